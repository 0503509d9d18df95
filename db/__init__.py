"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization, statement
execution and SQL fragment building.
Apart from the column list in `models/` it has no dependencies on other layers.
"""
