"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL statements for a specific domain entity.
Repositories hand parameterized statements to `db.query.execute` and return
plain row dicts or affected-row counts.
"""
