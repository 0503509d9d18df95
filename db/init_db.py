"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.query import execute
from utils.logger import get_logger

logger = get_logger(__name__)

# Column names are quoted so PostgreSQL keeps them upper-case.
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS customer (
    "CUST_CODE"       VARCHAR(6) PRIMARY KEY,
    "CUST_NAME"       VARCHAR(40) NOT NULL,
    "CUST_CITY"       VARCHAR(35) NOT NULL,
    "WORKING_AREA"    VARCHAR(35),
    "CUST_COUNTRY"    VARCHAR(20),
    "GRADE"           INTEGER,
    "OPENING_AMT"     NUMERIC(12,2),
    "RECEIVE_AMT"     NUMERIC(12,2),
    "PAYMENT_AMT"     NUMERIC(12,2),
    "OUTSTANDING_AMT" NUMERIC(12,2),
    "PHONE_NO"        VARCHAR(17),
    "AGENT_CODE"      VARCHAR(6)
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
    finally:
        close_pool()
    print("Database schema created successfully.")
