"""
repositories/customer_repo.py
------------------------------
Data access layer for customer records.
All SQL statements against the `customer` table live here.
"""

from typing import Any, Mapping

from db.connection import ConnectionPool
from db.query import execute
from db.update_builder import build_update_clause
from models.customer import COLUMNS, PRIMARY_KEY, TABLE_NAME, Customer
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMN_LIST = ", ".join(f'"{col}"' for col in COLUMNS)
_PLACEHOLDERS = ", ".join(["%s"] * len(COLUMNS))


class CustomerRepository:
    """Repository for CRUD operations on the customer table."""

    def __init__(self, pool: ConnectionPool | None = None):
        # None means the process-wide pool, looked up per statement.
        self.pool = pool

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[dict]:
        """Fetch every customer row, in store order."""
        sql = f"SELECT * FROM {TABLE_NAME};"
        return execute(sql, (), self.pool)

    def get_by_code(self, cust_code: str) -> list[dict]:
        """
        Fetch the rows matching a customer code.

        Returns:
            A list with zero or one row dict.
        """
        sql = f'SELECT * FROM {TABLE_NAME} WHERE "{PRIMARY_KEY}" = %s;'
        return execute(sql, (cust_code,), self.pool)

    # ── CREATE ────────────────────────────────────────────

    def add(self, customer: Customer) -> int:
        """
        Insert a new customer. A duplicate code is rejected by the primary key.

        Returns:
            Number of inserted rows.
        """
        sql = f"INSERT INTO {TABLE_NAME} ({_COLUMN_LIST}) VALUES ({_PLACEHOLDERS});"
        inserted = execute(sql, customer.to_params(), self.pool)
        logger.info(f"Added customer {customer.CUST_CODE}")
        return inserted

    # ── UPDATE ────────────────────────────────────────────

    def update_fields(self, cust_code: str, updates: Mapping[str, Any]) -> int:
        """
        Update only the given columns of one customer.

        Returns:
            Number of updated rows (0 if the code does not exist).
        """
        clause, params = build_update_clause(updates)
        params.append(cust_code)
        sql = f'UPDATE {TABLE_NAME} SET {clause} WHERE "{PRIMARY_KEY}" = %s;'
        updated = execute(sql, params, self.pool)
        if updated:
            logger.info(f"Updated customer {cust_code}: {', '.join(updates)}")
        return updated

    def replace(self, customer: Customer) -> int:
        """
        Insert the customer, or overwrite every column if the code exists.
        Uses PostgreSQL's ON CONFLICT (upsert) for atomicity.
        """
        overwrite = ", ".join(
            f'"{col}" = EXCLUDED."{col}"' for col in COLUMNS if col != PRIMARY_KEY
        )
        sql = f"""
            INSERT INTO {TABLE_NAME} ({_COLUMN_LIST})
            VALUES ({_PLACEHOLDERS})
            ON CONFLICT ("{PRIMARY_KEY}") DO UPDATE SET {overwrite};
        """
        written = execute(sql, customer.to_params(), self.pool)
        logger.info(f"Replaced customer {customer.CUST_CODE}")
        return written

    # ── DELETE ────────────────────────────────────────────

    def delete(self, cust_code: str) -> int:
        """
        Delete a customer by code.

        Returns:
            Number of deleted rows (0 if the code does not exist).
        """
        sql = f'DELETE FROM {TABLE_NAME} WHERE "{PRIMARY_KEY}" = %s;'
        deleted = execute(sql, (cust_code,), self.pool)
        if deleted:
            logger.info(f"Deleted customer {cust_code}")
        return deleted
