"""
db/query.py
-----------
Runs one parameterized statement on one pooled connection.
Every repository goes through `execute`, so connection handling,
commit/rollback and driver-error translation live in one place.
"""

from typing import Any, Sequence

import psycopg2
from psycopg2 import extras

from db.connection import ConnectionPool, get_pool
from utils.errors import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

# psycopg2 reports some binding failures (NUL bytes in strings, placeholder
# and parameter count mismatches) as plain Python exceptions.
_DRIVER_ERRORS = (psycopg2.Error, ValueError, TypeError, IndexError)


def execute(
    sql: str,
    params: Sequence[Any] = (),
    pool: ConnectionPool | None = None,
) -> list[dict] | int:
    """
    Execute a single statement with positionally bound values.

    Args:
        sql: Statement text with ``%s`` placeholders only.
        params: Values bound to the placeholders, in order.
        pool: Pool to borrow from (defaults to the process-wide pool).

    Returns:
        For statements that produce rows, a list of ``{column: value}``
        dicts in the order the store returned them. Otherwise the
        number of affected rows.

    Raises:
        StoreConnectionError: If no connection could be obtained.
        QueryError: If the store rejected the statement.
    """
    pool = pool or get_pool()
    with pool.connection() as conn:
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(params))
                if cur.description is not None:
                    result = [dict(row) for row in cur.fetchall()]
                else:
                    result = cur.rowcount
            conn.commit()
            return result
        except _DRIVER_ERRORS as e:
            _rollback(conn)
            message = _store_message(e)
            logger.error(f"Query failed: {message}")
            raise QueryError(message) from e


def _store_message(error: Exception) -> str:
    """The primary server message, without severity prefix or DETAIL lines."""
    diag = getattr(error, "diag", None)
    primary = getattr(diag, "message_primary", None)
    return (primary or str(error)).strip()


def _rollback(conn) -> None:
    """Roll back, unless the connection itself is already gone."""
    if conn.closed:
        return
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback failed: {e}")
