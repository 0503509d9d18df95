"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool for connection reuse across the
server's worker threads, with a bounded wait when every connection is out.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN, DB_POOL_TIMEOUT_SECONDS
from utils.errors import StoreConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionPool:
    """
    Fixed-capacity pool of live connections.

    psycopg2's pools fail immediately when exhausted; a bounded semaphore
    in front of it makes ``acquire`` wait up to ``timeout`` seconds for a
    connection to come back instead.
    """

    def __init__(
        self,
        dsn: str,
        min_conn: int = 1,
        max_conn: int = 5,
        timeout: float = 10.0,
        pool_factory=pool.ThreadedConnectionPool,
    ):
        if max_conn < 1 or min_conn > max_conn:
            raise ValueError(f"Invalid pool bounds: min={min_conn}, max={max_conn}")
        try:
            self._pool = pool_factory(min_conn, max_conn, dsn)
        except psycopg2.OperationalError as e:
            raise StoreConnectionError(str(e)) from e
        self.max_conn = max_conn
        self.timeout = timeout
        self._slots = threading.BoundedSemaphore(max_conn)
        self._lock = threading.Lock()
        self._in_use = 0
        self._closed = False

    @property
    def available(self) -> int:
        """Number of connections that can be acquired without waiting."""
        with self._lock:
            return self.max_conn - self._in_use

    @property
    def closed(self) -> bool:
        return self._closed

    def acquire(self):
        """
        Borrow a connection, waiting up to ``timeout`` seconds for one to free up.

        Raises:
            StoreConnectionError: On timeout, if the pool is closed,
                or if the store cannot be reached.
        """
        if self._closed:
            raise StoreConnectionError("Database pool is closed")
        if not self._slots.acquire(timeout=self.timeout):
            logger.warning(f"Timed out after {self.timeout}s waiting for a database connection")
            raise StoreConnectionError("Timed out waiting for a database connection")
        try:
            conn = self._pool.getconn()
        except (psycopg2.OperationalError, pool.PoolError) as e:
            self._slots.release()
            logger.error(f"Failed to obtain database connection: {e}")
            raise StoreConnectionError(str(e)) from e
        with self._lock:
            self._in_use += 1
        return conn

    def release(self, conn) -> None:
        """Return a connection. Broken connections are closed instead of reused."""
        try:
            if self._closed:
                conn.close()
            else:
                self._pool.putconn(conn, close=bool(conn.closed))
        finally:
            with self._lock:
                self._in_use -= 1
            self._slots.release()

    @contextmanager
    def connection(self) -> Iterator:
        """Scoped acquisition: the connection is released on every exit path."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)

    def close(self) -> None:
        """Close all connections held by the pool."""
        if self._closed:
            return
        self._closed = True
        self._pool.closeall()


_pool: ConnectionPool | None = None


def init_pool(
    min_conn: int = DB_POOL_MIN,
    max_conn: int = DB_POOL_MAX,
    timeout: float = DB_POOL_TIMEOUT_SECONDS,
) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        timeout: Seconds to wait for a free connection before failing.

    Raises:
        StoreConnectionError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = ConnectionPool(DATABASE_URL, min_conn, max_conn, timeout)
        logger.info(f"Database connection pool initialized (max {max_conn} connections).")
    except StoreConnectionError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def set_pool(new_pool: ConnectionPool | None) -> None:
    """Install an already-built pool, replacing the module-level one."""
    global _pool
    _pool = new_pool


def get_pool() -> ConnectionPool:
    """
    Return the process-wide pool.

    Raises:
        StoreConnectionError: If the pool has not been initialized.
    """
    if _pool is None:
        raise StoreConnectionError("Database pool not initialized. Call init_pool() first.")
    return _pool


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.close()
        _pool = None
        logger.info("Database connection pool closed.")
