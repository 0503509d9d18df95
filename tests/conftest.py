from __future__ import annotations

import threading

import pytest
from fastapi.testclient import TestClient
from psycopg2.extensions import adapt

from db.connection import ConnectionPool
from db.update_builder import build_update_clause
from handlers.customer_handler import get_customer_service
from main import create_app
from models.customer import COLUMNS, Customer
from services.customer_service import CustomerService
from utils.errors import QueryError


# ── psycopg2 stand-ins ────────────────────────────────────


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.description = None
        self.rowcount = -1
        self._rows: list[dict] = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        # Quote every value as the driver would, so binding failures surface here.
        for value in params or ():
            adapt(value).getquoted()
        if self.conn.error is not None:
            raise self.conn.error
        if self.conn.rows is not None:
            self._rows = list(self.conn.rows)
            self.description = [(name,) for name in (self._rows[0] if self._rows else COLUMNS)]
        else:
            self.rowcount = self.conn.rowcount

    def fetchall(self):
        return self._rows


class FakeConnection:
    def __init__(self):
        self.closed = 0
        self.executed: list[tuple] = []
        self.cursor_factories: list = []
        self.commits = 0
        self.rollbacks = 0
        # Scripted behaviour for the next statement.
        self.rows: list[dict] | None = None
        self.rowcount = 0
        self.error: Exception | None = None

    def cursor(self, cursor_factory=None):
        self.cursor_factories.append(cursor_factory)
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = 1


class FakeThreadedPool:
    """Mimics psycopg2.pool.ThreadedConnectionPool without a server."""

    def __init__(self, minconn, maxconn, dsn):
        self.minconn = minconn
        self.maxconn = maxconn
        self.dsn = dsn
        self.idle: list[FakeConnection] = [FakeConnection() for _ in range(minconn)]
        self.out: set[int] = set()
        self.created = len(self.idle)
        self.discarded: list[FakeConnection] = []
        self.getconn_error: Exception | None = None
        self.closed = False
        self._lock = threading.Lock()

    def getconn(self):
        if self.getconn_error is not None:
            raise self.getconn_error
        with self._lock:
            if self.idle:
                conn = self.idle.pop()
            else:
                conn = FakeConnection()
                self.created += 1
            self.out.add(id(conn))
            return conn

    def putconn(self, conn, key=None, close=False):
        with self._lock:
            self.out.discard(id(conn))
            if close:
                conn.close()
                self.discarded.append(conn)
            else:
                self.idle.append(conn)

    def closeall(self):
        self.closed = True
        for conn in self.idle:
            conn.close()


@pytest.fixture
def make_pool():
    def _make(max_conn: int = 2, timeout: float = 1.0, min_conn: int = 1) -> ConnectionPool:
        return ConnectionPool(
            "postgresql://test@localhost/test",
            min_conn=min_conn,
            max_conn=max_conn,
            timeout=timeout,
            pool_factory=FakeThreadedPool,
        )

    return _make


@pytest.fixture
def fake_pool(make_pool):
    pool = make_pool()
    yield pool
    pool.close()


# ── In-memory repository ──────────────────────────────────


class InMemoryCustomerRepository:
    """Same interface as CustomerRepository, backed by a dict keyed on CUST_CODE."""

    def __init__(self):
        self.rows: dict[str, dict] = {}

    def list_all(self) -> list[dict]:
        return [dict(row) for row in self.rows.values()]

    def get_by_code(self, cust_code: str) -> list[dict]:
        row = self.rows.get(cust_code)
        return [dict(row)] if row else []

    def add(self, customer: Customer) -> int:
        if customer.CUST_CODE in self.rows:
            raise QueryError(
                'duplicate key value violates unique constraint "customer_pkey"'
            )
        self.rows[customer.CUST_CODE] = customer.to_dict()
        return 1

    def update_fields(self, cust_code: str, updates) -> int:
        build_update_clause(updates)
        row = self.rows.get(cust_code)
        if row is None:
            return 0
        row.update(updates)
        return 1

    def replace(self, customer: Customer) -> int:
        self.rows[customer.CUST_CODE] = customer.to_dict()
        return 1

    def delete(self, cust_code: str) -> int:
        return 1 if self.rows.pop(cust_code, None) is not None else 0


@pytest.fixture
def repo():
    return InMemoryCustomerRepository()


@pytest.fixture
def service(repo):
    return CustomerService(repo)


@pytest.fixture
def app(service):
    fastapi_app = create_app(manage_store=False)
    fastapi_app.dependency_overrides[get_customer_service] = lambda: service
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
