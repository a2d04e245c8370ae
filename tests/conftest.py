"""
Shared test fixtures.

Provides an in-memory Supabase stand-in that keeps table state between
calls, so multi-step operations (read then write) can be asserted on.
"""

import os
import sys
from pathlib import Path

# Add project root to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings require these at import time
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

import copy
import re
import pytest
from unittest.mock import patch
from typing import Callable, Generator, Optional


# ===================
# MOCK SUPABASE CLIENT
# ===================

class MockSupabaseResponse:
    """Mock Supabase query response."""

    def __init__(self, data: list = None, count: int = None):
        self.data = data or []
        self.count = count if count is not None else len(self.data)


class MockStoreError(Exception):
    """Raised by the mock to simulate an unavailable store."""


class MockSupabaseQuery:
    """Mock Supabase query builder with chainable methods."""

    def __init__(self, table: "MockSupabaseTable", operation: str, payload=None):
        self._table = table
        self._operation = operation
        self._payload = payload
        self._filters: list[Callable[[dict], bool]] = []
        self._order: Optional[tuple[str, bool]] = None
        self._range: Optional[tuple[int, int]] = None
        self._limit: Optional[int] = None

    def eq(self, column, value):
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column, value):
        self._filters.append(lambda row: row.get(column) != value)
        return self

    def gt(self, column, value):
        self._filters.append(lambda row: row.get(column) is not None and row[column] > value)
        return self

    def ilike(self, column, pattern):
        regex = re.compile(
            "^" + ".*".join(re.escape(part) for part in pattern.split("%")) + "$",
            re.IGNORECASE
        )
        self._filters.append(lambda row: bool(regex.match(str(row.get(column, "")))))
        return self

    def order(self, column, desc: bool = False, **kwargs):
        self._order = (column, desc)
        return self

    def range(self, start, end):
        self._range = (start, end)
        return self

    def limit(self, count):
        self._limit = count
        return self

    def _matches(self, row: dict) -> bool:
        return all(check(row) for check in self._filters)

    def execute(self) -> MockSupabaseResponse:
        self._table.record_call(self._operation)

        if self._operation == "select":
            rows = [row for row in self._table.rows if self._matches(row)]
            total = len(rows)
            if self._order:
                column, desc = self._order
                rows = sorted(rows, key=lambda row: row[column], reverse=desc)
            if self._range:
                start, end = self._range
                rows = rows[start:end + 1]
            if self._limit is not None:
                rows = rows[:self._limit]
            return MockSupabaseResponse(data=copy.deepcopy(rows), count=total)

        if self._operation == "insert":
            items = self._payload if isinstance(self._payload, list) else [self._payload]
            created = []
            for item in items:
                row = {"id": self._table.next_id(), **item}
                self._table.rows.append(row)
                created.append(copy.deepcopy(row))
            return MockSupabaseResponse(data=created)

        if self._operation == "update":
            updated = []
            for row in self._table.rows:
                if self._matches(row):
                    row.update(self._payload)
                    updated.append(copy.deepcopy(row))
            return MockSupabaseResponse(data=updated)

        if self._operation == "delete":
            removed = [row for row in self._table.rows if self._matches(row)]
            self._table.rows = [row for row in self._table.rows if not self._matches(row)]
            return MockSupabaseResponse(data=copy.deepcopy(removed))

        raise ValueError(f"Unsupported operation: {self._operation}")


class MockSupabaseTable:
    """Mock Supabase table holding rows in memory."""

    def __init__(self, rows: list = None):
        self.rows = copy.deepcopy(rows or [])
        self.calls: list[str] = []
        self._failures: dict[str, int] = {}

    def next_id(self) -> int:
        return max((row["id"] for row in self.rows), default=0) + 1

    def fail_on(self, operation: str, after: int = 0):
        """Raise MockStoreError on `operation` once `after` calls have succeeded."""
        self._failures[operation] = after

    def record_call(self, operation: str):
        if operation in self._failures:
            if self.calls.count(operation) >= self._failures[operation]:
                self.calls.append(operation)
                raise MockStoreError(f"store unavailable during {operation}")
        self.calls.append(operation)

    def select(self, *args, **kwargs):
        return MockSupabaseQuery(self, "select")

    def insert(self, data):
        return MockSupabaseQuery(self, "insert", data)

    def update(self, data):
        return MockSupabaseQuery(self, "update", data)

    def delete(self):
        return MockSupabaseQuery(self, "delete")


class MockSupabaseClient:
    """Mock Supabase client."""

    def __init__(self):
        self._tables: dict[str, MockSupabaseTable] = {}

    def set_table_data(self, table_name: str, data: list):
        """Replace a table's rows."""
        self._tables[table_name] = MockSupabaseTable(data)

    def table(self, name: str) -> MockSupabaseTable:
        """Get mock table, creating an empty one on first use."""
        if name not in self._tables:
            self._tables[name] = MockSupabaseTable()
        return self._tables[name]

    def rows(self, table_name: str) -> list:
        """Current rows of a table."""
        return self.table(table_name).rows


# ===================
# FIXTURES
# ===================

def _reset_service_singletons():
    import services.product_service
    import services.price_update_service
    import services.export_service

    services.product_service._product_service = None
    services.price_update_service._price_update_service = None
    services.export_service._export_service = None


@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.

    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("products", [
                {"id": 1, "name": "Samsung", "price": 10000, "quantity": 50}
            ])
    """
    return MockSupabaseClient()


@pytest.fixture
def mock_db(mock_supabase) -> Generator:
    """
    Patch the database client with mock.

    Service singletons are reset so each test sees its own mock.
    """
    _reset_service_singletons()
    with patch("config.database.get_supabase_client", return_value=mock_supabase):
        with patch("services.product_service.get_supabase_client", return_value=mock_supabase):
            yield mock_supabase
    _reset_service_singletons()


@pytest.fixture
def sample_product_data() -> dict:
    """Sample product data for testing."""
    return {
        "id": 1,
        "name": "Samsung",
        "price": 10000.0,
        "quantity": 50
    }


@pytest.fixture
def sample_products_list() -> list:
    """Sample list of products for testing."""
    return [
        {"id": 1, "name": "Samsung", "price": 10000.0, "quantity": 50},
        {"id": 2, "name": "I phone", "price": 16000.0, "quantity": 30},
        {"id": 3, "name": "Nokia", "price": 70000.0, "quantity": 75},
    ]


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client_with_mock_db(mock_db):
    """
    Create FastAPI test client with mocked database.

    Usage:
        def test_endpoint(test_client_with_mock_db, mock_supabase):
            mock_supabase.set_table_data("products", [...])
            response = test_client_with_mock_db.get("/products")
    """
    from fastapi.testclient import TestClient
    from main import app

    yield TestClient(app)
