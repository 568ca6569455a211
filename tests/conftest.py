# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - In-memory stand-in for the Supabase client (tables, rpc, storage)
# - httpx.MockTransport stand-in for the marketplace REST API
# - A signed-in AuthUser fixture
# =============================================================================

import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID, uuid4

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("MARKETPLACE_API_URL", "http://marketplace.test")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import httpx
import pytest

from app.auth.models import AuthUser
from app.config import settings
from lib.api_client import ApiClient
from lib.supabase_client import SupabaseClient


# =============================================================================
# Supabase Fake
# =============================================================================

class FakeAPIError(Exception):
    """Shaped like postgrest's APIError (code + message)."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class FakeStorageError(Exception):
    """Shaped like storage3's StorageApiError (message, code, status)."""

    def __init__(self, message: str, code: str | None = None, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status


class FakeResponse:
    def __init__(self, data: Any):
        self.data = data


def _sort_key(column: str):
    def key(row: dict[str, Any]):
        value = row.get(column)
        return (value is not None, value)
    return key


class FakeQuery:
    """Chainable query builder over one in-memory table."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.payload: Any = None
        self.filters: list = []
        self.orders: list[tuple[str, bool]] = []
        self.row_limit: int | None = None
        self.single_row = False

    # -- operations -----------------------------------------------------------

    def select(self, columns: str = "*"):
        self.op = "select"
        return self

    def insert(self, rows):
        self.op = "insert"
        self.payload = rows
        return self

    def update(self, changes: dict[str, Any]):
        self.op = "update"
        self.payload = changes
        return self

    def delete(self):
        self.op = "delete"
        return self

    # -- filters --------------------------------------------------------------

    def eq(self, column: str, value: Any):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column: str, value: Any):
        self.filters.append(lambda row: row.get(column) != value)
        return self

    def or_(self, expression: str):
        # Only "col.ilike.%term%,col.ilike.%term%" is needed
        clauses = []
        for clause in expression.split(","):
            column, _, pattern = clause.split(".", 2)
            clauses.append((column, pattern.strip("%").lower()))
        self.filters.append(
            lambda row: any(term in str(row.get(col) or "").lower() for col, term in clauses)
        )
        return self

    def order(self, column: str, desc: bool = False):
        self.orders.append((column, desc))
        return self

    def limit(self, count: int):
        self.row_limit = count
        return self

    def single(self):
        self.single_row = True
        return self

    # -- execution ------------------------------------------------------------

    def _matching(self) -> list[dict[str, Any]]:
        return [row for row in self.db.rows(self.table) if all(f(row) for f in self.filters)]

    def execute(self) -> FakeResponse:
        error = self.db.errors.get((self.table, self.op))
        if error is not None:
            raise error

        self.db.calls.append((self.table, self.op, self.payload))

        if self.op == "insert":
            if self.table in self.db.empty_inserts:
                return FakeResponse([])
            rows = self.payload if isinstance(self.payload, list) else [self.payload]
            created = [self.db.add_row(self.table, dict(row)) for row in rows]
            return FakeResponse([dict(row) for row in created])

        matched = self._matching()

        if self.op == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])

        if self.op == "delete":
            table = self.db.rows(self.table)
            doomed = {id(row) for row in matched}
            table[:] = [row for row in table if id(row) not in doomed]
            return FakeResponse([dict(row) for row in matched])

        result = list(matched)
        for column, desc in reversed(self.orders):
            result.sort(key=_sort_key(column), reverse=desc)
        if self.row_limit is not None:
            result = result[:self.row_limit]
        result = [dict(row) for row in result]

        if self.single_row:
            if len(result) != 1:
                raise FakeAPIError(
                    "JSON object requested, multiple (or no) rows returned",
                    code="PGRST116",
                )
            return FakeResponse(result[0])
        return FakeResponse(result)


class FakeRpc:
    def __init__(self, db: "FakeSupabase", name: str, params: dict[str, Any]):
        self.db = db
        self.name = name
        self.params = params

    def execute(self) -> FakeResponse:
        self.db.rpc_calls.append((self.name, self.params))
        if self.db.rpc_error is not None:
            raise self.db.rpc_error
        return FakeResponse(None)


class FakeBucket:
    def __init__(self, storage: "FakeStorage", bucket: str):
        self.storage = storage
        self.bucket = bucket

    def upload(self, path: str, file: bytes, file_options: dict[str, str] | None = None):
        if self.storage.upload_error is not None:
            raise self.storage.upload_error
        self.storage.objects[(self.bucket, path)] = {
            "content": file,
            "options": file_options or {},
        }
        return {"Key": f"{self.bucket}/{path}"}

    def get_public_url(self, path: str) -> str:
        return f"{settings.SUPABASE_URL}/storage/v1/object/public/{self.bucket}/{path}?"

    def remove(self, paths: list[str]):
        if self.storage.remove_error is not None:
            raise self.storage.remove_error
        for path in paths:
            self.storage.removed.append((self.bucket, path))
            self.storage.objects.pop((self.bucket, path), None)
        return []


class FakeStorage:
    def __init__(self):
        self.objects: dict[tuple[str, str], dict[str, Any]] = {}
        self.removed: list[tuple[str, str]] = []
        self.upload_error: Exception | None = None
        self.remove_error: Exception | None = None

    def from_(self, bucket: str) -> FakeBucket:
        return FakeBucket(self, bucket)

    def list_buckets(self) -> list[dict[str, str]]:
        return [{"name": settings.CROP_IMAGES_BUCKET}, {"name": settings.PRODUCT_IMAGES_BUCKET}]


class FakeSupabase:
    """
    In-memory double for supabase.Client.

    Rows get an id and an increasing created_at on insert. Tables listed in
    INT_ID_TABLES use integer ids, the rest UUID strings.
    """

    INT_ID_TABLES = {"feeds", "agri_service_categories"}

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.errors: dict[tuple[str, str], Exception] = {}
        self.calls: list[tuple[str, str, Any]] = []
        self.rpc_calls: list[tuple[str, dict[str, Any]]] = []
        self.rpc_error: Exception | None = None
        self.empty_inserts: set[str] = set()
        self.storage = FakeStorage()
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self._next_int = 1

    def rows(self, table: str) -> list[dict[str, Any]]:
        return self.tables.setdefault(table, [])

    def add_row(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        if "id" not in row:
            if table in self.INT_ID_TABLES:
                row["id"] = self._next_int
                self._next_int += 1
            else:
                row["id"] = str(uuid4())
        if "created_at" not in row:
            self._clock += timedelta(seconds=1)
            row["created_at"] = self._clock.isoformat()
        self.rows(table).append(row)
        return row

    def seed(self, table: str, *rows: dict[str, Any]) -> list[dict[str, Any]]:
        return [dict(self.add_row(table, dict(row))) for row in rows]

    def fail(self, table: str, op: str, error: Exception) -> None:
        """Make every `op` on `table` raise `error`."""
        self.errors[(table, op)] = error

    def return_nothing_on_insert(self, table: str) -> None:
        """Make inserts into `table` store nothing and return no rows."""
        self.empty_inserts.add(table)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rpc(self, name: str, params: dict[str, Any]) -> FakeRpc:
        return FakeRpc(self, name, params)


# =============================================================================
# Marketplace API Stub
# =============================================================================

class MarketplaceStub:
    """
    Routes (method, path) to canned (status, body) answers.

    Paths are relative to /api/v1/, e.g. ("GET", "categories/").
    Every request is recorded in `requests`.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, body: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.split("/api/v1/", 1)[-1]
        status, body = self.routes.get((request.method, path), (404, {"detail": "Not found."}))
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, content=json.dumps(body), headers={"content-type": "application/json"})

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase():
    """Install the in-memory Supabase double as the shared client."""
    fake = FakeSupabase()
    SupabaseClient._instance = fake
    yield fake
    SupabaseClient.reset()


@pytest.fixture
def marketplace():
    """Point ApiClient at a MarketplaceStub."""
    stub = MarketplaceStub()
    ApiClient.set_client(httpx.Client(
        base_url=settings.api_base_url,
        transport=httpx.MockTransport(stub.handler),
    ))
    yield stub
    ApiClient.set_client(None)


@pytest.fixture
def auth_user():
    """A signed-in dashboard user."""
    return AuthUser(
        id=UUID("11111111-2222-3333-4444-555555555555"),
        email="admin@example.com",
        role="authenticated",
        access_token="test-access-token",
    )


@pytest.fixture
def other_user():
    return AuthUser(
        id=UUID("99999999-8888-7777-6666-555555555555"),
        email="seller@example.com",
        role="authenticated",
        access_token="other-access-token",
    )
