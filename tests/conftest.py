"""Shared test fixtures and collaborator fakes."""

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.db import StoreError
from main import create_app

API_KEY = "s3cret"


class FakeDatabase:
    """In-memory stand-in for `core.db.Database` that records every query."""

    def __init__(
        self,
        *,
        configured: bool = True,
        rows: Optional[list[dict]] = None,
        count: Optional[int] = None,
        error: Optional[str] = None,
    ):
        self.configured = configured
        self.rows = rows or []
        self.count = count
        self.error = error
        self.calls: list[tuple[str, str, tuple]] = []

    def _record(self, kind: str, sql: str, args: tuple) -> None:
        self.calls.append((kind, " ".join(sql.split()), args))
        if not self.configured:
            raise StoreError("Database is not configured.")
        if self.error:
            raise StoreError(self.error)

    async def init_pool(self) -> None:
        return None

    async def close_pool(self) -> None:
        return None

    async def fetch_one(self, sql: str, *args: Any) -> Optional[dict]:
        self._record("fetch_one", sql, args)
        return {"id": len(self.calls), "values": list(args)}

    async def fetch_all(self, sql: str, *args: Any) -> list[dict]:
        self._record("fetch_all", sql, args)
        return [dict(row) for row in self.rows]

    async def fetch_val(self, sql: str, *args: Any) -> Any:
        self._record("fetch_val", sql, args)
        return self.count if self.count is not None else 1

    def queries(self, kind: Optional[str] = None) -> list[str]:
        return [sql for (k, sql, _) in self.calls if kind is None or k == kind]


class FakeNotifier:
    def __init__(self, *, configured: bool = False, succeed: bool = True):
        self.configured = configured
        self.succeed = succeed
        self.sent: list[dict] = []

    async def send_course_email(self, *, to: str, course_title: str, note: Optional[str] = None) -> bool:
        if not self.configured:
            return False
        self.sent.append({"to": to, "course_title": course_title, "note": note})
        return self.succeed


def make_settings(**overrides) -> Settings:
    values = {"database_url": "postgresql://user@db.example.test/postgres"}
    values.update(overrides)
    return Settings(**values)


def make_client(
    settings: Optional[Settings] = None,
    *,
    db: Optional[FakeDatabase] = None,
    notifier: Optional[FakeNotifier] = None,
) -> TestClient:
    """Build a client without running the lifespan hook."""
    settings = settings or make_settings()
    db = db if db is not None else FakeDatabase(configured=settings.store_configured)
    app = create_app(settings, db=db, notifier=notifier or FakeNotifier())
    return TestClient(app)


def ctx_of(client: TestClient):
    return client.app.state.ctx


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def client(db, notifier):
    return make_client(db=db, notifier=notifier)
