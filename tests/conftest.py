"""Pytest configuration and shared fixtures."""

import uuid
from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from herdsync.config import Settings
from herdsync.db import create_session_factory
from herdsync.services import dates
from herdsync.services.reference_resolver import ReferenceResolver
from herdsync.services.store import LocalStore
from herdsync.services.sync_orchestrator import SyncContext, SyncOrchestrator


def _changed_since(row: Dict[str, Any], since: datetime, columns) -> bool:
    for key in columns:
        ts = dates.parse(row[key]) if row.get(key) else None
        if ts is not None and ts >= since:
            return True
    return False


class FakeRemote:
    """In-memory stand-in for the Supabase client.

    ``tables`` holds remote rows per table; ``upsert_errors`` / ``fetch_errors``
    are raised in order before calls start succeeding.
    """

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.upserts: List[tuple] = []
        self.fetch_calls: List[tuple] = []
        self.upsert_errors: List[Exception] = []
        self.fetch_errors: List[Exception] = []
        self.on_fetch = None

    async def fetch_changes(
        self,
        table: str,
        since: Optional[datetime] = None,
        farm_id: Optional[str] = None,
        cursor_columns=("updated_at", "deleted_at"),
    ):
        self.fetch_calls.append((table, since))
        if self.on_fetch is not None:
            self.on_fetch(table)
        if self.fetch_errors:
            raise self.fetch_errors.pop(0)
        rows = self.tables.get(table, [])
        if since is not None:
            rows = [r for r in rows if _changed_since(r, since, cursor_columns)]
        return [dict(r) for r in rows]

    async def upsert(self, table: str, payload: Dict[str, Any]):
        if self.upsert_errors:
            raise self.upsert_errors.pop(0)
        self.upserts.append((table, payload))
        rows = self.tables[table]
        row = dict(payload)
        for index, existing in enumerate(rows):
            if existing.get("id") == row.get("id"):
                rows[index] = {**existing, **row}
                return dict(rows[index])
        rows.append(row)
        return dict(row)


@pytest.fixture
def settings() -> Settings:
    """Settings with fast, deterministic retry behaviour.

    Returns:
        Settings: test settings (no .env lookups matter, values are explicit)
    """
    return Settings(
        DATABASE_URL="sqlite://",
        SUPABASE_URL="https://demo.supabase.co",
        SUPABASE_KEY="anon-key",
        SYNC_MAX_ATTEMPTS=3,
        SYNC_BACKOFF_BASE=1.0,
        SYNC_BACKOFF_CAP=60.0,
    )


@pytest.fixture
def session_factory():
    """In-memory SQLite with every table created."""
    return create_session_factory("sqlite://")


@pytest.fixture
def store(session_factory):
    store = LocalStore(session_factory)
    yield store
    store.close()


@pytest.fixture
def resolver(store) -> ReferenceResolver:
    return ReferenceResolver(store, gestation_days=283)


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def sleep() -> AsyncMock:
    """Records backoff delays instead of sleeping."""
    return AsyncMock()


@pytest.fixture
def ctx(settings, store, remote, resolver, sleep) -> SyncContext:
    return SyncContext(settings=settings, store=store, remote=remote, resolver=resolver, sleep=sleep)


@pytest.fixture
def orchestrator(ctx) -> SyncOrchestrator:
    return SyncOrchestrator(ctx)


@pytest.fixture
def farm_id() -> str:
    return "5b6f4c52-1d1e-4a55-8a0e-1b2c3d4e5f60"


@pytest.fixture
def cattle_row(farm_id) -> Dict[str, Any]:
    """A typical cattle row as served by the remote."""
    return {
        "id": str(uuid.uuid4()),
        "farm_id": farm_id,
        "user_id": None,
        "tag_number": "A-101",
        "name": "Daisy",
        "sex": "heifer",
        "cattle_type": None,
        "date_of_birth": "2023-04-02",
        "current_weight": 612.5,
        "current_status": "active",
        "current_stage": "calf",
        "production_path": None,
        "location": ["North Paddock", " ", "Creek"],
        "dam_id": None,
        "sire_id": None,
        "external_sire_name": "Big Red",
        "external_sire_registration": "AAA-123",
        "deleted_at": None,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-03-01T12:00:00.123Z",
    }

