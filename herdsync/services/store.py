"""
Local store: identifier-indexed records behind a single writer.

All writes go through ``async with store.writer():`` so concurrent entity
passes queue instead of racing on the one Session. Reads are plain calls;
nothing awaits in the middle of a read.
"""
import asyncio
import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional, Set, Type

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from . import dates
from ..errors import RecordTombstoned, TerminalStatusChange
from ..models.models import SYNC_PENDING, SYNC_SYNCED, PregnancyRecord, SyncState
from ..schemas.enums import TERMINAL_PREGNANCY_STATUSES

logger = structlog.get_logger(__name__)


def _as_uuid(value: Any) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


class LocalStore:
    def __init__(self, session_factory, dry_run: bool = False):
        self.db: Session = session_factory()
        self.dry_run = dry_run
        self._lock = asyncio.Lock()

    def close(self) -> None:
        self.db.close()

    @asynccontextmanager
    async def writer(self):
        """Serialize a write and commit it (rolled back on error or dry run)."""
        async with self._lock:
            try:
                yield self.db
                if self.dry_run:
                    self.db.flush()
                else:
                    self.db.commit()
            except BaseException:
                self.db.rollback()
                raise

    # reads

    def get(self, model: Type, record_id: Any) -> Optional[Any]:
        if record_id is None:
            return None
        return self.db.get(model, _as_uuid(record_id))

    def find(self, model: Type, **filters) -> List[Any]:
        stmt = select(model)
        for name, value in filters.items():
            stmt = stmt.where(getattr(model, name) == value)
        return list(self.db.scalars(stmt).all())

    def live(self, model: Type) -> List[Any]:
        return list(self.db.scalars(select(model).where(model.deleted_at.is_(None))).all())

    def ids(self, model: Type) -> Set[uuid.UUID]:
        return set(self.db.scalars(select(model.id)).all())

    def pending(self, model: Type) -> List[Any]:
        stmt = select(model).where(model.sync_status == SYNC_PENDING).order_by(model.modified_at.asc().nulls_first())
        return list(self.db.scalars(stmt).all())

    def with_unresolved_refs(self, model: Type) -> List[Any]:
        return [r for r in self.db.scalars(select(model)).all() if r.unresolved_refs]

    # writes (call inside writer())

    def upsert(self, model: Type, record_id: Any, patch: Dict[str, Any], status: str = SYNC_SYNCED):
        """Create or update by identifier. Returns (record, created)."""
        record = self.get(model, record_id)
        created = record is None
        if created:
            record = model(id=_as_uuid(record_id))
            record.unresolved_refs = []
            record.sync_attempts = 0
            self.db.add(record)
        for name, value in patch.items():
            if name != "id":
                setattr(record, name, value)
        record.sync_status = status
        if status == SYNC_SYNCED:
            record.sync_error = None
            record.sync_attempts = 0
        self.db.flush()
        return record, created

    def create_local(self, model: Type, **fields):
        """A record created on this device; it is pending until pushed."""
        now = dates.utcnow()
        record = model(**fields)
        if record.id is None:
            record.id = uuid.uuid4()
        record.created_at = record.created_at or now
        record.modified_at = now
        record.sync_status = SYNC_PENDING
        record.sync_attempts = 0
        record.unresolved_refs = []
        self.db.add(record)
        self.db.flush()
        return record

    def record_local_change(self, record: Any, **changes):
        """Apply a local edit and queue the record for push."""
        if record.deleted_at is not None:
            raise RecordTombstoned(f"{record.__tablename__} {record.id} is deleted")
        if (
            isinstance(record, PregnancyRecord)
            and record.status in TERMINAL_PREGNANCY_STATUSES
            and changes.get("status", record.status) not in TERMINAL_PREGNANCY_STATUSES
        ):
            raise TerminalStatusChange(f"pregnancy {record.id} is {record.status}")
        for name, value in changes.items():
            setattr(record, name, value)
        self.touch(record)
        self.db.flush()
        return record

    def touch(self, record: Any, at: Optional[datetime] = None) -> None:
        record.modified_at = at or dates.utcnow()
        record.sync_status = SYNC_PENDING

    def soft_delete(self, record: Any, at: Optional[datetime] = None, status: str = SYNC_PENDING) -> bool:
        """Tombstone a record; the row is never removed. Returns False if already tombstoned."""
        if record.deleted_at is not None:
            if status == SYNC_SYNCED and record.sync_status == SYNC_PENDING:
                # remote confirmed a delete we had queued
                record.sync_status = SYNC_SYNCED
            return False
        when = at or dates.utcnow()
        record.deleted_at = when
        record.modified_at = max(when, record.modified_at) if record.modified_at else when
        record.sync_status = status
        return True

    def mark_synced(self, record: Any, created_at: Optional[datetime] = None, modified_at: Optional[datetime] = None) -> None:
        if created_at is not None:
            record.created_at = created_at
        if modified_at is not None:
            record.modified_at = modified_at
        record.sync_status = SYNC_SYNCED
        record.sync_error = None
        record.sync_attempts = 0

    def mark_failed(self, record: Any, error: str) -> None:
        record.sync_error = error
        record.sync_attempts = (record.sync_attempts or 0) + 1

    # watermarks

    def watermark(self, table: str) -> Optional[datetime]:
        state = self.db.get(SyncState, table)
        return state.last_synced_at if state else None

    def set_watermark(self, table: str, value: Optional[datetime], full: bool = False) -> None:
        state = self.db.get(SyncState, table)
        if state is None:
            state = SyncState(table_name=table)
            self.db.add(state)
        if value is not None and (state.last_synced_at is None or value > state.last_synced_at):
            state.last_synced_at = value
        if full:
            state.last_full_sync_at = dates.utcnow()
