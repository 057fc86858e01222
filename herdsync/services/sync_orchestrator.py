"""
Sync orchestration: pull remote deltas, link references, push local changes.

Per-record lifecycle::

    pending (local only) -> synced -> pending (edited) -> synced ...
    -> pending (soft-deleted) -> synced (tombstoned, final)

Conflicts are last-write-wins on ``modified_at``; there is no field merge, so
concurrent edits from two devices keep only the newer one.
"""
import asyncio
import uuid
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, List, Optional

import structlog
from pydantic import BaseModel, Field

from . import dates
from .reference_resolver import ReferenceResolver
from .store import LocalStore
from ..config import Settings
from ..errors import NetworkFailure, RemoteError, RemoteRejected, SyncCancelled, TranslationError
from ..logging import sync_pass_context
from ..models.models import SYNC_PENDING, SYNC_SYNCED, CalvingRecord
from ..translators import CORE_TRANSLATORS, REFERENCE_TRANSLATORS
from ..translators.base import EntityTranslator

logger = structlog.get_logger(__name__)


def _row_id(row: Any) -> Optional[uuid.UUID]:
    if not isinstance(row, dict) or row.get("id") is None:
        return None
    try:
        return uuid.UUID(str(row["id"]))
    except ValueError:
        return None


def _row_timestamp(translator: EntityTranslator, row: Any) -> Optional[datetime]:
    """Latest of the row's cursor columns; what the delta filter compares against."""
    if not isinstance(row, dict):
        return None
    stamps = [dates.parse(row[col]) for col in translator.cursor_columns if isinstance(row.get(col), str)]
    stamps = [ts for ts in stamps if ts is not None]
    return max(stamps) if stamps else None


class EntityReport(BaseModel):
    pulled: int = 0
    created: int = 0
    updated: int = 0
    tombstoned: int = 0
    skipped: int = 0
    failed: int = 0
    deferred: int = 0
    pushed: int = 0
    push_failed: int = 0


class SyncReport(BaseModel):
    status: str = "idle"  # idle | running | ok | partial | failed | cancelled
    pass_id: Optional[str] = None
    error: Optional[str] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    backfilled: int = 0
    entities: Dict[str, EntityReport] = Field(default_factory=dict)

    def entity(self, table: str) -> EntityReport:
        return self.entities.setdefault(table, EntityReport())

    @property
    def has_failures(self) -> bool:
        return any(e.failed or e.push_failed for e in self.entities.values())


class SyncContext:
    """Everything a sync pass needs, built once by the application entry point."""

    def __init__(
        self,
        settings: Settings,
        store: LocalStore,
        remote: Any,
        resolver: Optional[ReferenceResolver] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings
        self.store = store
        self.remote = remote
        self.resolver = resolver or ReferenceResolver(store, gestation_days=settings.gestation_days)
        self.sleep = sleep
        self.cancel_event = asyncio.Event()


class SyncOrchestrator:
    def __init__(
        self,
        ctx: SyncContext,
        reference_translators: Optional[List[EntityTranslator]] = None,
        core_translators: Optional[List[EntityTranslator]] = None,
    ):
        self.ctx = ctx
        self.store = ctx.store
        self.remote = ctx.remote
        self.resolver = ctx.resolver
        self.reference_translators = reference_translators if reference_translators is not None else REFERENCE_TRANSLATORS
        self.core_translators = core_translators if core_translators is not None else CORE_TRANSLATORS
        self.last_report = SyncReport()
        self._touched: Dict[str, set] = {}

    # status

    @property
    def status(self) -> str:
        return self.last_report.status

    @property
    def last_error(self) -> Optional[str]:
        return self.last_report.error

    def cancel(self) -> None:
        self.ctx.cancel_event.set()

    def _checkpoint(self) -> None:
        if self.ctx.cancel_event.is_set():
            raise SyncCancelled("sync cancelled")

    # retry

    async def _with_retry(self, call: Callable[[], Awaitable[Any]], what: str) -> Any:
        settings = self.ctx.settings
        attempts = max(1, settings.sync_max_attempts)
        for attempt in range(attempts):
            try:
                return await call()
            except NetworkFailure as e:
                if attempt == attempts - 1:
                    logger.error("sync_retries_exhausted", operation=what, attempts=attempts, error=str(e))
                    raise
                delay = min(settings.sync_backoff_base_seconds * (2 ** attempt), settings.sync_backoff_cap_seconds)
                logger.warning("sync_retry_scheduled", operation=what, attempt=attempt + 1, delay=delay, error=str(e))
                await self.ctx.sleep(delay)
                self._checkpoint()

    # pull

    async def pull(self, translator: EntityTranslator, full: bool = False, report: Optional[SyncReport] = None) -> EntityReport:
        self._checkpoint()
        report = report or self.last_report
        counts = report.entity(translator.table)
        store = self.store
        since = None if full else store.watermark(translator.table)
        is_full = since is None
        farm_id = self.ctx.settings.farm_id if translator.farm_scoped else None

        try:
            rows = await self._with_retry(
                lambda: self.remote.fetch_changes(
                    translator.table, since=since, farm_id=farm_id, cursor_columns=translator.cursor_columns
                ),
                what=f"pull {translator.table}",
            )
        except RemoteRejected as e:
            # the query itself was refused (missing column, RLS); other tables still sync
            counts.failed += 1
            logger.warning("table_pull_rejected", table=translator.table, status_code=e.status_code, error=str(e))
            return counts
        counts.pulled += len(rows)

        seen = set()
        touched = self._touched.setdefault(translator.table, set())
        newest: Optional[datetime] = None
        oldest_failed: Optional[datetime] = None
        failed_undated = False

        for row in rows:
            self._checkpoint()
            row_ts = _row_timestamp(translator, row)
            row_id = _row_id(row)
            if row_id is not None:
                # the remote still has it, even if this version cannot be read
                seen.add(row_id)
            try:
                patch = translator.to_local(row)
            except TranslationError as e:
                counts.failed += 1
                logger.warning(
                    "record_translation_failed",
                    entity=e.entity,
                    record_id=str(row_id) if row_id is not None else None,
                    field=e.field,
                    reason=e.reason,
                )
                if row_ts is None:
                    failed_undated = True
                elif oldest_failed is None or row_ts < oldest_failed:
                    oldest_failed = row_ts
                continue

            seen.add(patch["id"])
            async with store.writer():
                if self._apply_remote(translator, patch, counts):
                    touched.add(patch["id"])
            if row_ts is not None and (newest is None or row_ts > newest):
                newest = row_ts

        async with store.writer():
            if is_full:
                counts.tombstoned += self._tombstone_orphans(translator, seen)
            # a failed row we cannot place in time keeps the watermark where it was
            advance_to = None if failed_undated else (oldest_failed or newest)
            store.set_watermark(translator.table, advance_to, full=is_full)

        logger.info("entity_pulled", table=translator.table, **counts.model_dump(include={"pulled", "created", "updated", "tombstoned", "skipped", "failed"}))
        return counts

    def _apply_remote(self, translator: EntityTranslator, patch: Dict[str, Any], counts: EntityReport) -> bool:
        """Create-vs-update decision for one decoded row. Returns True if stored."""
        store = self.store
        record = store.get(translator.model, patch["id"])

        if record is not None and record.deleted_at is not None:
            # tombstones are final; a remote echo of our own delete confirms it
            if patch.get("deleted_at") is not None and record.sync_status == SYNC_PENDING:
                record.sync_status = SYNC_SYNCED
            counts.skipped += 1
            return False

        if patch.get("deleted_at") is not None:
            record, _ = store.upsert(translator.model, patch["id"], patch, status=SYNC_SYNCED)
            self.resolver.cascade_tombstone(record)
            counts.tombstoned += 1
            return True

        if record is not None and record.sync_status == SYNC_PENDING:
            local_ts = record.modified_at
            remote_ts = patch.get("modified_at")
            if local_ts is not None and (remote_ts is None or local_ts > remote_ts):
                # local edit is newer; it wins and will be pushed
                counts.skipped += 1
                return False

        record, created = store.upsert(translator.model, patch["id"], patch, status=SYNC_SYNCED)
        if created:
            counts.created += 1
        else:
            counts.updated += 1
        return True

    def _tombstone_orphans(self, translator: EntityTranslator, seen: set) -> int:
        """On a full pull, synced rows the remote no longer has are tombstoned."""
        count = 0
        for record in self.store.live(translator.model):
            if record.id in seen or record.sync_status != SYNC_SYNCED:
                continue
            self.store.soft_delete(record, status=SYNC_SYNCED)
            self.resolver.cascade_tombstone(record)
            count += 1
        if count:
            logger.info("orphans_tombstoned", table=translator.table, count=count)
        return count

    # link

    async def link_all(self, report: Optional[SyncReport] = None) -> None:
        """Resolve references after every pulled record is committed."""
        report = report or self.last_report
        for translator in self.reference_translators + self.core_translators:
            if not translator.references:
                continue
            self._checkpoint()
            counts = report.entity(translator.table)
            touched = self._touched.get(translator.table, set())
            async with self.store.writer():
                candidates = {r.id: r for r in self.store.with_unresolved_refs(translator.model)}
                for record_id in touched:
                    record = self.store.get(translator.model, record_id)
                    if record is not None:
                        candidates[record.id] = record
                counts.deferred = 0
                for record in candidates.values():
                    if self.resolver.link(translator, record):
                        counts.deferred += 1

        self._checkpoint()
        async with self.store.writer():
            for calving in self.store.live(CalvingRecord):
                if calving.pregnancy_id is not None and calving.id not in self._touched.get("calving_records", set()):
                    continue
                had_link = calving.pregnancy_id is not None
                pregnancy = self.resolver.resolve_pregnancy_for_calving(calving)
                if pregnancy is not None and not had_link:
                    report.backfilled += 1
                    self.resolver.link(self._translator_for_model(type(pregnancy)), pregnancy)
                    self.resolver.link(self._translator_for_model(CalvingRecord), calving)

    def _translator_for_model(self, model: type) -> EntityTranslator:
        for translator in self.reference_translators + self.core_translators:
            if translator.model is model:
                return translator
        raise KeyError(model.__name__)

    # push

    async def push(self, translator: EntityTranslator, report: Optional[SyncReport] = None) -> EntityReport:
        report = report or self.last_report
        counts = report.entity(translator.table)
        if not translator.pushable:
            return counts

        pending = self.store.pending(translator.model)
        for index, record in enumerate(pending):
            self._checkpoint()
            try:
                payload = translator.to_remote(record)
            except TranslationError as e:
                async with self.store.writer():
                    self.store.mark_failed(record, str(e))
                counts.push_failed += 1
                logger.warning("record_encode_failed", entity=e.entity, record_id=str(record.id), field=e.field, reason=e.reason)
                continue
            if "farm_id" in payload and payload["farm_id"] is None and self.ctx.settings.farm_id:
                payload["farm_id"] = self.ctx.settings.farm_id

            try:
                row = await self._with_retry(
                    lambda: self.remote.upsert(translator.table, payload),
                    what=f"push {translator.table}",
                )
            except RemoteRejected as e:
                async with self.store.writer():
                    self.store.mark_failed(record, str(e))
                counts.push_failed += 1
                logger.warning("record_push_rejected", table=translator.table, record_id=str(record.id), status_code=e.status_code, error=str(e))
                continue
            except NetworkFailure as e:
                # leave this and the rest of the batch pending for the next pass
                async with self.store.writer():
                    for remaining in pending[index:]:
                        self.store.mark_failed(remaining, str(e))
                counts.push_failed += len(pending) - index
                raise

            async with self.store.writer():
                row = row or {}
                self.store.mark_synced(
                    record,
                    created_at=dates.parse(row.get("created_at")) if row.get("created_at") else None,
                    modified_at=dates.parse(row.get("updated_at") or row.get("modified_at")) if (row.get("updated_at") or row.get("modified_at")) else None,
                )
            counts.pushed += 1

        if pending:
            logger.info("entity_pushed", table=translator.table, pushed=counts.pushed, failed=counts.push_failed)
        return counts

    # cycle

    async def run_cycle(self, full: bool = False, pull: bool = True, push: bool = True) -> SyncReport:
        """One pass: reference pulls (concurrent), core pulls, link, push."""
        report = SyncReport(status="running", started_at=dates.utcnow())
        self.last_report = report
        self._touched = {}
        self.ctx.cancel_event.clear()
        with sync_pass_context(farm_id=self.ctx.settings.farm_id) as pass_id:
            report.pass_id = pass_id
            try:
                if pull:
                    results = await asyncio.gather(
                        *(self.pull(t, full=full, report=report) for t in self.reference_translators),
                        return_exceptions=True,
                    )
                    for result in results:
                        if isinstance(result, BaseException):
                            raise result
                    for translator in self.core_translators:
                        await self.pull(translator, full=full, report=report)
                    await self.link_all(report)
                if push and not self.store.dry_run:
                    for translator in self.core_translators:
                        await self.push(translator, report=report)
                report.status = "partial" if report.has_failures else "ok"
            except SyncCancelled:
                report.status = "cancelled"
                logger.info("sync_pass_cancelled")
            except RemoteError as e:
                report.status = "failed"
                report.error = str(e)
                logger.error("sync_pass_aborted", error_type=type(e).__name__, status_code=e.status_code, error=str(e))
            finally:
                if self.store.dry_run:
                    self.store.db.rollback()
                report.finished_at = dates.utcnow()

            logger.info("sync_pass_finished", status=report.status, backfilled=report.backfilled)
        return report
