"""Error taxonomy for the sync subsystem.

Per-record errors (``TranslationError`` and subclasses, ``RemoteRejected``) are
isolated by the orchestrator. Pass-level errors (``AuthenticationFailure``,
exhausted ``NetworkFailure``) abort the pass and surface in the report.
"""
from typing import Optional


class SyncError(Exception):
    pass


class TranslationError(SyncError):
    def __init__(self, entity: str, field: Optional[str], reason: str):
        self.entity = entity
        self.field = field
        self.reason = reason
        super().__init__(f"{entity}.{field or '*'}: {reason}")


class MissingRequiredField(TranslationError):
    def __init__(self, key: str, entity: str = "record", field: Optional[str] = None):
        self.key = key
        super().__init__(entity, field or key, f"missing required field '{key}'")


class TypeCoercionError(TranslationError):
    pass


class RemoteError(SyncError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NetworkFailure(RemoteError):
    """Transient: timeouts, connection errors, 408/429/5xx."""


class AuthenticationFailure(RemoteError):
    pass


class RemoteRejected(RemoteError):
    """The server refused one payload (validation, constraint, RLS)."""


class SyncCancelled(SyncError):
    pass


class RecordTombstoned(SyncError):
    """Local edits to a soft-deleted record are refused; tombstones are final."""


class TerminalStatusChange(SyncError):
    """A calved or lost pregnancy cannot be moved back to an open status."""
