import uuid
from typing import Optional

from ..services.field_codec import RemoteModel, Timestamp, column


class RecordPayload(RemoteModel):
    """Columns every remote table carries, even the append-only ones."""

    id: uuid.UUID = column("id", required=True)
    created_at: Timestamp = column("created_at")


class SyncedPayload(RecordPayload):
    """Columns every syncable remote table carries."""

    farm_id: Optional[uuid.UUID] = column("farm_id")
    # Most tables use updated_at; a few older ones still carry modified_at
    modified_at: Timestamp = column("updated_at", "modified_at")
    deleted_at: Timestamp = column("deleted_at")
