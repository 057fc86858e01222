import uuid
from typing import ClassVar, List, Optional

from .common import SyncedPayload
from ..services.field_codec import Timestamp, column


class TaskPayload(SyncedPayload):
    __entity__: ClassVar[str] = "task"

    title: str = column("title", required=True)
    description: Optional[str] = column("description")
    category: str = column("category", "task_type", required=True)
    priority: Optional[str] = column("priority")
    status: Optional[str] = column("status")
    due_date: Timestamp = column("due_date")
    assigned_to_user_id: Optional[uuid.UUID] = column("assigned_to_user_id")
    cattle_ids: Optional[List[uuid.UUID]] = column("cattle_ids")
    # Single-cattle column from before cattle_ids existed; still read by older clients
    related_cattle_id: Optional[uuid.UUID] = column("related_cattle_id", "cattle_id")
    completed_at: Timestamp = column("completed_at")
