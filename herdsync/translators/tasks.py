from typing import Any, Dict, List, Optional

from .base import EntityTranslator, normalize_choice
from ..models.models import Task
from ..schemas.enums import TaskPriority, TaskStatus
from ..schemas.tasks import TaskPayload


class TaskTranslator(EntityTranslator):
    """Tasks went through two schema changes: ``task_type`` became ``category``,
    and the single ``related_cattle_id`` became the ``cattle_ids`` array. Both
    old columns are still read, and ``related_cattle_id`` is still written for
    older clients."""

    entity = "task"
    table = "tasks"
    model = Task
    payload_model = TaskPayload
    remote_only = ("related_cattle_id",)

    def _normalize(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        if fields.get("category") is not None:
            fields["category"] = fields["category"].strip().lower()
        fields["priority"] = normalize_choice(self.entity, "priority", fields.get("priority"), TaskPriority, default=TaskPriority.medium.value)
        fields["status"] = normalize_choice(self.entity, "status", fields.get("status"), TaskStatus, default=TaskStatus.pending.value)
        if fields["status"] == TaskStatus.completed.value and fields.get("completed_at") is None:
            fields["completed_at"] = fields.get("modified_at")
        return fields

    def normalize_local(self, patch, dto):
        ids: Optional[List[Any]] = dto.cattle_ids
        if ids is None and dto.related_cattle_id is not None:
            ids = [dto.related_cattle_id]
        patch["cattle_ids"] = [str(i) for i in ids or []]
        return self._normalize(patch)

    def prepare_remote(self, fields):
        fields = self._normalize(dict(fields))
        # tasks created on this device may not have picked a category yet
        fields["category"] = fields.get("category") or "general"
        ids = [str(i) for i in fields.get("cattle_ids") or []]
        fields["cattle_ids"] = ids
        fields["related_cattle_id"] = ids[0] if ids else None
        return fields
