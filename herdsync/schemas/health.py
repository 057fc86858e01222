import uuid
from typing import ClassVar, Optional

from .common import SyncedPayload
from ..services.field_codec import Timestamp, column


class HealthRecordPayload(SyncedPayload):
    __entity__: ClassVar[str] = "health_record"

    cattle_id: Optional[uuid.UUID] = column("cattle_id")
    record_date: Timestamp = column("date", "record_date")
    record_type: Optional[str] = column("record_type")
    diagnosis: Optional[str] = column("condition", "diagnosis")
    treatment: Optional[str] = column("treatment")
    # Free text; the remote never had a veterinarian_id on this table
    veterinarian: Optional[str] = column("veterinarian")
    medication: Optional[str] = column("medication")
    dosage: Optional[str] = column("dosage")
    administration_method: Optional[str] = column("administration_method")
    temperature: Optional[float] = column("temperature")
    weight: Optional[float] = column("weight")
    cost: Optional[float] = column("cost")
    notes: Optional[str] = column("notes")
    follow_up_date: Timestamp = column("follow_up_date")
    follow_up_completed: Optional[bool] = column("follow_up_completed")
    treatment_plan_id: Optional[uuid.UUID] = column("treatment_plan_id")
