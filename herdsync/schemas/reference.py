"""Read-mostly reference tables. These are pulled, never pushed."""
import uuid
from typing import ClassVar, Optional

from .common import SyncedPayload
from ..services.field_codec import column


class BreedPayload(SyncedPayload):
    __entity__: ClassVar[str] = "breed"

    name: str = column("name", required=True)
    category: Optional[str] = column("category")
    characteristics: Optional[str] = column("characteristics")
    is_active: Optional[bool] = column("is_active")


class MedicationPayload(SyncedPayload):
    __entity__: ClassVar[str] = "medication"

    name: str = column("name", required=True)
    type: Optional[str] = column("type")
    manufacturer: Optional[str] = column("manufacturer")
    common_dosage: Optional[str] = column("common_dosage")
    withdrawal_period: Optional[str] = column("withdrawal_period")
    notes: Optional[str] = column("notes")
    is_active: Optional[bool] = column("is_active")


class ProductionPathPayload(SyncedPayload):
    __entity__: ClassVar[str] = "production_path"

    name: str = column("name", required=True)
    display_name: str = column("display_name", required=True)
    description: Optional[str] = column("description")
    color: Optional[str] = column("color")
    icon: Optional[str] = column("icon")
    is_system: Optional[bool] = column("is_system")
    is_active: Optional[bool] = column("is_active")


class CattleStagePayload(ProductionPathPayload):
    __entity__: ClassVar[str] = "cattle_stage"

    sort_order: Optional[int] = column("sort_order")


class TreatmentPlanPayload(SyncedPayload):
    __entity__: ClassVar[str] = "treatment_plan"

    name: str = column("name", required=True)
    condition: str = column("condition", required=True)
    description: Optional[str] = column("description")
    notes: Optional[str] = column("notes")


class TreatmentPlanStepPayload(SyncedPayload):
    __entity__: ClassVar[str] = "treatment_plan_step"

    treatment_plan_id: uuid.UUID = column("treatment_plan_id", required=True)
    step_number: int = column("step_number", required=True)
    day_number: int = column("day_number", required=True)
    title: str = column("title", required=True)
    description: Optional[str] = column("description")
    medication: Optional[str] = column("medication")
    dosage: Optional[str] = column("dosage")
    administration_method: Optional[str] = column("administration_method")
    notes: Optional[str] = column("notes")


class VeterinarianPayload(SyncedPayload):
    __entity__: ClassVar[str] = "veterinarian"

    name: str = column("name", required=True)
    clinic_name: Optional[str] = column("clinic_name")
    phone: Optional[str] = column("phone")
    email: Optional[str] = column("email")
    notes: Optional[str] = column("notes")


class ProcessorPayload(SyncedPayload):
    __entity__: ClassVar[str] = "processor"

    name: str = column("name", required=True)
    location: Optional[str] = column("location")
    phone: Optional[str] = column("phone")
    email: Optional[str] = column("email")
    notes: Optional[str] = column("notes")


class HealthConditionPayload(SyncedPayload):
    __entity__: ClassVar[str] = "health_condition"

    name: str = column("name", required=True)
    description: Optional[str] = column("description")
    is_active: Optional[bool] = column("is_active")


class ProductionPathStagePayload(SyncedPayload):
    """Which stages a production path goes through, and in what order."""

    __entity__: ClassVar[str] = "production_path_stage"

    production_path_id: uuid.UUID = column("production_path_id", required=True)
    stage_id: uuid.UUID = column("stage_id", required=True)
    stage_order: int = column("stage_order", required=True)
    is_optional: Optional[bool] = column("is_optional")
    min_days: Optional[int] = column("min_days")
    max_days: Optional[int] = column("max_days")
    target_weight_min: Optional[float] = column("target_weight_min")
    target_weight_max: Optional[float] = column("target_weight_max")
    notes: Optional[str] = column("notes")


class HealthRecordTypePayload(SyncedPayload):
    __entity__: ClassVar[str] = "health_record_type"

    name: str = column("name", required=True)
    description: Optional[str] = column("description")
    icon: Optional[str] = column("icon")
    color: Optional[str] = column("color")
    is_active: Optional[bool] = column("is_active")


class BuyerPayload(SyncedPayload):
    __entity__: ClassVar[str] = "buyer"

    name: str = column("name", required=True)
    type: Optional[str] = column("type")
    contact_name: Optional[str] = column("contact_name")
    phone: Optional[str] = column("phone")
    email: Optional[str] = column("email")
    address: Optional[str] = column("address")
    city: Optional[str] = column("city")
    state: Optional[str] = column("state")
    zip_code: Optional[str] = column("zip_code")
    notes: Optional[str] = column("notes")
    is_active: Optional[bool] = column("is_active")
