"""Per-animal event records (sales, processing, deaths, stage moves) and pasture logs.

Several of these tables are append-only on the remote: they carry
``created_at`` but no ``updated_at``, and ``pasture_logs`` has no
``deleted_at`` either. Each payload lists exactly the columns its table has,
since the remote rejects unknown keys on upsert.
"""
import uuid
from typing import ClassVar, Optional

from .common import RecordPayload, SyncedPayload
from ..services.field_codec import Timestamp, column


class SaleRecordPayload(RecordPayload):
    __entity__: ClassVar[str] = "sale_record"

    cattle_id: uuid.UUID = column("cattle_id", required=True)
    # contacts.id of the buyer
    buyer_id: Optional[uuid.UUID] = column("buyer_id")
    sale_date: Timestamp = column("sale_date")
    sale_price: Optional[float] = column("sale_price")
    sale_weight: Optional[float] = column("sale_weight")
    price_per_pound: Optional[float] = column("price_per_pound")
    quickbooks_invoice_id: Optional[str] = column("quickbooks_invoice_id")
    notes: Optional[str] = column("notes")
    deleted_at: Timestamp = column("deleted_at")


class ProcessingRecordPayload(SyncedPayload):
    __entity__: ClassVar[str] = "processing_record"

    cattle_id: uuid.UUID = column("cattle_id", required=True)
    processing_date: Timestamp = column("processing_date")
    # processor name as free text, not a processors.id
    processor: Optional[str] = column("processor")
    live_weight: Optional[float] = column("live_weight")
    hanging_weight: Optional[float] = column("hanging_weight")
    processing_cost: Optional[float] = column("processing_cost")
    dress_percentage: Optional[float] = column("dress_percentage")
    notes: Optional[str] = column("notes")


class MortalityRecordPayload(RecordPayload):
    __entity__: ClassVar[str] = "mortality_record"

    cattle_id: uuid.UUID = column("cattle_id", required=True)
    farm_id: Optional[uuid.UUID] = column("farm_id")
    death_date: Timestamp = column("death_date")
    cause: Optional[str] = column("cause")
    cause_category: Optional[str] = column("category")
    disposal_method: Optional[str] = column("disposal_method")
    veterinarian_called: Optional[bool] = column("veterinarian_called")
    veterinarian: Optional[str] = column("veterinarian_name")
    notes: Optional[str] = column("notes")
    deleted_at: Timestamp = column("deleted_at")


class StageTransitionPayload(RecordPayload):
    __entity__: ClassVar[str] = "stage_transition"

    cattle_id: uuid.UUID = column("cattle_id", required=True)
    farm_id: Optional[uuid.UUID] = column("farm_id")
    from_stage: Optional[str] = column("from_stage")
    to_stage: Optional[str] = column("to_stage")
    transition_date: Timestamp = column("transition_date")
    weight: Optional[float] = column("weight_at_transition")
    notes: Optional[str] = column("notes")
    deleted_at: Timestamp = column("deleted_at")


class PastureLogPayload(RecordPayload):
    __entity__: ClassVar[str] = "pasture_log"

    farm_id: Optional[uuid.UUID] = column("farm_id")
    modified_at: Timestamp = column("updated_at")
    pasture_id: uuid.UUID = column("pasture_id", required=True)
    user_id: uuid.UUID = column("user_id", required=True)
    log_type: str = column("log_type", required=True)
    log_date: Timestamp = column("log_date")
    title: str = column("title", required=True)
    description: Optional[str] = column("description")
    # soil test
    soil_ph: Optional[float] = column("soil_ph")
    nitrogen_level: Optional[str] = column("nitrogen_level")
    phosphorus_level: Optional[str] = column("phosphorus_level")
    potassium_level: Optional[str] = column("potassium_level")
    test_results: Optional[str] = column("test_results")
    recommendations: Optional[str] = column("recommendations")
    # maintenance
    maintenance_type: Optional[str] = column("maintenance_type")
    materials_used: Optional[str] = column("materials_used")
    cost: Optional[float] = column("cost")
    labor_hours: Optional[float] = column("labor_hours")
    status: Optional[str] = column("status")
    completed_date: Timestamp = column("completed_date")
    # grazing
    animals_moved_in: Optional[int] = column("animals_moved_in")
    animals_moved_out: Optional[int] = column("animals_moved_out")
    stocking_density: Optional[float] = column("stocking_density")
    # hay
    hay_cut: Optional[str] = column("hay_cut")
    cutting_date: Timestamp = column("cutting_date")
    bailing_date: Timestamp = column("bailing_date")
    yield_per_acre: Optional[float] = column("yield_per_acre")
    total_yield: Optional[float] = column("total_yield")
    moisture_content: Optional[float] = column("moisture_content")
    bale_count: Optional[int] = column("bale_count")
    bale_weight: Optional[float] = column("bale_weight")
    quality_grade: Optional[str] = column("quality_grade")
    notes: Optional[str] = column("notes")
