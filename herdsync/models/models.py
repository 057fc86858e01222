import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    String,
    DateTime,
    Boolean,
    Integer,
    Float,
    JSON,
    Text,
    Index,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from ..db import Base


def uuid_pk() -> Mapped[uuid.UUID]:
    return mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)


def uuid_ref(index: bool = True) -> Mapped[Optional[uuid.UUID]]:
    # Plain id column: references are resolved by lookup, never by ORM relationship
    return mapped_column(UUID(as_uuid=True), nullable=True, index=index)


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC datetimes on every backend (SQLite drops tzinfo)."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


SYNC_PENDING = "pending"
SYNC_SYNCED = "synced"


class SyncMixin:
    """Columns shared by every syncable record."""

    id: Mapped[uuid.UUID] = uuid_pk()
    farm_id: Mapped[Optional[uuid.UUID]] = mapped_column(UUID(as_uuid=True), nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    modified_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)

    sync_status: Mapped[str] = mapped_column(String(20), default=SYNC_PENDING, index=True)
    sync_error: Mapped[Optional[str]] = mapped_column(Text)
    sync_attempts: Mapped[int] = mapped_column(Integer, default=0)
    # Field names whose referenced record was not present locally at link time
    unresolved_refs: Mapped[Optional[list]] = mapped_column(JSON, default=list)

    @property
    def is_tombstoned(self) -> bool:
        return self.deleted_at is not None


class Cattle(SyncMixin, Base):
    __tablename__ = "cattle"

    tag_number: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(255))
    sex: Mapped[Optional[str]] = mapped_column(String(20))
    cattle_type: Mapped[Optional[str]] = mapped_column(String(20))
    date_of_birth: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    approximate_age: Mapped[Optional[str]] = mapped_column(String(100))
    color: Mapped[Optional[str]] = mapped_column(String(100))
    markings: Mapped[Optional[str]] = mapped_column(Text)
    registration_number: Mapped[Optional[str]] = mapped_column(String(100))
    current_weight: Mapped[Optional[float]] = mapped_column(Float)
    purchase_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    purchase_price: Mapped[Optional[float]] = mapped_column(Float)
    purchase_weight: Mapped[Optional[float]] = mapped_column(Float)
    purchase_type: Mapped[Optional[str]] = mapped_column(String(100))
    purchased_from: Mapped[Optional[str]] = mapped_column(String(255))
    current_status: Mapped[Optional[str]] = mapped_column(String(50))
    current_stage: Mapped[Optional[str]] = mapped_column(String(50))
    production_path: Mapped[Optional[str]] = mapped_column(String(50))
    weaning_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    weaning_weight: Mapped[Optional[float]] = mapped_column(Float)
    finishing_start_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    processing_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    estimated_processing_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    exit_reason: Mapped[Optional[str]] = mapped_column(String(255))
    exit_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    sale_price: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    tags: Mapped[Optional[str]] = mapped_column(Text)
    location: Mapped[Optional[list]] = mapped_column(JSON)  # ordered pasture names
    pasture_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    breed_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    dam_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    sire_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    external_sire_name: Mapped[Optional[str]] = mapped_column(String(255))
    external_sire_registration: Mapped[Optional[str]] = mapped_column(String(100))


class PregnancyRecord(SyncMixin, Base):
    __tablename__ = "pregnancy_records"

    dam_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    sire_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    breeding_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    breeding_start_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    breeding_end_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    expected_calving_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    expected_calving_start_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    expected_calving_end_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    status: Mapped[Optional[str]] = mapped_column(String(20), index=True)
    breeding_method: Mapped[Optional[str]] = mapped_column(String(50))
    ai_technician: Mapped[Optional[str]] = mapped_column(String(255))
    semen_source: Mapped[Optional[str]] = mapped_column(String(255))
    external_bull_name: Mapped[Optional[str]] = mapped_column(String(255))
    external_bull_registration: Mapped[Optional[str]] = mapped_column(String(100))
    confirmation_method: Mapped[Optional[str]] = mapped_column(String(100))
    confirmed_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    provenance: Mapped[str] = mapped_column(String(20), default="user")  # user | backfill

    __table_args__ = (Index("idx_pregnancy_dam_status", "dam_id", "status"),)


class CalvingRecord(SyncMixin, Base):
    __tablename__ = "calving_records"

    dam_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    sire_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    calf_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    pregnancy_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    calving_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    difficulty: Mapped[Optional[str]] = mapped_column(String(50))
    calf_sex: Mapped[Optional[str]] = mapped_column(String(20))
    calf_birth_weight: Mapped[Optional[float]] = mapped_column(Float)
    calf_vigor: Mapped[Optional[str]] = mapped_column(String(50))
    complications: Mapped[Optional[str]] = mapped_column(Text)
    retained_placenta: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    assistance_provided: Mapped[Optional[str]] = mapped_column(Text)
    veterinarian_called: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class HealthRecord(SyncMixin, Base):
    __tablename__ = "health_records"

    cattle_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    record_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    record_type: Mapped[Optional[str]] = mapped_column(String(100))
    diagnosis: Mapped[Optional[str]] = mapped_column(String(255))
    treatment: Mapped[Optional[str]] = mapped_column(Text)
    veterinarian: Mapped[Optional[str]] = mapped_column(String(255))
    medication: Mapped[Optional[str]] = mapped_column(String(255))
    dosage: Mapped[Optional[str]] = mapped_column(String(100))
    administration_method: Mapped[Optional[str]] = mapped_column(String(100))
    temperature: Mapped[Optional[float]] = mapped_column(Float)
    weight: Mapped[Optional[float]] = mapped_column(Float)
    cost: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    follow_up_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    follow_up_completed: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    treatment_plan_id: Mapped[Optional[uuid.UUID]] = uuid_ref()


class Task(SyncMixin, Base):
    __tablename__ = "tasks"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    category: Mapped[Optional[str]] = mapped_column(String(50))
    priority: Mapped[Optional[str]] = mapped_column(String(20))
    status: Mapped[Optional[str]] = mapped_column(String(20), index=True)
    due_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    assigned_to_user_id: Mapped[Optional[uuid.UUID]] = uuid_ref(index=False)
    cattle_ids: Mapped[Optional[list]] = mapped_column(JSON)  # list of uuid strings
    completed_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)


class Contact(SyncMixin, Base):
    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_type: Mapped[Optional[str]] = mapped_column(String(50))
    company: Mapped[Optional[str]] = mapped_column(String(255))
    is_business: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    # Legacy single-value fields kept alongside the sub-collections
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    email: Mapped[Optional[str]] = mapped_column(String(255))
    address: Mapped[Optional[str]] = mapped_column(Text)
    address_line1: Mapped[Optional[str]] = mapped_column(String(255))
    address_line2: Mapped[Optional[str]] = mapped_column(String(255))
    city: Mapped[Optional[str]] = mapped_column(String(100))
    state: Mapped[Optional[str]] = mapped_column(String(100))
    zip_code: Mapped[Optional[str]] = mapped_column(String(20))
    country: Mapped[Optional[str]] = mapped_column(String(100))
    website: Mapped[Optional[str]] = mapped_column(String(255))
    tax_id: Mapped[Optional[str]] = mapped_column(String(100))
    payment_terms: Mapped[Optional[str]] = mapped_column(String(100))
    status: Mapped[Optional[str]] = mapped_column(String(20))
    preferred_contact_method: Mapped[Optional[str]] = mapped_column(String(50))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    # Owned sub-collections, stored as JSON lists of objects
    phone_numbers: Mapped[Optional[list]] = mapped_column(JSON)
    emails: Mapped[Optional[list]] = mapped_column(JSON)
    contact_persons: Mapped[Optional[list]] = mapped_column(JSON)


class Pasture(SyncMixin, Base):
    __tablename__ = "pastures"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    pasture_type: Mapped[Optional[str]] = mapped_column(String(50))
    acreage: Mapped[Optional[float]] = mapped_column(Float)
    fencing_type: Mapped[Optional[str]] = mapped_column(String(100))
    water_source: Mapped[Optional[str]] = mapped_column(String(100))
    carrying_capacity: Mapped[Optional[int]] = mapped_column(Integer)
    current_occupancy: Mapped[Optional[int]] = mapped_column(Integer)
    condition: Mapped[Optional[str]] = mapped_column(String(50))
    last_grazed_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    rest_period_days: Mapped[Optional[int]] = mapped_column(Integer)
    forage_type: Mapped[Optional[str]] = mapped_column(String(100))
    forage_acres: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    boundary_coordinates: Mapped[Optional[str]] = mapped_column(Text)  # canonical JSON text
    forage_boundary_coordinates: Mapped[Optional[str]] = mapped_column(Text)
    center_lat: Mapped[Optional[float]] = mapped_column(Float)
    center_lng: Mapped[Optional[float]] = mapped_column(Float)
    map_zoom_level: Mapped[Optional[int]] = mapped_column(Integer)


# =====================
# Animal events and pasture logs
# =====================

class SaleRecord(SyncMixin, Base):
    __tablename__ = "sale_records"

    cattle_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    buyer_id: Mapped[Optional[uuid.UUID]] = uuid_ref()  # contacts.id
    sale_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    sale_price: Mapped[Optional[float]] = mapped_column(Float)
    sale_weight: Mapped[Optional[float]] = mapped_column(Float)
    price_per_pound: Mapped[Optional[float]] = mapped_column(Float)
    quickbooks_invoice_id: Mapped[Optional[str]] = mapped_column(String(100))
    notes: Mapped[Optional[str]] = mapped_column(Text)


class ProcessingRecord(SyncMixin, Base):
    __tablename__ = "processing_records"

    cattle_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    processing_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    processor: Mapped[Optional[str]] = mapped_column(String(255))
    live_weight: Mapped[Optional[float]] = mapped_column(Float)
    hanging_weight: Mapped[Optional[float]] = mapped_column(Float)
    processing_cost: Mapped[Optional[float]] = mapped_column(Float)
    dress_percentage: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class MortalityRecord(SyncMixin, Base):
    __tablename__ = "mortality_records"

    cattle_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    death_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    cause: Mapped[Optional[str]] = mapped_column(String(255))
    cause_category: Mapped[Optional[str]] = mapped_column(String(100))
    disposal_method: Mapped[Optional[str]] = mapped_column(String(100))
    veterinarian_called: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    veterinarian: Mapped[Optional[str]] = mapped_column(String(255))
    notes: Mapped[Optional[str]] = mapped_column(Text)


class StageTransition(SyncMixin, Base):
    __tablename__ = "stage_transitions"

    cattle_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    from_stage: Mapped[Optional[str]] = mapped_column(String(50))
    to_stage: Mapped[Optional[str]] = mapped_column(String(50))
    transition_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    weight: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class PastureLog(SyncMixin, Base):
    __tablename__ = "pasture_logs"

    pasture_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    user_id: Mapped[Optional[uuid.UUID]] = uuid_ref(index=False)
    log_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    log_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    soil_ph: Mapped[Optional[float]] = mapped_column(Float)
    nitrogen_level: Mapped[Optional[str]] = mapped_column(String(50))
    phosphorus_level: Mapped[Optional[str]] = mapped_column(String(50))
    potassium_level: Mapped[Optional[str]] = mapped_column(String(50))
    test_results: Mapped[Optional[str]] = mapped_column(Text)
    recommendations: Mapped[Optional[str]] = mapped_column(Text)
    maintenance_type: Mapped[Optional[str]] = mapped_column(String(100))
    materials_used: Mapped[Optional[str]] = mapped_column(Text)
    cost: Mapped[Optional[float]] = mapped_column(Float)
    labor_hours: Mapped[Optional[float]] = mapped_column(Float)
    status: Mapped[Optional[str]] = mapped_column(String(50))
    completed_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    animals_moved_in: Mapped[Optional[int]] = mapped_column(Integer)
    animals_moved_out: Mapped[Optional[int]] = mapped_column(Integer)
    stocking_density: Mapped[Optional[float]] = mapped_column(Float)
    hay_cut: Mapped[Optional[str]] = mapped_column(String(100))
    cutting_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    bailing_date: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    yield_per_acre: Mapped[Optional[float]] = mapped_column(Float)
    total_yield: Mapped[Optional[float]] = mapped_column(Float)
    moisture_content: Mapped[Optional[float]] = mapped_column(Float)
    bale_count: Mapped[Optional[int]] = mapped_column(Integer)
    bale_weight: Mapped[Optional[float]] = mapped_column(Float)
    quality_grade: Mapped[Optional[str]] = mapped_column(String(50))
    notes: Mapped[Optional[str]] = mapped_column(Text)


# =====================
# Reference data (pull-only)
# =====================

class Breed(SyncMixin, Base):
    __tablename__ = "breeds"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(50))
    characteristics: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class Medication(SyncMixin, Base):
    __tablename__ = "medications"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(String(100))
    manufacturer: Mapped[Optional[str]] = mapped_column(String(255))
    common_dosage: Mapped[Optional[str]] = mapped_column(String(255))
    withdrawal_period: Mapped[Optional[str]] = mapped_column(String(100))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class ProductionPath(SyncMixin, Base):
    __tablename__ = "production_paths"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    color: Mapped[Optional[str]] = mapped_column(String(50))
    icon: Mapped[Optional[str]] = mapped_column(String(100))
    is_system: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class CattleStage(SyncMixin, Base):
    __tablename__ = "cattle_stages"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    color: Mapped[Optional[str]] = mapped_column(String(50))
    icon: Mapped[Optional[str]] = mapped_column(String(100))
    sort_order: Mapped[int] = mapped_column(Integer, default=0)
    is_system: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class TreatmentPlan(SyncMixin, Base):
    __tablename__ = "treatment_plans"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    condition: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class TreatmentPlanStep(SyncMixin, Base):
    __tablename__ = "treatment_plan_steps"

    treatment_plan_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    step_number: Mapped[int] = mapped_column(Integer, nullable=False)
    day_number: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    medication: Mapped[Optional[str]] = mapped_column(String(255))
    dosage: Mapped[Optional[str]] = mapped_column(String(100))
    administration_method: Mapped[Optional[str]] = mapped_column(String(100))
    notes: Mapped[Optional[str]] = mapped_column(Text)


class Veterinarian(SyncMixin, Base):
    __tablename__ = "veterinarians"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    clinic_name: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    email: Mapped[Optional[str]] = mapped_column(String(255))
    notes: Mapped[Optional[str]] = mapped_column(Text)


class Processor(SyncMixin, Base):
    __tablename__ = "processors"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    email: Mapped[Optional[str]] = mapped_column(String(255))
    notes: Mapped[Optional[str]] = mapped_column(Text)


class HealthCondition(SyncMixin, Base):
    __tablename__ = "health_conditions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class ProductionPathStage(SyncMixin, Base):
    __tablename__ = "production_path_stages"

    production_path_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    stage_id: Mapped[Optional[uuid.UUID]] = uuid_ref()
    stage_order: Mapped[int] = mapped_column(Integer, nullable=False)
    is_optional: Mapped[Optional[bool]] = mapped_column(Boolean, default=False)
    min_days: Mapped[Optional[int]] = mapped_column(Integer)
    max_days: Mapped[Optional[int]] = mapped_column(Integer)
    target_weight_min: Mapped[Optional[float]] = mapped_column(Float)
    target_weight_max: Mapped[Optional[float]] = mapped_column(Float)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class HealthRecordType(SyncMixin, Base):
    __tablename__ = "health_record_types"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    icon: Mapped[Optional[str]] = mapped_column(String(100))
    color: Mapped[Optional[str]] = mapped_column(String(50))
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class Buyer(SyncMixin, Base):
    __tablename__ = "buyers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[Optional[str]] = mapped_column(String(50))
    contact_name: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    email: Mapped[Optional[str]] = mapped_column(String(255))
    address: Mapped[Optional[str]] = mapped_column(Text)
    city: Mapped[Optional[str]] = mapped_column(String(100))
    state: Mapped[Optional[str]] = mapped_column(String(100))
    zip_code: Mapped[Optional[str]] = mapped_column(String(20))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, default=True)


class SyncState(Base):
    """Per-table pull watermark."""

    __tablename__ = "sync_state"

    table_name: Mapped[str] = mapped_column(String(100), primary_key=True)
    last_synced_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
    last_full_sync_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime)
