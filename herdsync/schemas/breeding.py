import uuid
from typing import ClassVar, Optional

from .common import SyncedPayload
from ..services.field_codec import Timestamp, column


class PregnancyRecordPayload(SyncedPayload):
    __entity__: ClassVar[str] = "pregnancy_record"

    # The table was created with cow_id/bull_id; dam_id/sire_id were added later
    # and are not yet populated on every row.
    dam_id: uuid.UUID = column("dam_id", "cow_id", emit="cow_id", required=True)
    sire_id: Optional[uuid.UUID] = column("sire_id", "bull_id", emit="bull_id")
    breeding_date: Timestamp = column("breeding_date")
    breeding_start_date: Timestamp = column("breeding_start_date")
    breeding_end_date: Timestamp = column("breeding_end_date")
    expected_calving_date: Timestamp = column("expected_calving_date")
    expected_calving_start_date: Timestamp = column("expected_calving_start_date")
    expected_calving_end_date: Timestamp = column("expected_calving_end_date")
    status: Optional[str] = column("status", "pregnancy_status")
    breeding_method: Optional[str] = column("breeding_method")
    ai_technician: Optional[str] = column("ai_technician")
    semen_source: Optional[str] = column("semen_source")
    external_bull_name: Optional[str] = column("external_bull_name")
    external_bull_registration: Optional[str] = column("external_bull_registration")
    confirmation_method: Optional[str] = column("confirmation_method")
    confirmed_date: Timestamp = column("confirmed_date", "confirmation_date")
    notes: Optional[str] = column("notes")


class CalvingRecordPayload(SyncedPayload):
    __entity__: ClassVar[str] = "calving_record"

    dam_id: uuid.UUID = column("dam_id", "cow_id", required=True)
    sire_id: Optional[uuid.UUID] = column("sire_id", "bull_id")
    calf_id: Optional[uuid.UUID] = column("calf_id")
    pregnancy_id: Optional[uuid.UUID] = column("pregnancy_id")
    calving_date: Timestamp = column("calving_date")
    difficulty: Optional[str] = column("calving_ease", "difficulty")
    calf_sex: Optional[str] = column("calf_sex")
    calf_birth_weight: Optional[float] = column("birth_weight", "calf_birth_weight")
    calf_vigor: Optional[str] = column("calf_vigor")
    complications: Optional[str] = column("complications")
    retained_placenta: Optional[bool] = column("retained_placenta")
    assistance_provided: Optional[str] = column("assistance_provided")
    veterinarian_called: Optional[bool] = column("veterinarian_called")
    notes: Optional[str] = column("notes")
