import uuid
from typing import ClassVar, List, Optional

from .common import SyncedPayload
from ..services.field_codec import Timestamp, column


class CattlePayload(SyncedPayload):
    __entity__: ClassVar[str] = "cattle"

    tag_number: str = column("tag_number", required=True)
    name: Optional[str] = column("name")
    sex: Optional[str] = column("sex")
    cattle_type: Optional[str] = column("cattle_type")
    date_of_birth: Timestamp = column("date_of_birth")
    approximate_age: Optional[str] = column("approximate_age")
    color: Optional[str] = column("color")
    markings: Optional[str] = column("markings")
    registration_number: Optional[str] = column("registration_number")
    current_weight: Optional[float] = column("current_weight")
    purchase_date: Timestamp = column("purchase_date")
    purchase_price: Optional[float] = column("purchase_price")
    purchase_weight: Optional[float] = column("purchase_weight")
    purchase_type: Optional[str] = column("purchase_type")
    purchased_from: Optional[str] = column("purchased_from")
    current_status: Optional[str] = column("current_status")
    current_stage: Optional[str] = column("current_stage")
    production_path: Optional[str] = column("production_path")
    weaning_date: Timestamp = column("weaning_date")
    weaning_weight: Optional[float] = column("weaning_weight")
    finishing_start_date: Timestamp = column("finishing_start_date")
    processing_date: Timestamp = column("processing_date")
    estimated_processing_date: Timestamp = column("estimated_processing_date")
    exit_reason: Optional[str] = column("exit_reason")
    exit_date: Timestamp = column("exit_date")
    sale_price: Optional[float] = column("sale_price")
    notes: Optional[str] = column("notes")
    tags: Optional[str] = column("tags")
    location: Optional[List[str]] = column("location")
    pasture_id: Optional[uuid.UUID] = column("pasture_id")
    breed_id: Optional[uuid.UUID] = column("breed_id")
    dam_id: Optional[uuid.UUID] = column("dam_id")
    sire_id: Optional[uuid.UUID] = column("sire_id")
    external_sire_name: Optional[str] = column("external_sire_name")
    external_sire_registration: Optional[str] = column("external_sire_registration")
