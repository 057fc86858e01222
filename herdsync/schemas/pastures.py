from typing import ClassVar, Optional

from pydantic import JsonValue

from .common import SyncedPayload
from ..services.field_codec import Timestamp, column


class PasturePayload(SyncedPayload):
    __entity__: ClassVar[str] = "pasture"

    name: str = column("name", required=True)
    pasture_type: Optional[str] = column("pasture_type")
    acreage: Optional[float] = column("acreage")
    fencing_type: Optional[str] = column("fencing_type")
    water_source: Optional[str] = column("water_source")
    carrying_capacity: Optional[int] = column("carrying_capacity")
    current_occupancy: Optional[int] = column("current_occupancy")
    condition: Optional[str] = column("condition")
    last_grazed_date: Timestamp = column("last_grazed_date")
    rest_period_days: Optional[int] = column("rest_period_days")
    forage_type: Optional[str] = column("forage_type")
    forage_acres: Optional[float] = column("forage_acres")
    notes: Optional[str] = column("notes")
    # text column on older rows, jsonb on newer ones
    boundary_coordinates: JsonValue = column("boundary_coordinates")
    forage_boundary_coordinates: JsonValue = column("forage_boundary_coordinates")
    center_lat: Optional[float] = column("center_lat")
    center_lng: Optional[float] = column("center_lng")
    map_zoom_level: Optional[int] = column("map_zoom_level")
