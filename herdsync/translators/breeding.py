"""
Pregnancy and calving translators.

Pregnancy dates exist in two generations: a single ``breeding_date`` /
``expected_calving_date`` and the newer start/end range columns. When a range
start is present it is authoritative and the single date mirrors it; a record
holding only the single date has no range.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from .base import EntityTranslator, blank_to_none, normalize_choice
from .cattle import enforce_external_sire_exclusivity
from ..models.models import CalvingRecord, Cattle, PregnancyRecord
from ..schemas.breeding import CalvingRecordPayload, PregnancyRecordPayload
from ..schemas.enums import BreedingMethod, CalvingEase, CattleSex, PregnancyStatus, RemoteCalfSex

BACKFILL_NOTE_PREFIX = "Backfilled from calving record"


def backfill_note(gestation: int = 283) -> str:
    return f"{BACKFILL_NOTE_PREFIX} - assumed natural service with {gestation} day gestation"


_BREEDING_METHOD_ALIASES = {
    "artificialinsemination": BreedingMethod.ai.value,
    "et": BreedingMethod.embryo_transfer.value,
    "naturalservice": BreedingMethod.natural.value,
}

CALF_SEXES = (CattleSex.bull.value, CattleSex.cow.value, CattleSex.steer.value, CattleSex.heifer.value)


def reconcile_date_range(fields: Dict[str, Any], single: str, start: str, end: str) -> Dict[str, Any]:
    if fields.get(start) is not None:
        fields[single] = fields[start]
    else:
        # no range without a start
        fields[end] = None
    return fields


def effective_window(record: Any, single: str, start: str, end: str):
    """(start, end) for readers that want a window regardless of storage mode."""
    first = getattr(record, start, None) or getattr(record, single, None)
    last = getattr(record, end, None) or first
    return first, last


def gestation_days(pregnancy: Any, calving_date: Optional[datetime] = None) -> Optional[int]:
    """Days from breeding to calving, or to the expected calving date. Never synced."""
    bred_on = getattr(pregnancy, "breeding_start_date", None) or getattr(pregnancy, "breeding_date", None)
    until = calving_date or getattr(pregnancy, "expected_calving_start_date", None) or getattr(pregnancy, "expected_calving_date", None)
    if bred_on is None or until is None:
        return None
    return (until - bred_on).days


def estimate_breeding_date(calving_date: datetime, gestation: int = 283) -> datetime:
    return calving_date - timedelta(days=gestation)


def remote_calf_sex(value: Optional[str]) -> str:
    """Map a local calf sex onto the remote's two-value vocabulary.

    Steer -> Bull and Cow -> Heifer; anything else (including absent) -> "".
    The mapping loses information and is never reversed.
    """
    if value in (CattleSex.steer.value, CattleSex.bull.value):
        return RemoteCalfSex.bull.value
    if value in (CattleSex.heifer.value, CattleSex.cow.value):
        return RemoteCalfSex.heifer.value
    return ""


class PregnancyRecordTranslator(EntityTranslator):
    entity = "pregnancy_record"
    table = "pregnancy_records"
    model = PregnancyRecord
    payload_model = PregnancyRecordPayload
    references = {"dam_id": Cattle, "sire_id": Cattle}
    local_only = ("provenance",)

    def _breeding_method(self, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str):
            alias = _BREEDING_METHOD_ALIASES.get("".join(ch for ch in value.lower() if ch.isalnum()))
            if alias:
                return alias
        return normalize_choice(self.entity, "breeding_method", value, BreedingMethod)

    def _normalize(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields["status"] = normalize_choice(self.entity, "status", fields.get("status"), PregnancyStatus, default=PregnancyStatus.bred.value)
        fields["breeding_method"] = self._breeding_method(fields.get("breeding_method"))
        if fields["breeding_method"] in (None, BreedingMethod.natural.value):
            fields["ai_technician"] = None
            fields["semen_source"] = None
        reconcile_date_range(fields, "breeding_date", "breeding_start_date", "breeding_end_date")
        reconcile_date_range(fields, "expected_calving_date", "expected_calving_start_date", "expected_calving_end_date")
        return enforce_external_sire_exclusivity(fields, "sire_id", "external_bull_name", "external_bull_registration")

    def normalize_local(self, patch, dto):
        patch = self._normalize(patch)
        notes = patch.get("notes") or ""
        patch["provenance"] = "backfill" if notes.startswith(BACKFILL_NOTE_PREFIX) else "user"
        return patch

    def prepare_remote(self, fields):
        return self._normalize(dict(fields))


class CalvingRecordTranslator(EntityTranslator):
    entity = "calving_record"
    table = "calving_records"
    model = CalvingRecord
    payload_model = CalvingRecordPayload
    references = {"dam_id": Cattle, "sire_id": Cattle, "calf_id": Cattle, "pregnancy_id": PregnancyRecord}

    def _common(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields["difficulty"] = normalize_choice(self.entity, "difficulty", fields.get("difficulty"), CalvingEase, default="")
        if fields.get("retained_placenta") is None:
            fields["retained_placenta"] = False
        if fields.get("veterinarian_called") is None:
            fields["veterinarian_called"] = False
        fields["calf_vigor"] = blank_to_none(fields.get("calf_vigor"))
        return fields

    def normalize_local(self, patch, dto):
        patch = self._common(patch)
        patch["calf_sex"] = normalize_choice(self.entity, "calf_sex", patch.get("calf_sex"), CALF_SEXES, default="", strict=False)
        return patch

    def prepare_remote(self, fields):
        fields = self._common(dict(fields))
        fields["calf_sex"] = remote_calf_sex(fields.get("calf_sex"))
        return fields
