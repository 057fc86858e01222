from typing import Any, Dict

from .base import EntityTranslator, blank_to_none, normalize_choice
from ..models.models import Breed, Cattle, Pasture
from ..schemas.cattle import CattlePayload
from ..schemas.enums import CattleSex, CattleStage, CattleStatus, CattleType, ProductionPath


def enforce_external_sire_exclusivity(fields: Dict[str, Any], sire_key: str, name_key: str, registration_key: str) -> Dict[str, Any]:
    """An internal sire reference wins; external free-text sire fields are cleared."""
    if fields.get(sire_key) is not None:
        fields[name_key] = None
        fields[registration_key] = None
    else:
        fields[name_key] = blank_to_none(fields.get(name_key))
        fields[registration_key] = blank_to_none(fields.get(registration_key))
    return fields


class CattleTranslator(EntityTranslator):
    entity = "cattle"
    table = "cattle"
    model = Cattle
    payload_model = CattlePayload
    references = {"dam_id": Cattle, "sire_id": Cattle, "breed_id": Breed, "pasture_id": Pasture}

    def _normalize(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        e = self.entity
        fields["sex"] = normalize_choice(e, "sex", fields.get("sex"), CattleSex, default=CattleSex.unknown.value)
        fields["current_stage"] = normalize_choice(e, "current_stage", fields.get("current_stage"), CattleStage, default=CattleStage.calf.value)
        fields["cattle_type"] = normalize_choice(e, "cattle_type", fields.get("cattle_type"), CattleType, default=CattleType.beef.value, strict=False)
        fields["current_status"] = normalize_choice(e, "current_status", fields.get("current_status"), CattleStatus, default=CattleStatus.active.value, strict=False)
        fields["production_path"] = normalize_choice(
            e, "production_path", fields.get("production_path"), ProductionPath, default=ProductionPath.beef_finishing.value, strict=False
        )
        location = fields.get("location")
        if location is not None:
            # keep order, drop blanks
            fields["location"] = [name.strip() for name in location if name and name.strip()]
        return enforce_external_sire_exclusivity(fields, "sire_id", "external_sire_name", "external_sire_registration")

    def normalize_local(self, patch, dto):
        return self._normalize(patch)

    def prepare_remote(self, fields):
        return self._normalize(dict(fields))
