from .base import EntityTranslator, blank_to_none
from ..models.models import Cattle, HealthRecord, TreatmentPlan
from ..schemas.health import HealthRecordPayload


class HealthRecordTranslator(EntityTranslator):
    entity = "health_record"
    table = "health_records"
    model = HealthRecord
    payload_model = HealthRecordPayload
    references = {"cattle_id": Cattle, "treatment_plan_id": TreatmentPlan}

    def _normalize(self, fields):
        fields["record_type"] = blank_to_none(fields.get("record_type")) or "General"
        if fields.get("follow_up_completed") is None:
            fields["follow_up_completed"] = False
        fields["veterinarian"] = blank_to_none(fields.get("veterinarian"))
        return fields

    def normalize_local(self, patch, dto):
        return self._normalize(patch)

    def prepare_remote(self, fields):
        return self._normalize(dict(fields))
