"""Animal event records and pasture logs.

Sales, mortality records and stage transitions are append-only on the remote
(no ``updated_at``), so deltas are found by ``created_at``. An edit made on
another device to one of these rows is only seen on the next full pull.
"""
from .base import EntityTranslator, blank_to_none, normalize_choice
from ..models.models import Cattle, Contact, MortalityRecord, Pasture, PastureLog, ProcessingRecord, SaleRecord, StageTransition
from ..schemas.enums import CattleStage
from ..schemas.records import (
    MortalityRecordPayload,
    PastureLogPayload,
    ProcessingRecordPayload,
    SaleRecordPayload,
    StageTransitionPayload,
)

APPEND_ONLY_CURSOR = ("created_at", "deleted_at")


class SaleRecordTranslator(EntityTranslator):
    entity = "sale_record"
    table = "sale_records"
    model = SaleRecord
    payload_model = SaleRecordPayload
    references = {"cattle_id": Cattle, "buyer_id": Contact}
    farm_scoped = False
    cursor_columns = APPEND_ONLY_CURSOR


class ProcessingRecordTranslator(EntityTranslator):
    entity = "processing_record"
    table = "processing_records"
    model = ProcessingRecord
    payload_model = ProcessingRecordPayload
    references = {"cattle_id": Cattle}

    def _normalize(self, fields):
        fields["processor"] = blank_to_none(fields.get("processor"))
        return fields

    def normalize_local(self, patch, dto):
        return self._normalize(patch)

    def prepare_remote(self, fields):
        return self._normalize(dict(fields))


class MortalityRecordTranslator(EntityTranslator):
    entity = "mortality_record"
    table = "mortality_records"
    model = MortalityRecord
    payload_model = MortalityRecordPayload
    references = {"cattle_id": Cattle}
    cursor_columns = APPEND_ONLY_CURSOR

    def _normalize(self, fields):
        if fields.get("veterinarian_called") is None:
            fields["veterinarian_called"] = False
        fields["veterinarian"] = blank_to_none(fields.get("veterinarian"))
        return fields

    def normalize_local(self, patch, dto):
        return self._normalize(patch)

    def prepare_remote(self, fields):
        return self._normalize(dict(fields))


class StageTransitionTranslator(EntityTranslator):
    entity = "stage_transition"
    table = "stage_transitions"
    model = StageTransition
    payload_model = StageTransitionPayload
    references = {"cattle_id": Cattle}
    cursor_columns = APPEND_ONLY_CURSOR

    def _normalize(self, fields):
        # stage names are open: farms add their own
        for name in ("from_stage", "to_stage"):
            fields[name] = normalize_choice(self.entity, name, fields.get(name), CattleStage, strict=False)
        return fields

    def normalize_local(self, patch, dto):
        return self._normalize(patch)

    def prepare_remote(self, fields):
        fields = self._normalize(dict(fields))
        # to_stage is NOT NULL remotely
        fields["to_stage"] = fields.get("to_stage") or ""
        return fields


class PastureLogTranslator(EntityTranslator):
    entity = "pasture_log"
    table = "pasture_logs"
    model = PastureLog
    payload_model = PastureLogPayload
    references = {"pasture_id": Pasture}
    cursor_columns = ("updated_at",)

    def normalize_local(self, patch, dto):
        patch["log_type"] = patch["log_type"].strip().lower()
        patch["title"] = patch["title"].strip()
        return patch
