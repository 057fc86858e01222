"""Pull-only reference tables: breeds, medications, stages, treatment plans..."""
from .base import EntityTranslator, blank_to_none
from ..models import models
from ..schemas import reference


class ReferenceTranslator(EntityTranslator):
    pushable = False
    # Active unless the remote says otherwise
    active_default = True

    def normalize_local(self, patch, dto):
        patch["name"] = patch["name"].strip()
        if "is_active" in patch and patch["is_active"] is None:
            patch["is_active"] = self.active_default
        return patch


class BreedTranslator(ReferenceTranslator):
    entity = "breed"
    table = "breeds"
    model = models.Breed
    payload_model = reference.BreedPayload
    farm_scoped = False

    def normalize_local(self, patch, dto):
        patch = super().normalize_local(patch, dto)
        patch["category"] = blank_to_none(patch.get("category")) or "Beef"
        return patch


class MedicationTranslator(ReferenceTranslator):
    entity = "medication"
    table = "medications"
    model = models.Medication
    payload_model = reference.MedicationPayload


class ProductionPathTranslator(ReferenceTranslator):
    entity = "production_path"
    table = "production_paths"
    model = models.ProductionPath
    payload_model = reference.ProductionPathPayload

    def normalize_local(self, patch, dto):
        patch = super().normalize_local(patch, dto)
        if patch.get("is_system") is None:
            patch["is_system"] = False
        return patch


class CattleStageTranslator(ProductionPathTranslator):
    entity = "cattle_stage"
    table = "cattle_stages"
    model = models.CattleStage
    payload_model = reference.CattleStagePayload

    def normalize_local(self, patch, dto):
        patch = super().normalize_local(patch, dto)
        if patch.get("sort_order") is None:
            patch["sort_order"] = 0
        return patch


class TreatmentPlanTranslator(ReferenceTranslator):
    entity = "treatment_plan"
    table = "treatment_plans"
    model = models.TreatmentPlan
    payload_model = reference.TreatmentPlanPayload


class TreatmentPlanStepTranslator(ReferenceTranslator):
    entity = "treatment_plan_step"
    table = "treatment_plan_steps"
    model = models.TreatmentPlanStep
    payload_model = reference.TreatmentPlanStepPayload
    references = {"treatment_plan_id": models.TreatmentPlan}
    # steps are reached through their plan
    farm_scoped = False

    def normalize_local(self, patch, dto):
        return patch


class VeterinarianTranslator(ReferenceTranslator):
    entity = "veterinarian"
    table = "veterinarians"
    model = models.Veterinarian
    payload_model = reference.VeterinarianPayload


class ProcessorTranslator(ReferenceTranslator):
    entity = "processor"
    table = "processors"
    model = models.Processor
    payload_model = reference.ProcessorPayload


class HealthConditionTranslator(ReferenceTranslator):
    entity = "health_condition"
    table = "health_conditions"
    model = models.HealthCondition
    payload_model = reference.HealthConditionPayload


class ProductionPathStageTranslator(ReferenceTranslator):
    entity = "production_path_stage"
    table = "production_path_stages"
    model = models.ProductionPathStage
    payload_model = reference.ProductionPathStagePayload
    references = {"production_path_id": models.ProductionPath, "stage_id": models.CattleStage}
    cursor_columns = ("updated_at",)

    def normalize_local(self, patch, dto):
        if patch.get("is_optional") is None:
            patch["is_optional"] = False
        return patch


class HealthRecordTypeTranslator(ReferenceTranslator):
    entity = "health_record_type"
    table = "health_record_types"
    model = models.HealthRecordType
    payload_model = reference.HealthRecordTypePayload
    cursor_columns = ("updated_at",)


class BuyerTranslator(ReferenceTranslator):
    entity = "buyer"
    table = "buyers"
    model = models.Buyer
    payload_model = reference.BuyerPayload
    farm_scoped = False
    cursor_columns = ("updated_at",)
