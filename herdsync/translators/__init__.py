"""Entity translators and the registry the orchestrator walks."""
from typing import Dict, List

from .base import EntityTranslator
from .breeding import CalvingRecordTranslator, PregnancyRecordTranslator
from .cattle import CattleTranslator
from .contacts import ContactTranslator
from .health import HealthRecordTranslator
from .pastures import PastureTranslator
from .tasks import TaskTranslator
from .records import (
    MortalityRecordTranslator,
    PastureLogTranslator,
    ProcessingRecordTranslator,
    SaleRecordTranslator,
    StageTransitionTranslator,
)
from .reference import (
    BreedTranslator,
    BuyerTranslator,
    CattleStageTranslator,
    HealthConditionTranslator,
    HealthRecordTypeTranslator,
    MedicationTranslator,
    ProcessorTranslator,
    ProductionPathStageTranslator,
    ProductionPathTranslator,
    TreatmentPlanStepTranslator,
    TreatmentPlanTranslator,
    VeterinarianTranslator,
)

# Pulled concurrently before anything else; nothing here references core entities.
REFERENCE_TRANSLATORS: List[EntityTranslator] = [
    BreedTranslator(),
    MedicationTranslator(),
    ProductionPathTranslator(),
    CattleStageTranslator(),
    ProductionPathStageTranslator(),
    TreatmentPlanTranslator(),
    TreatmentPlanStepTranslator(),
    VeterinarianTranslator(),
    ProcessorTranslator(),
    BuyerTranslator(),
    HealthConditionTranslator(),
    HealthRecordTypeTranslator(),
]

# Foreign-key order: a record is pushed only after what it points at.
CORE_TRANSLATORS: List[EntityTranslator] = [
    PastureTranslator(),
    CattleTranslator(),
    PregnancyRecordTranslator(),
    CalvingRecordTranslator(),
    HealthRecordTranslator(),
    TaskTranslator(),
    ContactTranslator(),
    SaleRecordTranslator(),
    ProcessingRecordTranslator(),
    MortalityRecordTranslator(),
    StageTransitionTranslator(),
    PastureLogTranslator(),
]

ALL_TRANSLATORS: List[EntityTranslator] = REFERENCE_TRANSLATORS + CORE_TRANSLATORS

BY_TABLE: Dict[str, EntityTranslator] = {t.table: t for t in ALL_TRANSLATORS}
BY_MODEL: Dict[type, EntityTranslator] = {t.model: t for t in ALL_TRANSLATORS}


def translator_for(table_or_model) -> EntityTranslator:
    if isinstance(table_or_model, str):
        return BY_TABLE[table_or_model]
    return BY_MODEL[table_or_model]
