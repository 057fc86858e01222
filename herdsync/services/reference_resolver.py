"""
Reference resolution: raw ids in a record -> records in the local store.

Runs strictly after the owning record has been committed. An id that does not
resolve yet is kept as-is and listed in ``unresolved_refs``; the next sync pass
retries it.
"""
import uuid
from typing import Any, List, Optional

import structlog

from .store import LocalStore
from ..models.models import Cattle, PregnancyRecord, TreatmentPlan, TreatmentPlanStep
from ..schemas.enums import BreedingMethod, PregnancyStatus
from ..translators.base import EntityTranslator
from ..translators.breeding import backfill_note, estimate_breeding_date

logger = structlog.get_logger(__name__)


class ReferenceResolver:
    def __init__(self, store: LocalStore, gestation_days: int = 283):
        self.store = store
        self.gestation_days = gestation_days

    def resolve_animal_reference(self, animal_id: Optional[uuid.UUID]) -> Optional[Cattle]:
        """The animal with this id, or None when it has not been synced yet."""
        if animal_id is None:
            return None
        return self.store.get(Cattle, animal_id)

    def link(self, translator: EntityTranslator, record: Any) -> List[str]:
        """Check every id reference on ``record``; returns the unresolved field names."""
        unresolved = []
        for field, target_model in translator.references.items():
            target_id = getattr(record, field, None)
            if target_id is None:
                continue
            if self.store.get(target_model, target_id) is None:
                unresolved.append(field)
        if unresolved:
            logger.info("reference_deferred", entity=translator.entity, record_id=str(record.id), fields=unresolved)
        record.unresolved_refs = unresolved
        return unresolved

    def resolve_pregnancy_for_calving(self, calving: Any) -> Optional[PregnancyRecord]:
        """The pregnancy a calving belongs to.

        With a ``pregnancy_id`` this is a lookup (None while that pregnancy has
        not been synced). Without one, a ``calved`` pregnancy is synthesized from
        the calving date minus the average gestation, flagged as a backfill, and
        linked; it is an estimate that assumes natural service.
        """
        if calving.pregnancy_id is not None:
            pregnancy = self.store.get(PregnancyRecord, calving.pregnancy_id)
            if pregnancy is not None and calving.sire_id is None and pregnancy.sire_id is not None:
                # sire is denormalized onto the calving from its pregnancy
                calving.sire_id = pregnancy.sire_id
                self.store.touch(calving)
            return pregnancy

        if calving.calving_date is None or calving.dam_id is None or calving.deleted_at is not None:
            return None

        pregnancy = self.store.create_local(
            PregnancyRecord,
            farm_id=calving.farm_id,
            dam_id=calving.dam_id,
            sire_id=calving.sire_id,
            breeding_date=estimate_breeding_date(calving.calving_date, self.gestation_days),
            expected_calving_date=calving.calving_date,
            status=PregnancyStatus.calved.value,
            breeding_method=BreedingMethod.natural.value,
            notes=backfill_note(self.gestation_days),
            provenance="backfill",
        )
        pregnancy.unresolved_refs = []
        calving.pregnancy_id = pregnancy.id
        self.store.touch(calving)
        logger.info(
            "pregnancy_backfilled",
            calving_id=str(calving.id),
            pregnancy_id=str(pregnancy.id),
            breeding_date=pregnancy.breeding_date.isoformat(),
        )
        return pregnancy

    def cascade_tombstone(self, record: Any) -> int:
        """Treatment plans own their steps; tombstoning a plan tombstones them."""
        if not isinstance(record, TreatmentPlan) or record.deleted_at is None:
            return 0
        count = 0
        for step in self.store.find(TreatmentPlanStep, treatment_plan_id=record.id):
            if self.store.soft_delete(step, at=record.deleted_at, status=record.sync_status):
                count += 1
        return count
