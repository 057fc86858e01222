from .base import EntityTranslator
from ..errors import TypeCoercionError
from ..models.models import Pasture
from ..schemas.pastures import PasturePayload
from ..services import json_value

BOUNDARY_FIELDS = ("boundary_coordinates", "forage_boundary_coordinates")


class PastureTranslator(EntityTranslator):
    entity = "pasture"
    table = "pastures"
    model = Pasture
    payload_model = PasturePayload

    def normalize_local(self, patch, dto):
        for name in BOUNDARY_FIELDS:
            try:
                patch[name] = json_value.coerce_to_text(patch.get(name))
            except ValueError as e:
                raise TypeCoercionError(self.entity, name, str(e)) from e
        return patch
