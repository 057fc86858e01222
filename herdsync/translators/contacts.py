from typing import Any, Dict, List, Optional

from .base import EntityTranslator, blank_to_none
from ..models.models import Contact
from ..schemas.contacts import ContactPayload


def single_primary(items: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    """At most one entry keeps is_primary; the first flagged one wins."""
    if items is None:
        return None
    seen = False
    result = []
    for item in items:
        item = dict(item)
        if item.get("is_primary") and not seen:
            seen = True
        else:
            item["is_primary"] = False
        result.append(item)
    return result


def primary_value(items: Optional[List[Dict[str, Any]]], key: str) -> Optional[str]:
    for item in items or []:
        if item.get("is_primary"):
            return item.get(key)
    return None


class ContactTranslator(EntityTranslator):
    entity = "contact"
    table = "contacts"
    model = Contact
    payload_model = ContactPayload

    def _normalize(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        fields["status"] = blank_to_none(fields.get("status")) or "Active"
        if fields.get("is_business") is None:
            fields["is_business"] = False
        fields["contact_type"] = blank_to_none(fields.get("contact_type"))
        for name in ("phone_numbers", "emails", "contact_persons"):
            fields[name] = single_primary(fields.get(name))
        return fields

    def normalize_local(self, patch, dto):
        # sub-collections are stored as JSON, so keep them in JSON form
        for name in ("phone_numbers", "emails", "contact_persons"):
            items = getattr(dto, name)
            patch[name] = [item.model_dump(mode="json") for item in items] if items is not None else None
        patch = self._normalize(patch)
        # legacy single fields fall back to the primary sub-collection entry
        if patch.get("phone") is None:
            patch["phone"] = primary_value(patch["phone_numbers"], "phone_number")
        if patch.get("email") is None:
            patch["email"] = primary_value(patch["emails"], "email")
        return patch

    def prepare_remote(self, fields):
        return self._normalize(dict(fields))
