"""
Helpers for free-form JSON columns (pasture boundary polygons and similar).

Values are plain JSON data typed as pydantic's ``JsonValue`` (null, bool,
number, string, array, object). ``kind_of`` names the variant so callers
branch explicitly instead of poking at untyped objects.
"""
import json
from enum import Enum
from typing import Optional

from pydantic import JsonValue, TypeAdapter, ValidationError

_adapter = TypeAdapter(JsonValue)


class JsonKind(str, Enum):
    null = "null"
    bool = "bool"
    number = "number"
    string = "string"
    array = "array"
    object = "object"


def kind_of(value: JsonValue) -> JsonKind:
    if value is None:
        return JsonKind.null
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return JsonKind.bool
    if isinstance(value, (int, float)):
        return JsonKind.number
    if isinstance(value, str):
        return JsonKind.string
    if isinstance(value, list):
        return JsonKind.array
    if isinstance(value, dict):
        return JsonKind.object
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def validate(value) -> JsonValue:
    """Reject anything that is not representable as JSON."""
    try:
        return _adapter.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"invalid JSON value: {e.errors()[0].get('msg')}") from e


def to_text(value: JsonValue) -> Optional[str]:
    """Canonical compact JSON text; ``None`` stays ``None`` (column absent)."""
    if value is None:
        return None
    return json.dumps(validate(value), separators=(",", ":"), sort_keys=True)


def from_text(text: Optional[str]) -> JsonValue:
    if text is None or text == "":
        return None
    try:
        return _adapter.validate_json(text)
    except ValidationError as e:
        raise ValueError("stored text is not valid JSON") from e


def coerce_to_text(raw: JsonValue) -> Optional[str]:
    """Accept either JSON text or structured JSON and return canonical text.

    The remote has served boundary columns both as ``text`` and as ``jsonb``.
    """
    kind = kind_of(raw)
    if kind is JsonKind.null:
        return None
    if kind is JsonKind.string:
        if raw.strip() == "":
            return None
        # text column holding serialized JSON
        return to_text(from_text(raw))
    if kind in (JsonKind.array, JsonKind.object):
        return to_text(raw)
    raise ValueError(f"expected JSON text, array or object, got {kind.value}")
