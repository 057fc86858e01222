"""
Shared machinery for entity translators.

A translator is a pair of pure functions over already-fetched data:

* ``to_local(payload)`` -> patch of local attribute values
* ``to_remote(record)`` -> remote payload

Entity rules (defaults, vocabulary normalization, exclusivity) live in the
``normalize_local`` / ``prepare_remote`` hooks so both directions apply them.
"""
import re
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Type, Union

from ..errors import TypeCoercionError
from ..services.field_codec import RemoteModel, build, decode, encode

_FOLD = re.compile(r"[^a-z0-9]")


def _fold(value: str) -> str:
    return _FOLD.sub("", value.lower())


def choice_values(choices: Union[Type[Enum], Iterable[str]]) -> Tuple[str, ...]:
    if isinstance(choices, type) and issubclass(choices, Enum):
        return tuple(c.value for c in choices)
    return tuple(choices)


def normalize_choice(
    entity: str,
    field: str,
    value: Any,
    choices: Union[Type[Enum], Iterable[str]],
    default: Optional[str] = None,
    strict: bool = True,
) -> Optional[str]:
    """Map free text onto a canonical vocabulary member.

    Matching ignores case, spaces and punctuation ("Easy pull", "easy_pull").
    Absent or blank values take ``default``. Unknown values raise unless
    ``strict`` is off, in which case they pass through trimmed.
    """
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeCoercionError(entity, field, f"expected text, got {type(value).__name__}")
    if value.strip() == "":
        return default
    key = _fold(value)
    for choice in choice_values(choices):
        if _fold(choice) == key:
            return choice
    if strict:
        raise TypeCoercionError(entity, field, f"unknown value {value!r}")
    return value.strip()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class EntityTranslator:
    """Base translator: straight field mapping through the payload model."""

    entity: ClassVar[str] = "record"
    table: ClassVar[str] = ""
    model: ClassVar[type] = None
    payload_model: ClassVar[Type[RemoteModel]] = RemoteModel
    pushable: ClassVar[bool] = True
    farm_scoped: ClassVar[bool] = True
    # local attribute -> model class the id points at
    references: ClassVar[Dict[str, type]] = {}
    # payload attributes that only exist on the wire
    remote_only: ClassVar[Sequence[str]] = ()
    # local attributes the remote never sees
    local_only: ClassVar[Sequence[str]] = ()
    # remote columns a delta pull filters on; pages are ordered by the first
    cursor_columns: ClassVar[Tuple[str, ...]] = ("updated_at", "deleted_at")

    def local_fields(self) -> Tuple[str, ...]:
        names = [n for n in self.payload_model.model_fields if n not in self.remote_only]
        return tuple(names) + tuple(self.local_only)

    # remote -> local

    def to_local(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        dto = decode(self.payload_model, payload)
        patch = dto.model_dump()
        for name in self.remote_only:
            patch.pop(name, None)
        return self.normalize_local(patch, dto)

    def normalize_local(self, patch: Dict[str, Any], dto: RemoteModel) -> Dict[str, Any]:
        return patch

    # local -> remote

    def snapshot(self, record: Any) -> Dict[str, Any]:
        """Local attribute values of a stored record (or an already-plain dict)."""
        if isinstance(record, Mapping):
            return {name: record.get(name) for name in self.local_fields()}
        return {name: getattr(record, name, None) for name in self.local_fields()}

    def to_remote(self, record: Any) -> Dict[str, Any]:
        fields = self.prepare_remote(self.snapshot(record))
        for name in self.local_only:
            fields.pop(name, None)
        return encode(build(self.payload_model, fields))

    def prepare_remote(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return dict(fields)

    # store side

    def apply(self, record: Any, patch: Mapping[str, Any]) -> Any:
        for name, value in patch.items():
            if name in self.local_fields():
                setattr(record, name, value)
        return record
