"""
Generic field codec between remote payloads (snake_case Supabase columns) and
the pydantic payload models in ``herdsync.schemas``.

Each model field is declared with ``column()``, which lists the remote keys it
may arrive under in priority order and the key it is emitted as. Resolution of
renamed columns is done in one place ("first present wins") instead of ad hoc
per entity.
"""
from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, ValidationError, model_validator

from . import dates
from ..errors import MissingRequiredField, TypeCoercionError

M = TypeVar("M", bound="RemoteModel")


def column(primary: str, *legacy: str, emit: Optional[str] = None, default: Any = None, required: bool = False, default_factory=None):
    """Declare a remote column.

    ``primary`` and then each ``legacy`` key are tried in order on decode;
    ``emit`` (defaults to ``primary``) is the key written on encode.
    """
    kwargs: Dict[str, Any] = {
        "validation_alias": AliasChoices(primary, *legacy),
        "serialization_alias": emit or primary,
    }
    if required:
        return Field(**kwargs)
    if default_factory is not None:
        return Field(default_factory=default_factory, **kwargs)
    return Field(default=default, **kwargs)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return dates.ensure_utc(value) if value is not None else None
    if isinstance(value, str):
        # unparseable text is dropped (logged by the normalizer), not fatal
        return dates.parse(value)
    raise ValueError(f"expected timestamp text, got {type(value).__name__}")


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return dates.format(value) if value is not None else None


Timestamp = Annotated[
    Optional[datetime],
    BeforeValidator(_parse_timestamp),
    PlainSerializer(_format_timestamp, return_type=Optional[str], when_used="json"),
]


class RemoteModel(BaseModel):
    """Base for remote payload models. A JSON null is the same as an absent key."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    __entity__: ClassVar[str] = "record"

    @model_validator(mode="before")
    @classmethod
    def _null_is_absent(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @classmethod
    def remote_keys(cls, name: str) -> Sequence[str]:
        alias = cls.model_fields[name].validation_alias
        if isinstance(alias, AliasChoices):
            return [c for c in alias.choices if isinstance(c, str)]
        return [alias or name]

    @classmethod
    def field_for_key(cls, key: Any) -> Optional[str]:
        for name in cls.model_fields:
            if key == name or key in cls.remote_keys(name):
                return name
        return None


def _raise_translation_error(model_cls: Type[RemoteModel], exc: ValidationError) -> None:
    err = exc.errors()[0]
    loc = err.get("loc") or ()
    entity = model_cls.__entity__
    if not loc:
        raise TypeCoercionError(entity, None, err.get("msg", "invalid payload")) from exc
    field = model_cls.field_for_key(loc[0])
    if err.get("type") == "missing" and len(loc) == 1 and field is not None:
        raise MissingRequiredField(model_cls.remote_keys(field)[0], entity=entity, field=field) from exc
    where = ".".join(str(p) for p in loc)
    raise TypeCoercionError(entity, field or where, f"{where}: {err.get('msg')}") from exc


def decode(model_cls: Type[M], payload: Any) -> M:
    """Remote payload -> model. Unknown keys are ignored."""
    if not isinstance(payload, Mapping):
        raise TypeCoercionError(model_cls.__entity__, None, f"expected an object, got {type(payload).__name__}")
    try:
        return model_cls.model_validate(payload)
    except ValidationError as e:
        _raise_translation_error(model_cls, e)


def build(model_cls: Type[M], fields: Mapping[str, Any]) -> M:
    """Local field values (keyed by attribute name) -> model."""
    try:
        return model_cls.model_validate(dict(fields))
    except ValidationError as e:
        _raise_translation_error(model_cls, e)


def encode(model: RemoteModel) -> Dict[str, Any]:
    """Model -> remote payload.

    Every mapped key is present; absent optional values are emitted as explicit
    nulls, which the remote treats as "clear this column".
    """
    return model.model_dump(mode="json", by_alias=True)
