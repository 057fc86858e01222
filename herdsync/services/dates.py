"""
Date/time normalization between local datetimes and remote timestamp text.

The remote has stored timestamps in several shapes over time (with and without
fractional seconds, with and without an offset, bare dates). Parsing is
permissive; formatting always emits one canonical form.
"""
from datetime import datetime, timezone, date
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

# Tried in order; the first that matches wins.
_OFFSET_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)
_NAIVE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
)
_DATE_ONLY = "%Y-%m-%d"


def _normalize_text(text: str) -> str:
    value = text.strip()
    # Postgres emits "2024-03-01 12:00:00+00"; accept the space separator
    if len(value) > 10 and value[10] == " ":
        value = value[:10] + "T" + value[11:]
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    # "+00" -> "+00:00" so %z accepts it on every interpreter
    if len(value) > 3 and value[-3] in "+-" and value[-2:].isdigit() and "T" in value:
        value = value + ":00"
    # %f takes at most 6 digits; Postgres may send up to 6, some clients 7-9
    if "." in value:
        head, _, tail = value.partition(".")
        digits = ""
        for ch in tail:
            if not ch.isdigit():
                break
            digits += ch
        if len(digits) > 6:
            value = f"{head}.{digits[:6]}{tail[len(digits):]}"
    return value


def parse(text: Optional[str]) -> Optional[datetime]:
    """Parse a remote timestamp into an aware UTC datetime.

    Returns None (and logs) when no known format matches.
    """
    if text is None:
        return None
    if not isinstance(text, str) or not text.strip():
        logger.warning("date_parse_failed", value=repr(text))
        return None

    value = _normalize_text(text)

    for fmt in _OFFSET_FORMATS:
        try:
            return datetime.strptime(value, fmt).astimezone(timezone.utc)
        except ValueError:
            continue

    for fmt in _NAIVE_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue

    try:
        return datetime.strptime(value, _DATE_ONLY).replace(tzinfo=timezone.utc)
    except ValueError:
        pass

    logger.warning("date_parse_failed", value=text)
    return None


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format(value: datetime) -> str:
    """Canonical remote form: ``2024-03-01T12:00:00.000000+00:00``."""
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return ensure_utc(value).isoformat(timespec="microseconds")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
