"""Helpers for normalizing versions and timestamps and rendering status text."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedInputError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"
DEFAULT_TIME_FORMAT = "%Y-%m-%d %I:%M%p"

# Tried in order when the strict parser rejects a textual timestamp.
FALLBACK_TIME_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%a, %d %b %Y %H:%M:%S %z",
)

_PARENTHETICAL = re.compile(r"\(.*\)$")
_VERSION = re.compile(r"^-?[0-9]+$")
_datetime_adapter = TypeAdapter(datetime)

Timestamp = Union[datetime, str]
VersionLike = Union[int, str]


def coerce_version(value: Any) -> Optional[int]:
    """Return ``value`` as an integer version, or ``None`` when absent.

    Raises:
        MalformedInputError: If ``value`` is not integer-like.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise MalformedInputError(f"Invalid version: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _VERSION.match(value.strip()):
        return int(value.strip())
    raise MalformedInputError(f"Invalid version: {value!r}")


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def normalize_timestamp(value: Timestamp) -> datetime:
    """Convert a structured or textual timestamp to an aware ``datetime``.

    Text goes through pydantic's datetime parser first. If that fails, each of
    ``FALLBACK_TIME_FORMATS`` is tried before giving up.

    Raises:
        MalformedInputError: If no parse succeeds.
    """
    if isinstance(value, datetime):
        return ensure_aware(value)
    if not isinstance(value, str):
        raise MalformedInputError(f"Unsupported timestamp: {value!r}")

    text = value.strip()
    try:
        return ensure_aware(_datetime_adapter.validate_python(text))
    except ValidationError:
        logger.debug(f"Strict timestamp parse failed for {text!r}, trying fallbacks")

    for fmt in FALLBACK_TIME_FORMATS:
        try:
            return ensure_aware(datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise MalformedInputError(f"Unable to parse timestamp: {value!r}")


def format_timestamp(
    value: Timestamp,
    tz: str = DEFAULT_TIMEZONE,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> str:
    """Render ``value`` in the display timezone using ``time_format``."""
    moment = normalize_timestamp(value)
    return moment.astimezone(ZoneInfo(tz)).strftime(time_format)


def xmlschema(value: datetime) -> str:
    """UTC ISO-8601 text with a ``Z`` suffix, e.g. ``2013-10-01T19:11:10Z``."""
    return ensure_aware(value).astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def simplify_display_text(display: str) -> str:
    """Strip a trailing parenthetical, e.g. ``'In accessioning (described)'``
    becomes ``'In accessioning'``."""
    return _PARENTHETICAL.sub("", display).strip()
