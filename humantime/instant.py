"""Coercion of instant-like values to Unix seconds."""

import logging
import math
from datetime import date, datetime, time, timezone
from typing import Any, TypeAlias

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

Instant: TypeAlias = int | float | datetime | date | str


class InvalidInstant(ValueError):
    """Raised when a value cannot be interpreted as a point in time."""


def to_timestamp(value: Any) -> float:
    """Convert an instant-like value to Unix seconds.

    Accepts:
    - int/float: Passed through as Unix seconds (must be finite)
    - datetime: Aware datetimes keep their offset, naive ones are read as UTC
    - date: Midnight UTC of that day
    - str: Any date string dateutil can parse (ISO-8601, RFC 2822, ...)

    Raises:
        InvalidInstant: If the value is unparseable, non-finite or of an
            unsupported type
    """
    if isinstance(value, bool):
        raise InvalidInstant(f"Expected an instant, got bool: {value!r}")
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise InvalidInstant(f"Instant must be finite, got {value!r}")
        return float(value)
    if isinstance(value, datetime):
        return _datetime_timestamp(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp()
    if isinstance(value, str):
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError) as e:
            logger.debug("Failed to parse instant %r: %s", value, e)
            raise InvalidInstant(
                f"Could not parse {value!r} as a date/time.\n"
                f"Examples:\n"
                f"  '2025-01-15T14:30:00Z'  # ISO-8601\n"
                f"  'Wed, 15 Jan 2025 14:30:00 +0000'  # RFC 2822"
            ) from e
        return _datetime_timestamp(parsed)
    raise InvalidInstant(
        f"Instant must be int, float, datetime, date, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def _datetime_timestamp(dt: datetime) -> float:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()
