"""Locale-aware formatting of dates, numbers, currency and percentages.

Thin wrappers over Babel that accept the same instant forms as the
relative formatters and both ``en_US`` and ``en-US`` locale identifiers.
"""

from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Literal, TypeAlias
from zoneinfo import ZoneInfo

from babel import dates, numbers
from babel.core import Locale

from humantime.instant import Instant, to_timestamp
from humantime.util import DEFAULT_LOCALE, parse_locale

Number: TypeAlias = int | float | Decimal
Width: TypeAlias = Literal["short", "medium", "long", "full"]

# Percent pattern with up to two fraction digits
PERCENT_PATTERN = "#,##0.##%"
# Numeric day, month and full year ("1/15/2025", "15.1.2025")
DEFAULT_DATE_SKELETON = "yMd"


def _as_datetime(value: Instant, tz: str) -> datetime:
    return datetime.fromtimestamp(to_timestamp(value), tz=ZoneInfo(tz))


def format_date(
    value: Instant,
    locale: str | Locale = DEFAULT_LOCALE,
    format: Width | str | None = None,
    tz: str = "UTC",
) -> str:
    """Format the calendar date of an instant.

    Plain ``date`` objects are formatted as-is; anything else is first
    converted to ``tz``. Without ``format`` the locale's numeric
    year-month-day form is used, with a four digit year.

    Example:
        >>> format_date("2025-01-15T14:30:00Z")
        '1/15/2025'
        >>> format_date(date(2025, 1, 15), "de-DE", "long")
        '15. Januar 2025'
    """
    if not isinstance(value, datetime) and isinstance(value, date):
        day = value
    else:
        day = _as_datetime(value, tz).date()
    if format is None:
        midnight = datetime.combine(day, time.min, tzinfo=timezone.utc)
        return dates.format_skeleton(
            DEFAULT_DATE_SKELETON,
            midnight,
            tzinfo=timezone.utc,
            locale=parse_locale(locale),
        )
    return dates.format_date(day, format=format, locale=parse_locale(locale))


def format_datetime(
    value: Instant,
    locale: str | Locale = DEFAULT_LOCALE,
    format: Width | str = "medium",
    tz: str = "UTC",
) -> str:
    """Format an instant with date and time in the ``tz`` time zone."""
    return dates.format_datetime(
        _as_datetime(value, tz),
        format=format,
        tzinfo=ZoneInfo(tz),
        locale=parse_locale(locale),
    )


def format_number(
    number: Number,
    locale: str | Locale = DEFAULT_LOCALE,
    format: str | None = None,
) -> str:
    """Format a number with the locale's grouping and decimal symbols."""
    return numbers.format_decimal(number, format=format, locale=parse_locale(locale))


def format_currency(
    amount: Number,
    currency: str = "USD",
    locale: str | Locale = DEFAULT_LOCALE,
) -> str:
    """Format a monetary amount, e.g. ``format_currency(1234.5) -> '$1,234.50'``."""
    return numbers.format_currency(amount, currency, locale=parse_locale(locale))


def format_percent(value: Number, locale: str | Locale = DEFAULT_LOCALE) -> str:
    """Format a ratio as a percentage with at most two fraction digits."""
    return numbers.format_percent(
        value, format=PERCENT_PATTERN, locale=parse_locale(locale)
    )
