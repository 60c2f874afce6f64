"""Utility constants and helpers for humantime.

Time unit constants represent durations in seconds.
Months are 30 days and years are 365 days; no calendar correction is applied.
"""

from typing import Literal, TypeAlias

from babel.core import Locale

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = 2592000
YEAR = 31536000

DEFAULT_LOCALE = "en_US"

Unit: TypeAlias = Literal["second", "minute", "hour", "day", "month", "year"]
NumericPolicy: TypeAlias = Literal["auto", "always"]

# Ordered smallest to largest: (unit, exclusive upper bound, divisor)
THRESHOLDS: tuple[tuple[Unit, float, int], ...] = (
    ("second", MINUTE, SECOND),
    ("minute", HOUR, MINUTE),
    ("hour", DAY, HOUR),
    ("day", MONTH, DAY),
    ("month", YEAR, MONTH),
    ("year", float("inf"), YEAR),
)

SCALES: dict[Unit, int] = {unit: divisor for unit, _, divisor in THRESHOLDS}


def check_numeric(numeric: str) -> NumericPolicy:
    if numeric not in ("auto", "always"):
        raise ValueError(
            f"numeric must be 'auto' or 'always', got {numeric!r}\n"
            f"Hint: 'auto' allows words like 'yesterday', "
            f"'always' forces '1 day ago'"
        )
    return numeric  # type: ignore[return-value]


def check_unit(unit: str) -> Unit:
    if unit not in SCALES:
        valid = ", ".join(SCALES)
        raise ValueError(f"Invalid unit '{unit}'. Valid units: {valid}")
    return unit  # type: ignore[return-value]


def parse_locale(locale: str | Locale) -> Locale:
    """Parse a locale identifier, accepting both ``en_US`` and ``en-US``."""
    if isinstance(locale, Locale):
        return locale
    sep = "-" if "-" in locale else "_"
    return Locale.parse(locale, sep=sep)
