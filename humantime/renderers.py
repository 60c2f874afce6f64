"""Phrase renderers turning a signed amount of a unit into relative text.

The relative formatters pick the unit and the amount; a renderer only
localizes the result. ``BabelRenderer`` is the default and covers every
CLDR locale. ``EnglishRenderer`` has no locale data and supports the
idiomatic ``numeric="auto"`` words ("yesterday", "next month").
"""

from abc import ABC, abstractmethod
from typing import Literal

from babel.core import Locale
from babel.dates import format_timedelta
from typing_extensions import override

from humantime.util import (
    DEFAULT_LOCALE,
    SCALES,
    NumericPolicy,
    Unit,
    check_numeric,
    check_unit,
    parse_locale,
)


class PhraseRenderer(ABC):

    @abstractmethod
    def render(
        self,
        value: int,
        unit: Unit,
        *,
        locale: str | Locale = DEFAULT_LOCALE,
        numeric: NumericPolicy = "auto",
        past: bool = False,
    ) -> str:
        """Render ``value`` units relative to now.

        Positive values are in the future, negative values in the past.
        A zero amount is future-framed unless ``past`` is set.
        """
        pass


class BabelRenderer(PhraseRenderer):
    """Render phrases from CLDR data via ``babel.dates.format_timedelta``.

    Babel only ships the numeric relative patterns, so ``numeric="auto"``
    renders the same text as ``numeric="always"``.
    """

    def __init__(self, format: Literal["long", "short", "narrow"] = "long"):
        if format not in ("long", "short", "narrow"):
            raise ValueError(
                f"format must be 'long', 'short', or 'narrow', got {format!r}"
            )
        self.format: Literal["long", "short", "narrow"] = format

    @override
    def render(
        self,
        value: int,
        unit: Unit,
        *,
        locale: str | Locale = DEFAULT_LOCALE,
        numeric: NumericPolicy = "auto",
        past: bool = False,
    ) -> str:
        check_numeric(numeric)
        scale = SCALES[check_unit(unit)]
        locale = parse_locale(locale)
        if value == 0 and past:
            return self._zero_past(unit, locale)
        # Infinite threshold keeps babel from promoting to a larger unit
        return format_timedelta(
            value * scale,
            granularity=unit,
            threshold=float("inf"),
            add_direction=True,
            format=self.format,
            locale=locale,
        )

    def _zero_past(self, unit: Unit, locale: Locale) -> str:
        """Render "0 <units> ago"; format_timedelta frames zero as future."""
        fields = locale._data["date_fields"]
        patterns = fields.get(f"{unit}-{self.format}") or fields[unit]
        past_patterns = patterns["past"]
        pattern = past_patterns.get(locale.plural_form(0)) or past_patterns["other"]
        return pattern.replace("{0}", "0")


# CLDR English relative-type words, keyed by unit then offset
_ENGLISH_WORDS: dict[Unit, dict[int, str]] = {
    "second": {0: "now"},
    "minute": {0: "this minute"},
    "hour": {0: "this hour"},
    "day": {-1: "yesterday", 0: "today", 1: "tomorrow"},
    "month": {-1: "last month", 0: "this month", 1: "next month"},
    "year": {-1: "last year", 0: "this year", 1: "next year"},
}


class EnglishRenderer(PhraseRenderer):
    """English-only phrases without locale data.

    The ``locale`` argument is accepted for interface compatibility and
    ignored.
    """

    @override
    def render(
        self,
        value: int,
        unit: Unit,
        *,
        locale: str | Locale = DEFAULT_LOCALE,
        numeric: NumericPolicy = "auto",
        past: bool = False,
    ) -> str:
        check_unit(unit)
        if check_numeric(numeric) == "auto" and value in _ENGLISH_WORDS[unit]:
            return _ENGLISH_WORDS[unit][value]

        amount = abs(value)
        label = unit if amount == 1 else f"{unit}s"
        if value < 0 or (value == 0 and past):
            return f"{amount} {label} ago"
        return f"in {amount} {label}"
