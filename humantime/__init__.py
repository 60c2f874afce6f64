from .clock import Clock, fixed_clock, system_clock
from .formatters import (
    format_currency,
    format_date,
    format_datetime,
    format_number,
    format_percent,
)
from .instant import Instant, InvalidInstant, to_timestamp
from .relative import (
    elapsed_breakdown,
    relative_time,
    select_unit,
    time_ago,
    verbose_ago,
)
from .renderers import BabelRenderer, EnglishRenderer, PhraseRenderer
from .util import DAY, DEFAULT_LOCALE, HOUR, MINUTE, MONTH, SECOND, YEAR

__all__ = [
    "relative_time",
    "time_ago",
    "elapsed_breakdown",
    "verbose_ago",
    "select_unit",
    "PhraseRenderer",
    "BabelRenderer",
    "EnglishRenderer",
    "Clock",
    "system_clock",
    "fixed_clock",
    "Instant",
    "InvalidInstant",
    "to_timestamp",
    "format_date",
    "format_datetime",
    "format_number",
    "format_currency",
    "format_percent",
    "DEFAULT_LOCALE",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTH",
    "YEAR",
]
