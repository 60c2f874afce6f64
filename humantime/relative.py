"""Relative time and elapsed duration formatting.

All functions share the threshold table in ``humantime.util`` and take the
current time from an injectable clock, so results are deterministic under
``fixed_clock``.

Example:
    >>> from humantime import fixed_clock, relative_time, verbose_ago
    >>> now = fixed_clock("2025-01-15T12:00:00Z")
    >>> relative_time("2025-01-18T12:00:00Z", clock=now)
    'in 3 days'
    >>> verbose_ago("2024-01-10T12:00:00Z", clock=now)
    '1 year 6 days ago'
"""

import logging
import math

from babel.core import Locale

from humantime.clock import Clock, system_clock
from humantime.instant import Instant, to_timestamp
from humantime.renderers import BabelRenderer, PhraseRenderer
from humantime.util import (
    DAY,
    DEFAULT_LOCALE,
    HOUR,
    MINUTE,
    THRESHOLDS,
    NumericPolicy,
    Unit,
)

logger = logging.getLogger(__name__)

# Largest to smallest
_VERBOSE_UNITS: tuple[tuple[Unit, int], ...] = tuple(
    (unit, divisor) for unit, _, divisor in reversed(THRESHOLDS)
)

_BREAKDOWN_UNITS: tuple[tuple[str, int], ...] = (
    ("d", DAY),
    ("h", HOUR),
    ("m", MINUTE),
)

JUST_NOW = "just now"
JUST_NOW_SECONDS = 5
MAX_VERBOSE_TERMS = 2


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def select_unit(diff_seconds: int | float) -> tuple[Unit, int]:
    """Pick the display unit for a signed difference in seconds.

    Returns (unit, amount) where amount keeps the sign of ``diff_seconds``.
    """
    magnitude = abs(diff_seconds)
    for unit, bound, divisor in THRESHOLDS:
        if magnitude < bound:
            amount = _round_half_up(diff_seconds / divisor)
            logger.debug("Selected %s for %ss (amount %d)", unit, diff_seconds, amount)
            return unit, amount
    return "second", 0


def relative_time(
    target: Instant,
    base: Instant | None = None,
    *,
    locale: str | Locale = DEFAULT_LOCALE,
    numeric: NumericPolicy = "auto",
    renderer: PhraseRenderer | None = None,
    clock: Clock = system_clock,
) -> str:
    """Describe ``target`` relative to ``base`` ("in 2 hours", "3 days ago").

    Args:
        target: The instant being described
        base: Reference instant (default: ``clock()``)
        locale: Locale identifier, ``en_US`` or ``en-US`` form
        numeric: "auto" lets the renderer use words such as "yesterday",
            "always" forces numbers
        renderer: Phrase renderer (default: ``BabelRenderer()``)
        clock: Time source used when ``base`` is omitted

    Raises:
        InvalidInstant: If ``target`` or ``base`` is not a valid instant
    """
    base_ts = clock() if base is None else to_timestamp(base)
    raw_diff = to_timestamp(target) - base_ts
    unit, amount = select_unit(_round_half_up(raw_diff))
    renderer = renderer or BabelRenderer()
    return renderer.render(
        amount, unit, locale=locale, numeric=numeric, past=raw_diff < 0
    )


def time_ago(
    past: Instant,
    *,
    locale: str | Locale = DEFAULT_LOCALE,
    numeric: NumericPolicy = "auto",
    renderer: PhraseRenderer | None = None,
    clock: Clock = system_clock,
) -> str:
    """Describe ``past`` as a past-framed phrase relative to ``clock()``.

    The amount is always rendered as past, even for instants after now or
    less than half a second away ("0 seconds ago").
    """
    diff_seconds = _round_half_up(to_timestamp(past) - clock())
    unit, amount = select_unit(diff_seconds)
    renderer = renderer or BabelRenderer()
    return renderer.render(
        -abs(amount), unit, locale=locale, numeric=numeric, past=True
    )


def elapsed_breakdown(diff_seconds: int | float) -> str:
    """Compact duration such as "2d 4h 15m" (sign ignored, never empty).

    Example:
        >>> elapsed_breakdown(90061)
        '1d 1h 1m 1s'

    Raises:
        ValueError: If ``diff_seconds`` is NaN or infinite
    """
    if not math.isfinite(diff_seconds):
        raise ValueError(
            f"Duration must be a finite number of seconds, got {diff_seconds!r}\n"
            f"Hint: pass a difference of timestamps, e.g. end - start"
        )
    remaining = math.floor(abs(diff_seconds))
    parts: list[str] = []
    for token, scale in _BREAKDOWN_UNITS:
        amount = remaining // scale
        remaining -= amount * scale
        if amount:
            parts.append(f"{amount}{token}")
    if remaining or not parts:
        parts.append(f"{remaining}s")
    return " ".join(parts)


def verbose_ago(
    past: Instant,
    *,
    locale: str | Locale = DEFAULT_LOCALE,
    clock: Clock = system_clock,
) -> str:
    """Describe ``past`` with up to two units, e.g. "2 years 3 months ago".

    Anything under five seconds old (or in the future) is "just now".
    Output is always English; ``locale`` is accepted and ignored.
    """
    elapsed = math.floor(clock() - to_timestamp(past))
    if elapsed < JUST_NOW_SECONDS:
        return JUST_NOW

    terms: list[str] = []
    remaining = elapsed
    for unit, scale in _VERBOSE_UNITS:
        amount = remaining // scale
        if amount > 0:
            terms.append(f"{amount} {unit}{'s' if amount > 1 else ''}")
            remaining -= amount * scale
            if len(terms) == MAX_VERBOSE_TERMS:
                break
    return " ".join(terms) + " ago"
