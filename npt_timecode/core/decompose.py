"""Numeric decomposition of NPT values.

Pure helpers converting a number of seconds to an hours/minutes/seconds/
milliseconds breakdown and back. Breakdowns are memoized per value in a
``DecompositionCache``.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_THOUSANDTH = Decimal('0.001')


@dataclass(frozen=True)
class Breakdown:
    """Computed parts of a time value expressed in seconds."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: float
    total_hours: float
    total_minutes: float
    total_seconds: float
    total_milliseconds: float

    @property
    def ms(self) -> float:
        return self.milliseconds

    def as_dict(self) -> Dict[str, Any]:
        return {
            'hours': self.hours,
            'minutes': self.minutes,
            'seconds': self.seconds,
            'milliseconds': self.milliseconds,
            'total_hours': self.total_hours,
            'total_minutes': self.total_minutes,
            'total_seconds': self.total_seconds,
            'total_milliseconds': self.total_milliseconds,
        }


def round_to_3(value: float) -> float:
    """Round to 3 decimals, half away from zero on the exact binary value.

    ``round_to_3(0.0625)`` is ``0.063`` where the builtin ``round`` would give
    ``0.062``.
    """
    return float(Decimal(value).quantize(_THOUSANDTH, rounding=ROUND_HALF_UP))


def compute_breakdown(value: float) -> Breakdown:
    """Compute the breakdown of ``value`` seconds without touching any cache."""
    total_milliseconds = value / 1000
    total_seconds = value
    total_minutes = total_seconds / 60
    total_hours = total_minutes / 60

    hours = math.floor(total_hours)
    minutes = math.floor((total_hours - hours) * 60)
    seconds = math.floor(total_seconds - (hours * 3600) - (minutes * 60))
    remainder = total_seconds - (hours * 3600) - (minutes * 60) - seconds
    milliseconds = 1000 * round_to_3(remainder)

    return Breakdown(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=milliseconds,
        total_hours=total_hours,
        total_minutes=total_minutes,
        total_seconds=total_seconds,
        total_milliseconds=total_milliseconds,
    )


class DecompositionCache:
    """Value -> ``Breakdown`` memo keyed by the exact numeric value.

    Writes are idempotent, so concurrent callers converging on the same key
    always store the same breakdown. With ``maxsize`` set, new values are
    still computed once the cache is full but no longer stored.
    """

    def __init__(self, maxsize: Optional[int] = None):
        self.maxsize = maxsize
        self._entries: Dict[float, Breakdown] = {}

    def get(self, value: float) -> Breakdown:
        breakdown = self._entries.get(value)
        if breakdown is None:
            logger.debug("Decomposition cache miss for %r", value)
            breakdown = compute_breakdown(value)
            if self.maxsize is None or len(self._entries) < self.maxsize:
                self._entries[value] = breakdown
        return breakdown

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value) -> bool:
        return value in self._entries


_default_cache: Optional[DecompositionCache] = None


def get_default_cache() -> DecompositionCache:
    """Return the process-wide cache, creating it on first use."""
    global _default_cache
    if _default_cache is None:
        _default_cache = DecompositionCache()
    return _default_cache


def set_default_cache(cache: Optional[DecompositionCache]) -> None:
    """Replace the process-wide cache. ``None`` makes the next use build a new one."""
    global _default_cache
    _default_cache = cache


def decompose(value: float, cache: Optional[DecompositionCache] = None) -> Breakdown:
    """Break ``value`` seconds into hours, minutes, seconds and milliseconds.

    ``value`` must be finite. Results come from ``cache`` (or the process
    default) so repeated accessor calls stay cheap.
    """
    if cache is None:
        cache = get_default_cache()
    return cache.get(value)


def _part(parts, name: str):
    if isinstance(parts, dict):
        return parts.get(name)
    try:
        return parts[name]
    except (TypeError, KeyError, IndexError):
        return getattr(parts, name, None)


def _as_float(value) -> float:
    """Missing parts are 0; anything that is not a representable number is NaN."""
    if value is None:
        return 0.0
    if not isinstance(value, Real) or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (OverflowError, ValueError):
        return math.nan


def recompose(parts) -> float:
    """Convert ``hours``/``minutes``/``seconds``/``milliseconds`` back to seconds.

    ``parts`` may be a mapping or any object exposing those names. Missing
    fields count as zero and ``ms`` is accepted as an alias; ``milliseconds``
    wins when both are present. A non-numeric part makes the result NaN.
    """
    milliseconds = _part(parts, 'milliseconds')
    if milliseconds is None:
        milliseconds = _part(parts, 'ms')

    total = 0.0
    total += 60 * 60 * _as_float(_part(parts, 'hours'))
    total += 60 * _as_float(_part(parts, 'minutes'))
    total += _as_float(_part(parts, 'seconds'))
    total += _as_float(milliseconds) / 1000
    return total
