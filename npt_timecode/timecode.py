"""
Normal Play Time entities: ``Time``, ``Range`` and ``Timecode``.

Factories are total: any input yields an entity, malformed input yields an
invalid one. Callers check ``is_valid``/``is_now`` instead of catching errors.

    Time.from_input(305.5)                       # 5 minutes, 5.5 seconds
    Time.from_input('05:5.5')
    Time.from_input({'minutes': 5, 'seconds': 5.5})
    Range.from_input('00:05:32.5-00:06:00')
    Timecode.from_input('now-')
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from .core import (
    Breakdown,
    DecompositionCache,
    DEFAULT_FORMAT,
    decompose,
    format_breakdown,
    parse_npt,
    recompose,
    split_range,
)
from .core.parser import NOW_TEXT

logger = logging.getLogger(__name__)

NOW = -1

_PART_NAMES = ('hours', 'minutes', 'seconds')


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_float(value: Any) -> float:
    """Float value of a number; NaN when it cannot be represented."""
    try:
        return float(value)
    except (OverflowError, ValueError):
        return math.nan


def _is_nan(value: Any) -> bool:
    if not _is_number(value):
        return False
    try:
        return math.isnan(value)
    except (OverflowError, ValueError):
        return False


def _lookup(arg: Any, name: str, default: Any = None) -> Any:
    if isinstance(arg, Mapping):
        return arg.get(name, default)
    return getattr(arg, name, default)


def _has_parts(arg: Any) -> bool:
    if isinstance(arg, Mapping):
        return any(name in arg for name in _PART_NAMES)
    return any(hasattr(arg, name) for name in _PART_NAMES)


def _is_given(value: Any) -> bool:
    """Loose truthiness used for range stops: ``None``, ``False``, ``0``,
    NaN and ``""`` count as "not given"; entities and containers always count."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if _is_number(value):
        if _is_nan(value):
            return False
        try:
            return value != 0
        except ArithmeticError:
            return True
    if isinstance(value, str):
        return value != ''
    return True


class Time:
    """A single NPT value in seconds, the ``now`` sentinel, or invalid (NaN)."""

    NOW = NOW

    # Decomposition cache; None uses the process default.
    cache: Optional[DecompositionCache] = None

    def __init__(self, value: float):
        self.value = value

    @classmethod
    def from_input(cls, arg: Any = None) -> "Time":
        """Create a ``Time`` from a number, NPT text, ``'now'``, another
        ``Time``, or a mapping/object with ``value`` or
        ``hours``/``minutes``/``seconds``. Never raises.
        """
        if isinstance(arg, bool):
            pass
        elif _is_number(arg):
            value = _as_float(arg)
            if not math.isnan(value):
                return cls(value)
            if not _is_nan(arg):
                logger.debug("%s value is not representable as seconds", type(arg).__name__)
        elif isinstance(arg, str):
            if arg == NOW_TEXT:
                return cls(NOW)
            parsed = parse_npt(arg)
            if parsed is not None:
                return cls(parsed / 1000)
            logger.debug("Unparseable NPT text %r", arg)
        elif isinstance(arg, Time):
            return cls(arg.value)
        elif arg is not None:
            value = _lookup(arg, 'value')
            if _is_number(value):
                return cls(_as_float(value))
            if _has_parts(arg):
                return cls(recompose(arg))
            logger.debug("Unsupported time input of type %s", type(arg).__name__)

        return cls(math.nan)

    @classmethod
    def now(cls) -> "Time":
        return cls.from_input(NOW)

    @property
    def is_now(self) -> bool:
        return self.value == NOW

    @property
    def is_valid(self) -> bool:
        return not math.isnan(self.value)

    @property
    def computed(self) -> Optional[Breakdown]:
        """Breakdown of the value, or ``None`` when it is NaN or infinite."""
        if self.value is None or not math.isfinite(self.value):
            return None
        return decompose(self.value, type(self).cache)

    def _field(self, name: str):
        computed = self.computed
        return None if computed is None else getattr(computed, name)

    @property
    def total_hours(self) -> Optional[float]:
        return self._field('total_hours')

    @property
    def total_minutes(self) -> Optional[float]:
        return self._field('total_minutes')

    @property
    def total_seconds(self) -> Optional[float]:
        return self._field('total_seconds')

    @property
    def total_milliseconds(self) -> Optional[float]:
        return self._field('total_milliseconds')

    @property
    def hours(self) -> Optional[int]:
        return self._field('hours')

    @property
    def minutes(self) -> Optional[int]:
        return self._field('minutes')

    @property
    def seconds(self) -> Optional[int]:
        return self._field('seconds')

    @property
    def milliseconds(self) -> Optional[float]:
        return self._field('milliseconds')

    @property
    def ms(self) -> Optional[float]:
        return self.milliseconds

    def set(self, value: Any) -> None:
        """Set the value from any ``from_input`` input.

        ``None`` and NaN leave the current value untouched.
        """
        if value is not None and not _is_nan(value):
            self.value = type(self).from_input(value).value

    def reset(self) -> None:
        self.value = math.nan

    def value_of(self) -> float:
        """Raw value: seconds, ``NOW`` or NaN."""
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def to_string(self, fmt: Optional[str] = None) -> str:
        """Format the value.

        Args:
            fmt: Format string, ``'hh:mm:ss'`` by default. ``hh``/``mm``/``ss``
                are padded, ``h``/``m``/``s`` are not, ``H``/``M``/``S`` are
                totals.

        Returns:
            ``'now'`` for the sentinel, ``''`` when invalid.
        """
        if self.is_now:
            return NOW_TEXT
        computed = self.computed
        if computed is None:
            return ''
        return format_breakdown(computed, fmt or DEFAULT_FORMAT)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        formatted = self.to_string(DEFAULT_FORMAT) or 'Invalid'
        return f"<{type(self).__name__} {formatted} value={self.value!r}>"


class Range:
    """A start ``Time`` and a stop ``Time``.

    Either end may be invalid. A numeric stop earlier than a numeric start is
    dropped; ``now`` is accepted at either end.
    """

    time_class = Time

    def __init__(self, start: Any = None, stop: Any = None):
        self.start = self.time_class.from_input()
        self.stop = self.time_class.from_input()
        self.set(start, stop)

    @classmethod
    def from_input(cls, *args: Any) -> "Range":
        """Create a range from ``[start, stop]``, ``{'start': .., 'stop': ..}``,
        another range or object with ``start``/``stop`` attributes,
        ``'start-stop'`` text, a single start value, or two positional values.
        """
        if not args:
            return cls()

        first = args[0]
        if isinstance(first, (list, tuple)):
            start = first[0] if len(first) > 0 else None
            stop = first[1] if len(first) > 1 else None
            return cls(start, stop)
        if isinstance(first, Mapping):
            return cls(first.get('start'), first.get('stop'))
        if isinstance(first, Range):
            return cls(first.start, first.stop)
        if not isinstance(first, str) and (hasattr(first, 'start') or hasattr(first, 'stop')):
            return cls(getattr(first, 'start', None), getattr(first, 'stop', None))

        if len(args) == 1:
            if isinstance(first, str):
                return cls(*split_range(first))
            return cls(first, None)

        return cls(args[0], args[1])

    def _stop_precedes_start(self) -> bool:
        start, stop = self.start, self.stop
        if start.is_now or stop.is_now:
            return False
        return stop.value_of() < start.value_of()

    def set(self, start: Any, stop: Any = None) -> None:
        """Set both ends. ``stop`` is only applied when given (``0`` counts as
        not given); a stop before the start is reset.
        """
        self.start.set(start)

        if _is_given(stop):
            self.stop.set(stop)

            if self._stop_precedes_start():
                self.stop.reset()

    def reset(self) -> None:
        self.start.reset()
        self.stop.reset()

    def to_string(self, fmt: Optional[str] = None) -> str:
        start = self.start.to_string(fmt)
        stop = self.stop.to_string(fmt)

        if start and stop and self.stop.value_of() >= self.start.value_of():
            return f"{start}-{stop}"
        elif start:
            return f"{start}-"
        elif stop:
            return f"-{stop}"
        else:
            return ''

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        start = self.start.to_string(DEFAULT_FORMAT)
        stop = self.stop.to_string(DEFAULT_FORMAT)
        return f"<{type(self).__name__} {start}-{stop}>"


class Timecode(Range):
    """An optionally ranged NPT timecode.

    Its value is the duration between start and stop when both are set and
    ordered, otherwise the start instant.
    """

    def value_of(self) -> float:
        start, stop = self.start, self.stop

        if start.is_now:
            return NOW

        start_value = start.value_of()
        if (start_value == 0 or math.isnan(start_value)) and stop.is_now:
            return NOW

        if start_value < stop.value_of():
            return stop.value_of() - start_value

        return start_value

    @property
    def value(self) -> float:
        return self.value_of()

    def __float__(self) -> float:
        return float(self.value_of())
