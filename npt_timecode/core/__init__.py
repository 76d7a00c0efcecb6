"""
Core NPT helpers: numeric decomposition, text parsing and formatting.

This package hosts pure, side-effect-free logic used by the ``Time``,
``Range`` and ``Timecode`` entities.
"""

__all__ = [
    "Breakdown",
    "DecompositionCache",
    "decompose",
    "recompose",
    "round_to_3",
    "get_default_cache",
    "set_default_cache",
    "parse_npt",
    "split_range",
    "format_breakdown",
    "number_text",
    "DEFAULT_FORMAT",
]

from .decompose import (
    Breakdown,
    DecompositionCache,
    decompose,
    recompose,
    round_to_3,
    get_default_cache,
    set_default_cache,
)
from .parser import parse_npt, split_range
from .formatting import format_breakdown, number_text, DEFAULT_FORMAT
