"""Format mini-language for time breakdowns.

Tokens: ``H``/``M``/``S`` totals, ``hh``/``mm``/``ss`` zero-padded parts,
``h``/``m``/``s`` unpadded parts. Seconds tokens carry the millisecond
fraction (``01.23``). Each token is substituted once, then any token left over
is dropped together with its trailing colon.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal

from .decompose import Breakdown

DEFAULT_FORMAT = 'hh:mm:ss'

_LEFTOVER_TOKENS = re.compile(r'(hh|mm|ss|H|M|S)(:)?')


def number_text(value: float) -> str:
    """Shortest round-trip text for ``value``.

    Integral values print without ``.0``. Digits stay positional for decimal
    exponents from -6 to 20 (``0.00002777777777777778``); outside that range
    the exponent form is ``1e-7`` / ``1.5e+21``.
    """
    if not isinstance(value, float):
        return str(value)
    if not math.isfinite(value):
        return repr(value)
    if value == 0:
        return '0'

    digits = Decimal(repr(value))
    if value.is_integer() and abs(value) < 1e21:
        return format(digits.to_integral_value(), 'f')
    if -7 < digits.adjusted() < 21:
        return format(digits, 'f')
    mantissa, _, exponent = repr(value).partition('e')
    return f"{mantissa}e{int(exponent):+d}"


def _fraction_suffix(ms: float) -> str:
    if not ms:
        return ''
    return '.' + number_text(ms / 1000)[2:]


def format_breakdown(breakdown: Breakdown, fmt: str = DEFAULT_FORMAT) -> str:
    """Render ``breakdown`` through ``fmt``."""
    b = breakdown
    fraction = _fraction_suffix(b.ms)

    text = (fmt or DEFAULT_FORMAT)
    text = text.replace('S', number_text(b.total_seconds), 1)
    text = text.replace('M', number_text(b.total_minutes), 1)
    text = text.replace('H', number_text(b.total_hours), 1)

    text = text.replace('hh', str(b.hours).zfill(2), 1)
    text = text.replace('mm', str(b.minutes).zfill(2), 1)
    text = text.replace('ss', str(b.seconds).zfill(2) + fraction, 1)

    text = text.replace('h', str(b.hours), 1)
    text = text.replace('m', str(b.minutes), 1)
    text = text.replace('s', str(b.seconds) + fraction, 1)

    return _LEFTOVER_TOKENS.sub('', text).strip()
