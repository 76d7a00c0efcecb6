"""NPT text parsing (RFC 2326, section 3.6).

Accepts ``now``, bare seconds (``30``, ``30.5``) and colon forms
(``05:30``, ``1:05:30.250``). Values come back in milliseconds, the unit the
textual layer works in; callers convert to seconds.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

NOW_TEXT = 'now'


def _is_digits(text: str) -> bool:
    return bool(text) and text.isascii() and text.isdigit()


def parse_npt(text: str) -> Optional[float]:
    """Parse ``[[hh:]mm:]ss[.fraction]`` into milliseconds.

    Returns ``None`` when the text does not follow the grammar. ``now`` is not
    a number and is handled by the caller.
    """
    if not isinstance(text, str):
        return None

    groups = text.strip().split(':')
    if not 1 <= len(groups) <= 3:
        return None

    seconds_text = groups[-1]
    whole, dot, fraction = seconds_text.partition('.')
    if not _is_digits(whole):
        return None
    if dot and fraction and not _is_digits(fraction):
        return None
    for group in groups[:-1]:
        if not _is_digits(group):
            return None

    # Oversized groups hit the int digit limit or overflow the float sum
    try:
        seconds = float(whole + '.' + (fraction or '0'))
        minutes = int(groups[-2]) if len(groups) >= 2 else 0
        hours = int(groups[-3]) if len(groups) == 3 else 0
        total = (hours * 3600 + minutes * 60 + seconds) * 1000
    except (OverflowError, ValueError):
        return None
    return total if math.isfinite(total) else None


def split_range(text: str) -> Tuple[Optional[str], Optional[str]]:
    """Split ``start-stop`` on the first hyphen.

    Empty sides come back as ``None``. Text without a hyphen is a start only.
    A second hyphen stays in the stop text, which then fails to parse.
    """
    start, _, stop = text.partition('-')
    return (start or None), (stop or None)
