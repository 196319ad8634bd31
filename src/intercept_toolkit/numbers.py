"""Number formatting and range helpers for dashboard counters and gauges."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Any) -> Optional[int]:
    """Leniently parse the leading base-10 integer of ``value``.

    Leading whitespace and a sign are accepted and trailing characters are
    ignored, so ``"6abc"`` is 6 and ``"11.5"`` is 11. Returns None when there
    are no leading digits.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def _number_str(num: float) -> str:
    if isinstance(num, float):
        if math.isnan(num):
            return "NaN"
        if num.is_integer():
            return str(int(num))
    return str(num)


def format_number(num: float) -> str:
    """Abbreviate large counts: 1.5M, 12.3K, or the plain number below 1000."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return _number_str(num)


def clamp(num: float, min_value: float, max_value: float) -> float:
    return min(max(num, min_value), max_value)


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``value`` from [in_min, in_max] onto [out_min, out_max].

    A degenerate input range gives nan or a signed infinity instead of raising;
    callers must guard against ``in_min == in_max`` themselves.
    """
    numerator = (value - in_min) * (out_max - out_min)
    span = in_max - in_min
    if span == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) + out_min
    return numerator / span + out_min
