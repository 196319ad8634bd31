"""RF frequency display helpers (values are in MHz)."""

from __future__ import annotations

import math
import re
from typing import Any

_NON_NUMERIC = re.compile(r"[^0-9.-]")
_FLOAT_PREFIX = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def format_frequency(freq_mhz: float, decimals: int = 3) -> str:
    """``format_frequency(118) == "118.000 MHz"``."""
    return f"{freq_mhz:.{decimals}f} MHz"


def parse_frequency(freq_str: Any) -> float:
    """Parse a display string such as ``"118.0 MHz"`` back to MHz.

    Every character other than digits, ``.`` and ``-`` is dropped and the
    longest numeric prefix of what remains is parsed. Returns nan when nothing
    numeric is left; callers must check with ``math.isnan``.
    """
    if freq_str is None:
        return math.nan
    cleaned = _NON_NUMERIC.sub("", str(freq_str))
    match = _FLOAT_PREFIX.match(cleaned)
    if match is None:
        return math.nan
    return float(match.group(0))
