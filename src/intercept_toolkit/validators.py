"""Syntax predicates for values typed into the dashboard."""

from __future__ import annotations

import re
from typing import Any

from intercept_toolkit.numbers import parse_int

MAC_PATTERN = re.compile(r"(?:[0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}")

# 1-200 covers 2.4 GHz, 5 GHz and 6 GHz channel numbering.
MIN_CHANNEL = 1
MAX_CHANNEL = 200


def is_valid_mac(mac: Any) -> bool:
    """True for exactly six colon-separated hex octets, e.g. ``AA:BB:CC:DD:EE:FF``."""
    if not isinstance(mac, str):
        return False
    return MAC_PATTERN.fullmatch(mac) is not None


def is_valid_channel(ch: Any) -> bool:
    num = parse_int(ch)
    return num is not None and MIN_CHANNEL <= num <= MAX_CHANNEL


def coordinate_errors(lat: float, lon: float) -> list[str]:
    """Validate a coordinate pair. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    if not -90 <= lat <= 90:
        errors.append(f"latitude {lat} out of range [-90, 90]")

    if not -180 <= lon <= 180:
        errors.append(f"longitude {lon} out of range [-180, 180]")

    return errors
