"""Stateless support toolkit for the Intercept signal-monitoring dashboard."""

from intercept_toolkit.frequency import format_frequency, parse_frequency
from intercept_toolkit.geo import haversine_km, haversine_nm
from intercept_toolkit.icons import Category, classify_protocol, icon_for_category, icon_for_signal_type
from intercept_toolkit.numbers import clamp, format_number, map_range
from intercept_toolkit.ratelimit import debounce, throttle
from intercept_toolkit.sanitize import escape_attr, escape_html
from intercept_toolkit.storage import get_stored, set_stored
from intercept_toolkit.timefmt import format_utc_time, relative_time
from intercept_toolkit.validators import is_valid_channel, is_valid_mac

__all__ = [
    "Category",
    "clamp",
    "classify_protocol",
    "debounce",
    "escape_attr",
    "escape_html",
    "format_frequency",
    "format_number",
    "format_utc_time",
    "get_stored",
    "haversine_km",
    "haversine_nm",
    "icon_for_category",
    "icon_for_signal_type",
    "is_valid_channel",
    "is_valid_mac",
    "map_range",
    "parse_frequency",
    "relative_time",
    "set_stored",
    "throttle",
]
