"""Relative and UTC time strings for live signal tables.

Signal records carry a bare ``HH:MM:SS`` local time with no date, so relative
phrases are only computed against today's date. Anything an hour or more old
falls back to the literal timestamp.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol, Union

from intercept_toolkit.numbers import parse_int

logger = logging.getLogger(__name__)

JUST_NOW_SECONDS = 5
MINUTE_SECONDS = 60
HOUR_SECONDS = 3600


class Clock(Protocol):
    """Anything that can answer "what time is it now"."""

    def now(self) -> datetime:
        ...


class RealClock:
    """Local wall-clock time, the same zone the dashboard stamps records in."""

    def now(self) -> datetime:
        return datetime.now()


class FrozenClock:
    """Clock that always returns a fixed timestamp (for deterministic tests)."""

    def __init__(self, fixed_now: datetime):
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        return self._fixed_now


def _event_time(timestamp: str, now: datetime) -> Optional[datetime]:
    parts = timestamp.split(":")
    if len(parts) < 3:
        return None
    hours, minutes, seconds = (parse_int(p) for p in parts[:3])
    if hours is None or minutes is None or seconds is None:
        return None

    # Sub-second part is carried over from now so the difference is whole seconds.
    midnight = now.replace(hour=0, minute=0, second=0)
    try:
        return midnight + timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError:
        return None


def relative_time(timestamp: str, clock: Optional[Clock] = None) -> str:
    """Describe an ``HH:MM:SS`` timestamp relative to now.

    Returns "just now" under 5 seconds, "{n}s ago" under a minute, "{n}m ago"
    under an hour, and the timestamp itself otherwise. Times later today give a
    negative difference and therefore read "just now".
    """
    if not timestamp:
        return ""

    now = (clock or RealClock()).now()
    event = _event_time(timestamp, now)
    if event is None:
        logger.debug("Unparseable timestamp %r, showing as-is", timestamp)
        return timestamp

    diff = (now - event) // timedelta(seconds=1)
    if diff < JUST_NOW_SECONDS:
        return "just now"
    if diff < MINUTE_SECONDS:
        return f"{diff}s ago"
    if diff < HOUR_SECONDS:
        return f"{diff // MINUTE_SECONDS}m ago"
    return timestamp


def format_utc_time(moment: Union[datetime, int, float]) -> str:
    """Render the UTC ``HH:MM:SS`` of an instant, dropping the date.

    Naive datetimes are taken to be UTC already; numbers are epoch seconds.
    """
    if isinstance(moment, (int, float)):
        moment = datetime.fromtimestamp(moment, tz=timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%H:%M:%S")
