# clock.py - current wall-clock time in a named IANA zone

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import UnknownTimezone

# e.g. "Mon, 02 Jan 2006 03:04:05 PM"
DEFAULT_FORMAT = "%a, %d %b %Y %I:%M:%S %p"


def get_zone(tz: str) -> ZoneInfo:
    """Load a zone by IANA name, raising UnknownTimezone for anything unusable."""
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownTimezone(f"unknown time zone {tz}") from e


def format_time(tz: str, fmt: str = DEFAULT_FORMAT, now: Optional[datetime] = None) -> str:
    """
    Format the current time (or `now`, which must be timezone-aware) as seen
    in zone `tz`.
    """
    zone = get_zone(tz)
    moment = now or datetime.now(timezone.utc)
    return moment.astimezone(zone).strftime(fmt)
