# agenda/clock.py
from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Union
from zoneinfo import ZoneInfo


def as_zone(tz: Union[str, tzinfo]) -> tzinfo:
    return ZoneInfo(tz) if isinstance(tz, str) else tz


class SystemClock:
    """'Now' in one fixed IANA zone."""

    def __init__(self, tz: Union[str, tzinfo]):
        self.tz = as_zone(tz)

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Always answers the same instant; naive values are read in `tz`."""

    def __init__(self, instant: datetime, tz: Union[str, tzinfo, None] = None):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=as_zone(tz or "UTC"))
        elif tz is not None:
            instant = instant.astimezone(as_zone(tz))
        self.instant = instant
        self.tz = instant.tzinfo

    def now(self) -> datetime:
        return self.instant
