# agenda/times.py
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from .dates import Strictness
from .errors import AgendaError, ErrorKind
from .lexicon import fold

# "às 15", "às 15h", "às 15:30", "às 15h30", "às9h"
TIME_RE = re.compile(r"(?<!\w)às\s*(\d{1,2})(?:(?::|h)(\d{2}))?(?:\s*h)?", re.IGNORECASE)


@dataclass(frozen=True)
class ResolvedTime:
    hour: int
    minute: int = 0

    def as_delta(self) -> timedelta:
        return timedelta(hours=self.hour, minutes=self.minute)


def extract_time(message: str, mode: Strictness = Strictness.LENIENT) -> ResolvedTime:
    """
    Clock time introduced by "às". A missing marker is always an error.
    "am"/"pm" anywhere in the message (even inside a word such as "amanhã")
    shifts the hour: 12 + am -> 0, hour < 12 + pm -> +12.
    Strict mode rejects hour > 23 or minute > 59; lenient mode wraps the hour
    and lets an oversized minute roll into the next hour when combined.
    """
    m = TIME_RE.search(message or "")
    if not m:
        raise AgendaError(ErrorKind.TIME_NOT_FOUND)

    hour = int(m.group(1))
    minute = int(m.group(2) or 0)

    folded = fold(message)
    if hour == 12 and "am" in folded:
        hour = 0
    if hour < 12 and "pm" in folded:
        hour += 12

    if mode is Strictness.STRICT:
        if hour > 23 or minute > 59:
            raise AgendaError(ErrorKind.INVALID_TIME, f"Hora inválida: {m.group(0).strip()}")
    else:
        hour %= 24
    return ResolvedTime(hour, minute)


def combine(day: date, at: ResolvedTime, tz: tzinfo) -> datetime:
    """Wall-clock `at` on `day` in zone `tz`, seconds zeroed."""
    midnight = datetime(day.year, day.month, day.day, tzinfo=tz)
    return midnight + at.as_delta()
