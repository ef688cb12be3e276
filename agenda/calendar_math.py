# agenda/calendar_math.py
"""
Calendar arithmetic used by the date rules.

All helpers return calendar-valid dates: whenever a requested day does not
exist in the target month (31 in April, 29 Feb in a common year) it is
clamped to the month's last day.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta
from typing import Tuple


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """date(year, month, day), with day pulled back to the month's end if needed."""
    return date(year, month, min(max(1, day), days_in_month(year, month)))


def shift_month(year: int, month: int, months: int) -> Tuple[int, int]:
    """(year, month) moved by `months`, rolling the year across December."""
    idx = (year * 12 + (month - 1)) + months
    return idx // 12, idx % 12 + 1


def add_months(d: date, months: int, day: int | None = None) -> date:
    """
    Move `d` by whole months keeping its day (or `day` when given),
    clamped to the end of the target month.
    """
    y, m = shift_month(d.year, d.month, months)
    return clamp_day(y, m, d.day if day is None else day)


def add_years(d: date, years: int, day: int | None = None) -> date:
    """Same month `years` later; 29 Feb lands on 28 Feb in common years."""
    return clamp_day(d.year + years, d.month, d.day if day is None else day)


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def weekday_number(d: date) -> int:
    """Sunday=0 .. Saturday=6 (Python's own weekday() starts on Monday)."""
    return d.isoweekday() % 7


def days_until_weekday(d: date, weekday: int) -> int:
    """Non-negative offset from `d` to the next `weekday` (0 when d is that day)."""
    return (weekday - weekday_number(d)) % 7


def next_weekday_on_or_after(d: date, weekday: int) -> date:
    return d + timedelta(days=days_until_weekday(d, weekday))
