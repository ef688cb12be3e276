# agenda/dates.py
"""
Date resolution for free-text scheduling requests.

The rules below form a priority list. They are evaluated in order and the
first one that produces a date wins; later rules are never consulted. An
explicit DD/MM/YYYY literal is applied afterwards and overrides whatever
won. When nothing matches, lenient mode may ask a general-purpose parser
(see agenda.fallback); strict mode fails with DateNotFound.

"Próximo mês" and "próximo ano" are meta-modifiers: they never resolve a
date on their own while a day-of-month or weekday rule can use them, they
only change how that rule computes its target.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Callable, Optional, Tuple

from .calendar_math import (
    add_months,
    add_years,
    clamp_day,
    days_until_weekday,
    next_weekday_on_or_after,
    shift_month,
)
from .errors import AgendaError, ErrorKind
from .lexicon import (
    DAY_AFTER_TOMORROW,
    NEXT_MONTH_PHRASES,
    NEXT_WEEK_PHRASES,
    NEXT_YEAR_PHRASES,
    TODAY,
    TOMORROW,
    WEEKDAYS,
    fold,
    has_any,
    has_phrase,
)

logger = logging.getLogger(__name__)

DAY_OF_MONTH_RE = re.compile(r"(?<!\w)dia\s+(\d+)(?!\d)")
RELATIVE_DAYS_RE = re.compile(r"(?<!\w)daqui\s+a\s+(\d+)\s+dias?(?!\w)")
EXPLICIT_DATE_RE = re.compile(r"(?<!\d)(\d{1,2})/(\d{1,2})/(\d{4})(?!\d)")

# fallback(message, reference) -> date or None
FallbackParser = Callable[[str, datetime], Optional[date]]


class Strictness(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def parse(cls, value: Optional[str], default: Optional["Strictness"] = None) -> "Strictness":
        """Accept 'strict'/'lenient' and the pt-BR 'estrito'/'tolerante'."""
        if isinstance(value, Strictness):
            return value
        v = (value or "").strip().lower()
        if v in ("strict", "estrito"):
            return cls.STRICT
        if v in ("lenient", "tolerante"):
            return cls.LENIENT
        if not v and default is not None:
            return default
        raise ValueError(f"Unknown parse mode: {value!r}")


class WeekdayVariant(str, Enum):
    FAR = "far"      # "<dia> da semana que vem" / "<dia> da próxima semana"
    NEAR = "near"    # "próxima <dia>"
    SAME = "same"    # bare "<dia>"


@dataclass(frozen=True)
class DetectionFlags:
    next_year: bool = False
    next_month: bool = False
    weekday: Optional[int] = None
    weekday_variant: Optional[WeekdayVariant] = None

    @property
    def is_week_after(self) -> bool:
        return self.weekday_variant is WeekdayVariant.FAR

    @property
    def is_next_week_day(self) -> bool:
        return self.weekday_variant is WeekdayVariant.NEAR

    @classmethod
    def scan(cls, folded: str) -> "DetectionFlags":
        weekday, variant = _find_weekday(folded)
        return cls(
            next_year=has_any(folded, NEXT_YEAR_PHRASES),
            next_month=has_any(folded, NEXT_MONTH_PHRASES),
            weekday=weekday,
            weekday_variant=variant,
        )


@dataclass(frozen=True)
class ResolvedDate:
    date: date
    tag: str


@dataclass(frozen=True)
class RuleContext:
    folded: str
    today: date
    flags: DetectionFlags
    mode: Strictness


def _find_weekday(folded: str) -> Tuple[Optional[int], Optional[WeekdayVariant]]:
    """First weekday name (table order) found in any of its three surface forms."""
    for name, number in WEEKDAYS:
        if has_any(folded, [f"{name} da {p}" for p in NEXT_WEEK_PHRASES]):
            return number, WeekdayVariant.FAR
        if has_any(folded, (f"proxima {name}", f"proximo {name}")):
            return number, WeekdayVariant.NEAR
        if has_phrase(folded, name):
            return number, WeekdayVariant.SAME
    return None, None


# ---------- rules, highest priority first ----------

def _day_of_month(ctx: RuleContext) -> Optional[date]:
    m = DAY_OF_MONTH_RE.search(ctx.folded)
    if not m:
        return None
    day = int(m.group(1))
    if not 1 <= day <= 31:
        if ctx.mode is Strictness.STRICT:
            raise AgendaError(ErrorKind.INVALID_DAY_OF_MONTH, f"Dia do mês inválido: {day}")
        return None

    today = ctx.today
    if ctx.flags.next_year:
        return add_years(today, 1, day=day)
    if ctx.flags.next_month:
        return add_months(today, 1, day=day)
    if day >= today.day:
        return clamp_day(today.year, today.month, day)
    return add_months(today, 1, day=day)


def _relative_days(ctx: RuleContext) -> Optional[date]:
    m = RELATIVE_DAYS_RE.search(ctx.folded)
    if not m:
        return None
    count = int(m.group(1))
    if count < 1:
        if ctx.mode is Strictness.STRICT:
            raise AgendaError(
                ErrorKind.INVALID_RELATIVE_DAY_COUNT, f"Quantidade de dias inválida: {count}"
            )
        return None
    return ctx.today + timedelta(days=count)


def _weekday(ctx: RuleContext) -> Optional[date]:
    flags = ctx.flags
    if flags.weekday is None:
        return None
    target, today = flags.weekday, ctx.today

    if flags.next_year:
        return next_weekday_on_or_after(date(today.year + 1, today.month, 1), target)
    if flags.next_month:
        y, m = shift_month(today.year, today.month, 1)
        return next_weekday_on_or_after(date(y, m, 1), target)
    if flags.is_week_after:
        # Same weekday as today lands exactly one week out, never two.
        return today + timedelta(days=7 + days_until_weekday(today, target))
    # "próxima <dia>" and bare "<dia>" always point strictly into the future.
    return today + timedelta(days=days_until_weekday(today, target) or 7)


def _next_week(ctx: RuleContext) -> Optional[date]:
    if ctx.flags.weekday is None and has_any(ctx.folded, NEXT_WEEK_PHRASES):
        return ctx.today + timedelta(days=7)
    return None


def _next_month(ctx: RuleContext) -> Optional[date]:
    return add_months(ctx.today, 1) if ctx.flags.next_month else None


def _next_year(ctx: RuleContext) -> Optional[date]:
    return add_years(ctx.today, 1) if ctx.flags.next_year else None


def _today(ctx: RuleContext) -> Optional[date]:
    return ctx.today if has_phrase(ctx.folded, TODAY) else None


def _day_after_tomorrow(ctx: RuleContext) -> Optional[date]:
    return ctx.today + timedelta(days=2) if has_phrase(ctx.folded, DAY_AFTER_TOMORROW) else None


def _tomorrow(ctx: RuleContext) -> Optional[date]:
    return ctx.today + timedelta(days=1) if has_phrase(ctx.folded, TOMORROW) else None


RULES: Tuple[Tuple[str, Callable[[RuleContext], Optional[date]]], ...] = (
    ("day_of_month", _day_of_month),
    ("relative_days", _relative_days),
    ("weekday", _weekday),
    ("next_week", _next_week),
    ("next_month", _next_month),
    ("next_year", _next_year),
    ("today", _today),
    ("day_after_tomorrow", _day_after_tomorrow),
    ("tomorrow", _tomorrow),
)


def explicit_date(message: str, mode: Strictness) -> Optional[date]:
    """
    DD/MM/YYYY literal anywhere in the message. Strict mode rejects a day
    outside 1-31, a month outside 1-12 or a year before 2000; lenient mode
    ignores such a literal. A day past the month's end is clamped.
    """
    m = EXPLICIT_DATE_RE.search(message or "")
    if not m:
        return None
    day, month, year = (int(g) for g in m.groups())
    valid = 1 <= day <= 31 and 1 <= month <= 12
    if mode is Strictness.STRICT:
        if not valid or year < 2000:
            raise AgendaError(ErrorKind.INVALID_DATE, f"Data inválida: {m.group(0)}")
    elif not valid or year < 1:
        return None
    return clamp_day(year, month, day)


def resolve_date(
    message: str,
    reference: datetime,
    mode: Strictness = Strictness.LENIENT,
    fallback: Optional[FallbackParser] = None,
) -> ResolvedDate:
    """Resolve the calendar date a message refers to, relative to `reference`."""
    folded = fold(message)
    today = reference.date() if isinstance(reference, datetime) else reference
    ctx = RuleContext(folded=folded, today=today, flags=DetectionFlags.scan(folded), mode=mode)

    resolved: Optional[ResolvedDate] = None
    for tag, rule in RULES:
        found = rule(ctx)
        if found is not None:
            resolved = ResolvedDate(found, tag)
            break

    literal = explicit_date(message, mode)
    if literal is not None:
        resolved = ResolvedDate(literal, "explicit_date")

    if resolved is None:
        if mode is Strictness.STRICT or fallback is None:
            raise AgendaError(ErrorKind.DATE_NOT_FOUND)
        found = fallback(message, reference)
        if found is None:
            raise AgendaError(ErrorKind.DATE_NOT_FOUND)
        resolved = ResolvedDate(found, "fallback")

    logger.debug("date rule %s -> %s (flags=%s)", resolved.tag, resolved.date.isoformat(), ctx.flags)
    return resolved
