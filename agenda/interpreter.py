# agenda/interpreter.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional, Union

from .clock import SystemClock, as_zone
from .dates import FallbackParser, Strictness, resolve_date
from .errors import AgendaError, ErrorKind
from .fallback import DateparserFallback
from .times import combine, extract_time
from .titles import extract_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppointmentDraft:
    """What a message asks for; identity is assigned later by storage."""

    title: str
    date_time: datetime
    date_rule: str = ""


class AppointmentInterpreter:
    """
    Turns one pt-BR scheduling message into an AppointmentDraft.

    The zone, the validation mode and the clock are fixed at construction;
    `interpret` may override the mode per call. The reference instant is read
    from the clock exactly once per message.
    """

    def __init__(
        self,
        tz: Union[str, tzinfo] = "America/Sao_Paulo",
        mode: Union[str, Strictness] = Strictness.LENIENT,
        clock=None,
        fallback: Optional[FallbackParser] = None,
    ):
        self.tz = as_zone(tz)
        self.mode = Strictness.parse(mode, Strictness.LENIENT)
        self.clock = clock or SystemClock(self.tz)
        self.fallback = fallback or DateparserFallback()

    def interpret(self, message: Optional[str], mode: Union[str, Strictness, None] = None) -> AppointmentDraft:
        mode = Strictness.parse(mode, self.mode)
        if not message or not message.strip():
            raise AgendaError(ErrorKind.EMPTY_MESSAGE)

        reference = self.clock.now().astimezone(self.tz)
        fallback = self.fallback if mode is Strictness.LENIENT else None

        resolved = resolve_date(message, reference, mode, fallback)
        at = extract_time(message, mode)
        title = extract_title(message, mode)

        draft = AppointmentDraft(
            title=title,
            date_time=combine(resolved.date, at, self.tz),
            date_rule=resolved.tag,
        )
        logger.debug("interpreted %r -> %s (%s)", message, draft.date_time.isoformat(), mode.value)
        return draft

    def confirmation(self, draft: AppointmentDraft) -> str:
        return confirmation_message(draft, self.tz)


def confirmation_message(draft: AppointmentDraft, tz: Optional[tzinfo] = None) -> str:
    """'Compromisso marcado: <título> em DD/MM/YYYY às HH:mm' (24h, local zone)."""
    when = draft.date_time.astimezone(tz) if tz is not None else draft.date_time
    return f"Compromisso marcado: {draft.title} em {when:%d/%m/%Y} às {when:%H:%M}"
