"""Resolution core: pt-BR scheduling message -> (title, date-time)."""

from .clock import FixedClock, SystemClock
from .dates import DetectionFlags, ResolvedDate, Strictness, resolve_date
from .errors import AgendaError, ErrorKind
from .interpreter import AppointmentDraft, AppointmentInterpreter, confirmation_message
from .times import ResolvedTime, extract_time
from .titles import extract_title

__all__ = [
    "AgendaError",
    "AppointmentDraft",
    "AppointmentInterpreter",
    "DetectionFlags",
    "ErrorKind",
    "FixedClock",
    "ResolvedDate",
    "ResolvedTime",
    "Strictness",
    "SystemClock",
    "confirmation_message",
    "extract_time",
    "extract_title",
    "resolve_date",
]
