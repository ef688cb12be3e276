# agenda/titles.py
"""
Title cleanup: whatever is left of the message once every temporal phrase,
the leading imperative verb and filler words are gone.

The steps run in a fixed order on the *original* text (accents and case
preserved for the user); each one assumes the previous ones already ran.
After the removals, leading and trailing punctuation is trimmed and a
dangling final "no", "na" or "em" is dropped ("reunião na segunda" gives
"reunião", not "reunião na").
"""

from __future__ import annotations

import re
from typing import List, Pattern

from .dates import EXPLICIT_DATE_RE, Strictness
from .errors import AgendaError, ErrorKind
from .lexicon import LEADING_VERBS, WEEKDAYS, loose
from .times import TIME_RE


def _words(*phrases: str) -> Pattern[str]:
    body = "|".join(loose(p) for p in phrases)
    return re.compile(rf"(?<!\w)(?:{body})(?!\w)", re.IGNORECASE)


_LEFTOVER_AS = re.compile(r"(?<!\w)às(?!\w)", re.IGNORECASE)

# Longest phrase first so "depois de amanhã" is not reduced to "depois de".
_RELATIVE_WORDS = _words(
    "depois de amanha", "amanha", "hoje", "semana que vem", "proxima semana"
)

_WEEKDAY_PATTERNS: List[Pattern[str]] = [
    _words(
        f"proxima {name}",
        f"proximo {name}",
        f"{name} da semana que vem",
        f"{name} da proxima semana",
        name,
    )
    for name, _ in WEEKDAYS
]

_DAY_OF_MONTH = re.compile(r"(?<!\w)dia\s+\d+(?!\d)", re.IGNORECASE)
_RELATIVE_DAYS = re.compile(r"(?<!\w)daqui\s+a\s+\d+\s+dias?(?!\w)", re.IGNORECASE)
_NEXT_MONTH = _words("no proximo mes", "proximo mes")
_NEXT_YEAR = _words("no proximo ano", "proximo ano")
_ECHO = re.compile(r"compromisso\s+marcado\s*:", re.IGNORECASE)

_VERB = re.compile(rf"^(?:{'|'.join(LEADING_VERBS)})(?:\s+|$)", re.IGNORECASE)
_ARTICLE = re.compile(r"^\s*uma?\s+", re.IGNORECASE)
_FILLER = re.compile(r"(?<!\w)(?:da|de)(?!\w)", re.IGNORECASE)
_SPACES = re.compile(r"\s+")
_EDGE_PUNCT = re.compile(r"^[\s.,;:!?-]+|[\s.,;:!?-]+$")
# "reunião na segunda" leaves a dangling "na" behind.
_DANGLING = re.compile(r"(?:\s+(?:no|na|em))+$", re.IGNORECASE)


def _strip_edges(s: str) -> str:
    return _EDGE_PUNCT.sub("", s)


def extract_title(message: str, mode: Strictness = Strictness.LENIENT) -> str:
    title = message or ""

    title = EXPLICIT_DATE_RE.sub("", title).strip()
    title = TIME_RE.sub("", title)
    title = _LEFTOVER_AS.sub("", title).strip()
    title = _RELATIVE_WORDS.sub("", title).strip()
    for pattern in _WEEKDAY_PATTERNS:
        title = pattern.sub("", title).strip()
    title = _DAY_OF_MONTH.sub("", title).strip()
    title = _RELATIVE_DAYS.sub("", title).strip()
    title = _NEXT_MONTH.sub("", title).strip()
    title = _NEXT_YEAR.sub("", title).strip()
    title = _ECHO.sub("", title).strip()

    title = _VERB.sub("", title, count=1).strip()
    title = _ARTICLE.sub("", title, count=1).strip()
    title = _FILLER.sub("", title)

    title = _SPACES.sub(" ", title).strip()
    title = _strip_edges(_DANGLING.sub("", _strip_edges(title)))

    if mode is Strictness.STRICT and not title.strip():
        raise AgendaError(ErrorKind.EMPTY_TITLE)
    return title
