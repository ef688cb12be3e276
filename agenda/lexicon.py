# agenda/lexicon.py
"""
Static vocabulary for Brazilian-Portuguese scheduling messages.

Every token below is stored in its *folded* form (lowercase, no accents).
Detection runs on a folded copy of the message (see `fold`); cleanup of the
original text uses `loose`, which turns a folded token back into a regex that
accepts both the accented and the unaccented spelling.
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Dict, Pattern, Tuple

# Sunday=0 .. Saturday=6. Order matters: full names come before their short
# forms so that "segunda-feira" is consumed before "segunda".
WEEKDAYS: Tuple[Tuple[str, int], ...] = (
    ("domingo", 0),
    ("segunda-feira", 1),
    ("segunda", 1),
    ("terca-feira", 2),
    ("terca", 2),
    ("quarta-feira", 3),
    ("quarta", 3),
    ("quinta-feira", 4),
    ("quinta", 4),
    ("sexta-feira", 5),
    ("sexta", 5),
    ("sabado", 6),
)

WEEKDAY_NUMBER: Dict[str, int] = dict(WEEKDAYS)

# Imperative verbs that usually open a request ("marque uma reunião ...").
LEADING_VERBS: Tuple[str, ...] = ("marque", "marca", "anote", "anota", "agende", "agenda")

NEXT_WEEK_PHRASES: Tuple[str, ...] = ("semana que vem", "proxima semana")
NEXT_MONTH_PHRASES: Tuple[str, ...] = ("proximo mes",)
NEXT_YEAR_PHRASES: Tuple[str, ...] = ("proximo ano",)

TODAY = "hoje"
TOMORROW = "amanha"
DAY_AFTER_TOMORROW = "depois de amanha"

_ACCENTED: Dict[str, str] = {
    "a": "[aáàâã]",
    "e": "[eéèê]",
    "i": "[iíì]",
    "o": "[oóòôõ]",
    "u": "[uúùü]",
    "c": "[cç]",
}


def fold(text: str) -> str:
    """Lowercase and strip diacritics: 'Próxima Terça' -> 'proxima terca'."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", stripped)


def loose(phrase: str) -> str:
    """
    Regex fragment matching `phrase` with or without accents and with any run
    of whitespace between words. Use with re.IGNORECASE.
    """
    parts = []
    for ch in fold(phrase):
        if ch in _ACCENTED:
            parts.append(_ACCENTED[ch])
        elif ch.isspace():
            parts.append(r"\s+")
        else:
            parts.append(re.escape(ch))
    return "".join(parts)


@lru_cache(maxsize=None)
def word_pattern(phrase: str) -> Pattern[str]:
    """Whole-word pattern for a folded phrase, used against folded text."""
    body = r"\s+".join(re.escape(w) for w in phrase.split())
    return re.compile(rf"(?<!\w){body}(?!\w)")


def has_phrase(folded: str, phrase: str) -> bool:
    return word_pattern(phrase).search(folded) is not None


def has_any(folded: str, phrases) -> bool:
    return any(has_phrase(folded, p) for p in phrases)
