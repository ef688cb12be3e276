# agenda/fallback.py
"""
Best-effort date parser for lenient mode, used only when none of the
explicit rules matched. Backed by `dateparser` (Portuguese).
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Optional

from dateparser.search import search_dates

from .times import TIME_RE

logger = logging.getLogger(__name__)


class DateparserFallback:
    def __init__(self, languages=("pt",)):
        self.languages = list(languages)

    def _settings(self, reference: datetime) -> Dict[str, Any]:
        # RELATIVE_BASE is the local wall-clock "now"; results stay naive.
        return {
            "RELATIVE_BASE": reference.replace(tzinfo=None),
            "PREFER_DATES_FROM": "future",
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

    def __call__(self, message: str, reference: datetime) -> Optional[date]:
        # "às 16h" would otherwise be read as part of the date (a year, a day).
        text = TIME_RE.sub(" ", message or "")
        found = search_dates(text, languages=self.languages, settings=self._settings(reference))
        if not found:
            logger.debug("fallback parser found nothing in %r", text)
            return None
        matched, parsed = found[0]
        logger.debug("fallback parser matched %r -> %s", matched, parsed.date().isoformat())
        return parsed.date()
