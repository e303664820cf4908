"""Infrastructure: free-form date parsing for ``--date``.

Understands the spellings people actually type on a command line:

* keywords: ``now``, ``today``, ``yesterday``, ``tomorrow``
* relative: ``3 days ago``, ``2 weeks ago``, ``1 hour ago``
* ISO 8601: ``2002-01-15``, ``2002-01-15T10``
* common calendar layouts: ``01/15/2002``, ``15 Jan 2002``,
  ``Jan 15 2002``, ``January 15, 2002``

Rules
-----
* No ``print()`` — failures raise
  :class:`~rvc.exceptions.UnparseableDateError`.
* The clock is injectable so results are deterministic in tests.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta

from rvc.exceptions import UnparseableDateError

logger = logging.getLogger(__name__)

_LAYOUTS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

_RELATIVE = re.compile(
    r"^(?P<count>\d+)\s+(?P<unit>minute|hour|day|week)s?\s+ago$",
)

_UNIT_SECONDS: dict[str, int] = {
    "minute": 60,
    "hour": 60 * 60,
    "day": 24 * 60 * 60,
    "week": 7 * 24 * 60 * 60,
}


class FreeFormDateParser:
    """Callable satisfying :class:`~rvc.core.protocols.DateParser`.

    Parameters
    ----------
    clock:
        Returns the current moment; defaults to :meth:`datetime.now`.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def __call__(self, text: str) -> datetime:
        normalized = " ".join(text.split()).lower()
        if not normalized:
            raise self._error(text)

        keyword = self._keyword(normalized)
        if keyword is not None:
            return keyword

        match = _RELATIVE.match(normalized)
        if match is not None:
            seconds = int(match["count"]) * _UNIT_SECONDS[match["unit"]]
            return self._clock() - timedelta(seconds=seconds)

        stripped = " ".join(text.split())
        try:
            return datetime.fromisoformat(stripped)
        except ValueError:
            pass

        for layout in _LAYOUTS:
            try:
                return datetime.strptime(stripped, layout)
            except ValueError:
                continue

        logger.debug("no date layout matched %r", text)
        raise self._error(text)

    def _keyword(self, normalized: str) -> datetime | None:
        now = self._clock()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        if normalized == "now":
            return now
        if normalized == "today":
            return midnight
        if normalized == "yesterday":
            return midnight - timedelta(days=1)
        if normalized == "tomorrow":
            return midnight + timedelta(days=1)
        return None

    @staticmethod
    def _error(text: str) -> UnparseableDateError:
        return UnparseableDateError(
            f'Unable to parse "{text}"',
            text=text,
            hint="Try an ISO date such as 2002-01-15, or 'yesterday'.",
        )
