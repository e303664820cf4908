"""Infrastructure: the process-wide locale switch used by ``--locale``.

The client starts in the ``C`` locale so help and error output are
predictable; ``--locale`` overrides that for the rest of the run.
"""

from __future__ import annotations

import locale
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "C"


class ProcessLocale:
    """Concrete :class:`~rvc.core.protocols.LocaleSetter`."""

    def apply(self, name: str) -> bool:
        """Set every locale category to *name*.

        Returns ``False`` instead of raising when the runtime rejects
        the name, since a missing locale only degrades output.
        """
        try:
            locale.setlocale(locale.LC_ALL, name)
        except locale.Error:
            return False
        logger.debug("process locale set to %r", name)
        return True


def reset_to_default() -> None:
    """Establish the ``C`` locale at startup."""
    ProcessLocale().apply(DEFAULT_LOCALE)
