"""Infrastructure layer — process and filesystem integration.

This layer wraps the clock, the filesystem and the process locale.
Every raw OS or standard-library exception must be caught here and
re-raised as a :class:`~rvc.exceptions.RvcError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from rvc.infra.date_parser import FreeFormDateParser
from rvc.infra.process_locale import ProcessLocale, reset_to_default
from rvc.infra.working_copy import WorkingCopyFiles

__all__: list[str] = [
    "FreeFormDateParser",
    "ProcessLocale",
    "WorkingCopyFiles",
    "reset_to_default",
]
