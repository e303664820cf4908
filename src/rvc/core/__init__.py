"""Core layer — command tables, range grammars and dispatch logic.

Rules
-----
* No ``print()`` calls.
* No filesystem, locale or network access; collaborators arrive
  through the protocols in :mod:`rvc.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from rvc.core.dispatcher import Dispatcher, Invocation
from rvc.core.models import (
    OLDEST_REVISION,
    CommandDescriptor,
    DateRange,
    OptionSpec,
    ParsedOptions,
    RevisionRange,
)
from rvc.core.options import OptionCatalog, default_catalog
from rvc.core.registry import CommandRegistry
from rvc.core.scanner import OptionScanner

__all__: list[str] = [
    "OLDEST_REVISION",
    "CommandDescriptor",
    "CommandRegistry",
    "DateRange",
    "Dispatcher",
    "Invocation",
    "OptionCatalog",
    "OptionScanner",
    "OptionSpec",
    "ParsedOptions",
    "RevisionRange",
    "default_catalog",
]
