"""Subcommand handler discovery and registry assembly.

Working-copy subcommands (add, commit, update, ...) are provided by
other distributions through the ``rvc.subcommands`` entry-point group::

    [project.entry-points."rvc.subcommands"]
    commit = "rvc_wc.commands:commit"

Each entry point must load a callable ``handler(arguments, options)``.
Commands nobody provides are registered with a stub that raises
:class:`~rvc.exceptions.CommandUnavailableError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from importlib import metadata

from rvc.cli.help import HelpCommand
from rvc.core.commands import COMMAND_TABLE
from rvc.core.dispatcher import HELP_COMMAND
from rvc.core.models import CommandHandler, ParsedOptions
from rvc.core.options import OptionCatalog
from rvc.core.registry import CommandRegistry
from rvc.exceptions import CommandUnavailableError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "rvc.subcommands"


def unavailable(name: str) -> CommandHandler:
    """Return a handler that reports *name* as not installed."""

    def _handler(arguments: Sequence[str], options: ParsedOptions) -> None:
        raise CommandUnavailableError(name)

    _handler.__name__ = f"unavailable_{name}"
    return _handler


def discover_handlers() -> dict[str, CommandHandler]:
    """Load every handler registered under :data:`ENTRY_POINT_GROUP`."""
    found: dict[str, CommandHandler] = {}
    for entry_point in metadata.entry_points(group=ENTRY_POINT_GROUP):
        try:
            handler = entry_point.load()
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "could not load subcommand %s from %s: %s",
                entry_point.name, entry_point.value, exc,
            )
            continue
        found[entry_point.name] = handler
    return found


def build_registry(
    catalog: OptionCatalog,
    handlers: Mapping[str, CommandHandler] | None = None,
    *,
    program: str = "rvc",
) -> CommandRegistry:
    """Assemble the command registry.

    Parameters
    ----------
    catalog:
        Option catalog the help command renders from.
    handlers:
        Explicit handlers by canonical name.  When ``None``, handlers
        are discovered through entry points.
    """
    provided = discover_handlers() if handlers is None else dict(handlers)
    help_command = HelpCommand(catalog, program)

    resolved: dict[str, CommandHandler] = {}
    for spec in COMMAND_TABLE:
        if spec.name == HELP_COMMAND:
            resolved[spec.name] = help_command
        else:
            resolved[spec.name] = provided.get(spec.name) or unavailable(spec.name)

    registry = CommandRegistry.from_table(COMMAND_TABLE, resolved)
    help_command.registry = registry
    return registry

