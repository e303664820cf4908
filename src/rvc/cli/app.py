"""CLI application entry point and error boundary for rvc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rvc.exceptions.RvcError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No parsing or resolution logic lives here — the dispatcher in
  :mod:`rvc.core.dispatcher` does that work and raises typed errors.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping, Sequence

from rvc.cli import exit_codes
from rvc.cli.console import console, out
from rvc.cli.feedback import RichFeedbackHook
from rvc.cli.handlers import build_registry
from rvc.core.dispatcher import Dispatcher
from rvc.core.models import CommandHandler
from rvc.core.options import OptionCatalog, default_catalog
from rvc.core.protocols import MessageFileSource
from rvc.core.registry import CommandRegistry
from rvc.core.scanner import OptionScanner
from rvc.core.usage import generic_help
from rvc.exceptions import ArgumentParsingError, RvcError
from rvc.infra.date_parser import FreeFormDateParser
from rvc.infra.process_locale import ProcessLocale, reset_to_default
from rvc.infra.working_copy import WorkingCopyFiles

logger = logging.getLogger(__name__)

PROGRAM = "rvc"
LOG_LEVEL_ENV = "RVC_LOG_LEVEL"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _configure_logging() -> None:
    """Configure root logging once, from ``RVC_LOG_LEVEL`` (default WARNING)."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _report(exc: RvcError, registry: CommandRegistry, catalog: OptionCatalog) -> None:
    """Render *exc* on stderr, followed by usage text when it asks for it."""
    console.error(str(exc), exc.hint)
    if exc.show_usage:
        out.print_plain(generic_help(registry, catalog, PROGRAM))


def _report_warning(exc: RvcError) -> None:
    """Render a non-fatal problem; the invocation carries on."""
    console.error(str(exc), exc.hint)


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def build_dispatcher(
    registry: CommandRegistry,
    catalog: OptionCatalog,
    *,
    message_files: MessageFileSource | None = None,
) -> Dispatcher:
    """Wire the scanner and dispatcher to their concrete collaborators."""
    scanner = OptionScanner(
        catalog,
        date_parser=FreeFormDateParser(),
        message_files=message_files or WorkingCopyFiles(),
        locale_setter=ProcessLocale(),
        on_warning=_report_warning,
    )
    return Dispatcher(registry, scanner, feedback_factory=RichFeedbackHook)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    handlers: Mapping[str, CommandHandler] | None = None,
    message_files: MessageFileSource | None = None,
) -> int:
    """Run the rvc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    handlers:
        Subcommand handlers by canonical name; discovered through entry
        points when ``None``.
    message_files:
        Override for the ``--filedata`` loader and working-copy check.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    catalog = default_catalog()
    registry = build_registry(catalog, handlers, program=PROGRAM)

    if not args:
        out.print_plain(generic_help(registry, catalog, PROGRAM))
        return exit_codes.GENERAL_ERROR

    dispatcher = build_dispatcher(registry, catalog, message_files=message_files)

    try:
        invocation = dispatcher.prepare(args)
    except RvcError as exc:
        _report(exc, registry, catalog)
        return exit_codes.GENERAL_ERROR

    try:
        dispatcher.invoke(invocation)
    except ArgumentParsingError as exc:
        # The subcommand already printed its own usage message.
        logger.debug("%s rejected its arguments: %s", invocation.command.name, exc)
        return exit_codes.GENERAL_ERROR
    except RvcError as exc:
        _report(exc, registry, catalog)
        return exit_codes.GENERAL_ERROR

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Starts from the ``C`` locale so output is predictable unless
    ``--locale`` asks otherwise.
    """
    _configure_logging()
    reset_to_default()
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
