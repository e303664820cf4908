"""Dispatcher — ties option scanning to command resolution and invocation.

One invocation walks these states::

    ScanningOptions -> ResolvingCommand -> PreconditionCheck -> Invoking

Every failure is raised as a typed :class:`~rvc.exceptions.RvcError`
so the CLI boundary (or an embedding program) decides how to report
it and which exit status to use.  Nothing here prints or exits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from rvc.core.models import CommandDescriptor, FeedbackHook, ParsedOptions
from rvc.core.registry import CommandRegistry
from rvc.core.scanner import OptionScanner
from rvc.exceptions import (
    CommandUnavailableError,
    HandlerFailureError,
    MissingSubcommandError,
    PreconditionViolationError,
    RvcError,
    UnresolvableCommandError,
)

logger = logging.getLogger(__name__)

HELP_COMMAND = "help"


@dataclass(frozen=True, slots=True)
class Invocation:
    """A resolved, validated subcommand call ready to run."""

    command: CommandDescriptor
    arguments: tuple[str, ...]
    options: ParsedOptions


class Dispatcher:
    """Resolves argv into an :class:`Invocation` and runs it.

    Parameters
    ----------
    registry:
        Command table used to resolve the subcommand token.
    scanner:
        Flag scanner producing the :class:`ParsedOptions`.
    feedback_factory:
        Builds the progress notifier handed to handlers.  Not called
        when ``--quiet`` is given.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        scanner: OptionScanner,
        *,
        feedback_factory: Callable[[], FeedbackHook] | None = None,
    ) -> None:
        self._registry = registry
        self._scanner = scanner
        self._feedback_factory = feedback_factory

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def prepare(self, argv: Sequence[str]) -> Invocation:
        """Scan *argv*, resolve the subcommand and check preconditions.

        Raises
        ------
        OptionScanError, MalformedRangeSyntaxError, UnparseableDateError,
        MessageFileError
            While scanning flags.
        MissingSubcommandError
            When no positional token names a subcommand.
        UnresolvableCommandError
            When the token matches no command or alias.
        PreconditionViolationError
            When a versioned file feeds ``--filedata`` without ``--force``.
        """
        options = self._scanner.scan(argv)
        command, arguments = self._resolve(options)

        if not options.quiet and self._feedback_factory is not None:
            options.feedback = self._feedback_factory()

        if options.filedata_versioned and not options.force:
            raise PreconditionViolationError(
                "Log message file is a versioned file; use `--force' to override.",
                hint=f"'{options.filedata_path}' is tracked by the working copy.",
            )

        return Invocation(command=command, arguments=arguments, options=options)

    def invoke(self, invocation: Invocation) -> None:
        """Call the command's handler.

        Raises
        ------
        RvcError
            Whatever the handler raised, if already typed.
        CommandUnavailableError
            When the command has no handler.
        HandlerFailureError
            Wrapping any other exception from the handler.
        """
        handler = invocation.command.handler
        if handler is None:
            raise CommandUnavailableError(invocation.command.name)
        logger.debug(
            "invoking %s with %r", invocation.command.name, invocation.arguments,
        )
        try:
            handler(invocation.arguments, invocation.options)
        except RvcError:
            raise
        except Exception as exc:
            raise HandlerFailureError(
                f"{invocation.command.name}: {exc}",
            ) from exc

    def run(self, argv: Sequence[str]) -> None:
        """Prepare and invoke in one step."""
        self.invoke(self.prepare(argv))

    # ------------------------------------------------------------------
    # Command resolution
    # ------------------------------------------------------------------

    def _resolve(
        self, options: ParsedOptions,
    ) -> tuple[CommandDescriptor, tuple[str, ...]]:
        """Pick the command to run and the arguments left for it."""
        positionals = options.positionals

        # With --help every positional names a subcommand to describe.
        if options.help:
            command = self._registry.resolve_canonical(HELP_COMMAND)
            if command is None:
                raise UnresolvableCommandError(HELP_COMMAND)
            return command, tuple(positionals)

        if not positionals:
            raise MissingSubcommandError("subcommand argument required")

        token = positionals[0]
        command = self._registry.resolve_canonical(token)
        if command is None:
            raise UnresolvableCommandError(token)
        logger.debug("resolved %r to %s", token, command.name)
        return command, tuple(positionals[1:])
