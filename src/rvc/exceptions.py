"""Custom exception hierarchy for rvc.

All exceptions that cross layer boundaries must inherit from
:class:`RvcError`.  Raw OS and standard-library exceptions must NEVER
propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
RvcError
├── ArgumentParsingError
│   ├── OptionScanError
│   ├── MalformedRangeSyntaxError
│   └── UnparseableDateError
├── UnresolvableCommandError
├── MissingSubcommandError
├── PreconditionViolationError
├── LocaleUnavailableError
├── MessageFileError
└── HandlerFailureError
    └── CommandUnavailableError
"""

from __future__ import annotations


class RvcError(Exception):
    """Base exception for all rvc errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    show_usage: bool = False
    """Whether the CLI prints the generic usage text after the message."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument syntax -------------------------------------------------------

class ArgumentParsingError(RvcError):
    """Raised when command-line input is syntactically invalid.

    A subcommand handler that raises this kind has already reported the
    problem itself, so the dispatcher does not render it a second time.
    """


class OptionScanError(ArgumentParsingError):
    """Raised when the flag scanner meets an unknown or incomplete option."""

    show_usage = True


class MalformedRangeSyntaxError(ArgumentParsingError):
    """Raised when a revision or date range token has an invalid shape."""

    def __init__(self, message: str, *, token: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.token: str = token


class UnparseableDateError(ArgumentParsingError):
    """Raised when free-form date text cannot be understood."""

    def __init__(self, message: str, *, text: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.text: str = text


# --- Command resolution ----------------------------------------------------

class UnresolvableCommandError(RvcError):
    """Raised when a subcommand token matches no registry entry."""

    show_usage = True

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown command: {name}")
        self.name: str = name


class MissingSubcommandError(RvcError):
    """Raised when no positional token is left to name the subcommand."""

    show_usage = True


# --- Preconditions ---------------------------------------------------------

class PreconditionViolationError(RvcError):
    """Raised when the invocation is well-formed but unsafe to run."""


class MessageFileError(RvcError):
    """Raised when the file given to ``--filedata`` cannot be read."""

    def __init__(self, message: str, *, path: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


# --- Environment -----------------------------------------------------------

class LocaleUnavailableError(RvcError):
    """Raised (and reported, never fatal) when a locale cannot be set."""

    def __init__(self, locale_name: str) -> None:
        super().__init__(f"The locale `{locale_name}' can not be set")
        self.locale_name: str = locale_name


# --- Subcommand execution --------------------------------------------------

class HandlerFailureError(RvcError):
    """Raised when a subcommand implementation fails."""


class CommandUnavailableError(HandlerFailureError):
    """Raised when no implementation is installed for a known subcommand."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"subcommand '{name}' has no implementation installed",
            hint=(
                "Install a package that provides it through the "
                "'rvc.subcommands' entry-point group."
            ),
        )
        self.name: str = name
