"""Domain models for rvc.

Value objects (option specs, command descriptors, ranges) are
**frozen** dataclasses.  :class:`ParsedOptions` is the one mutable
model: it is filled in while the option scanner walks argv and is
treated as read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

OLDEST_REVISION: int = 1
"""Default end bound of a revision range: the first revision."""

FeedbackHook = Callable[[dict[str, Any]], None]
CommandHandler = Callable[[Sequence[str], "ParsedOptions"], None]


# ---------------------------------------------------------------------------
# Option catalog entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One recognised command-line flag."""

    long_name: str
    """Spelling after ``--`` (e.g. ``revision``)."""

    code: int
    """Unique code: ``ord(c)`` for a one-letter flag, ``>= 256`` otherwise."""

    takes_argument: bool
    """Whether the flag consumes a value."""

    description: str
    """One-line help text."""

    short_aliases: tuple[str, ...] = ()
    """Extra one-character spellings besides the one encoded in ``code``."""

    @property
    def short_flag(self) -> str | None:
        """Printable single-character form, or ``None`` for long-only flags."""
        if 32 < self.code < 127:
            return chr(self.code)
        return None


# ---------------------------------------------------------------------------
# Command registry entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """A canonical command or one of its aliases.

    Canonical entries own a handler, help text and accepted option codes.
    Aliases own only their name and the name of their canonical entry.
    """

    name: str
    is_alias: bool
    handler: CommandHandler | None
    help_text: str
    accepted_options: tuple[int, ...]
    """Accepted option codes in the order help lists them."""
    canonical_name: str | None = None
    """Target of an alias; ``None`` on canonical entries."""


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RevisionRange:
    """Pair of revision bounds.  ``None`` means head (the youngest revision)."""

    start: int | None
    end: int | None


@dataclass(frozen=True, slots=True)
class DateRange:
    """Pair of optional timestamps."""

    start: datetime | None = None
    end: datetime | None = None


# ---------------------------------------------------------------------------
# Scan result
# ---------------------------------------------------------------------------

@dataclass
class ParsedOptions:
    """Everything the option scanner learnt from one argv.

    Also used directly as the ``argparse`` namespace, so every flag has
    an attribute here before scanning starts.
    """

    # Boolean flags
    force: bool = False
    help: bool = False
    quiet: bool = False
    recursive: bool = False
    nonrecursive: bool = False
    version: bool = False
    verbose: bool = False
    very_verbose: bool = False
    show_updates: bool = False

    # Value flags
    destination: str | None = None
    message: str | None = None
    xml_file: str | None = None
    username: str | None = None
    password: str | None = None
    extensions: str | None = None
    locale: str | None = None

    # --filedata
    filedata: str | None = None
    filedata_path: str | None = None
    filedata_versioned: bool = False

    # Ranges
    revision: RevisionRange = field(
        default_factory=lambda: RevisionRange(start=None, end=OLDEST_REVISION),
    )
    date: DateRange = field(default_factory=DateRange)

    positionals: list[str] = field(default_factory=list)
    """Non-flag tokens in command-line order."""

    feedback: FeedbackHook | None = None
    """Progress notifier for handlers; stays ``None`` under ``--quiet``."""
