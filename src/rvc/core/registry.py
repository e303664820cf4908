"""Command registry and alias resolver.

Entries are kept in registration order: every canonical command is
followed directly by its aliases.  Each alias also stores the name of
its canonical entry, so resolution never depends on that ordering.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from rvc.core.commands import CommandSpec
from rvc.core.models import CommandDescriptor, CommandHandler

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Immutable table of canonical commands and aliases.

    Parameters
    ----------
    entries:
        Descriptors in registration order.  Alias entries must name a
        canonical entry registered earlier.
    """

    def __init__(self, entries: Iterable[CommandDescriptor]) -> None:
        self._entries: tuple[CommandDescriptor, ...] = tuple(entries)
        self._by_name: dict[str, CommandDescriptor] = {}
        self._canonical: dict[str, CommandDescriptor] = {}

        for entry in self._entries:
            if entry.name in self._by_name:
                raise ValueError(f"command name registered twice: {entry.name!r}")
            if entry.is_alias:
                target = self._by_name.get(entry.canonical_name or "")
                if target is None or target.is_alias:
                    raise ValueError(
                        f"alias {entry.name!r} refers to unknown command "
                        f"{entry.canonical_name!r}"
                    )
            elif entry.handler is None:
                raise ValueError(f"command {entry.name!r} has no handler")
            else:
                target = entry
            self._by_name[entry.name] = entry
            self._canonical[entry.name] = target

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_table(
        cls,
        table: Iterable[CommandSpec],
        handlers: Mapping[str, CommandHandler],
    ) -> CommandRegistry:
        """Register every spec in *table*, each followed by its aliases."""
        entries: list[CommandDescriptor] = []
        for spec in table:
            handler = handlers.get(spec.name)
            if handler is None:
                raise ValueError(f"no handler supplied for command {spec.name!r}")
            entries.append(
                CommandDescriptor(
                    name=spec.name,
                    is_alias=False,
                    handler=handler,
                    help_text=spec.help_text,
                    accepted_options=tuple(spec.options),
                )
            )
            entries.extend(
                CommandDescriptor(
                    name=alias,
                    is_alias=True,
                    handler=None,
                    help_text="",
                    accepted_options=(),
                    canonical_name=spec.name,
                )
                for alias in spec.aliases
            )
        return cls(entries)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_by_name(self, token: str) -> CommandDescriptor | None:
        """Return the entry (canonical or alias) named exactly *token*."""
        return self._by_name.get(token)

    def resolve_canonical(self, token: str) -> CommandDescriptor | None:
        """Return the canonical entry *token* stands for, or ``None``."""
        canonical = self._canonical.get(token)
        if canonical is None:
            logger.debug("no command named %r", token)
        elif canonical.name != token:
            logger.debug("alias %r resolves to %r", token, canonical.name)
        return canonical

    def list_canonical(self) -> list[CommandDescriptor]:
        """Canonical entries in registration order."""
        return [entry for entry in self._entries if not entry.is_alias]

    def aliases_of(self, descriptor: CommandDescriptor) -> list[str]:
        """Alias names of *descriptor*'s canonical command, in order."""
        canonical = descriptor.canonical_name if descriptor.is_alias else descriptor.name
        return [
            entry.name
            for entry in self._entries
            if entry.is_alias and entry.canonical_name == canonical
        ]

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
