"""Tests for the command registry and alias resolution (core/registry.py)."""

from __future__ import annotations

import pytest

from rvc.core.commands import COMMAND_TABLE, CommandSpec
from rvc.core.models import CommandDescriptor
from rvc.core.registry import CommandRegistry


def _noop(arguments: object, options: object) -> None:
    return None


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

class TestLookup:
    def test_find_canonical(self, registry: CommandRegistry) -> None:
        entry = registry.find_by_name("commit")
        assert entry is not None
        assert not entry.is_alias

    def test_find_alias_returns_alias_entry(self, registry: CommandRegistry) -> None:
        entry = registry.find_by_name("ci")
        assert entry is not None
        assert entry.is_alias
        assert entry.canonical_name == "commit"

    def test_find_unknown(self, registry: CommandRegistry) -> None:
        assert registry.find_by_name("frobnicate") is None

    def test_lookup_is_case_sensitive(self, registry: CommandRegistry) -> None:
        assert registry.find_by_name("Commit") is None

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("ci", "commit"),
            ("rm", "delete"),
            ("remove", "delete"),
            ("ren", "move"),
            ("?", "help"),
            ("h", "help"),
            ("st", "status"),
            ("up", "update"),
        ],
    )
    def test_resolve_alias(
        self, registry: CommandRegistry, token: str, expected: str
    ) -> None:
        entry = registry.resolve_canonical(token)
        assert entry is not None
        assert entry.name == expected

    def test_resolve_is_idempotent(self, registry: CommandRegistry) -> None:
        first = registry.resolve_canonical("co")
        assert first is not None
        assert registry.resolve_canonical(first.name) is first

    def test_resolve_unknown(self, registry: CommandRegistry) -> None:
        assert registry.resolve_canonical("nope") is None

    def test_canonical_entry_carries_handler(self, registry, handlers) -> None:
        entry = registry.resolve_canonical("log")
        assert entry is not None
        assert entry.handler is handlers["log"]


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

class TestListing:
    def test_list_canonical_in_table_order(self, registry: CommandRegistry) -> None:
        names = [entry.name for entry in registry.list_canonical()]
        assert names == [spec.name for spec in COMMAND_TABLE]

    def test_aliases_of_canonical(self, registry: CommandRegistry) -> None:
        entry = registry.find_by_name("delete")
        assert entry is not None
        assert registry.aliases_of(entry) == ["del", "remove", "rm"]

    def test_aliases_of_alias(self, registry: CommandRegistry) -> None:
        entry = registry.find_by_name("rm")
        assert entry is not None
        assert registry.aliases_of(entry) == ["del", "remove", "rm"]

    def test_no_aliases(self, registry: CommandRegistry) -> None:
        entry = registry.find_by_name("cleanup")
        assert entry is not None
        assert registry.aliases_of(entry) == []

    def test_len_counts_aliases(self, registry: CommandRegistry) -> None:
        expected = sum(1 + len(spec.aliases) for spec in COMMAND_TABLE)
        assert len(registry) == expected

    def test_alias_follows_its_canonical_entry(self, registry: CommandRegistry) -> None:
        last_canonical = None
        for entry in registry:
            if entry.is_alias:
                assert last_canonical is not None
                assert entry.canonical_name == last_canonical.name
                assert registry.resolve_canonical(entry.name) is last_canonical
            else:
                last_canonical = entry

    def test_every_alias_resolves(self, registry: CommandRegistry) -> None:
        for entry in registry:
            resolved = registry.resolve_canonical(entry.name)
            assert resolved is not None
            assert not resolved.is_alias


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_missing_handler_rejected(self) -> None:
        table = (CommandSpec("log", (), "Show the log.\n", ()),)
        with pytest.raises(ValueError, match="log"):
            CommandRegistry.from_table(table, {})

    def test_duplicate_name_rejected(self) -> None:
        table = (
            CommandSpec("log", ("l",), "Show the log.\n", ()),
            CommandSpec("list", ("l",), "List.\n", ()),
        )
        with pytest.raises(ValueError, match="'l'"):
            CommandRegistry.from_table(table, {"log": _noop, "list": _noop})

    def test_alias_to_unknown_target_rejected(self) -> None:
        orphan = CommandDescriptor(
            name="ci",
            is_alias=True,
            handler=None,
            help_text="",
            accepted_options=(),
            canonical_name="commit",
        )
        with pytest.raises(ValueError, match="ci"):
            CommandRegistry([orphan])

    def test_canonical_without_handler_rejected(self) -> None:
        entry = CommandDescriptor(
            name="log",
            is_alias=False,
            handler=None,
            help_text="",
            accepted_options=(),
        )
        with pytest.raises(ValueError, match="handler"):
            CommandRegistry([entry])
