"""Shared pytest fixtures and test doubles for the rvc test suite.

Guidelines
----------
* No test touches a real working copy; ``--filedata`` goes through
  :class:`FakeMessageFiles` unless a test uses ``tmp_path``.
* The process locale is only switched through :class:`FakeLocale`.
* Dates come from a parser with a fixed clock.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import pytest

from rvc.core.commands import COMMAND_TABLE
from rvc.core.models import ParsedOptions
from rvc.core.options import OptionCatalog, default_catalog
from rvc.core.registry import CommandRegistry
from rvc.core.scanner import OptionScanner
from rvc.exceptions import MessageFileError, RvcError
from rvc.infra.date_parser import FreeFormDateParser

FIXED_NOW = datetime(2002, 1, 15, 13, 45, 0)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------

class FakeMessageFiles:
    """In-memory :class:`MessageFileSource`."""

    def __init__(
        self,
        files: dict[str, str] | None = None,
        versioned: set[str] | None = None,
    ) -> None:
        self.files = files or {}
        self.versioned = versioned or set()

    def read(self, path: str) -> str:
        if path not in self.files:
            raise MessageFileError(f"Can't open file '{path}': no such file", path=path)
        return self.files[path]

    def is_versioned(self, path: str) -> bool:
        return path in self.versioned


class FakeLocale:
    """Records requested locales and accepts only the listed ones."""

    def __init__(self, accepted: tuple[str, ...] = ("C",)) -> None:
        self.accepted = accepted
        self.applied: list[str] = []

    def apply(self, name: str) -> bool:
        self.applied.append(name)
        return name in self.accepted


class RecordingHandler:
    """Handler that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], ParsedOptions]] = []

    def __call__(self, arguments: Sequence[str], options: ParsedOptions) -> None:
        self.calls.append((tuple(arguments), options))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def catalog() -> OptionCatalog:
    return default_catalog()


@pytest.fixture()
def handlers() -> dict[str, RecordingHandler]:
    return {spec.name: RecordingHandler() for spec in COMMAND_TABLE}


@pytest.fixture()
def registry(handlers: dict[str, RecordingHandler]) -> CommandRegistry:
    return CommandRegistry.from_table(COMMAND_TABLE, handlers)


@pytest.fixture()
def message_files() -> FakeMessageFiles:
    return FakeMessageFiles(
        files={"msg.txt": "Fix the frobnicator.\n", "README": "tracked text\n"},
        versioned={"README"},
    )


@pytest.fixture()
def fake_locale() -> FakeLocale:
    return FakeLocale()


@pytest.fixture()
def scan_warnings() -> list[RvcError]:
    return []


@pytest.fixture()
def scanner(
    catalog: OptionCatalog,
    message_files: FakeMessageFiles,
    fake_locale: FakeLocale,
    scan_warnings: list[RvcError],
) -> OptionScanner:
    return OptionScanner(
        catalog,
        date_parser=FreeFormDateParser(clock=lambda: FIXED_NOW),
        message_files=message_files,
        locale_setter=fake_locale,
        on_warning=scan_warnings.append,
    )
