"""Tests for the option catalog (core/options.py)."""

from __future__ import annotations

import pytest

from rvc.core.commands import COMMAND_TABLE
from rvc.core.models import OptionSpec
from rvc.core.options import (
    DEFAULT_OPTIONS,
    FORCE_OPT,
    LONG_ONLY_BASE,
    OptionCatalog,
    default_catalog,
)


class TestDefaultCatalog:
    def test_codes_are_unique(self) -> None:
        codes = [spec.code for spec in DEFAULT_OPTIONS]
        assert len(codes) == len(set(codes))

    def test_long_names_are_unique(self) -> None:
        names = [spec.long_name for spec in DEFAULT_OPTIONS]
        assert len(names) == len(set(names))

    def test_lookup_short_code(self) -> None:
        spec = default_catalog().lookup(ord("r"))
        assert spec is not None
        assert spec.long_name == "revision"
        assert spec.takes_argument

    def test_lookup_long_only_code(self) -> None:
        spec = default_catalog().lookup(FORCE_OPT)
        assert spec is not None
        assert spec.long_name == "force"
        assert spec.short_flag is None

    def test_lookup_unknown_code(self) -> None:
        assert default_catalog().lookup(ord("Z")) is None

    def test_long_only_codes_above_printable_range(self) -> None:
        for spec in DEFAULT_OPTIONS:
            if spec.short_flag is None:
                assert spec.code >= LONG_ONLY_BASE

    def test_help_accepts_question_mark(self) -> None:
        spec = default_catalog().lookup(ord("h"))
        assert spec is not None
        assert "?" in spec.short_aliases

    def test_iteration_keeps_declaration_order(self) -> None:
        names = [spec.long_name for spec in default_catalog()]
        assert names[0] == "destination"
        assert names[-1] == "extensions"

    def test_contains_and_len(self) -> None:
        catalog = default_catalog()
        assert ord("m") in catalog
        assert len(catalog) == len(DEFAULT_OPTIONS)

    def test_every_command_option_is_in_catalog(self) -> None:
        catalog = default_catalog()
        for spec in COMMAND_TABLE:
            for code in spec.options:
                assert catalog.lookup(code) is not None, (spec.name, code)


class TestCatalogConstruction:
    def test_duplicate_code_rejected(self) -> None:
        specs = [
            OptionSpec("alpha", ord("a"), False, "first"),
            OptionSpec("also-alpha", ord("a"), False, "second"),
        ]
        with pytest.raises(ValueError, match="--alpha"):
            OptionCatalog(specs)
