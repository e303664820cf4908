"""Tests for the process locale switch (infra/process_locale.py)."""

from __future__ import annotations

import locale

import pytest

from rvc.infra.process_locale import ProcessLocale, reset_to_default


@pytest.fixture(autouse=True)
def _restore_locale():
    saved = locale.setlocale(locale.LC_ALL)
    yield
    locale.setlocale(locale.LC_ALL, saved)


class TestProcessLocale:
    def test_c_locale_accepted(self) -> None:
        assert ProcessLocale().apply("C") is True

    def test_unknown_locale_rejected(self) -> None:
        assert ProcessLocale().apply("no_SUCH.locale-at-all") is False

    def test_reset_to_default(self) -> None:
        reset_to_default()
        assert locale.setlocale(locale.LC_NUMERIC) == "C"
