"""Regression tests for the optional Rich dependency.

Help, version and error output must keep working in plain text when
Rich cannot be imported.
"""

from __future__ import annotations

import sys

import pytest

from rvc import __version__
from rvc.cli import exit_codes
from rvc.cli.app import main
from rvc.cli.feedback import RichFeedbackHook


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    _hide_rich(monkeypatch)

    assert main(["help", "commit"], handlers={}) == exit_codes.SUCCESS
    assert capsys.readouterr().out.startswith("commit (ci): ")


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    _hide_rich(monkeypatch)

    assert main(["--version"], handlers={}) == exit_codes.SUCCESS
    assert capsys.readouterr().out == f"rvc, version {__version__}\n"


def test_errors_render_plainly_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys,
) -> None:
    _hide_rich(monkeypatch)

    assert main(["frobnicate"], handlers={}) == exit_codes.GENERAL_ERROR
    captured = capsys.readouterr()
    assert "error: unknown command: frobnicate\n" in captured.err
    assert "[bold red]" not in captured.err
    assert captured.out.startswith("usage: rvc <subcommand>")


def test_hint_rendered_without_rich(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    _hide_rich(monkeypatch)

    assert main(["log"], handlers={}) == exit_codes.GENERAL_ERROR
    err = capsys.readouterr().err
    assert "error: subcommand 'log' has no implementation installed" in err
    assert "hint: " in err


def test_feedback_works_without_rich(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    _hide_rich(monkeypatch)

    RichFeedbackHook()({"action": "update_update", "path": "a.c"})
    assert capsys.readouterr().out == "U  a.c\n"
