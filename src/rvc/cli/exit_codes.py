"""Process exit statuses returned by :func:`rvc.cli.app.main`.

Every failure the dispatcher can detect (bad flag, bad range, unknown
or missing subcommand, refused ``--filedata``, handler error) maps to
:data:`GENERAL_ERROR`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The subcommand (or help) ran to completion."""

GENERAL_ERROR: int = 1
"""An RvcError was reported, or usage was printed for empty argv."""

UNEXPECTED_ERROR: int = 2
"""A non-RvcError exception reached :func:`rvc.cli.app.cli`."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
