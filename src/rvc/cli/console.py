"""CLI console helpers with optional Rich support.

Two proxies are exported: :data:`console` writes to stderr (errors,
warnings) and :data:`out` writes to stdout (help text, feedback).
Rich is imported lazily so that ``rvc help`` still works when it is
not installed.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO


def _load_rich() -> tuple[type[Any], Any] | None:
    """Return ``(Console, escape)`` from Rich, or ``None`` if unavailable."""
    try:
        from rich.console import Console
        from rich.markup import escape
    except ModuleNotFoundError:
        return None
    return Console, escape


def get_rich_console(*, stderr: bool = True) -> Any | None:
    """Create a Rich console targeting stderr (default) or stdout."""
    loaded = _load_rich()
    if loaded is None:
        return None
    console_class, _ = loaded
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with plain-text fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def _stream(self) -> TextIO:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object) -> None:
        """Render Rich markup when available, else plain print."""
        rich_console = get_rich_console(stderr=self._stderr)
        if rich_console is None:
            print(*objects, file=self._stream())
            return
        rich_console.print(*objects)

    def print_plain(self, text: str) -> None:
        """Write *text* verbatim: no markup, no highlighting, no wrapping."""
        rich_console = get_rich_console(stderr=self._stderr)
        if rich_console is None:
            print(text, end="", file=self._stream())
            return
        rich_console.print(
            text, markup=False, highlight=False, soft_wrap=True, end="",
        )

    def error(self, message: str, hint: str | None = None) -> None:
        """Render an error line and an optional hint."""
        loaded = _load_rich()
        if loaded is None:
            print(f"error: {message}", file=self._stream())
            if hint:
                print(f"hint: {hint}", file=self._stream())
            return
        console_class, escape = loaded
        rich_console = console_class(stderr=self._stderr)
        rich_console.print(f"[bold red]error:[/bold red] {escape(message)}", soft_wrap=True)
        if hint:
            rich_console.print(f"[yellow]hint:[/yellow] {escape(hint)}", soft_wrap=True)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
