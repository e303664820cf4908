"""Feedback hook: one status line per working-copy notification.

Subcommand implementations report progress by calling
``options.feedback`` with a notification dict.  The dispatcher only
installs this hook when ``--quiet`` was not given.

Notification dicts carry at least ``"action"`` and ``"path"``::

    {"action": "add", "path": "src/main.c"}
    {"action": "commit_modified", "path": "README"}
"""

from __future__ import annotations

from typing import Any

from rvc.cli.console import out

# Short status codes are padded to a column; long verbs are left-aligned.
_STATUS_CODES: dict[str, str] = {
    "add": "A",
    "delete": "D",
    "update_add": "A",
    "update_delete": "D",
    "update_update": "U",
}

_VERBS: dict[str, str] = {
    "restore": "Restored",
    "revert": "Reverted",
    "commit_added": "Adding",
    "commit_deleted": "Deleting",
    "commit_modified": "Sending",
    "commit_replaced": "Replacing",
}


def format_notification(notification: dict[str, Any]) -> str | None:
    """Return the line for *notification*, or ``None`` if it is not shown."""
    action: str = notification.get("action", "")
    path = str(notification.get("path", ""))

    code = _STATUS_CODES.get(action)
    if code is not None:
        return f"{code}  {path}"

    verb = _VERBS.get(action)
    if verb is not None:
        return f"{verb:<14} {path}"

    return None


class RichFeedbackHook:
    """Callable notifier that prints through the stdout console.

    Usage::

        hook = RichFeedbackHook()
        hook({"action": "add", "path": "foo.c"})   # prints "A  foo.c"
    """

    def __init__(self) -> None:
        self.lines_written: int = 0

    def __call__(self, notification: dict[str, Any]) -> None:
        line = format_notification(notification)
        if line is None:
            return
        out.print_plain(line + "\n")
        self.lines_written += 1
