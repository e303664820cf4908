"""Static command table: canonical subcommands, aliases, help, options.

Order matters only for presentation: the generic usage listing shows
canonical commands in the order given here.
"""

from __future__ import annotations

from dataclasses import dataclass

from rvc.core.options import (
    FORCE_OPT,
    PASSWORD_OPT,
    RECURSIVE_OPT,
    USERNAME_OPT,
    VERSION_OPT,
    XML_FILE_OPT,
)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Declarative description of one canonical command and its aliases."""

    name: str
    aliases: tuple[str, ...]
    help_text: str
    options: tuple[int, ...]


def _codes(*flags: str | int) -> tuple[int, ...]:
    """Turn one-letter flags and long-only codes into option codes."""
    return tuple(ord(f) if isinstance(f, str) else f for f in flags)


_AUTH = (USERNAME_OPT, PASSWORD_OPT)

COMMAND_TABLE: tuple[CommandSpec, ...] = (
    CommandSpec(
        "add", ("ad", "new"),
        "Add new files and directories to version control.\n"
        "usage: add [TARGETS]\n",
        _codes("r"),
    ),
    CommandSpec(
        "checkout", ("co",),
        "Check out a working directory from a repository.\n"
        "usage: checkout REPOS_URL1 [REPOS_URL2 REPOS_URL3...]\n",
        _codes(*_AUTH, XML_FILE_OPT, "d", "q", "n", "D", "r"),
    ),
    CommandSpec(
        "cleanup", (),
        "Recursively clean up the working copy, removing locks, resuming\n"
        "unfinished operations, etc.\n"
        "usage: cleanup [TARGETS]\n",
        (),
    ),
    CommandSpec(
        "commit", ("ci",),
        "Commit changes from your working copy to the repository.\n"
        "usage: commit [TARGETS]\n",
        _codes("F", "m", *_AUTH, XML_FILE_OPT, "q", "r"),
    ),
    CommandSpec(
        "copy", ("cp",),
        "Duplicate something in your working copy, remembering history.\n"
        "usage: copy SRC_PATH DST_PATH.\n",
        _codes("F", "m", "r", *_AUTH),
    ),
    CommandSpec(
        "delete", ("del", "remove", "rm"),
        "Remove files and directories from version control.\n"
        "usage: delete [TARGET]\n"
        "       delete REPOS_URL1 [[REPOS_URL2] ... ]\n",
        _codes("F", "m", *_AUTH, FORCE_OPT),
    ),
    CommandSpec(
        "diff", ("di",),
        "Display local changes in the working copy, or changes between the\n"
        "working copy and the repository if a revision is given.\n"
        "usage: diff [-r REV] [TARGETS]\n",
        _codes(*_AUTH, "x", "r", "d", "n"),
    ),
    CommandSpec(
        "help", ("?", "h"),
        "Display this usage message.\n"
        "usage: help [SUBCOMMAND1 [SUBCOMMAND2] ...]\n",
        _codes(VERSION_OPT),
    ),
    CommandSpec(
        "import", (),
        "Import a file or tree into the repository.\n"
        "usage: import REPOS_URL [PATH] [NEW_ENTRY_IN_REPOS]\n",
        _codes("F", "m", *_AUTH, XML_FILE_OPT, "q", "r"),
    ),
    CommandSpec(
        "log", (),
        "Show the log messages for a set of revision(s) and/or file(s).\n"
        "usage: log [-r REV1[:REV2]] [PATH1 [PATH2] ...]\n",
        _codes(*_AUTH, "r", "v"),
    ),
    CommandSpec(
        "mkdir", (),
        "Create a new directory under revision control.\n"
        "usage: mkdir [NEW_DIR | REPOS_URL].\n",
        _codes(*_AUTH, "m", "F"),
    ),
    CommandSpec(
        "move", ("mv", "rename", "ren"),
        "Move or rename something in the working copy.\n"
        "usage: move SRC_PATH DST_PATH.\n",
        _codes(*_AUTH, "m", "F", "r"),
    ),
    CommandSpec(
        "propdel", ("pdel",),
        "Remove property PROPNAME on files and directories.\n"
        "usage: propdel PROPNAME [TARGETS]\n",
        _codes("q", RECURSIVE_OPT),
    ),
    CommandSpec(
        "propedit", ("pedit", "pe"),
        "Edit property PROPNAME with $EDITOR on files and directories.\n"
        "usage: propedit PROPNAME [TARGETS]\n",
        (),
    ),
    CommandSpec(
        "propget", ("pget", "pg"),
        "Get the value of property PROPNAME on files and directories.\n"
        "usage: propget PROPNAME [TARGETS]\n",
        _codes(RECURSIVE_OPT),
    ),
    CommandSpec(
        "proplist", ("plist", "pl"),
        "List all properties for given files and directories.\n"
        "usage: proplist [TARGETS]\n",
        _codes(RECURSIVE_OPT),
    ),
    CommandSpec(
        "propset", ("pset", "ps"),
        "Set property PROPNAME to PROPVAL on files and directories.\n"
        "usage: propset PROPNAME [PROPVAL | -F/--filedata VALFILE] [TARGETS]\n",
        _codes("F", "q", RECURSIVE_OPT),
    ),
    CommandSpec(
        "revert", (),
        "Restore pristine working copy file (undo all local edits)\n"
        "usage: revert [TARGETS]\n",
        _codes(RECURSIVE_OPT),
    ),
    CommandSpec(
        "status", ("stat", "st"),
        "Print the status of working copy files and directories.\n"
        "usage: status [TARGETS]\n",
        _codes(*_AUTH, "u", "n", "v", "q"),
    ),
    CommandSpec(
        "switch", ("sw",),
        "Update existing working copy files and directories to become\n"
        "a working copy of a different repository URL.\n"
        "usage: switch [TARGET] REPOS_URL\n",
        (),
    ),
    CommandSpec(
        "update", ("up",),
        "Bring changes from the repository into the working copy.\n"
        "usage: update [TARGETS]\n",
        _codes(*_AUTH, "r", "D", "n", XML_FILE_OPT),
    ),
)
