"""Pure help-text rendering for commands and options.

Every function returns a string; printing is left to the CLI layer.
"""

from __future__ import annotations

from rvc.core.models import CommandDescriptor, OptionSpec
from rvc.core.options import OptionCatalog
from rvc.core.registry import CommandRegistry

_INFO = (
    "rvc is a tool for revision control.\n"
    "Run with --version to see the client version.\n"
)


def describe_option(option: OptionSpec) -> str:
    """Render one option as ``"  --long (-c):  description"``."""
    short = option.short_flag
    short_part = f" (-{short})" if short is not None else ""
    return f"  --{option.long_name}{short_part}:  {option.description}"


def describe_command(
    registry: CommandRegistry,
    catalog: OptionCatalog,
    descriptor: CommandDescriptor,
    verbose: bool,
) -> str:
    """Render a command's name and aliases, plus help and options if *verbose*.

    *descriptor* may be an alias; the canonical entry is described.
    """
    canonical = registry.resolve_canonical(descriptor.name) or descriptor
    line = canonical.name
    aliases = registry.aliases_of(canonical)
    if aliases:
        line += f" ({', '.join(aliases)})"

    if not verbose:
        return line

    parts = [f"{line}: {canonical.help_text}\n"]
    for code in canonical.accepted_options:
        option = catalog.lookup(code)
        if option is not None:
            parts.append(describe_option(option) + "\n")
    parts.append("\n")
    return "".join(parts)


def generic_help(
    registry: CommandRegistry,
    catalog: OptionCatalog,
    program: str = "rvc",
) -> str:
    """Render the usage banner and the list of available subcommands."""
    parts = [
        f"usage: {program} <subcommand> [options] [args]\n"
        f'Type "{program} help <subcommand>" for help on a specific subcommand.\n'
        "\n"
        "Most subcommands take file and/or directory arguments, recursing\n"
        "on the directories.  If no arguments are supplied to such a\n"
        "command, it will recurse on the current directory (inclusive) by\n"
        "default.\n"
        "\n"
        "Available subcommands:\n"
    ]
    for descriptor in registry.list_canonical():
        parts.append(f"   {describe_command(registry, catalog, descriptor, False)}\n")
    parts.append("\n")
    parts.append(_INFO)
    return "".join(parts)


def version_banner(program: str, version: str) -> str:
    """Render the ``--version`` banner."""
    return f"{program}, version {version}\n"
