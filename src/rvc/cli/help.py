"""``rvc help`` — the one subcommand implemented inside this package.

It renders the command registry itself, so it has to live next to
the dispatcher rather than with the working-copy subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence

from rvc.cli.console import console, out
from rvc.core.models import ParsedOptions
from rvc.core.options import OptionCatalog
from rvc.core.registry import CommandRegistry
from rvc.core.usage import describe_command, generic_help, version_banner
from rvc.version import __version__


class HelpCommand:
    """Handler for ``help [SUBCOMMAND...]``, ``--help`` and ``--version``.

    The registry is attached after construction because the registry
    itself needs this handler.
    """

    def __init__(self, catalog: OptionCatalog, program: str = "rvc") -> None:
        self.catalog = catalog
        self.program = program
        self.registry: CommandRegistry | None = None

    def __call__(self, arguments: Sequence[str], options: ParsedOptions) -> None:
        registry = self.registry
        if registry is None:
            raise RuntimeError("help command used before a registry was attached")

        if options.version:
            out.print_plain(version_banner(self.program, __version__))
            return

        if not arguments:
            out.print_plain(generic_help(registry, self.catalog, self.program))
            return

        for name in arguments:
            descriptor = registry.resolve_canonical(name)
            if descriptor is None:
                console.print_plain(f'"{name}": unknown command.\n\n')
                continue
            out.print_plain(describe_command(registry, self.catalog, descriptor, True))
