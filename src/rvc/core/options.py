"""The option catalog: every flag the client recognises.

Single-letter flags use their ASCII value as code.  Flags that only
have a long spelling get codes from :data:`LONG_ONLY_BASE` upward so
they can never collide with a printable character.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from rvc.core.models import OptionSpec

LONG_ONLY_BASE: int = 256

FORCE_OPT: int = LONG_ONLY_BASE
RECURSIVE_OPT: int = LONG_ONLY_BASE + 1
XML_FILE_OPT: int = LONG_ONLY_BASE + 2
LOCALE_OPT: int = LONG_ONLY_BASE + 3
VERSION_OPT: int = LONG_ONLY_BASE + 4
USERNAME_OPT: int = LONG_ONLY_BASE + 5
PASSWORD_OPT: int = LONG_ONLY_BASE + 6


DEFAULT_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("destination", ord("d"), True, "put results in newly-created directory name"),
    OptionSpec("force", FORCE_OPT, False, "force operation to run"),
    OptionSpec("help", ord("h"), False, "show help on a subcommand", short_aliases=("?",)),
    OptionSpec("message", ord("m"), True, "specify commit message"),
    OptionSpec("quiet", ord("q"), False, "print as little as possible"),
    OptionSpec("recursive", RECURSIVE_OPT, False, "descend recursively"),
    OptionSpec("nonrecursive", ord("n"), False, "operate on single directory only"),
    OptionSpec("revision", ord("r"), True, "specify revision number (or X:Y range)"),
    OptionSpec("date", ord("D"), True, "specify a date (instead of a revision)"),
    OptionSpec("filedata", ord("F"), True, "read data from specified file"),
    OptionSpec("xml-file", XML_FILE_OPT, True, "read/write xml to specified file"),
    OptionSpec("locale", LOCALE_OPT, True, "specify a locale to use"),
    OptionSpec("version", VERSION_OPT, False, "print client version info"),
    OptionSpec("verbose", ord("v"), False, "print extra information"),
    OptionSpec("very-verbose", ord("V"), False, "print maximum information"),
    OptionSpec("show-updates", ord("u"), False, "display update information"),
    # Authentication
    OptionSpec("username", USERNAME_OPT, True, "specify a username [optional]"),
    OptionSpec("password", PASSWORD_OPT, True, "specify a password [optional]"),
    OptionSpec("extensions", ord("x"), True, "pass options through to GNU diff process"),
)


class OptionCatalog:
    """Read-only mapping from option code to :class:`OptionSpec`.

    Iteration yields specs in declaration order.
    """

    def __init__(self, specs: Iterable[OptionSpec]) -> None:
        self._specs: tuple[OptionSpec, ...] = tuple(specs)
        self._by_code: dict[int, OptionSpec] = {}
        for spec in self._specs:
            if spec.code in self._by_code:
                raise ValueError(
                    f"option code {spec.code} used by both "
                    f"--{self._by_code[spec.code].long_name} and --{spec.long_name}"
                )
            self._by_code[spec.code] = spec

    def lookup(self, code: int) -> OptionSpec | None:
        """Return the option registered under *code*, or ``None``."""
        return self._by_code.get(code)

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code


def default_catalog() -> OptionCatalog:
    """Build the catalog of every flag the client understands."""
    return OptionCatalog(DEFAULT_OPTIONS)
