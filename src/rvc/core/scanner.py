"""Generic flag scanner driven by the option catalog.

The scanner builds an :mod:`argparse` parser from the catalog and uses
a :class:`~rvc.core.models.ParsedOptions` instance as its namespace.
Flags are applied in command-line order, so a later ``-r`` replaces an
earlier one and a ``-D X:`` only moves the start bound set so far.

A flag that takes a value always consumes the next token, even one
that starts with a dash (``-x -b``, ``-m --``).  Before argparse sees
argv, every such flag is rewritten to the attached ``--long=value``
form so argparse never has to guess.

Positional tokens may appear before, between or after flags.  Any
recognised flag is accepted whatever the subcommand turns out to be.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import Any, NoReturn

from rvc.core.models import OptionSpec, ParsedOptions
from rvc.core.options import OptionCatalog
from rvc.core.protocols import DateParser, LocaleSetter, MessageFileSource
from rvc.core.ranges import parse_date_range, parse_revision_range
from rvc.exceptions import LocaleUnavailableError, OptionScanError, RvcError

logger = logging.getLogger(__name__)

_END_OF_OPTIONS = "--"

# argparse drops a literal "--" from option values, so it travels as this.
_DOUBLE_DASH_VALUE = "\x00--"


def _value(raw: str) -> str:
    return _END_OF_OPTIONS if raw == _DOUBLE_DASH_VALUE else raw


class _ScanningParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises instead of printing and exiting."""

    def error(self, message: str) -> NoReturn:
        raise OptionScanError(message)


# ---------------------------------------------------------------------------
# Per-flag actions
# ---------------------------------------------------------------------------

class _StoreValueAction(argparse.Action):
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        setattr(namespace, self.dest, _value(values))


class _RevisionAction(argparse.Action):
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        namespace.revision = parse_revision_range(_value(values))


class _DateAction(argparse.Action):
    def __init__(self, *args: Any, date_parser: DateParser, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._date_parser = date_parser

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        namespace.date = parse_date_range(
            _value(values), namespace.date, self._date_parser,
        )


class _FileDataAction(argparse.Action):
    """Load the file's text and remember whether it is under version control."""

    def __init__(self, *args: Any, source: MessageFileSource, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._source = source

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        path = _value(values)
        namespace.filedata = self._source.read(path)
        namespace.filedata_path = path
        namespace.filedata_versioned = self._source.is_versioned(path)
        logger.debug(
            "loaded %s (versioned=%s)", path, namespace.filedata_versioned,
        )


class _LocaleAction(argparse.Action):
    """Switch the process locale as soon as the flag is seen."""

    def __init__(
        self,
        *args: Any,
        setter: LocaleSetter,
        on_warning: Callable[[RvcError], None],
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._setter = setter
        self._on_warning = on_warning

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        name = _value(values)
        namespace.locale = name
        if not self._setter.apply(name):
            logger.warning("locale %r rejected by the runtime", name)
            self._on_warning(LocaleUnavailableError(name))


class _VersionAction(argparse.Action):
    """``--version`` asks for help as well."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, nargs=0, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: Any,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        namespace.version = True
        namespace.help = True


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

def _ignore_warning(_error: RvcError) -> None:
    return None


class OptionScanner:
    """Turns an argv into a :class:`ParsedOptions`.

    Parameters
    ----------
    catalog:
        Flags to recognise.
    date_parser:
        Free-form date backend used by ``--date``.
    message_files:
        Loader and version-control check used by ``--filedata``.
    locale_setter:
        Process locale switch used by ``--locale``.
    on_warning:
        Receives non-fatal problems (an unavailable locale).  Scanning
        continues after the call.
    """

    def __init__(
        self,
        catalog: OptionCatalog,
        *,
        date_parser: DateParser,
        message_files: MessageFileSource,
        locale_setter: LocaleSetter,
        on_warning: Callable[[RvcError], None] = _ignore_warning,
    ) -> None:
        self._catalog = catalog
        self._parser = _ScanningParser(prog="rvc", add_help=False, allow_abbrev=False)
        self._by_long: dict[str, OptionSpec] = {}
        self._by_short: dict[str, OptionSpec] = {}

        special: dict[str, dict[str, Any]] = {
            "revision": {"action": _RevisionAction},
            "date": {"action": _DateAction, "date_parser": date_parser},
            "filedata": {"action": _FileDataAction, "source": message_files},
            "locale": {
                "action": _LocaleAction,
                "setter": locale_setter,
                "on_warning": on_warning,
            },
            "version": {"action": _VersionAction},
        }
        for spec in catalog:
            kwargs = special.get(spec.long_name)
            if kwargs is None:
                kwargs = {
                    "action": _StoreValueAction if spec.takes_argument else "store_true",
                }
            self._parser.add_argument(
                *self._option_strings(spec),
                dest=spec.long_name.replace("-", "_"),
                help=spec.description,
                **kwargs,
            )
            self._by_long[spec.long_name] = spec
            if spec.short_flag is not None:
                self._by_short[spec.short_flag] = spec
            for alias in spec.short_aliases:
                self._by_short[alias] = spec

    @staticmethod
    def _option_strings(spec: OptionSpec) -> list[str]:
        strings = [f"--{spec.long_name}"]
        if spec.short_flag is not None:
            strings.append(f"-{spec.short_flag}")
        strings.extend(f"-{alias}" for alias in spec.short_aliases)
        return strings

    def scan(self, argv: Sequence[str]) -> ParsedOptions:
        """Apply every flag in *argv* and collect the positional tokens.

        Raises
        ------
        OptionScanError
            On an unknown flag or a flag missing its argument.
        MalformedRangeSyntaxError, UnparseableDateError
            From the ``--revision`` / ``--date`` parsers.
        MessageFileError
            When the ``--filedata`` file cannot be read.
        """
        args, trailing = self._attach_values(argv)

        options = ParsedOptions()
        _, extras = self._parser.parse_known_args(args, namespace=options)

        positionals: list[str] = []
        for token in extras:
            if token.startswith("-") and token != "-":
                raise OptionScanError(f"unrecognized option: {token}")
            positionals.append(token)
        options.positionals = positionals + trailing

        logger.debug("scanned options, positionals=%r", options.positionals)
        return options

    # ------------------------------------------------------------------
    # argv rewriting
    # ------------------------------------------------------------------

    def _attach(self, spec: OptionSpec, value: str) -> str:
        if value == _END_OF_OPTIONS:
            value = _DOUBLE_DASH_VALUE
        return f"--{spec.long_name}={value}"

    def _attach_values(self, argv: Sequence[str]) -> tuple[list[str], list[str]]:
        """Rewrite value-taking flags to ``--long=value`` form.

        Returns the tokens for argparse and the tokens after a ``--``
        that ended option scanning.  A ``--`` consumed as a flag's value
        does not end scanning.  Unknown flags and a value-taking flag
        with nothing after it are passed through for argparse to reject.
        """
        tokens = list(argv)
        rewritten: list[str] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            index += 1
            following = tokens[index] if index < len(tokens) else None

            if token == _END_OF_OPTIONS:
                return rewritten, tokens[index:]

            if token.startswith("--"):
                name, sep, attached = token[2:].partition("=")
                spec = self._by_long.get(name)
                if spec is None or not spec.takes_argument:
                    rewritten.append(token)
                elif sep:
                    rewritten.append(self._attach(spec, attached))
                elif following is not None:
                    rewritten.append(self._attach(spec, following))
                    index += 1
                else:
                    rewritten.append(token)
                continue

            if not token.startswith("-") or token == "-":
                rewritten.append(token)
                continue

            # A cluster of one-letter flags, e.g. "-qv" or "-qm" or "-mfix".
            cluster = token[1:]
            for position, letter in enumerate(cluster):
                spec = self._by_short.get(letter)
                if spec is None:
                    rewritten.append(token)
                    break
                if not spec.takes_argument:
                    continue
                attached = cluster[position + 1:]
                if not attached and following is None:
                    rewritten.append(token)
                    break
                if position:
                    rewritten.append(f"-{cluster[:position]}")
                if attached:
                    rewritten.append(self._attach(spec, attached))
                else:
                    rewritten.append(self._attach(spec, following))
                    index += 1
                break
            else:
                rewritten.append(token)

        return rewritten, []
