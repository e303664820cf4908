"""Parsers for ``--revision`` and ``--date`` range tokens.

Both grammars allow at most one ``:`` separator.

Revision tokens
    ``N``, ``N:M``, ``head``, ``N:head``, ``head:N``, ``N:``, ``:N``.
    ``head`` is case-insensitive and may be shortened to ``h``; an
    empty side means head too.  Head is represented as ``None``.

Date tokens
    ``X``, ``X:``, ``:Y``, ``X:Y``.  An empty side leaves the matching
    bound of the current range untouched.
"""

from __future__ import annotations

from dataclasses import replace

from rvc.core.models import DateRange, RevisionRange
from rvc.core.protocols import DateParser
from rvc.exceptions import MalformedRangeSyntaxError

_SEPARATOR = ":"
_HEAD = "head"


def _split_once(token: str) -> tuple[str, str] | None:
    """Split *token* on its only separator.

    Returns ``None`` when there is no separator and raises when there is
    more than one.  The caller attaches its own error message.
    """
    left, sep, right = token.partition(_SEPARATOR)
    if not sep:
        return None
    if _SEPARATOR in right:
        raise ValueError(token)
    return left, right


# ---------------------------------------------------------------------------
# Revisions
# ---------------------------------------------------------------------------

def is_valid_revision(side: str) -> bool:
    """Return ``True`` for digits, ``h``/``H``, any-case ``head``, or ``""``."""
    if side == "" or (side.isascii() and side.isdigit()):
        return True
    if len(side) == 1:
        return side in ("h", "H")
    return len(side) == 4 and side.lower() == _HEAD


def _resolve_revision(side: str) -> int | None:
    if side == "" or side[0] in ("h", "H"):
        return None
    return int(side)


def parse_revision_range(token: str) -> RevisionRange:
    """Parse a ``--revision`` token into a :class:`RevisionRange`.

    A bare ``N`` yields ``start == end == N``.

    Raises
    ------
    MalformedRangeSyntaxError
        On a second separator or a side that is neither digits nor head.
    """
    error = MalformedRangeSyntaxError(
        f'Syntax error in revision argument "{token}"',
        token=token,
        hint="Use N, N:M, head or N:head.",
    )
    try:
        sides = _split_once(token)
    except ValueError:
        raise error from None
    left, right = sides if sides is not None else (token, token)

    if not (is_valid_revision(left) and is_valid_revision(right)):
        raise error

    return RevisionRange(start=_resolve_revision(left), end=_resolve_revision(right))


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def parse_date_range(
    token: str,
    current: DateRange,
    parse_date: DateParser,
) -> DateRange:
    """Apply a ``--date`` token to *current* and return the updated range.

    Raises
    ------
    MalformedRangeSyntaxError
        On a second separator.
    UnparseableDateError
        Propagated from *parse_date*.
    """
    try:
        sides = _split_once(token)
    except ValueError:
        raise MalformedRangeSyntaxError(
            f'Unable to parse "{token}"',
            token=token,
            hint="Date ranges take the form X, X:, :Y or X:Y.",
        ) from None

    if sides is None:
        moment = parse_date(token)
        return DateRange(start=moment, end=moment)

    left, right = sides
    updated = current
    if left:
        updated = replace(updated, start=parse_date(left))
    if right:
        updated = replace(updated, end=parse_date(right))
    return updated
