"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the scanner and dispatcher can run in tests
without touching the filesystem or the process locale.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class DateParser(Protocol):
    """Contract for free-form date parsing backends."""

    def __call__(self, text: str) -> datetime:
        """Return the moment described by *text*.

        Raises
        ------
        UnparseableDateError
            When *text* is not a date the backend understands.
        """
        ...  # pragma: no cover


class MessageFileSource(Protocol):
    """Contract for loading ``--filedata`` files and probing their status.

    Implementations must map OS errors to
    :class:`~rvc.exceptions.MessageFileError`.
    """

    def read(self, path: str) -> str:
        """Return the full text of *path*."""
        ...  # pragma: no cover

    def is_versioned(self, path: str) -> bool:
        """Return ``True`` when *path* is tracked by a working copy."""
        ...  # pragma: no cover


class LocaleSetter(Protocol):
    """Contract for the process-wide locale switch."""

    def apply(self, name: str) -> bool:
        """Switch every locale category to *name*; ``False`` on rejection."""
        ...  # pragma: no cover
