"""Infrastructure: ``--filedata`` loading and working-copy probing.

A file counts as versioned when the administrative area of its parent
directory holds a pristine copy of it::

    <dir>/.svn/text-base/<name>.svn-base

Rules
-----
* Read-only filesystem access — nothing is created or modified.
* OS errors are mapped to :class:`~rvc.exceptions.MessageFileError`.
"""

from __future__ import annotations

from pathlib import Path

from rvc.exceptions import MessageFileError

ADMIN_DIR_NAME = ".svn"
_TEXT_BASE = "text-base"
_PRISTINE_SUFFIX = ".svn-base"


class WorkingCopyFiles:
    """Concrete :class:`~rvc.core.protocols.MessageFileSource`.

    Parameters
    ----------
    admin_dir_name:
        Name of the per-directory administrative area.
    """

    def __init__(self, admin_dir_name: str = ADMIN_DIR_NAME) -> None:
        self._admin_dir_name = admin_dir_name

    def read(self, path: str) -> str:
        """Return the text of *path*, decoded as UTF-8."""
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise MessageFileError(
                f"Can't open file '{path}': no such file",
                path=path,
            ) from exc
        except UnicodeDecodeError as exc:
            raise MessageFileError(
                f"File '{path}' is not valid UTF-8 text",
                path=path,
            ) from exc
        except OSError as exc:
            raise MessageFileError(
                f"Can't read file '{path}': {exc.strerror or exc}",
                path=path,
            ) from exc

    def is_versioned(self, path: str) -> bool:
        """Return ``True`` when the working copy keeps a pristine copy of *path*."""
        target = Path(path)
        pristine = (
            target.parent
            / self._admin_dir_name
            / _TEXT_BASE
            / f"{target.name}{_PRISTINE_SUFFIX}"
        )
        try:
            return pristine.is_file()
        except OSError:
            return False
