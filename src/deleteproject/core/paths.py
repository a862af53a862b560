"""Central paths and directory resolution for deleteproject."""

from __future__ import annotations

import os
from pathlib import Path

_SEPARATORS = "\\/"


def get_home() -> Path:
    """Return the directory holding the global config.

    ``DELETEPROJECT_HOME`` overrides the default ``~/.deleteproject``.
    """
    override = os.environ.get("DELETEPROJECT_HOME")
    if override:
        return Path(override)
    return Path.home() / ".deleteproject"


def directory_of(file_name: str | os.PathLike[str] | None) -> str:
    """Return the parent directory of *file_name* without trailing separators.

    Both ``/`` and ``\\`` count as separators so Windows-style paths read from
    a solution file resolve the same way on every platform.
    """
    if not file_name:
        return ""
    path = os.fspath(file_name)
    normalized = path.replace("\\", os.sep) if os.sep != "\\" else path
    return os.path.dirname(normalized).rstrip(_SEPARATORS)


def same_directory(left: str, right: str) -> bool:
    """Case-insensitive comparison of two resolved directories."""
    return left.rstrip(_SEPARATORS).casefold() == right.rstrip(_SEPARATORS).casefold()
