"""Querying and changing files and directories by name."""

from __future__ import annotations

import os
import stat
from typing import Union

PathName = Union[str, "os.PathLike[str]"]

FILE_SEPARATOR = "\\" if os.name == "nt" else "/"
LINE_END = "\r\n" if os.name == "nt" else "\n"

_SPECIAL_ENTRIES = frozenset({".", ".."})


def delete_file(filename: PathName) -> None:
    """Remove the file ``filename``; raises OSError if that fails."""
    os.unlink(filename)


def delete_directory(filename: PathName) -> None:
    """Remove the empty directory ``filename``; raises OSError if that fails."""
    os.rmdir(filename)


def is_file(filename: PathName) -> bool:
    """Whether ``filename`` exists and is a regular file."""
    try:
        return stat.S_ISREG(os.stat(filename).st_mode)
    except (OSError, ValueError):
        return False


def is_dir(filename: PathName) -> bool:
    """Whether ``filename`` exists and is a directory."""
    try:
        return stat.S_ISDIR(os.stat(filename).st_mode)
    except (OSError, ValueError):
        return False


def get_file_size(filename: PathName) -> int:
    """The size of ``filename`` in bytes; raises OSError if it cannot be read."""
    return os.stat(filename).st_size


def create_directory(filename: PathName) -> None:
    """Create the directory ``filename``, readable and writable by its owner only.

    Raises OSError if it already exists or cannot be created.
    """
    os.mkdir(filename, 0o700)


def get_cwd() -> str:
    """The current working directory."""
    return os.getcwd()


def list_files_in_directory(folder: PathName) -> list[str]:
    """Sorted names of the direct children of ``folder``.

    Names are relative to ``folder``; directories end with ``FILE_SEPARATOR``.
    Raises OSError if ``folder`` cannot be read.
    """
    folder = os.fspath(folder)
    if not folder.endswith(FILE_SEPARATOR):
        folder += FILE_SEPARATOR

    names = []
    with os.scandir(folder) as entries:
        for entry in entries:
            if entry.name in _SPECIAL_ENTRIES:
                continue
            if entry.is_dir(follow_symlinks=False):
                names.append(entry.name + FILE_SEPARATOR)
            else:
                names.append(entry.name)
    return sorted(names)