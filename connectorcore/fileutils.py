"""File and directory operations used to find and manage connection files."""

from __future__ import annotations

import os
import stat
from typing import Any, Callable, Optional, Union

PathArg = Union[str, "os.PathLike[str]"]
Filter = Callable[[str, Any], bool]


def default_filter(name: Optional[str], data: Any = None) -> bool:
    """Accept every name that is not hidden (does not start with a dot)."""
    return name is not None and not name.startswith(".")


def list_directory(
    path: PathArg, filter_op: Optional[Filter] = None, data: Any = None
) -> list[str]:
    """Return the names in ``path`` that ``filter_op(name, data)`` accepts.

    Hidden names are dropped when no filter is given. Raises OSError when
    the directory cannot be read.
    """
    accept = filter_op if filter_op is not None else default_filter
    return [name for name in os.listdir(path) if accept(name, data)]


def _mode_of(path: Optional[PathArg]) -> Optional[int]:
    if path is None:
        return None
    try:
        return os.stat(path).st_mode
    except (OSError, ValueError):
        return None


def is_directory(path: Optional[PathArg]) -> bool:
    """True when ``path`` exists and is a directory."""
    mode = _mode_of(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_unix_socket(path: Optional[PathArg]) -> bool:
    """True when ``path`` exists and is a Unix domain socket."""
    if os.name == "nt":
        return False
    mode = _mode_of(path)
    return mode is not None and stat.S_ISSOCK(mode)


def is_file(path: Optional[PathArg]) -> bool:
    """True when ``path`` exists and is a regular file."""
    mode = _mode_of(path)
    return mode is not None and stat.S_ISREG(mode)


def make_directory(path: PathArg) -> None:
    """Create ``path`` and open its permissions to everyone.

    Raises OSError if the directory cannot be created, including when it
    already exists.
    """
    os.mkdir(path, stat.S_IRWXO)
    os.chmod(path, 0o777)


def remove_directory(path: PathArg) -> None:
    """Remove the empty directory ``path``; raises OSError on failure."""
    os.rmdir(path)


def remove_file(path: PathArg) -> None:
    """Remove the file ``path``; raises OSError on failure."""
    os.unlink(path)