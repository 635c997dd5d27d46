"""Well-known directories where open connections announce themselves.

A listening TCP endpoint is advertised by an empty file, named after its
port, in the TCP directory. Unix domain sockets live in their own directory.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from connectorcore.fileutils import is_directory, is_file, make_directory, remove_file
from connectorcore.pathutils import path_join

PathArg = Union[str, "os.PathLike[str]"]

DEFAULT_POSIX_BASE = "/tmp"
DEFAULT_UNIX_SUBDIRECTORY = "substanceconnectoropenunix"
DEFAULT_TCP_SUBDIRECTORY = "substanceconnectoropentcp"

_MAX_PORT = 65535


def _default_tcp_base() -> str:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise OSError("the roaming application data folder is unknown")
        return appdata
    return DEFAULT_POSIX_BASE


def default_unix_directory(base: Optional[PathArg] = None) -> Optional[str]:
    """Return the directory holding Unix sockets.

    Without ``base`` this is only defined on POSIX systems; elsewhere None
    is returned.
    """
    if base is None:
        if os.name == "nt":
            return None
        base = DEFAULT_POSIX_BASE
    return path_join([base, DEFAULT_UNIX_SUBDIRECTORY])


def default_tcp_directory(base: Optional[PathArg] = None) -> str:
    """Return the directory where open TCP ports are recorded."""
    if base is None:
        base = _default_tcp_base()
    return path_join([base, DEFAULT_TCP_SUBDIRECTORY])


def tcp_port_path(port: int, base: Optional[PathArg] = None) -> str:
    """Return the path of the file that advertises ``port``."""
    if not isinstance(port, int) or not 0 <= port <= _MAX_PORT:
        raise ValueError(f"not a valid TCP port: {port!r}")
    return path_join([default_tcp_directory(base), str(port)])


def _ensure(path: Optional[str]) -> bool:
    if path is None:
        return False
    try:
        make_directory(path)
    except OSError:
        pass
    return is_directory(path)


def ensure_default_unix_directory(base: Optional[PathArg] = None) -> bool:
    """Create the Unix socket directory if needed; True when it exists."""
    return _ensure(default_unix_directory(base))


def ensure_default_tcp_directory(base: Optional[PathArg] = None) -> bool:
    """Create the TCP port directory if needed; True when it exists."""
    return _ensure(default_tcp_directory(base))


def commit_open_tcp_port(port: int, base: Optional[PathArg] = None) -> str:
    """Record ``port`` as open by creating its file; return the file's path.

    Raises OSError when the file cannot be created.
    """
    location = tcp_port_path(port, base)
    with open(location, "w", encoding="utf-8"):
        pass
    return location


def remove_open_tcp_port(port: int, base: Optional[PathArg] = None) -> None:
    """Delete the file recording ``port``.

    Raises FileNotFoundError when no such file exists.
    """
    location = tcp_port_path(port, base)
    if not is_file(location):
        raise FileNotFoundError(location)
    remove_file(location)