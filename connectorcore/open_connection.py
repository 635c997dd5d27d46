"""Opening listening and client TCP sockets on the loopback interface."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass
from typing import Optional, Union

from connectorcore.connection_directory import (
    commit_open_tcp_port,
    ensure_default_tcp_directory,
)

PathArg = Union[str, "os.PathLike[str]"]

LOOPBACK_ADDRESS = "127.0.0.1"
SOCKET_BACKLOG = 10


class OpenFailError(OSError):
    """Raised when a socket cannot be opened, bound, listened on or connected."""


@dataclass
class TcpContext:
    """A TCP endpoint: the port it uses and, once opened, its socket."""

    port: int = 0
    sock: Optional[socket.socket] = None

    @property
    def fd(self) -> int:
        """File descriptor of the socket, or -1 when none is open."""
        return self.sock.fileno() if self.sock is not None else -1

    def close(self) -> None:
        """Close the socket if one is open."""
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def __enter__(self) -> "TcpContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_tcp(context: TcpContext, base: Optional[PathArg] = None) -> TcpContext:
    """Bind and listen on ``context.port`` on the loopback address.

    Given zero, the system chooses a free number and the context is updated.
    The bound number is recorded in the TCP connection directory under ``base``.
    """
    if not ensure_default_tcp_directory(base):
        raise OpenFailError("the TCP connection directory is unavailable")
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise OpenFailError(f"could not create socket: {exc}") from exc
    try:
        sock.bind((LOOPBACK_ADDRESS, context.port))
        context.port = sock.getsockname()[1]
        if hasattr(socket, "SO_NOSIGPIPE"):
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_NOSIGPIPE, 1)
        sock.listen(SOCKET_BACKLOG)
    except OSError as exc:
        sock.close()
        raise OpenFailError(f"could not listen on port {context.port}: {exc}") from exc
    commit_open_tcp_port(context.port, base)
    context.sock = sock
    return context


def connect_tcp(context: TcpContext) -> TcpContext:
    """Connect to ``context.port`` on the loopback address."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise OpenFailError(f"could not create socket: {exc}") from exc
    try:
        sock.connect((LOOPBACK_ADDRESS, context.port))
    except OSError as exc:
        sock.close()
        raise OpenFailError(f"could not connect to port {context.port}: {exc}") from exc
    context.sock = sock
    return context