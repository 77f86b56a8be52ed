"""TCP listening socket and per-client socket wrapper."""

from __future__ import annotations

import socket
import sys
from typing import Optional

from .logger import Logger, LogType

BUFFER_SIZE = 1024
BACKLOG = 5


class SocketCreationError(Exception):
    """Raised when the listening socket cannot be set up."""


class SocketHandler:
    """Sends and receives text on one connected socket."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    def send(self, message: str) -> int:
        """Send ``message``; return the number of bytes sent."""
        return self.sock.send(message.encode("utf-8"))

    def receive(self) -> str:
        """Read up to one buffer; an empty string on close or error."""
        try:
            data = self.sock.recv(BUFFER_SIZE)
        except OSError:
            return ""
        return data.decode("utf-8", errors="replace")

    def close(self) -> None:
        self.sock.close()

    def fileno(self) -> int:
        return self.sock.fileno()


class SocketListener:
    """A non-blocking IPv4 TCP server socket."""

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.sock: Optional[socket.socket] = None
        self.logger: Optional[Logger] = None

    def set_logger(self, logger: Optional[Logger]) -> None:
        self.logger = logger

    def _log(self, log_type: LogType, message: str) -> None:
        if self.logger is not None:
            self.logger.log(log_type, message)

    @property
    def address(self) -> tuple[str, int]:
        """The address the socket is bound to."""
        if self.sock is None:
            raise SocketCreationError("Socket is not started")
        return self.sock.getsockname()

    def start(self) -> None:
        """Create, bind and listen; raise SocketCreationError on failure."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise SocketCreationError("Impossible to create the socket") from exc
        steps = (
            (lambda: sock.setblocking(False), "Failed to set socket to non-blocking"),
            (lambda: sock.bind((self.host, self.port)), "Failed to bind socket to the address"),
            (lambda: sock.listen(BACKLOG), "Failed to listen on the server socket"),
        )
        for step, error in steps:
            try:
                step()
            except OSError as exc:
                sock.close()
                self._log(LogType.ERROR, error)
                raise SocketCreationError(error) from exc
        self.sock = sock
        self._log(LogType.INFO, f"Listening on {self.host}:{self.port}")

    def stop(self) -> None:
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def accept_new_connection(self) -> Optional[socket.socket]:
        """Accept one pending client; None if none could be accepted."""
        if self.sock is None:
            return None
        try:
            client, peer = self.sock.accept()
        except OSError:
            print("Impossible to accept", file=sys.stderr)
            self._log(LogType.ERROR, "Impossible to accept")
            return None
        self._log(LogType.INFO, f"Connection accepted from {peer[0]}:{peer[1]}")
        return client

    def fileno(self) -> int:
        return self.sock.fileno() if self.sock is not None else -1