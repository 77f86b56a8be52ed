"""The IRC server loop: accepts clients and dispatches their request lines."""

from __future__ import annotations

import re
import selectors
import socket
from typing import Mapping, Optional

from .client_manager import ClientManager
from .logger import Logger, LogType
from .sockets import BUFFER_SIZE, SocketListener

LISTEN_HOST = "0.0.0.0"
RUN_POLL_INTERVAL = 0.2

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LINE_BREAKS = re.compile(r"[\r\n]+")


def _parse_port(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Server:
    """Listens for clients and answers their requests line by line."""

    def __init__(self) -> None:
        self.running = True
        self.config: dict[str, str] = {}
        self.listener: Optional[SocketListener] = None
        self.logger: Optional[Logger] = None
        self.manager = ClientManager(send=self._send_to)
        self._selector: Optional[selectors.BaseSelector] = None
        self._clients: dict[int, socket.socket] = {}
        self._in_run = False

    @property
    def address(self) -> tuple[str, int]:
        """The address the listening socket is bound to."""
        if self.listener is None:
            raise RuntimeError("Server is not started")
        return self.listener.address

    @property
    def client_count(self) -> int:
        """Number of connected clients."""
        return len(self._clients)

    def validate_config(self, config: Mapping[str, str]) -> bool:
        """Check the configuration; every configuration is accepted."""
        return True

    def set_logger(self, logger: Optional[Logger]) -> None:
        """Attach a logger unless one is already attached."""
        if self.logger is None:
            self.logger = logger

    def _log(self, log_type: LogType, message: str) -> None:
        if self.logger is not None:
            self.logger.log(log_type, message)

    def start(self, config: Mapping[str, str], logger: Optional[Logger] = None) -> None:
        """Bind the listening socket on the configured port."""
        self.config = dict(config)
        self.set_logger(logger)
        port = _parse_port(self.config.get("port", ""))
        listener = SocketListener(LISTEN_HOST, port)
        listener.set_logger(self.logger)
        listener.start()
        self.listener = listener
        self._selector = selectors.DefaultSelector()
        self._selector.register(listener.sock, selectors.EVENT_READ, None)
        self.running = True
        self._log(LogType.INFO, f"Server started on port {port}")

    def handle_new_connections(self) -> Optional[int]:
        """Accept one waiting client; return its descriptor, or None."""
        if self.listener is None or self._selector is None:
            raise RuntimeError("Server is not started")
        client = self.listener.accept_new_connection()
        if client is None:
            return None
        fd = client.fileno()
        self._clients[fd] = client
        self._selector.register(client, selectors.EVENT_READ, fd)
        return fd

    def _send_to(self, fd: int, data: bytes) -> None:
        sock = self._clients.get(fd)
        if sock is None:
            return
        try:
            sock.sendall(data)
        except OSError:
            self._log(LogType.WARNING, f"Could not send to client {fd}")

    def _read_client(self, fd: int) -> bool:
        """Handle data from ``fd``; False when the client has gone."""
        sock = self._clients[fd]
        try:
            data = sock.recv(BUFFER_SIZE)
        except OSError:
            data = b""
        if not data:
            return False
        text = data.decode("utf-8", errors="replace")
        for line in filter(None, _LINE_BREAKS.split(text)):
            self._log(LogType.INFO, f"Received from {fd}: {line}")
            reply = self.manager.handle_request(fd, line)
            if reply:
                self._send_to(fd, reply.encode("utf-8"))
                self._log(LogType.INFO, f"Sent to {fd}: {reply.rstrip()}")
        return True

    def _drop(self, fd: int) -> None:
        sock = self._clients.pop(fd, None)
        if sock is None:
            return
        if self._selector is not None:
            self._selector.unregister(sock)
        sock.close()
        self.manager.users.pop(fd, None)
        self._log(LogType.INFO, f"Client {fd} disconnected")

    def serve_once(self, timeout: Optional[float] = None) -> int:
        """Wait up to ``timeout`` seconds and handle what is ready.

        Returns the number of ready sockets.
        """
        if self._selector is None:
            raise RuntimeError("Server is not started")
        events = self._selector.select(timeout)
        disconnected = []
        for key, _ in events:
            if key.data is None:
                self.handle_new_connections()
            elif not self._read_client(key.data):
                disconnected.append(key.data)
        for fd in disconnected:
            self._drop(fd)
        return len(events)

    def run(self) -> None:
        """Serve until ``stop`` is called, then release every socket."""
        self._in_run = True
        try:
            while self.running:
                self.serve_once(RUN_POLL_INTERVAL)
        finally:
            self._in_run = False
            self._shutdown()

    def stop(self) -> None:
        """Stop serving and close all sockets."""
        self.running = False
        if not self._in_run:
            self._shutdown()

    def _shutdown(self) -> None:
        for fd in list(self._clients):
            self._drop(fd)
        if self._selector is not None:
            self._selector.close()
            self._selector = None
        if self.listener is not None:
            self.listener.stop()