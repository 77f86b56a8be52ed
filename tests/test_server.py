import socket
import threading

import pytest

from ircserv.server import Server
from ircserv.sockets import SocketCreationError


@pytest.fixture
def server():
    srv = Server()
    srv.start({"port": "0", "password": "password"})
    yield srv
    srv.stop()


def _connect(srv):
    client = socket.create_connection(("127.0.0.1", srv.address[1]), timeout=2)
    return client


def _pump(srv, predicate, tries=50):
    for _ in range(tries):
        if predicate():
            return True
        srv.serve_once(0.1)
    return predicate()


def test_validate_config_accepts_anything():
    assert Server().validate_config({}) is True
    assert Server().validate_config({"port": "x"}) is True


def test_set_logger_keeps_first():
    srv = Server()
    first, second = object(), object()
    srv.set_logger(first)
    srv.set_logger(second)
    assert srv.logger is first


def test_start_binds_a_port(server):
    assert server.address[1] > 0
    assert server.client_count == 0


def test_port_in_use_raises(server):
    other = Server()
    with pytest.raises(SocketCreationError):
        other.start({"port": str(server.address[1])})


def test_serve_before_start_raises():
    with pytest.raises(RuntimeError):
        Server().serve_once(0)


def test_accepts_client(server):
    client = _connect(server)
    try:
        _pump(server, lambda: server.client_count == 1)
        assert server.client_count == 1
    finally:
        client.close()


def test_handle_new_connections_without_pending_client(server):
    assert server.handle_new_connections() is None
    assert server.client_count == 0


def test_registration_gets_welcome(server):
    client = _connect(server)
    try:
        assert _pump(server, lambda: server.client_count == 1)
        client.sendall(b"NICK bob\r\nUSER bob 0 * :Bob Smith\r\n")
        assert _pump(
            server,
            lambda: any(u.registered for u in server.manager.users.values()),
        )
        data = client.recv(1024)
        assert data.startswith(b"001 bob")
        user = next(iter(server.manager.users.values()))
        assert user.nickname == "bob"
        assert user.realname == "Bob Smith"
    finally:
        client.close()


def test_privmsg_delivered(server):
    alice = _connect(server)
    bob = _connect(server)
    try:
        _pump(server, lambda: server.client_count == 2)
        assert server.client_count == 2
        alice.sendall(b"NICK alice\r\n")
        _pump(
            server,
            lambda: any(u.nickname == "alice" for u in server.manager.users.values()),
        )
        nicknames = [u.nickname for u in server.manager.users.values()]
        assert nicknames.count("alice") == 1
        bob.sendall(b"PRIVMSG alice :hello\r\n")
        received = []

        def got():
            alice.setblocking(False)
            try:
                received.append(alice.recv(1024))
            except BlockingIOError:
                pass
            return bool(received)

        _pump(server, got)
        assert received[0] == b"hello"
    finally:
        alice.close()
        bob.close()


def test_disconnect_removes_client(server):
    client = _connect(server)
    assert _pump(server, lambda: server.client_count == 1)
    client.sendall(b"NICK carol\r\n")
    assert _pump(server, lambda: len(server.manager.users) == 1)
    client.close()
    assert _pump(server, lambda: server.client_count == 0)
    assert server.manager.users == {}


def test_run_stops_from_other_thread():
    srv = Server()
    srv.start({"port": "0"})
    port = srv.address[1]
    thread = threading.Thread(target=srv.run)
    thread.start()
    client = socket.create_connection(("127.0.0.1", port), timeout=2)
    try:
        client.sendall(b"NICK dave\r\nUSER dave 0 * :Dave\r\n")
        assert client.recv(1024).startswith(b"001 dave")
    finally:
        srv.stop()
        thread.join(timeout=5)
        client.close()
    assert not thread.is_alive()
    assert srv.client_count == 0