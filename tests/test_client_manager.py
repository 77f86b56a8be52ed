import pytest

from ircserv.client_manager import ClientManager
from ircserv.replies import ERR_ALREADYREGISTRED, ERR_NEEDMOREPARAMS


def test_new_descriptor_creates_user():
    manager = ClientManager()
    assert manager.handle_request(3, "NICK alice") == ""
    assert manager.users[3].id == 3
    assert manager.users[3].nickname == "alice"


def test_welcome_reply_is_formatted():
    manager = ClientManager()
    manager.handle_request(3, "NICK alice")
    reply = manager.handle_request(3, "USER guest 0 * :Real Name")
    assert reply == (
        "001 alice :Welcome to the ft_irc_network Network, <nick>[!guest@<host>]\r\n"
    )
    assert manager.reply == reply
    assert manager.users[3].realname == "Real Name"


def test_error_replies():
    manager = ClientManager()
    assert manager.handle_request(3, "USER guest") == ERR_NEEDMOREPARAMS
    manager.handle_request(3, "USER guest 0 * :x")
    assert manager.handle_request(3, "USER guest 0 * :x") == ERR_ALREADYREGISTRED


def test_join_creates_channel_once():
    manager = ClientManager()
    manager.handle_request(3, "JOIN #room")
    manager.handle_request(4, "JOIN #room")
    assert list(manager.channels) == ["#room"]
    assert manager.channels["#room"].users == [manager.users[3]]


def test_privmsg_uses_send_callback():
    sent = []
    manager = ClientManager(send=lambda fd, data: sent.append((fd, data)))
    manager.handle_request(7, "NICK bob")
    manager.handle_request(3, "PRIVMSG bob :hello there")
    assert sent == [(7, "hello there".encode())]


def test_format_reply_without_placeholders_needs_no_user():
    manager = ClientManager()
    assert manager.format_reply("PONG\r\n", 99) == "PONG\r\n"


def test_format_reply_unknown_user_raises():
    manager = ClientManager()
    with pytest.raises(KeyError):
        manager.format_reply("<nick>", 99)