from ircserv.channel import Channel, ChannelObserver
from ircserv.commands import (
    JoinCommand,
    NickCommand,
    PrivMsgCommand,
    UnknownCommand,
    UserCommand,
)
from ircserv.invoker import build_command, execute_command, find_channel, find_user
from ircserv.parser import parse
from ircserv.replies import Numeric
from ircserv.user import User


class RecordingObserver(ChannelObserver):
    def __init__(self):
        self.calls = []

    def on_channel_creation_request(self, channel_name, user):
        self.calls.append(channel_name)


def test_find_user_prefers_lowest_descriptor():
    users = {5: User(id=5, nickname="alice"), 3: User(id=3, nickname="alice")}
    assert find_user("alice", users) is users[3]


def test_find_user_missing_and_empty():
    assert find_user("bob", {1: User(id=1, nickname="alice")}) is None
    assert find_user("bob", {}) is None


def test_find_channel():
    room = Channel("#room")
    assert find_channel("#room", {"#room": room}) is room
    assert find_channel("#other", {"#room": room}) is None


def test_build_command_types():
    users = {1: User(id=1)}
    observer = RecordingObserver()

    user_cmd = build_command(observer, 1, parse("USER a 0 * :b"), users, {})
    assert type(user_cmd) is UserCommand
    assert user_cmd.message == "b"

    nick_cmd = build_command(observer, 1, parse("NICK a"), users, {})
    assert type(nick_cmd) is NickCommand
    assert execute_command(nick_cmd) == 0
    assert users[1].nickname == "a"

    unknown_cmd = build_command(observer, 1, parse("PING x"), users, {})
    assert type(unknown_cmd) is UnknownCommand
    assert execute_command(unknown_cmd) == 0


def test_build_privmsg_resolves_target():
    users = {1: User(id=1, nickname="alice"), 2: User(id=2, nickname="bob")}
    cmd = build_command(RecordingObserver(), 1, parse("PRIVMSG bob :hi"), users, {})
    assert isinstance(cmd, PrivMsgCommand)
    assert cmd.target is users[2]
    assert cmd.message == "hi"


def test_build_join_resolves_channel_and_observer():
    users = {1: User(id=1)}
    room = Channel("#room")
    observer = RecordingObserver()
    cmd = build_command(observer, 1, parse("JOIN #room"), users, {"#room": room})
    assert isinstance(cmd, JoinCommand)
    assert cmd.target is room
    assert cmd.observer is observer


def test_execute_command_runs_when_valid():
    user = User(id=1)
    users = {1: user}
    cmd = build_command(RecordingObserver(), 1, parse("NICK alice"), users, {})
    assert execute_command(cmd) == 0
    assert user.nickname == "alice"


def test_execute_command_stops_on_validation_error():
    user = User(id=1)
    cmd = build_command(RecordingObserver(), 1, parse("USER guest"), {1: user}, {})
    assert execute_command(cmd) == Numeric.ERR_NEEDMOREPARAMS
    assert user.registered is False


def test_execute_join_creates_channel_through_observer():
    observer = RecordingObserver()
    cmd = build_command(observer, 1, parse("JOIN #new"), {1: User(id=1)}, {})
    assert execute_command(cmd) == 0
    assert observer.calls == ["#new"]