"""Building commands from parsed requests and running them."""

from __future__ import annotations

from typing import Mapping, Optional

from .channel import Channel, ChannelObserver
from .commands import (
    Command,
    JoinCommand,
    NickCommand,
    PrivMsgCommand,
    SendFunc,
    UnknownCommand,
    UserCommand,
)
from .parser import IRCCommand, ParsedCommand
from .user import User


def find_user(name: str, users: Mapping[int, User]) -> Optional[User]:
    """Return the user with nickname ``name``, lowest descriptor first."""
    return next(
        (users[fd] for fd in sorted(users) if users[fd].nickname == name), None
    )


def find_channel(name: str, channels: Mapping[str, Channel]) -> Optional[Channel]:
    """Return the channel called ``name``, if any."""
    return channels.get(name)


def build_command(
    observer: ChannelObserver,
    fd: int,
    parsed: ParsedCommand,
    users: Mapping[int, User],
    channels: Mapping[str, Channel],
    send: Optional[SendFunc] = None,
) -> Command:
    """Create the command for ``parsed`` issued by the user on ``fd``."""
    user = users[fd]
    parameters = parsed.parameters
    message = parsed.message
    first = parameters[0] if parameters else None

    if parsed.command is IRCCommand.USER:
        return UserCommand(user, parameters, message)
    if parsed.command is IRCCommand.NICK:
        return NickCommand(user, parameters, message)
    if parsed.command is IRCCommand.PRIVMSG:
        target = find_user(first, users) if first is not None else None
        return PrivMsgCommand(user, parameters, message, target, send)
    if parsed.command is IRCCommand.JOIN:
        target_channel = find_channel(first, channels) if first is not None else None
        return JoinCommand(user, parameters, message, target_channel, observer)
    return UnknownCommand(user, parameters, message)


def execute_command(command: Command) -> int:
    """Validate ``command`` and run it if valid; return the reply numeric."""
    numeric = command.validate()
    if numeric == 0:
        numeric = command.execute()
    return numeric