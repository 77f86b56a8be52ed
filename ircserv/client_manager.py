"""Per-connection request handling and reply formatting."""

from __future__ import annotations

from typing import Optional

from .channel import Channel, ChannelObserver
from .commands import SendFunc
from .invoker import build_command, execute_command
from .parser import parse
from .replies import reply_for
from .user import User

NETWORK_NAME = "ft_irc_network"


class ClientManager(ChannelObserver):
    """Keeps users and channels, and turns request lines into replies."""

    def __init__(self, send: Optional[SendFunc] = None) -> None:
        self.send = send
        self.users: dict[int, User] = {}
        self.channels: dict[str, Channel] = {}
        self.reply = ""

    def handle_request(self, fd: int, message: str) -> str:
        """Run one request line from the client on ``fd``; return the reply."""
        self.users.setdefault(fd, User(id=fd))
        command = build_command(
            self, fd, parse(message), self.users, self.channels, self.send
        )
        numeric = execute_command(command)
        self.reply = self.format_reply(reply_for(numeric), fd)
        return self.reply

    def on_channel_creation_request(self, channel_name: str, user: User) -> None:
        channel = Channel(channel_name)
        channel.add_user(user)
        self.channels[channel_name] = channel

    def format_reply(self, reply: str, fd: int) -> str:
        """Fill the first ``<nick>``, ``<user>`` and ``<network>`` placeholders."""
        if "<nick>" in reply:
            reply = reply.replace("<nick>", self.users[fd].nickname, 1)
        if "<user>" in reply:
            reply = reply.replace("<user>", self.users[fd].username, 1)
        return reply.replace("<network>", NETWORK_NAME, 1)