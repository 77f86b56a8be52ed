"""Client commands: validation of their parameters and their effect."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from .channel import Channel, ChannelObserver
from .replies import Numeric
from .user import User

SendFunc = Callable[[int, bytes], object]

# Returned by NICK when no nickname is given at all.
NICK_MISSING = 7


class Command(ABC):
    """A request from ``user`` with its parameters and trailing message.

    ``validate`` returns 0 when the command may run, otherwise the numeric
    to reply with; ``execute`` returns the numeric of the reply to send.
    """

    def __init__(self, user: User, parameters: Sequence[str], message: str) -> None:
        self.user = user
        self.parameters = list(parameters)
        self.message = message

    @abstractmethod
    def execute(self) -> int:
        """Carry out the command."""

    @abstractmethod
    def validate(self) -> int:
        """Check the command before it runs."""


class UserCommand(Command):
    """USER <username> <mode> <unused> :<realname>."""

    def validate(self) -> int:
        if len(self.parameters) != 3:
            return Numeric.ERR_NEEDMOREPARAMS
        if self.user.registered:
            return Numeric.ERR_ALREADYREGISTRED
        return 0

    def execute(self) -> int:
        self.user.username = self.parameters[0]
        self.user.set_usermode(self.parameters[1])
        self.user.realname = self.message
        self.user.registered = True
        if not self.user.welcomed:
            self.user.welcomed = True
            return Numeric.RPL_WELCOME
        return 0


class NickCommand(Command):
    """NICK <nickname>."""

    def validate(self) -> int:
        if not self.parameters:
            return NICK_MISSING
        if len(self.parameters) != 1:
            return Numeric.ERR_NEEDMOREPARAMS
        return 0

    def execute(self) -> int:
        self.user.nickname = self.parameters[0]
        return 0


class PrivMsgCommand(Command):
    """PRIVMSG <nickname> :<text>, delivered through ``send``."""

    def __init__(
        self,
        user: User,
        parameters: Sequence[str],
        message: str,
        target: Optional[User] = None,
        send: Optional[SendFunc] = None,
    ) -> None:
        super().__init__(user, parameters, message)
        self.target = target
        self.send = send

    def validate(self) -> int:
        return 0

    def execute(self) -> int:
        if self.target is not None and self.send is not None:
            self.send(self.target.id, self.message.encode("utf-8"))
        return 0


class JoinCommand(Command):
    """JOIN <channel>; asks the observer to create a missing channel."""

    def __init__(
        self,
        user: User,
        parameters: Sequence[str],
        message: str,
        target: Optional[Channel] = None,
        observer: Optional[ChannelObserver] = None,
    ) -> None:
        super().__init__(user, parameters, message)
        self.target = target
        self.observer = observer

    def validate(self) -> int:
        if not self.parameters:
            return Numeric.ERR_NEEDMOREPARAMS
        return 0

    def execute(self) -> int:
        if self.target is None and self.observer is not None:
            self.observer.on_channel_creation_request(self.parameters[0], self.user)
        return 0


class UnknownCommand(Command):
    """Any command the server does not recognise."""

    def validate(self) -> int:
        return 0

    def execute(self) -> int:
        print("UNKNOWN command")
        return 0