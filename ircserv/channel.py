"""Channels and the observer that creates them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .user import User


class ChannelObserver(ABC):
    """Receives requests to create channels."""

    @abstractmethod
    def on_channel_creation_request(self, channel_name: str, user: User) -> None:
        """Create ``channel_name`` with ``user`` as its first member."""


@dataclass
class Channel:
    """A named channel and its members."""

    name: str = ""
    key: str = ""
    topic: str = ""
    mode: int = 0
    full: bool = False
    invite_only: bool = False
    protected: bool = False
    users: list[User] = field(default_factory=list)

    def add_user(self, user: User) -> None:
        """Add ``user`` to the member list."""
        self.users.append(user)