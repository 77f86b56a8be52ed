"""Connected user state."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_usermode(text: str) -> int:
    """Read a leading integer from ``text``; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class User:
    """A client identified by its socket descriptor."""

    id: int = 0
    username: str = ""
    nickname: str = ""
    realname: str = ""
    usermode: int = 0
    registered: bool = False
    welcomed: bool = False

    def set_usermode(self, usermode: str) -> None:
        """Set the mode from its textual form."""
        self.usermode = parse_usermode(usermode)