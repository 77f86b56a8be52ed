"""Splitting of a raw IRC line into command, parameters and trailing text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IRCCommand(Enum):
    """Commands the server recognises."""

    USER = "USER"
    NICK = "NICK"
    PRIVMSG = "PRIVMSG"
    JOIN = "JOIN"
    UNKNOWN = "UNKNOWN"


_KNOWN = {
    command.value: command for command in IRCCommand if command is not IRCCommand.UNKNOWN
}


@dataclass(frozen=True)
class ParsedCommand:
    """A parsed request line."""

    command: IRCCommand
    parameters: list[str]
    message: str


def command_from_name(name: str) -> IRCCommand:
    """Map an exact, case-sensitive command name to its command."""
    return _KNOWN.get(name, IRCCommand.UNKNOWN)


def split_parameters(text: str) -> list[str]:
    """Split parameter text on whitespace."""
    return text.split()


def parse(message: str) -> ParsedCommand:
    """Parse ``COMMAND params... :trailing`` into its parts.

    The trailing text runs from the first ``:`` after the command to the end
    of the line.
    """
    stripped = message.lstrip()
    name, _, rest = stripped.partition(" ")
    if any(ch.isspace() for ch in name):
        head = name.split(None, 1)
        name = head[0]
        rest = stripped[len(name):]
    params_text, _, trailing = rest.partition(":")
    trailing = trailing.split("\n", 1)[0]
    return ParsedCommand(
        command=command_from_name(name),
        parameters=split_parameters(params_text),
        message=trailing,
    )