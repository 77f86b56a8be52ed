"""Numeric replies and their message templates."""

from __future__ import annotations

from enum import IntEnum


class Numeric(IntEnum):
    """Reply numerics returned by commands."""

    RPL_EMPTY = 0
    RPL_WELCOME = 1
    ERR_NEEDMOREPARAMS = 461
    ERR_ALREADYREGISTRED = 462


RPL_EMPTY = ""
RPL_PONG = "PONG\r\n"
RPL_WELCOME = (
    "001 <nick> :Welcome to the <network> Network, <nick>[!<user>@<host>]\r\n"
)
ERR_NEEDMOREPARAMS = "461 <client> <command> : Wrong number of parameters\r\n"
ERR_ALREADYREGISTRED = "462 <client> <command> : User already registred\r\n"

_TEMPLATES = {
    Numeric.RPL_WELCOME: RPL_WELCOME,
    Numeric.ERR_NEEDMOREPARAMS: ERR_NEEDMOREPARAMS,
    Numeric.ERR_ALREADYREGISTRED: ERR_ALREADYREGISTRED,
}


def reply_for(numeric: int) -> str:
    """Return the reply template for ``numeric``, or an empty reply."""
    return _TEMPLATES.get(numeric, RPL_EMPTY)