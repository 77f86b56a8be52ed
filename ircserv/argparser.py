"""Positional command-line argument parsing for the server."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class InvalidArgument(ValueError):
    """Raised when the command line does not match the declared arguments."""

    def __init__(self, message: str = "Invalid argument") -> None:
        super().__init__(message)


class ArgType(Enum):
    """Kind of a declared argument."""

    ARG = "arg"
    OPT = "opt"
    SPLT = "split"
    HLP = "help"


@dataclass
class Argument:
    """A declared command-line argument."""

    name: str
    define: str
    priority: int
    required: bool
    type: ArgType
    value: str = ""
    split: str = ""


class ArgParser:
    """Maps positional command-line values onto declared argument names."""

    def __init__(self, argv: Sequence[str] | None = None) -> None:
        self._argv = list(sys.argv if argv is None else argv)
        self.added = 0
        self.required = 0
        self.arguments: list[Argument] = []
        self._split_seen = 0

    def _add(self, name: str, define: str, required: bool, arg_type: ArgType) -> None:
        self.added += 1
        self.required += int(bool(required))
        self.arguments.append(
            Argument(
                name=name,
                define=define,
                priority=self.added + 1,
                required=bool(required),
                type=arg_type,
            )
        )

    def add_argument(self, name: str, define: str, required: bool) -> None:
        """Declare a positional argument."""
        self._add(name, define, required, ArgType.ARG)

    def add_option(self, name: str, define: str, required: bool) -> None:
        """Declare an option."""
        self._add(name, define, required, ArgType.OPT)

    def add_split_argument(
        self, name: str, define: str, count: int, split: str, required: bool
    ) -> None:
        """Declare one part of a value made of ``count`` parts.

        The first call of a group counts as one argument; the group closes
        after ``count`` calls.
        """
        if self._split_seen == 0:
            self.added += 1
            self.required += int(bool(required))
        self._split_seen += 1
        if self._split_seen == count:
            self._split_seen = 0

    def parse(self) -> dict[str, str]:
        """Return a mapping of argument names to the given values.

        Raises InvalidArgument unless exactly the required number of values
        follows the program name.
        """
        values = self._argv[1:]
        if len(values) != self.required:
            raise InvalidArgument()
        return {
            argument.name: value for argument, value in zip(self.arguments, values)
        }