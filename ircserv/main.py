"""Command-line entry point: ircserv <port> <password>."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from .argparser import ArgParser, InvalidArgument
from .logger import Logger
from .server import Server
from .sockets import SocketCreationError

PROGRAM_NAME = "ircserv"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, start the server and serve until interrupted."""
    if argv is None:
        program = os.path.basename(sys.argv[0]) or PROGRAM_NAME
        args = list(sys.argv[1:])
    else:
        program = PROGRAM_NAME
        args = list(argv)

    server = Server()
    with Logger(program) as logger:
        parser = ArgParser([program, *args])
        parser.add_argument(
            "port",
            "Is the port number on which your server will accept incoming connections",
            True,
        )
        parser.add_argument(
            "password",
            "Is the password needed by any IRC client who wants to connect to your server",
            True,
        )
        try:
            config = parser.parse()
        except InvalidArgument as exc:
            print(exc, file=sys.stderr)
            return 1

        print("config: ")
        for key in sorted(config):
            print(f"  {key} = {config[key]}")

        try:
            server.start(config, logger)
        except SocketCreationError as exc:
            print(exc, file=sys.stderr)
            return 1
        try:
            server.run()
        except KeyboardInterrupt:
            pass
        finally:
            server.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())