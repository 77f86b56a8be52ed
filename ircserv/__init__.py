"""A small IRC server: request parsing, user and channel registry, network loop."""

__version__ = "0.1.0"
__all__ = [
    "argparser",
    "channel",
    "client_manager",
    "commands",
    "invoker",
    "logger",
    "main",
    "parser",
    "replies",
    "server",
    "sockets",
    "user",
]