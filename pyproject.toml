[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ircserv"
version = "0.1.0"
description = "A small IRC server handling USER, NICK, PRIVMSG and JOIN requests"
requires-python = ">=3.10"
dependencies = []
keywords = ["irc", "server", "chat", "sockets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ircserv = "ircserv.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ircserv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
