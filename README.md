# ircserv

A small IRC server. It listens on a TCP port, accepts clients and answers
their request lines one at a time. It understands these commands:

- `USER <username> <mode> <unused> :<real name>` registers the user. The
  first successful `USER` is answered with the welcome reply (`001`).
  A wrong number of parameters gets `461`; registering twice gets `462`.
- `NICK <nickname>` sets the user's nickname. More than one parameter gets
  `461`; with no parameter nothing is sent back.
- `PRIVMSG <nickname> :<text>` sends the text to the connected user with that
  nickname, if there is one.
- `JOIN <channel>` creates the channel, with the sender as its first member,
  if no channel of that name exists yet. Without a channel name it gets `461`.

Any other command is accepted and gets no reply. Command names are
case-sensitive.

## Installing

```
pip install .
```

## Running

The server takes exactly two arguments: the port to listen on and the
connection password.

```
ircserv 6667 password
```

With the wrong number of arguments it prints `Invalid argument` and exits
with status 1. If the port cannot be bound it prints the reason and exits
with status 1. Otherwise it prints the configuration and serves on `0.0.0.0`
until interrupted with Ctrl-C.

On start it creates an empty log file in the current directory, named
`ircserv.log`, or `ircserv-0.log`, `ircserv-1.log` and so on if that name is
taken.

You can connect with any IRC client, or try it by hand:

```
nc 127.0.0.1 6667
NICK guest
USER guest 0 * :Guest User
```

## Using it as a library

- `ircserv.parser.parse(line)` returns a `ParsedCommand` with an
  `IRCCommand`, a list of parameters and the trailing message after the first
  `:`.
- `ircserv.client_manager.ClientManager` holds `users` (by descriptor) and
  `channels` (by name); `handle_request(fd, line)` runs one request line and
  returns the reply string, possibly empty. Pass `send=` a callable taking a
  descriptor and bytes to deliver `PRIVMSG` text.
- `ircserv.server.Server` runs the network loop. Call `start(config, logger)`
  with a mapping holding `"port"`, then either `run()` or
  `serve_once(timeout)` as often as you need, and `stop()` at the end.
  `address` gives the bound address and `client_count` the number of
  connected clients.
- `ircserv.sockets.SocketListener` and `SocketHandler` wrap the listening and
  the client sockets; setup failures raise `SocketCreationError`.
- `ircserv.logger.Logger` writes timestamped `[INFO]`, `[WARNING]` and
  `[ERROR]` lines to the terminal, to its `.log` file, or to both, once
  `enable_terminal_output()` or `enable_file_output()` is called. It can be
  used as a context manager.
- `ircserv.argparser.ArgParser` maps positional values onto declared names
  and raises `InvalidArgument` when their number is wrong.

## What it does not do

- The password argument is read but never checked; any client may connect.
- `JOIN` on a channel that already exists does not add the user to it, and
  nothing is ever sent to channel members.
- There is no `PING`, `PONG`, `QUIT`, `PART`, `MODE` or `TOPIC` handling, and
  no check that a nickname is already in use.
- Reply texts are templates: the `<host>`, `<client>` and `<command>`
  placeholders are sent as they are, and `PRIVMSG` text is passed on without
  a sender prefix or line ending.
- Input is read in chunks of up to 1024 bytes and split on line breaks; a
  line cut across two reads is handled as two lines.

## Tests

```
pip install .[test]
pytest
```