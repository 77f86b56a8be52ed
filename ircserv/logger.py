"""Timestamped logging to a file and/or the terminal."""

from __future__ import annotations

import sys
import time
from enum import Enum
from typing import IO, TextIO


class LogType(Enum):
    """Severity of a log line, with its printed label."""

    INFO = "[INFO]"
    WARNING = "[WARNING]"
    ERROR = "[ERROR]"

    @property
    def label(self) -> str:
        return self.value


def file_exists(filename: str) -> bool:
    """Return True if ``filename`` can be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


def gen_log_file(base: str) -> str:
    """Return ``base.log`` or the first free ``base-N.log``."""
    candidate = f"{base}.log"
    index = 0
    while file_exists(candidate):
        candidate = f"{base}-{index}.log"
        index += 1
    return candidate


def timestamp() -> str:
    """Current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


class Logger:
    """Writes log lines to a fresh log file and, optionally, the terminal.

    Both outputs start disabled.
    """

    def __init__(self, filename: str) -> None:
        self.to_file = False
        self.to_terminal = False
        self.filename = gen_log_file(filename)
        self._file: IO[str] | None
        try:
            self._file = open(self.filename, "w", encoding="utf-8")
        except OSError:
            self._file = None

    def enable_file_output(self) -> None:
        self.to_file = True

    def enable_terminal_output(self) -> None:
        self.to_terminal = True

    @staticmethod
    def _format(log_type: LogType, message: str, file: str, line: int) -> str:
        text = f"[{timestamp()}] {log_type.label:<10}"
        if file:
            text += file
        if line:
            text += f":{line} "
        return text + message + "\n"

    def log(
        self, log_type: LogType, message: str, file: str = "", line: int = 0
    ) -> None:
        """Write one line to every enabled output."""
        text = self._format(log_type, message, file, line)
        if self.to_file and self._file is not None:
            self._file.write(text)
            self._file.flush()
        if self.to_terminal:
            stream: TextIO = sys.stdout
            stream.write(text)
            stream.flush()

    def close(self) -> None:
        """Log the shutdown line and close the log file."""
        if self._file is None:
            return
        self.log(LogType.INFO, "Stopped log system")
        self._file.close()
        self._file = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()