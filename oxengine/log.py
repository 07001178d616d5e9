"""Console and file logging with coloured, tagged messages."""

from __future__ import annotations

import enum
import os
import sys
from typing import Iterable, TextIO

from oxengine.defines import DEBUG_ENABLED


class LogType(enum.IntEnum):
    """Severity of a log message."""

    INFO = 0
    DEBUG = 1
    WARNING = 2
    ERROR = 3


_HEADS = {
    LogType.INFO: "[INFO]: ",
    LogType.DEBUG: "[DEBUG]: ",
    LogType.WARNING: "[WARN]: ",
    LogType.ERROR: "[ERROR]: ",
}

_COLORS = {
    LogType.INFO: 32,  # green
    LogType.DEBUG: 94,  # blue
    LogType.WARNING: 33,  # yellow
    LogType.ERROR: 91,  # red
}


class _LogFile:
    def __init__(self) -> None:
        self.stream: TextIO | None = None

    def open(self, path: str | os.PathLike) -> None:
        self.close()
        self.stream = open(path, "w", encoding="utf-8")

    def close(self) -> None:
        if self.stream is not None:
            self.stream.close()
            self.stream = None

    def write(self, text: str) -> None:
        if self.stream is not None:
            self.stream.write(text)
            self.stream.flush()


_log_file = _LogFile()


def initialize_logger(path: str | os.PathLike = "log.log") -> None:
    """Open (and truncate) the log file; raises OSError if it cannot be opened."""
    _log_file.open(path)


def shutdown_logger() -> None:
    """Close the log file if it is open."""
    _log_file.close()


def insert_into_log_file(text: str) -> None:
    """Append text to the log file; does nothing while no file is open."""
    _log_file.write(text)


def _to_text(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(int(value)) if isinstance(value, enum.IntEnum) else str(value)


def format_message(log_type: LogType, message: Iterable[object], colored: bool) -> str:
    """Build one log line: a tag, then every item followed by a space."""
    log_type = LogType(log_type)
    body = _HEADS[log_type] + "".join(f"{_to_text(item)} " for item in message)
    if colored:
        return f"\033[{_COLORS[log_type]}m{body}\033[0m\n"
    return body + "\n"


def log(log_type: LogType, *args: object) -> None:
    """Write a message to standard output and to the log file."""
    log_type = LogType(log_type)
    if log_type is LogType.DEBUG and not DEBUG_ENABLED:
        console, record = "", ""
    else:
        console = format_message(log_type, args, colored=True)
        record = format_message(log_type, args, colored=False)
    sys.stdout.write(console)
    insert_into_log_file(record)


def info(*args: object) -> None:
    log(LogType.INFO, *args)


def debug(*args: object) -> None:
    log(LogType.DEBUG, *args)


def warn(*args: object) -> None:
    log(LogType.WARNING, *args)


def error(*args: object) -> None:
    log(LogType.ERROR, *args)


def report_assertion(expression: str, message: str, file: str, line: int) -> None:
    """Log a failed assertion as an error."""
    if not message:
        log(LogType.ERROR, "Faulty code:", expression, "in file:", file, "at line", line)
        return
    log(LogType.ERROR, message, "| Faulty code:", expression, "in file:", file, "at line", line)