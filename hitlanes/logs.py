"""Logging to a file, to the console and to an in-memory ring of messages."""

import datetime
from collections import deque
from enum import IntEnum


class LogLevel(IntEnum):
    NORMAL = 0
    WARNING = 1
    ERROR = 2


def format_log(message: str, level: LogLevel = LogLevel.NORMAL) -> str:
    """Format one log line with a timestamp and the level tag."""
    stamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    tag = {LogLevel.WARNING: "[warning]", LogLevel.ERROR: "[error]"}.get(level, "")
    return f"#{stamp}{tag}: {message}\n"


def log_to_file(file_name: str, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
    """Append a formatted line to ``file_name``; a file that cannot be opened is skipped."""
    try:
        with open(file_name, "a", encoding="utf-8") as file:
            file.write(format_log(message, level))
    except OSError:
        return


class LogManager:
    """Sends log messages to a file, the console and an internal history."""

    DEFAULT_LOG_FILE = "logs.txt"
    MAX_INTERNAL_LOG_COUNT = 100

    def __init__(self, development: bool = True):
        self.development = development
        self.name = ""
        self.first_log_already_placed = False
        self.internal_logs: deque[str] = deque(maxlen=self.MAX_INTERNAL_LOG_COUNT)

    def init(self, name: str) -> None:
        """Set the log file; an empty name falls back to the default file."""
        self.name = name
        self.first_log_already_placed = False

    def log(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        if self.development:
            self.log_internally(message, level)
            self.log_to_file(message, level)
            self.log_to_console(message, level)
        else:
            self.log_to_file(message, level)
            self.log_internally(message, level)

    def log_to_file(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        if not self.name:
            self.name = self.DEFAULT_LOG_FILE
        if not self.first_log_already_placed:
            self.first_log_already_placed = True
            try:
                open(self.name, "w", encoding="utf-8").close()
            except OSError:
                pass
        log_to_file(self.name, message, level)

    def log_internally(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        self.internal_logs.append(format_log(message, level))

    def log_to_console(self, message: str, level: LogLevel = LogLevel.NORMAL) -> None:
        print(format_log(message, level), end="")


_logs_manager = LogManager()


def log(message: str, level: LogLevel = LogLevel.NORMAL) -> None:
    """Log through the shared manager."""
    _logs_manager.log(message, level)


def get_logs_manager() -> LogManager:
    """Return the shared manager."""
    return _logs_manager