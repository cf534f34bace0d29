"""Application logger keeping a bounded history of formatted messages."""

from __future__ import annotations

import functools
import sys
import threading
from collections import deque
from datetime import datetime
from typing import IO

from piksy.config import LoggerConfig, LogLevel

_COLOR_CODES = {
    LogLevel.TRACE: "\033[37m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARN: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[1;31m",
}
_RESET = "\033[0m"


class FatalError(RuntimeError):
    """Raised after a fatal message has been logged."""


class Logger:
    """Writes messages to stdout and a log file and keeps the latest ones."""

    MAX_MESSAGES = 1000
    _BUFFER_SIZE = 1024

    def __init__(self, config: LoggerConfig | None = None) -> None:
        self.config = config if config is not None else LoggerConfig()
        self._lock = threading.Lock()
        self._file: IO[str] | None = None
        self._messages: deque[tuple[LogLevel, str]] = deque(maxlen=self.MAX_MESSAGES)

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self, config: LoggerConfig) -> None:
        """Adopt ``config`` and open its log file for appending."""
        with self._lock:
            self.config = config
            if self._file is not None:
                self._file.close()
                self._file = None
            try:
                self._file = open(config.log_file, "a", encoding="utf-8")
            except OSError as exc:
                raise OSError(f"Failed to open log file: {config.log_file}") from exc

    def close(self) -> None:
        """Close the log file if one is open."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def messages(self) -> list[tuple[LogLevel, str]]:
        """Return the retained messages, oldest first."""
        with self._lock:
            return list(self._messages)

    def clear_messages(self) -> None:
        with self._lock:
            self._messages.clear()

    def trace(self, format_str: str, *args: object) -> None:
        self._log(LogLevel.TRACE, format_str, args)

    def debug(self, format_str: str, *args: object) -> None:
        self._log(LogLevel.DEBUG, format_str, args)

    def info(self, format_str: str, *args: object) -> None:
        self._log(LogLevel.INFO, format_str, args)

    def warn(self, format_str: str, *args: object) -> None:
        self._log(LogLevel.WARN, format_str, args)

    def error(self, format_str: str, *args: object) -> None:
        self._log(LogLevel.ERROR, format_str, args)

    def fatal(
        self, format_str: str, *args: object, exc: BaseException | None = None
    ) -> None:
        """Log a fatal message and raise :class:`FatalError` carrying it."""
        message = self._render(format_str, args)
        if exc is None:
            self._log(LogLevel.FATAL, message, ())
            raise FatalError(message)
        self._log(LogLevel.FATAL, f"{message}: {exc}", ())
        raise FatalError(message) from exc

    def format_message(self, level: LogLevel, message: str) -> str:
        """Prefix ``message`` with the local time and the level name."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        return f"[{timestamp}][{LogLevel(level).name}] {message}"

    def _render(self, format_str: str, args: tuple[object, ...]) -> str:
        if not args:
            return format_str
        try:
            message = format_str % args
        except (TypeError, ValueError):
            return format_str
        if len(message.encode("utf-8")) >= self._BUFFER_SIZE:
            return format_str
        return message

    def _log(self, level: LogLevel, format_str: str, args: tuple[object, ...]) -> None:
        if level < self.config.level:
            return
        formatted = self.format_message(level, self._render(format_str, args))
        with self._lock:
            self._messages.append((level, formatted))
            if self.config.enable_colors:
                print(f"{_COLOR_CODES[level]}{formatted}{_RESET}", file=sys.stdout, flush=True)
            else:
                print(formatted, file=sys.stdout, flush=True)
            if self._file is not None:
                self._file.write(formatted + "\n")
                self._file.flush()


@functools.cache
def get_logger() -> Logger:
    """Return the application-wide logger."""
    return Logger()