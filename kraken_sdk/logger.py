"""Logging interface and implementations."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"


class Logger(ABC):
    """
    Abstract logger interface.

    The client and dispatcher only talk to this interface, so any object with
    these four methods can be injected (for example an adapter over the
    standard ``logging`` module).
    """

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""
        pass

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Log info message."""
        pass

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""
        pass

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        """Log error message."""
        pass


class ConsoleLogger(Logger):
    """Console logger with a minimum level and a message prefix."""

    _LEVELS = {
        LogLevel.DEBUG: 0,
        LogLevel.INFO: 1,
        LogLevel.WARN: 2,
        LogLevel.ERROR: 3,
        LogLevel.NONE: 4,
    }

    def __init__(self, level: LogLevel = LogLevel.INFO, prefix: str = "[Kraken SDK]"):
        """
        Initialize console logger.

        Args:
            level: Minimum log level to display
            prefix: Prefix for log messages
        """
        self.level = level
        self.prefix = prefix

    def _should_log(self, level: LogLevel) -> bool:
        return self._LEVELS[level] >= self._LEVELS[self.level]

    def _emit(self, level: LogLevel, message: str, *args: Any) -> None:
        if self._should_log(level):
            print(f"{self.prefix} {level.value.upper()}: {message}", *args)

    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""
        self._emit(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log info message."""
        self._emit(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""
        self._emit(LogLevel.WARN, message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log error message."""
        self._emit(LogLevel.ERROR, message, *args)

    def set_level(self, level: LogLevel) -> None:
        """Set log level."""
        self.level = level

    def get_level(self) -> LogLevel:
        """Get current log level."""
        return self.level


class NoopLogger(Logger):
    """No-op logger that discards all log messages."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass
