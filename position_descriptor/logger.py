"""Logging interface and implementations."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, TextIO


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"


_SEVERITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
    LogLevel.NONE: 4,
}


class Logger(ABC):
    """Abstract logger interface."""

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

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        prefix: str = "[Position Descriptor]",
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console logger.

        Args:
            level: Minimum log level to display
            prefix: Prefix for log messages
            stream: Output stream, stdout when None
        """
        self.level = level
        self.prefix = prefix
        self.stream = stream

    def _emit(self, level: LogLevel, message: str, args: tuple[Any, ...]) -> None:
        if _SEVERITY[level] < _SEVERITY[self.level]:
            return
        print(f"{self.prefix} {level.value.upper()}: {message}", *args, file=self.stream)

    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""
        self._emit(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        """Log info message."""
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""
        self._emit(LogLevel.WARN, message, args)

    def error(self, message: str, *args: Any) -> None:
        """Log error message."""
        self._emit(LogLevel.ERROR, message, args)

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
