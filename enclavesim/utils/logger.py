"""Minimal levelled logging to the standard streams."""

import sys
from enum import Enum


class LogLevel(Enum):
    """Severity of a log message."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def log(level: LogLevel, message: str) -> None:
    """Write ``message`` tagged with its level; errors go to standard error."""
    stream = sys.stderr if level is LogLevel.ERROR else sys.stdout
    print(f"[{level.value}] {message}", file=stream)