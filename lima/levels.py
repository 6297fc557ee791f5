"""Severity levels with their display labels and colors."""

from __future__ import annotations

from enum import IntEnum


RESET = "\033[0m"


class LogType(IntEnum):
    """Severity of a log line, ordered by increasing urgency."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_name(cls, name: str) -> LogType | None:
        """Resolve a level from its case-insensitive name, or None if unknown."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            return None


_LABELS = {
    LogType.TRACE: "[Trace]",
    LogType.DEBUG: "[Debug]",
    LogType.INFO: "[Info]",
    LogType.WARNING: "[Warning]",
    LogType.ERROR: "[Error]",
    LogType.FATAL: "[Fatal]",
}

_COLORS = {
    LogType.TRACE: RESET,
    LogType.DEBUG: "\033[32m",  # green
    LogType.INFO: "\033[34m",  # blue
    LogType.WARNING: "\033[33m",  # yellow
    LogType.ERROR: "\033[31m",  # red
    LogType.FATAL: "\033[37;41m",  # white on red
}
