"""Process-wide default logger and call-site helpers."""

from __future__ import annotations

from lima.filters import default_registry
from lima.flags import DEFAULTS
from lima.levels import LogType
from lima.logger import Logger


MAIN = Logger("LIMA", DEFAULTS, registry=default_registry())


def get_logger() -> Logger:
    """Return the shared default logger instance."""
    return MAIN


def trace(*values: object) -> None:
    MAIN.log(LogType.TRACE, *values)


def debug(*values: object) -> None:
    MAIN.log(LogType.DEBUG, *values)


def info(*values: object) -> None:
    MAIN.log(LogType.INFO, *values)


def warning(*values: object) -> None:
    MAIN.log(LogType.WARNING, *values)


def error(*values: object) -> None:
    MAIN.log(LogType.ERROR, *values)


def fatal(*values: object) -> None:
    MAIN.log(LogType.FATAL, *values)


def set_flag(flag: int) -> None:
    MAIN.set_flag(flag)


def clear_flag(flag: int) -> None:
    MAIN.clear_flag(flag)


def set_filter(target: LogType | str) -> None:
    MAIN.set_filter(target)


def clear_filter(target: LogType | str) -> None:
    MAIN.clear_filter(target)
