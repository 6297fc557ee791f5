"""lima package facade."""

from lima.config import LoggerConfig, build_logger, config_from_dict, config_from_flags
from lima.default import (
    MAIN,
    clear_filter,
    clear_flag,
    debug,
    error,
    fatal,
    get_logger,
    info,
    set_filter,
    set_flag,
    trace,
    warning,
)
from lima.filters import FilterRegistry, default_registry
from lima.flags import DEFAULTS, Flag
from lima.levels import RESET, LogType
from lima.logger import Logger

__all__ = [
    "DEFAULTS",
    "MAIN",
    "RESET",
    "FilterRegistry",
    "Flag",
    "LogType",
    "Logger",
    "LoggerConfig",
    "build_logger",
    "clear_filter",
    "clear_flag",
    "config_from_dict",
    "config_from_flags",
    "debug",
    "default_registry",
    "error",
    "fatal",
    "get_logger",
    "info",
    "set_filter",
    "set_flag",
    "trace",
    "warning",
]
