"""Logger configuration dataclass and normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, TextIO

from lima.filters import FilterRegistry
from lima.flags import DEFAULTS, Flag, has_flag
from lima.levels import LogType
from lima.logger import Logger


DEFAULT_TAG = "LIMA"

# LoggerConfig field -> flag bit it toggles.
FLAG_FIELDS = {
    "timestamps": Flag.TIMESTAMPS_PREFIX,
    "log_types": Flag.LOGTYPES_PREFIX,
    "whitespace": Flag.WHITESPACE_PREFIX,
    "log_tag": Flag.LOGTAG_PREFIX,
    "colors": Flag.LOGTYPE_COLORS,
    "level_filter": Flag.LOGTYPE_FILTER,
    "tag_filter": Flag.LOGTAG_FILTER,
    "whitelist": Flag.WHITELIST_FILTER,
    "end_of_line": Flag.END_OF_LINE_SUFFIX,
}


@dataclass
class LoggerConfig:
    """Logger configuration settings."""

    tag: str = DEFAULT_TAG
    timestamps: bool = True
    log_types: bool = True
    whitespace: bool = True
    log_tag: bool = True
    colors: bool = True
    level_filter: bool = True
    tag_filter: bool = True
    whitelist: bool = False
    end_of_line: bool = True
    filtered_levels: List[LogType] = field(default_factory=list)
    filtered_tags: List[str] = field(default_factory=list)

    def to_flags(self) -> Flag:
        flags = Flag.NONE
        for name, bit in FLAG_FIELDS.items():
            if getattr(self, name):
                flags |= bit
        return flags


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def _as_levels(value: Any) -> List[LogType]:
    levels: List[LogType] = []
    for name in _as_list(value):
        level = LogType.from_name(name)
        if level is not None and level not in levels:
            levels.append(level)
    return levels


def config_from_flags(tag: str = DEFAULT_TAG, flags: int = DEFAULTS) -> LoggerConfig:
    """Build a LoggerConfig whose boolean fields mirror a flag set."""
    toggles = {name: has_flag(flags, bit) for name, bit in FLAG_FIELDS.items()}
    return LoggerConfig(tag=str(tag), **toggles)


def config_from_dict(raw: Dict[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig instance from a raw dictionary.

    Unknown keys and unknown level names are ignored; values of the wrong
    type fall back to the defaults.
    """
    if not isinstance(raw, dict):
        raw = {}
    defaults = LoggerConfig()
    toggles = {
        name: _as_bool(raw.get(name), getattr(defaults, name))
        for name in FLAG_FIELDS
    }
    tag = raw.get("tag")
    return LoggerConfig(
        tag=str(tag) if tag else DEFAULT_TAG,
        filtered_levels=_as_levels(raw.get("filtered_levels")),
        filtered_tags=_as_list(raw.get("filtered_tags")),
        **toggles,
    )


def build_logger(
    cfg: LoggerConfig | None = None,
    *,
    stream: TextIO | None = None,
    registry: FilterRegistry | None = None,
) -> Logger:
    """Create a Logger from cfg and apply its filter marks.

    Args:
        cfg: Configuration to apply; defaults to LoggerConfig().
        stream: Optional output stream, sys.stdout when omitted.
        registry: Filter registry to bind to, the process-wide one when omitted.

    Returns:
        The configured Logger.
    """
    cfg = cfg or LoggerConfig()
    logger = Logger(cfg.tag, cfg.to_flags(), stream=stream, registry=registry)
    for level in cfg.filtered_levels:
        logger.set_filter(level)
    for tag in cfg.filtered_tags:
        logger.set_filter(tag)
    return logger
