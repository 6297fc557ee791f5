"""Formatting and filtering toggles carried by each logger."""

from __future__ import annotations

from enum import IntFlag


class Flag(IntFlag):
    """Independent bits controlling one aspect of a logger's output."""

    NONE = 0
    TIMESTAMPS_PREFIX = 1 << 0
    LOGTYPES_PREFIX = 1 << 1
    WHITESPACE_PREFIX = 1 << 2
    LOGTAG_PREFIX = 1 << 3
    LOGTYPE_COLORS = 1 << 4
    LOGTYPE_FILTER = 1 << 5
    LOGTAG_FILTER = 1 << 6
    WHITELIST_FILTER = 1 << 7
    END_OF_LINE_SUFFIX = 1 << 8


DEFAULTS = (
    Flag.TIMESTAMPS_PREFIX
    | Flag.LOGTYPES_PREFIX
    | Flag.WHITESPACE_PREFIX
    | Flag.LOGTAG_PREFIX
    | Flag.LOGTYPE_COLORS
    | Flag.LOGTYPE_FILTER
    | Flag.LOGTAG_FILTER
    | Flag.END_OF_LINE_SUFFIX
)

ALL = DEFAULTS | Flag.WHITELIST_FILTER


def has_flag(flags: int, flag: int) -> bool:
    """Return True when any bit of flag is set in flags."""
    return (int(flags) & int(flag)) != 0
