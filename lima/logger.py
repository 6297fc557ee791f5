"""Tagged, level-aware logger writing composed lines to a text stream."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import TextIO

from lima.filters import FilterRegistry, default_registry
from lima.flags import ALL, DEFAULTS, Flag, has_flag
from lima.levels import RESET, LogType


WHITESPACE = "    "


def _timestamp() -> str:
    return datetime.now().strftime("[%H:%M:%S]")


class Logger:
    """Logger identified by a tag, with its own flags and shared filters.

    Flags are local to the instance. Filter marks live in a FilterRegistry
    shared with every other logger bound to it, so filtering a level or a tag
    through one logger affects all of them.
    """

    def __init__(
        self,
        tag: str,
        flags: int = DEFAULTS,
        *,
        stream: TextIO | None = None,
        registry: FilterRegistry | None = None,
    ) -> None:
        self._tag = str(tag)
        self._flags = int(flags)
        self._flags_lock = threading.Lock()
        self._stream = stream
        self._registry = registry if registry is not None else default_registry()
        self._registry.register_tag(self._tag)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def flags(self) -> Flag:
        return Flag(self._flags & ALL)

    @property
    def registry(self) -> FilterRegistry:
        return self._registry

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def is_set(self, flag: int) -> bool:
        return has_flag(self._flags, flag)

    def set_flag(self, flag: int) -> None:
        with self._flags_lock:
            self._flags |= int(flag)

    def clear_flag(self, flag: int) -> None:
        with self._flags_lock:
            self._flags &= ~int(flag)

    def set_filter(self, target: LogType | str) -> None:
        """Mark a level or a tag as filtered for every logger on the registry."""
        self._mark(target, True)

    def clear_filter(self, target: LogType | str) -> None:
        """Remove the filtered mark from a level or a tag."""
        self._mark(target, False)

    def _mark(self, target: LogType | str, value: bool) -> None:
        if isinstance(target, str):
            self._registry.set_tag(target, value)
            return
        try:
            level = LogType(target)
        except ValueError:
            # Not a known level; nothing to mark.
            return
        self._registry.set_level(level, value)

    def _prefix(self, flags: int, level: LogType) -> str:
        parts = []
        if has_flag(flags, Flag.LOGTYPE_COLORS):
            parts.append(level.color)
        if has_flag(flags, Flag.TIMESTAMPS_PREFIX):
            parts.append(_timestamp())
        if has_flag(flags, Flag.LOGTYPES_PREFIX):
            parts.append(level.label)
        if has_flag(flags, Flag.LOGTAG_PREFIX):
            parts.append(f"[{self._tag}]")
        if has_flag(flags, Flag.WHITESPACE_PREFIX):
            parts.append(WHITESPACE)
        return "".join(parts)

    @staticmethod
    def _suffix(flags: int) -> str:
        suffix = ""
        if has_flag(flags, Flag.LOGTYPE_COLORS):
            suffix += RESET
        if has_flag(flags, Flag.END_OF_LINE_SUFFIX):
            suffix += "\n"
        return suffix

    def _suppressed(self, flags: int, level: LogType) -> bool:
        whitelist = has_flag(flags, Flag.WHITELIST_FILTER)
        if has_flag(flags, Flag.LOGTYPE_FILTER):
            if whitelist != self._registry.is_level_filtered(level):
                return True
        if has_flag(flags, Flag.LOGTAG_FILTER):
            if whitelist != self._registry.is_tag_filtered(self._tag):
                return True
        return False

    def _compose(self, flags: int, level: LogType, values: tuple) -> str:
        body = "".join(str(value) for value in values)
        return self._prefix(flags, level) + body + self._suffix(flags)

    def format(self, level: LogType, *values: object) -> str:
        """Compose the full line for level and values without writing it."""
        return self._compose(self._flags, LogType(level), values)

    def log(self, level: LogType, *values: object) -> None:
        """Write one line built from values unless a filter suppresses it.

        Args:
            level: Severity of the line.
            values: Objects stringified with str() and joined without separator.
        """
        level = LogType(level)
        flags = self._flags
        line = self._compose(flags, level, values)
        if self._suppressed(flags, level):
            return
        stream = self._stream or sys.stdout
        stream.write(line)
        if has_flag(flags, Flag.END_OF_LINE_SUFFIX):
            stream.flush()

    def trace(self, *values: object) -> None:
        self.log(LogType.TRACE, *values)

    def debug(self, *values: object) -> None:
        self.log(LogType.DEBUG, *values)

    def info(self, *values: object) -> None:
        self.log(LogType.INFO, *values)

    def warning(self, *values: object) -> None:
        self.log(LogType.WARNING, *values)

    def error(self, *values: object) -> None:
        self.log(LogType.ERROR, *values)

    def fatal(self, *values: object) -> None:
        self.log(LogType.FATAL, *values)

    def __repr__(self) -> str:
        return f"Logger(tag={self._tag!r}, flags={int(self.flags):#x})"
