"""Shared severity and tag filter tables."""

from __future__ import annotations

import threading
from typing import Dict, List

from lima.levels import LogType


class FilterRegistry:
    """Process-wide filter tables consulted by every logger bound to it.

    A table entry set to True marks the level or tag as "filtered". Whether
    that mark suppresses or allows a line depends on the reading logger's
    polarity flag, never on the registry itself.

    The tag table only grows: tags are added on logger construction or by
    an explicit set/clear and are never removed.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._levels: Dict[LogType, bool] = {level: False for level in LogType}
        self._tags: Dict[str, bool] = {}

    def register_tag(self, tag: str) -> None:
        """Add tag as not filtered unless it already has an entry."""
        with self._lock:
            self._tags.setdefault(tag, False)

    def set_level(self, level: LogType, value: bool) -> None:
        with self._lock:
            self._levels[LogType(level)] = bool(value)

    def set_tag(self, tag: str, value: bool) -> None:
        with self._lock:
            self._tags[tag] = bool(value)

    def is_level_filtered(self, level: LogType) -> bool:
        with self._lock:
            return self._levels[LogType(level)]

    def is_tag_filtered(self, tag: str) -> bool:
        with self._lock:
            return self._tags.get(tag, False)

    def has_tag(self, tag: str) -> bool:
        with self._lock:
            return tag in self._tags

    def tags(self) -> List[str]:
        """Return a sorted snapshot of every registered tag."""
        with self._lock:
            return sorted(self._tags)


_REGISTRY: FilterRegistry | None = None
_REGISTRY_LOCK = threading.Lock()


def default_registry() -> FilterRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _REGISTRY
    with _REGISTRY_LOCK:
        if _REGISTRY is None:
            _REGISTRY = FilterRegistry()
        return _REGISTRY
