"""A fixed-capacity cache that evicts the least recently used entry."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

MISSING = -1


class LRUCache:
    """Map keys to values, holding at most ``capacity`` entries.

    Reading or writing a key makes it the most recently used one.
    When the cache is full, a new key evicts the least recently used entry.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def get(self, key: Hashable) -> Any:
        """Return the value stored under ``key``, or -1 if it is absent."""
        if key not in self._entries:
            return MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._entries:
            del self._entries[key]
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self.capacity}, entries={dict(self._entries)!r})"