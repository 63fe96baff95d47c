"""A fixed-capacity array that overwrites its oldest items when full."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class CircularArray:
    """Holds at most ``capacity`` items; appending to a full array drops the oldest."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque(maxlen=capacity)

    def append(self, item: Any) -> None:
        """Add ``item`` as the newest element."""
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from oldest to newest."""
        return iter(self._items)