"""Ordered destruction of long-lived objects."""

from __future__ import annotations

import atexit
import bisect
from collections.abc import Callable


class LifetimeTracker:
    """Calls registered destruction functions in ascending order of longevity."""

    def __init__(self) -> None:
        self._items: list[tuple[int, Callable[[], object]]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, func) -> bool:
        return any(f == func for _, f in self._items)

    def add(self, longevity: int, func: Callable[[], object]) -> None:
        """Register ``func``; a previous registration of it is replaced."""
        self._items = [item for item in self._items if item[1] != func]
        bisect.insort_right(self._items, (longevity, func), key=lambda item: item[0])

    def destroy_all(self) -> None:
        """Call all registered functions, shortest longevity first, and forget them."""
        items, self._items = self._items, []
        for _, func in items:
            func()


_tracker = LifetimeTracker()
atexit.register(_tracker.destroy_all)


def set_longevity(longevity: int, func: Callable[[], object]) -> LifetimeTracker:
    """Register ``func`` to be called at exit; return the tracker holding it."""
    _tracker.add(longevity, func)
    return _tracker