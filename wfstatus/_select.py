"""Deterministic maximum selection."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")


def first_max(items: Iterable[T], key: Callable[[T], Any]) -> Optional[T]:
    """Return the item with the greatest ``key``, or ``None`` if empty.

    The best item is only replaced on a strictly greater key, so the earliest
    of several tied items wins.
    """
    best: Optional[T] = None
    best_key: Any = None
    for item in items:
        item_key = key(item)
        if best is None or item_key > best_key:
            best, best_key = item, item_key
    return best
