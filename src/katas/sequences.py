"""Lazy sequence generators: song lines, Fibonacci, tree walks, merging."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Mapping
from typing import Any, Iterable, Iterator

__all__ = [
    "bottles_of_beer",
    "breadth_first",
    "depth_first",
    "fibonacci",
    "merge_sorted",
]

_DONE = object()

_SONG_ENDING = (
    "1 bottle of beer on the wall, 1 bottle of beer.",
    "Take one down and pass it around, no more bottles of beer on the wall.",
    "No more bottles of beer on the wall, no more bottles of beer.",
    "Go to the store and buy some more, 99 bottles of beer on the wall.",
)


def bottles_of_beer() -> Iterator[str]:
    """Yield the lines of "99 Bottles of Beer", two per verse."""
    for count in range(99, 1, -1):
        left = count - 1
        yield f"{count} bottles of beer on the wall, {count} bottles of beer."
        yield (
            f"Take one down and pass it around, {left} "
            f"bottle{'s' if left > 1 else ''} of beer on the wall."
        )
    yield from _SONG_ENDING


def fibonacci() -> Iterator[int]:
    """Yield 0, 1, 1, 2, 3, 5, ... without end."""
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def _children(node: Any) -> list[Any]:
    # Leaf nodes carry no children at all, as a key or as an attribute.
    if isinstance(node, Mapping):
        return list(node.get("children") or [])
    return list(getattr(node, "children", None) or [])


def depth_first(root: Any) -> Iterator[Any]:
    """Yield tree nodes in depth-first pre-order.

    Uses an explicit stack of child iterators, so deep trees do not hit the
    recursion limit.
    """
    yield root
    stack = [iter(_children(root))]
    while stack:
        child = next(stack[-1], _DONE)
        if child is _DONE:
            stack.pop()
            continue
        yield child
        stack.append(iter(_children(child)))


def breadth_first(root: Any) -> Iterator[Any]:
    """Yield tree nodes level by level, left to right."""
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(_children(node))


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Lazily merge two sorted iterables, either of which may be infinite."""
    return heapq.merge(first, second)
