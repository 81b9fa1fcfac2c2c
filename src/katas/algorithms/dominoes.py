"""Domino row feasibility."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Iterable, Sequence

from katas.errors import KataError

MAX_PIPS = 6


def _validate(tile: Sequence[int]) -> tuple[int, int]:
    if len(tile) != 2:
        raise KataError(f"A domino has exactly two halves, got {list(tile)!r}")
    left, right = tile
    for value in (left, right):
        if not isinstance(value, int) or not 0 <= value <= MAX_PIPS:
            raise KataError(f"Domino values must be integers 0..{MAX_PIPS}, got {value!r}")
    return left, right


def can_make_row(tiles: Iterable[Sequence[int]]) -> bool:
    """Return True if every tile can be laid in a single row.

    Tiles may be turned around.  Treating values as vertices and tiles as
    edges, a row exists iff the tiles form one connected component with
    zero or two values of odd degree.
    """
    pairs = [_validate(tile) for tile in tiles]
    if not pairs:
        return True

    degree: Counter[int] = Counter()
    neighbours: dict[int, set[int]] = defaultdict(set)
    for left, right in pairs:
        degree[left] += 1
        degree[right] += 1
        neighbours[left].add(right)
        neighbours[right].add(left)

    odd = sum(1 for count in degree.values() if count % 2)
    if odd not in (0, 2):
        return False

    start = pairs[0][0]
    reached = {start}
    stack = [start]
    while stack:
        for other in neighbours[stack.pop()]:
            if other not in reached:
                reached.add(other)
                stack.append(other)
    return reached == set(degree)
