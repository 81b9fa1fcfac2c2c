"""Integer range compression: ``[0, 1, 2, 5]`` -> ``"0-2,5"``."""

from __future__ import annotations

from typing import Iterable


def extract_ranges(nums: Iterable[int], separator: str = ",") -> str:
    """Return the range expression of an ordered list of integers.

    Runs of three or more consecutive integers collapse to ``first-last``;
    shorter runs are listed individually.
    """
    parts: list[str] = []
    values = list(nums)
    index = 0
    while index < len(values):
        first = last = values[index]
        index += 1
        while index < len(values) and values[index] - last == 1:
            last = values[index]
            index += 1
        if last - first >= 2:
            parts.append(f"{first}-{last}")
        elif last == first:
            parts.append(str(first))
        else:
            parts.extend((str(first), str(last)))
    return separator.join(parts)
