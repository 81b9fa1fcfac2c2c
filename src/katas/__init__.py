"""katas: standalone exercise utilities and the ``katas`` command line."""
from __future__ import annotations

from katas.algorithms import (
    CompassPoint,
    can_make_row,
    create_compass_points,
    expand_braces,
    extract_ranges,
    zigzag_matrix,
)
from katas.config import KatasConfig
from katas.errors import KataError
from katas.objects import Rectangle, from_json, get_json
from katas.sequences import (
    bottles_of_beer,
    breadth_first,
    depth_first,
    fibonacci,
    merge_sorted,
)

__version__ = "0.1.0"

__all__ = [
    "CompassPoint",
    "KataError",
    "KatasConfig",
    "Rectangle",
    "bottles_of_beer",
    "breadth_first",
    "can_make_row",
    "create_compass_points",
    "depth_first",
    "expand_braces",
    "extract_ranges",
    "fibonacci",
    "from_json",
    "get_json",
    "merge_sorted",
    "zigzag_matrix",
]
