from katas.algorithms.braces import expand_braces
from katas.algorithms.compass import CompassPoint, create_compass_points
from katas.algorithms.dominoes import can_make_row
from katas.algorithms.ranges import extract_ranges
from katas.algorithms.zigzag import zigzag_matrix

__all__ = [
    "CompassPoint",
    "can_make_row",
    "create_compass_points",
    "expand_braces",
    "extract_ranges",
    "zigzag_matrix",
]
