"""Compass rose: the 32 points and their azimuths."""

from __future__ import annotations

from dataclasses import dataclass

CARDINALS = ("N", "E", "S", "W")
POINT_STEP = 11.25


@dataclass(frozen=True)
class CompassPoint:
    abbreviation: str
    azimuth: float


def _quadrant(current: str, following: str, middle: str) -> list[str]:
    """Abbreviations from *current* (inclusive) to *following* (exclusive)."""
    return [
        current,
        f"{current}b{following}",
        f"{current}{middle}",
        f"{middle}b{current}",
        middle,
        f"{middle}b{following}",
        f"{following}{middle}",
        f"{following}b{current}",
    ]


def create_compass_points() -> list[CompassPoint]:
    """Return the 32 compass points clockwise from N (0.0) to NbW (348.75)."""
    abbreviations: list[str] = []
    for index, current in enumerate(CARDINALS):
        following = CARDINALS[(index + 1) % len(CARDINALS)]
        # N/S always lead the intercardinal name: NE, SE, SW, NW.
        middle = current + following if index % 2 == 0 else following + current
        abbreviations.extend(_quadrant(current, following, middle))
    return [
        CompassPoint(abbreviation=abbr, azimuth=position * POINT_STEP)
        for position, abbr in enumerate(abbreviations)
    ]
