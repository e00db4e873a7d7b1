"""Repositioning of the friendly (green) team against the opponent."""

from typing import List, Optional

from .field import FIELD, Bounds, FieldGeometry, Point, clamp

PHASE_OFFSET_X = {"defense": -60, "attack": 40, "advanced": 80, "neutral": 0}
LATERAL_JITTER = 15
EDGE_MARGIN = 30


def companion_bounds(geometry: FieldGeometry = FIELD) -> Bounds:
    return (
        EDGE_MARGIN,
        geometry.width - EDGE_MARGIN,
        EDGE_MARGIN,
        geometry.height - EDGE_MARGIN,
    )


def reposition_companion(
    phase: str,
    green: Optional[List[Point]],
    black: Optional[List[Point]],
    geometry: FieldGeometry = FIELD,
) -> List[Point]:
    """Mark each opponent with the green player at the same index.

    Players are paired index by index for the indices both teams have; pairs
    whose opponent has no numeric position are skipped. With no opponent
    data the green team is returned unchanged.
    """
    green = list(green or [])
    if not black:
        return green

    offset_x = PHASE_OFFSET_X.get(phase, 0)
    min_x, max_x, min_y, max_y = companion_bounds(geometry)

    adjusted = []
    for i, (mine, theirs) in enumerate(zip(green, black)):
        if not theirs.is_valid:
            continue
        offset_y = -LATERAL_JITTER if i % 2 == 0 else LATERAL_JITTER
        adjusted.append(Point(
            id=mine.id,
            left=clamp(theirs.left + offset_x, min_x, max_x),
            top=clamp(theirs.top + offset_y, min_y, max_y),
        ))
    return adjusted
