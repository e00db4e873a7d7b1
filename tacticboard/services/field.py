"""Field geometry and point primitives shared by the tactical engine.

All coordinates are pixel-space values as rendered by the tactical board.
"Field-relative" values start at the field's own origin; "page-absolute"
values add the page offsets of the field element.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class FieldGeometry:
    """Fixed dimensions of the rendered field."""
    width: int = 600
    height: int = 300
    left_offset: int = 20  # CSS left of the field element
    top_offset: int = 20   # CSS top of the field element

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def mid_y(self) -> float:
        return self.height / 2


FIELD = FieldGeometry()


def is_number(value: Any) -> bool:
    """True for finite ints/floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def round_half_up(value: float) -> int:
    """Round .5 away from -inf, matching the board's client-side rounding."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Point:
    """A player or ball position on the board."""
    left: Optional[float] = None
    top: Optional[float] = None
    id: Optional[int] = None

    @property
    def has_left(self) -> bool:
        return is_number(self.left)

    @property
    def has_top(self) -> bool:
        return is_number(self.top)

    @property
    def is_valid(self) -> bool:
        return self.has_left and self.has_top

    def to_dict(self) -> dict:
        return {"id": self.id, "left": self.left, "top": self.top}


def valid_points(team: Optional[Iterable[Point]]) -> List[Point]:
    """Drop points without numeric coordinates."""
    return [p for p in (team or []) if p.is_valid]


Bounds = Tuple[float, float, float, float]  # (min_x, max_x, min_y, max_y)


def within(point: Point, bounds: Bounds) -> bool:
    min_x, max_x, min_y, max_y = bounds
    return min_x <= point.left <= max_x and min_y <= point.top <= max_y
