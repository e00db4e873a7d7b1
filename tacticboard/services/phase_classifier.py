"""Game phase classification from the ball and both teams' positions."""

from typing import Callable, List, Optional, Sequence, Tuple

from .field import FIELD, FieldGeometry, Point

# Distance behind the center line that still counts as "near center"
CENTER_BAND = 50

PhaseRule = Callable[[Point, Sequence[Point], Sequence[Point], FieldGeometry], bool]


def _threshold(geometry: FieldGeometry) -> float:
    return geometry.center_x - CENTER_BAND


def _opponent_pressing(ball, green, black, geometry) -> bool:
    return ball.left > geometry.center_x and any(
        p.has_left and p.left > _threshold(geometry) for p in black
    )


def _we_are_pushing(ball, green, black, geometry) -> bool:
    return ball.left < geometry.center_x and any(
        p.has_left and p.left < _threshold(geometry) for p in green
    )


def _opponent_withdrawn(ball, green, black, geometry) -> bool:
    return bool(black) and all(
        p.has_left and p.left < _threshold(geometry) for p in black
    )


# Evaluated in order; the conditions overlap, so order decides the label.
PHASE_RULES: Tuple[Tuple[str, PhaseRule], ...] = (
    ("defense", _opponent_pressing),
    ("attack", _we_are_pushing),
    ("advanced", _opponent_withdrawn),
)


def classify_phase(
    ball: Optional[Point],
    green: Optional[List[Point]],
    black: Optional[List[Point]],
    geometry: FieldGeometry = FIELD,
) -> str:
    """Return "defense", "attack", "advanced" or "neutral".

    Without a numeric ball position the phase is always neutral.
    """
    if ball is None or not ball.has_left:
        return "neutral"

    green = green or []
    black = black or []
    for label, rule in PHASE_RULES:
        if rule(ball, green, black, geometry):
            return label
    return "neutral"
