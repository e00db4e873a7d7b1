"""Counter-formation synthesis for the computer-controlled (red) team.

The red team mirrors a formation template so it attacks right to left,
shifts it towards the opponent's centroid and the current phase, and pins
a goalkeeper on its own goal line following the ball vertically.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional

from .field import FIELD, Bounds, FieldGeometry, Point, clamp, round_half_up
from .formation_templates import GOALKEEPER_ID, get_template
from .position_stats import TeamStats

# Base forward push per local phase
PHASE_PUSH = {"attack": 30, "defense": -20, "neutral": 0}

MIRROR_MARGIN = 30
CENTROID_X_DIVISOR = 12
CENTROID_Y_DIVISOR = 6
MAX_LATERAL_SHIFT = 25
JITTER = 6.0

# Field-relative clamp margins
EDGE_MARGIN = 20
FAR_EDGE_MARGIN_X = 30

GK_MARGIN = 20
GK_TOP_MIN = 30
GK_BOTTOM_MARGIN = 40

# Centroids further out than this already saturate every shift
CENTROID_LIMIT = 1e6

_default_rng = random.Random()


@dataclass
class CounterFormation:
    """Synthesized team (goalkeeper first) and the phase used to place it."""
    red: List[Point]
    phase: str


def ball_phase(ball: Optional[Point], geometry: FieldGeometry = FIELD) -> str:
    """Phase of the red team judged by the ball's horizontal position only."""
    if ball is None or not ball.has_left:
        return "neutral"
    return "defense" if (ball.left - geometry.left_offset) > geometry.center_x else "attack"


def counter_bounds(geometry: FieldGeometry = FIELD) -> Bounds:
    """Page-absolute bounds every synthesized player stays inside."""
    return (
        geometry.left_offset + EDGE_MARGIN,
        geometry.left_offset + geometry.width - GK_MARGIN,
        geometry.top_offset + EDGE_MARGIN,
        geometry.top_offset + geometry.height - EDGE_MARGIN,
    )


def _centroid(stats: Optional[TeamStats], geometry: FieldGeometry):
    if stats is None or not (math.isfinite(stats.avg_x) and math.isfinite(stats.avg_y)):
        return geometry.center_x, geometry.mid_y
    return (
        round_half_up(clamp(stats.avg_x - geometry.left_offset, -CENTROID_LIMIT, CENTROID_LIMIT)),
        round_half_up(clamp(stats.avg_y - geometry.top_offset, -CENTROID_LIMIT, CENTROID_LIMIT)),
    )


def _goalkeeper(ball: Optional[Point], geometry: FieldGeometry) -> Point:
    if ball is not None and ball.has_top:
        rel_top = clamp(
            round_half_up(ball.top - geometry.top_offset),
            GK_TOP_MIN,
            geometry.height - GK_BOTTOM_MARGIN,
        )
    else:
        rel_top = round_half_up(geometry.mid_y)
    return Point(
        id=GOALKEEPER_ID,
        left=geometry.left_offset + geometry.width - GK_MARGIN,
        top=geometry.top_offset + rel_top,
    )


def build_counter_formation(
    formation: str,
    stats: Optional[TeamStats],
    ball: Optional[Point],
    rng: Optional[random.Random] = None,
    geometry: FieldGeometry = FIELD,
) -> CounterFormation:
    """Place the red team against an opponent playing ``formation``.

    Args:
        formation: Detected formation label; unknown labels use 4-3-3.
        stats: Position statistics of the opponent, or None for no data.
        ball: Ball position, if known.
        rng: Source of the vertical jitter (anything with ``uniform``).

    Returns:
        CounterFormation with 11 players, goalkeeper first.
    """
    rng = rng or _default_rng
    template = get_template(formation)
    centroid_x, centroid_y = _centroid(stats, geometry)

    phase = ball_phase(ball, geometry)
    forward_shift = PHASE_PUSH[phase] + round_half_up((centroid_x - geometry.center_x) / CENTROID_X_DIVISOR)
    lateral_shift = clamp(
        round_half_up((centroid_y - geometry.mid_y) / CENTROID_Y_DIVISOR),
        -MAX_LATERAL_SHIFT,
        MAX_LATERAL_SHIFT,
    )

    red = []
    for slot in template:
        rel_x = geometry.width - slot.x + forward_shift - MIRROR_MARGIN
        rel_y = slot.y + lateral_shift + rng.uniform(-JITTER, JITTER)

        rel_x = clamp(round_half_up(rel_x), EDGE_MARGIN, geometry.width - FAR_EDGE_MARGIN_X)
        rel_y = clamp(round_half_up(rel_y), EDGE_MARGIN, geometry.height - EDGE_MARGIN)

        red.append(Point(
            id=slot.id,
            left=geometry.left_offset + rel_x,
            top=geometry.top_offset + rel_y,
        ))

    red.insert(0, _goalkeeper(ball, geometry))
    return CounterFormation(red=red, phase=phase)
