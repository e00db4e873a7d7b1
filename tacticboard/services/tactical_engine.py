"""Per-snapshot tactical analysis combining the engine components."""

import random
from dataclasses import dataclass
from typing import List, Optional

from .companion import reposition_companion
from .counter_formation import build_counter_formation
from .field import Point
from .formation_classifier import detect_formation
from .phase_classifier import classify_phase
from .position_stats import compute_team_stats


@dataclass
class TacticalAnalysis:
    """Result of analysing one board snapshot."""
    detected_formation: str
    phase: str
    red: List[Point]
    green_adjusted: List[Point]

    def to_dict(self) -> dict:
        return {
            "detectedFormation": self.detected_formation,
            "phase": self.phase,
            "red": [p.to_dict() for p in self.red],
            "greenAdjusted": [p.to_dict() for p in self.green_adjusted],
        }


def analyze_snapshot(
    ball: Optional[Point],
    green: Optional[List[Point]],
    black: Optional[List[Point]],
    rng: Optional[random.Random] = None,
) -> TacticalAnalysis:
    """Classify the snapshot and compute red and adjusted green positions.

    The formation is read from the black team when it has players, else
    from the green team. The red team is built against the green team.
    """
    green = list(green or [])
    black = list(black or [])

    formation = detect_formation(black if black else green)
    stats = compute_team_stats(green)
    counter = build_counter_formation(formation, stats, ball, rng=rng)
    phase = classify_phase(ball, green, black)

    return TacticalAnalysis(
        detected_formation=formation,
        phase=phase,
        red=counter.red,
        green_adjusted=reposition_companion(phase, green, black),
    )
