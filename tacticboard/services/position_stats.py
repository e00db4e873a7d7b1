"""Team shape statistics: centroid, spread and thirds occupancy."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

import numpy as np

from .field import FIELD, FieldGeometry, Point, valid_points


@dataclass
class TeamStats:
    """Aggregate position statistics for one team snapshot."""
    avg_x: float
    avg_y: float
    spread_x: float
    spread_y: float
    count: int
    thirds: Dict[str, int] = field(default_factory=lambda: {"defense": 0, "middle": 0, "attack": 0})

    def to_dict(self) -> dict:
        return {
            "avgX": self.avg_x,
            "avgY": self.avg_y,
            "spreadX": self.spread_x,
            "spreadY": self.spread_y,
            "thirds": dict(self.thirds),
            "count": self.count,
        }


def _mean(values: np.ndarray) -> float:
    # Divide first so large coordinates cannot overflow the sum
    return float(np.sum(values / len(values)))


def compute_team_stats(
    team: Optional[Iterable[Point]],
    geometry: FieldGeometry = FIELD,
) -> Optional[TeamStats]:
    """Compute centroid, spread and thirds occupancy for a team.

    Points without numeric coordinates are ignored. Returns None when no
    valid point remains.

    Thirds are assigned on ``left`` with half-open intervals
    ``[0, W/3)``, ``[W/3, 2W/3)`` and ``[2W/3, inf)``; values below zero
    count as defense.
    """
    valid = valid_points(team)
    if not valid:
        return None

    xs = np.array([p.left for p in valid], dtype=float)
    ys = np.array([p.top for p in valid], dtype=float)

    third_w = geometry.width / 3
    thirds = {"defense": 0, "middle": 0, "attack": 0}
    for x in xs:
        if x < third_w:
            thirds["defense"] += 1
        elif x < 2 * third_w:
            thirds["middle"] += 1
        else:
            thirds["attack"] += 1

    return TeamStats(
        avg_x=_mean(xs),
        avg_y=_mean(ys),
        spread_x=float(xs.max()) - float(xs.min()),
        spread_y=float(ys.max()) - float(ys.min()),
        count=len(valid),
        thirds=thirds,
    )
