"""Formation detection by clustering players into horizontal lines."""

from typing import Iterable, List, Optional, Tuple

from .field import Point, is_number

DEFAULT_FORMATION = "4-3-3"

# Max distance between a player and the running mean of its line
LINE_TOLERANCE = 45.0

# Evaluated in order; first signature prefix match wins.
FORMATION_RULES: Tuple[Tuple[str, str], ...] = (
    ("4-4-2", "4-4-2"),
    ("3-5-2", "3-5-2"),
    ("5-3-2", "5-3-2"),
    ("4-3-3", "4-3-3"),
    ("4-2-3-1", "4-2-3-1"),
    ("3-4-3", "3-4-3"),
)


def cluster_lines(values: Iterable[float], tolerance: float = LINE_TOLERANCE) -> List[List[float]]:
    """Greedily group sorted coordinates into lines.

    A value opens a new line when it lies further than ``tolerance`` from
    the mean of the current line; otherwise it joins it and the mean is
    updated.
    """
    lines: List[List[float]] = []
    mean = 0.0
    for v in sorted(values):
        if not lines or abs(v - mean) > tolerance:
            lines.append([v])
            mean = v
        else:
            current = lines[-1]
            current.append(v)
            mean += (v - mean) / len(current)
    return lines


def line_signature(lines: List[List[float]]) -> str:
    """Dash-joined line sizes, largest first (e.g. "4-4-2")."""
    counts = sorted((len(line) for line in lines), reverse=True)
    return "-".join(str(c) for c in counts)


def match_signature(signature: str) -> Optional[str]:
    for prefix, label in FORMATION_RULES:
        if signature.startswith(prefix):
            return label
    return None


def detect_formation(team: Optional[Iterable[Point]]) -> str:
    """Classify a team snapshot into a named formation.

    Heuristic only: the descending sort loses line order, so shapes such as
    4-2-3-1 rarely match their own label. Falls back to 4-3-3.
    """
    tops = [p.top for p in (team or []) if is_number(p.top)]
    if not tops:
        return DEFAULT_FORMATION

    signature = line_signature(cluster_lines(tops))
    return match_signature(signature) or DEFAULT_FORMATION
