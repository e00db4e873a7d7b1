# Tactical engine (pure, no I/O)
from .field import FIELD, FieldGeometry, Point
from .position_stats import TeamStats, compute_team_stats
from .formation_classifier import detect_formation
from .formation_templates import FORMATION_TEMPLATES, get_template
from .counter_formation import CounterFormation, build_counter_formation
from .phase_classifier import classify_phase
from .companion import reposition_companion
from .tactical_engine import TacticalAnalysis, analyze_snapshot

__all__ = [
    "FIELD",
    "FieldGeometry",
    "Point",
    "TeamStats",
    "compute_team_stats",
    "detect_formation",
    "FORMATION_TEMPLATES",
    "get_template",
    "CounterFormation",
    "build_counter_formation",
    "classify_phase",
    "reposition_companion",
    "TacticalAnalysis",
    "analyze_snapshot",
]
