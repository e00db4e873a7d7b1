"""Tests for phase_classifier.py"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tacticboard.services.field import Point
from tacticboard.services.phase_classifier import PHASE_RULES, classify_phase


def at(*lefts):
    return [Point(left=x, top=150) for x in lefts]


class TestPhaseRules:
    """Ordered rule evaluation."""

    def test_rule_order(self):
        """Test rule order."""
        assert [label for label, _ in PHASE_RULES] == ["defense", "attack", "advanced"]

    def test_missing_ball_is_neutral(self):
        """Test missing ball is neutral."""
        assert classify_phase(None, at(100), at(100)) == "neutral"
        assert classify_phase(Point(top=10), at(100), at(100)) == "neutral"

    def test_defense(self):
        """Test defense."""
        assert classify_phase(Point(left=400, top=100), at(500), at(100, 260)) == "defense"

    def test_ball_past_center_with_withdrawn_opponent(self):
        """Test ball past center with withdrawn opponent."""
        assert classify_phase(Point(left=400, top=100), at(500), at(100, 200)) == "advanced"

    def test_attack(self):
        """Test attack."""
        assert classify_phase(Point(left=200, top=100), at(100, 400), at(400)) == "attack"

    def test_attack_takes_priority_over_advanced(self):
        """Test attack takes priority over advanced."""
        # both conditions hold; attack is checked first
        assert classify_phase(Point(left=200, top=100), at(100), at(100)) == "attack"

    def test_neutral_when_nothing_matches(self):
        """Test neutral when nothing matches."""
        assert classify_phase(Point(left=200, top=100), at(280), at(280)) == "neutral"

    def test_empty_black_is_never_advanced(self):
        """Test empty black is never advanced."""
        assert classify_phase(Point(left=200, top=100), at(280), []) == "neutral"

    def test_ball_on_center_line(self):
        """Test ball on center line."""
        ball = Point(left=300, top=100)
        assert classify_phase(ball, at(100), at(100)) == "advanced"
        assert classify_phase(ball, at(100), at(400)) == "neutral"

    def test_invalid_black_point_blocks_advanced(self):
        """Test invalid black point blocks advanced."""
        black = at(100) + [Point(left=None, top=10)]
        assert classify_phase(Point(left=200, top=100), at(280), black) == "neutral"

    def test_deterministic(self):
        """Test deterministic."""
        ball = Point(left=410, top=100)
        green, black = at(100, 500), at(270, 90)
        assert classify_phase(ball, green, black) == classify_phase(ball, green, black)
