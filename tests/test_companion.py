"""Tests for companion.py"""

import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tacticboard.services.field import Point, within
from tacticboard.services.companion import companion_bounds, reposition_companion


class TestRepositioning:
    """Marking the opponent at the same index."""

    def test_defense_scenario(self):
        """Test defense scenario."""
        green = [Point(id=1, left=10, top=10)]
        black = [Point(id=7, left=300, top=150)]
        adjusted = reposition_companion("defense", green, black)
        assert adjusted == [Point(id=1, left=240, top=135)]

    def test_lateral_offset_alternates(self):
        """Test lateral offset alternates."""
        green = [Point(id=i) for i in range(3)]
        black = [Point(left=300, top=150)] * 3
        adjusted = reposition_companion("neutral", green, black)
        assert [p.top for p in adjusted] == [135, 165, 135]
        assert all(p.left == 300 for p in adjusted)

    def test_phase_offsets(self):
        """Test phase offsets."""
        green = [Point(id=1)]
        black = [Point(left=300, top=150)]
        assert reposition_companion("attack", green, black)[0].left == 340
        assert reposition_companion("advanced", green, black)[0].left == 380
        assert reposition_companion("unknown", green, black)[0].left == 300

    def test_pairs_only_common_indices(self):
        """Test pairs only common indices."""
        green = [Point(id=i) for i in range(5)]
        black = [Point(left=300, top=150)] * 2
        assert [p.id for p in reposition_companion("neutral", green, black)] == [0, 1]

    def test_invalid_opponent_is_skipped(self):
        """Test invalid opponent is skipped."""
        green = [Point(id=1), Point(id=2)]
        black = [Point(left=None, top=150), Point(left=300, top=150)]
        adjusted = reposition_companion("neutral", green, black)
        assert adjusted == [Point(id=2, left=300, top=165)]

    def test_clamped_to_interior(self):
        """Test clamped to interior."""
        green = [Point(id=1), Point(id=2)]
        black = [Point(left=0, top=0), Point(left=900, top=900)]
        adjusted = reposition_companion("advanced", green, black)
        assert adjusted[0] == Point(id=1, left=80, top=30)
        assert adjusted[1] == Point(id=2, left=570, top=270)


class TestPassthrough:
    """No opponent data."""

    def test_empty_opponent_returns_input(self):
        """Test empty opponent returns input."""
        green = [Point(id=1, left=5, top=5), Point(id=2, left="x", top=None)]
        assert reposition_companion("defense", green, []) == green

    def test_none_opponent_returns_input(self):
        """Test none opponent returns input."""
        green = [Point(id=1, left=5, top=5)]
        assert reposition_companion("attack", green, None) == green


class TestBounds:
    """Every repositioned player stays inside the field."""

    def test_random_input(self):
        """Test random input."""
        rng = random.Random(99)
        bounds = companion_bounds()
        for _ in range(200):
            size = rng.randint(1, 11)
            green = [Point(id=i) for i in range(size)]
            black = [
                Point(left=rng.uniform(-1000, 1600), top=rng.uniform(-1000, 1300))
                for _ in range(rng.randint(1, 11))
            ]
            phase = rng.choice(["defense", "attack", "advanced", "neutral"])
            for point in reposition_companion(phase, green, black):
                assert within(point, bounds)
