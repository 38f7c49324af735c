"""Tests for the action → segment transform."""

import math

import pytest

from funsvg.models import Keyframe
from funsvg.segments import actions_to_segments, interpolate, lerp, round2, segment_speed


class TestActionsToSegments:
    def test_speed_in_units_per_second(self):
        segs = actions_to_segments([Keyframe(at=0, pos=0), Keyframe(at=500, pos=100)])
        assert len(segs) == 1
        assert segs[0].speed == pytest.approx(200)

    def test_direction_ignored(self):
        assert segment_speed(Keyframe(at=0, pos=80), Keyframe(at=1000, pos=20)) == pytest.approx(60)

    def test_skips_non_forward_pairs(self):
        actions = [
            Keyframe(at=0, pos=0),
            Keyframe(at=100, pos=50),
            Keyframe(at=100, pos=60),
            Keyframe(at=300, pos=0),
        ]
        segs = actions_to_segments(actions)
        assert [(s.start.at, s.end.at) for s in segs] == [(0, 100), (100, 300)]

    def test_empty_and_single(self):
        assert actions_to_segments([]) == []
        assert actions_to_segments([Keyframe(at=0, pos=0)]) == []


class TestInterpolate:
    def test_lerp(self):
        assert lerp(10, 20, 0.25) == 12.5

    def test_keyframe(self):
        k = interpolate(Keyframe(at=1000, pos=0), Keyframe(at=2000, pos=100), 0.5)
        assert (k.at, k.pos) == (1500, 50)


class TestRound2:
    @pytest.mark.parametrize("value,expected", [
        (0.125, 0.13),
        (0.625, 0.63),
        (-0.125, -0.13),
        (1.005, 1.0),
        (230.16666, 230.17),
        (12, 12.0),
    ])
    def test_values(self, value, expected):
        assert round2(value) == expected

    def test_non_finite_pass_through(self):
        assert round2(float("inf")) == float("inf")
        assert math.isnan(round2(float("nan")))
