"""Tests for speed → color/opacity mapping."""

import pytest

from funsvg.colors import HEATMAP, paint_stop, speed_to_hex, speed_to_opacity
from funsvg.models import GradientStop


class TestSpeedToOpacity:
    @pytest.mark.parametrize("speed,expected", [
        (0, 0),
        (50, 0.5),
        (99, 0.99),
        (100, 1),
        (450, 1),
    ])
    def test_values(self, speed, expected):
        assert speed_to_opacity(speed) == pytest.approx(expected)


class TestSpeedToHex:
    def test_ramp_stops(self):
        assert speed_to_hex(0) == "#000000"
        assert speed_to_hex(100) == "#1e90ff"
        assert speed_to_hex(300) == "#ffd700"

    def test_interpolates_between_stops(self):
        assert speed_to_hex(50) == "#0f4880"

    def test_clamped_above_ramp(self):
        top = "#{:02x}{:02x}{:02x}".format(*HEATMAP[-1])
        assert speed_to_hex(600) == top
        assert speed_to_hex(10_000) == top
        assert speed_to_hex(float("inf")) == top

    def test_negative_and_nan(self):
        assert speed_to_hex(-5) == "#000000"
        assert speed_to_hex(float("nan")) == "#000000"

    def test_deterministic(self):
        assert speed_to_hex(123.456) == speed_to_hex(123.456)


class TestPaintStop:
    def test_offset_clamped(self):
        assert paint_stop(GradientStop(at=-50, speed=0), 1000).offset == 0
        assert paint_stop(GradientStop(at=1100, speed=0), 1000).offset == 1

    def test_paint(self):
        p = paint_stop(GradientStop(at=250, speed=50), 1000)
        assert p.offset == 0.25
        assert p.color == "#0f4880"
        assert p.opacity == 0.5

    def test_custom_color_fn(self):
        p = paint_stop(GradientStop(at=0, speed=200), 1000, color_fn=lambda s: f"speed-{s:g}")
        assert p.color == "speed-200"
        assert p.opacity == 1
