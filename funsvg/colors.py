"""Speed → paint mapping.

The color function is a pluggable dependency: every renderer accepts a
``color_fn`` and falls back to :func:`speed_to_hex`, a heatmap ramp that
walks one color step per 100 units/s of speed.
"""

import math
from collections.abc import Callable
from functools import lru_cache

from funsvg.models import GradientStop, PaintedStop

ColorFn = Callable[[float], str]

# --- Colors ---

# Heatmap ramp (slow → fast), one entry per SPEED_STEP
HEATMAP: list[tuple[int, int, int]] = [
    (0, 0, 0),
    (30, 144, 255),
    (34, 139, 34),
    (255, 215, 0),
    (220, 20, 60),
    (147, 112, 219),
    (37, 22, 122),
]
SPEED_STEP = 100.0


def _to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _heat_color(speed: float) -> tuple[int, int, int]:
    """Interpolate the heatmap ramp at ``speed``."""
    if math.isnan(speed) or speed <= 0:
        return HEATMAP[0]
    t = speed / SPEED_STEP
    if t >= len(HEATMAP) - 1:
        return HEATMAP[-1]
    idx = int(t)
    frac = t - idx
    lo, hi = HEATMAP[idx], HEATMAP[idx + 1]
    return tuple(round(a + (b - a) * frac) for a, b in zip(lo, hi))


@lru_cache(maxsize=4096)
def speed_to_hex(speed: float) -> str:
    return _to_hex(_heat_color(speed))


def speed_to_opacity(speed: float) -> float:
    """Fully opaque from speed 100 up, fading linearly toward 0 below it."""
    if speed >= 100:
        return 1.0
    return speed / 100


def paint_stop(
    stop: GradientStop,
    duration_ms: float,
    color_fn: ColorFn | None = None,
) -> PaintedStop:
    color_fn = color_fn or speed_to_hex
    return PaintedStop(
        offset=stop.offset(duration_ms),
        speed=stop.speed,
        color=color_fn(stop.speed),
        opacity=speed_to_opacity(stop.speed),
    )
