"""Turn keyframe actions into speed-tagged segments."""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from funsvg.models import Keyframe, Segment

logger = logging.getLogger(__name__)


def segment_speed(a: Keyframe, b: Keyframe) -> float:
    """Position units travelled per second between two keyframes."""
    return abs(b.pos - a.pos) / (b.at - a.at) * 1000


def actions_to_segments(actions: list[Keyframe]) -> list[Segment]:
    """Pair consecutive actions into segments.

    Pairs that do not move forward in time are skipped.
    """
    segments: list[Segment] = []
    skipped = 0
    for a, b in zip(actions, actions[1:]):
        if b.at <= a.at:
            skipped += 1
            continue
        segments.append(Segment(start=a, end=b, speed=segment_speed(a, b)))

    if skipped:
        logger.debug("Skipped %d zero-length action pairs", skipped)
    return segments


def round2(x: float) -> float:
    """Round to 2 decimals, ties away from zero.

    Works on the exact binary value of ``x``, so 0.125 becomes 0.13 while
    1.005 (stored just below) becomes 1.0. Non-finite values pass through.
    """
    if not math.isfinite(x):
        return x
    return float(Decimal(x).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def interpolate(a: Keyframe, b: Keyframe, t: float) -> Keyframe:
    return Keyframe(at=lerp(a.at, b.at, t), pos=lerp(a.pos, b.pos, t))
