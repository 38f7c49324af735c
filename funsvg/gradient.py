"""Speed gradient synthesis.

Turns a dense, variable-length list of speed-tagged segments into a short
list of gradient stops:

1. expand_segments: split long segments into ~target_span_ms pieces
2. merge_short_segments: fuse adjacent short pieces, weighting speed by duration
3. compress_stops: drop flat-run interior stops, add start/end and fade stops

build_gradient runs all three and paints the result.
"""

import logging
import math
from collections.abc import Callable, Sequence
from typing import TypeVar

from funsvg.colors import ColorFn, paint_stop
from funsvg.config import GradientConfig
from funsvg.models import GradientStop, PaintedStop, Segment, check_duration
from funsvg.segments import interpolate

logger = logging.getLogger(__name__)

T = TypeVar("T", Segment, GradientStop)


# --- Interval expansion ---

def split_count(span: float, config: GradientConfig) -> int:
    """Number of pieces a segment of ``span`` ms is split into."""
    if span <= config.long_span_ms:
        return 1
    return max(1, math.floor((span - config.split_bias_ms) / config.target_span_ms))


def expand_segments(
    segments: Sequence[Segment],
    config: GradientConfig | None = None,
) -> list[Segment]:
    """Subdivide over-long segments into evenly spaced pieces of equal speed.

    Segments with a non-positive span are dropped.
    """
    config = config or GradientConfig()
    expanded: list[Segment] = []
    dropped = 0

    for seg in segments:
        span = seg.span
        if not span > 0:
            dropped += 1
            continue
        n = split_count(span, config)
        if n == 1:
            expanded.append(seg)
            continue
        for i in range(n):
            expanded.append(Segment(
                start=interpolate(seg.start, seg.end, i / n),
                end=interpolate(seg.start, seg.end, (i + 1) / n),
                speed=seg.speed,
            ))

    if dropped:
        logger.debug("Dropped %d segments with non-positive span", dropped)
    return expanded


# --- Interval merging ---

def merged_speed(left: Segment, right: Segment) -> float:
    """Duration-weighted average speed of two segments."""
    d1 = left.span
    d2 = right.span
    return (left.speed * d1 + right.speed * d2) / (d1 + d2)


def merge_short_segments(
    segments: Sequence[Segment],
    config: GradientConfig | None = None,
) -> list[Segment]:
    """Fuse adjacent pairs whose combined span is below merge_span_ms.

    A merged segment is checked again against its new right neighbor, so
    merges cascade through runs of short segments.
    """
    config = config or GradientConfig()
    lines = list(segments)

    i = 0
    while i < len(lines) - 1:
        left, right = lines[i], lines[i + 1]
        if right.end.at - left.start.at < config.merge_span_ms:
            lines[i:i + 2] = [Segment(
                start=left.start,
                end=right.end,
                speed=merged_speed(left, right),
            )]
            continue
        i += 1

    return lines


# --- Stop compression ---

def drop_redundant(items: Sequence[T], speed: Callable[[T], float] = lambda e: e.speed) -> list[T]:
    """Remove every item whose speed equals both of its neighbors' speeds.

    Neighbors are taken from the input list, so a flat run keeps only its
    two endpoints. The first and last items are always kept.
    """
    kept: list[T] = []
    last = len(items) - 1
    for i, item in enumerate(items):
        if 0 < i < last and speed(items[i - 1]) == speed(item) == speed(items[i + 1]):
            continue
        kept.append(item)
    return kept


def compress_stops(
    segments: Sequence[Segment],
    duration_ms: float,
    config: GradientConfig | None = None,
) -> list[GradientStop]:
    """Derive gradient stops from merged segments.

    Each surviving segment contributes a stop at its midpoint. The first and
    last segments add stops at their outer edges, plus zero-speed fade stops
    ``fade_ms`` outside them when there is room before 0 / after the end.
    """
    config = config or GradientConfig()
    check_duration(duration_ms)

    stops = [
        GradientStop(at=(seg.start.at + seg.end.at) / 2, speed=seg.speed)
        for seg in drop_redundant(segments)
    ]

    if segments:
        first, last = segments[0], segments[-1]
        head = [GradientStop(at=first.start.at, speed=first.speed)]
        if first.start.at > config.fade_ms:
            head.insert(0, GradientStop(at=first.start.at - config.fade_ms, speed=0))
        tail = [GradientStop(at=last.end.at, speed=last.speed)]
        if last.end.at < duration_ms - config.fade_ms:
            tail.append(GradientStop(at=last.end.at + config.fade_ms, speed=0))
        stops = head + stops + tail

    return drop_redundant(stops)


# --- Pipeline ---

def synthesize_stops(
    segments: Sequence[Segment],
    duration_ms: float,
    config: GradientConfig | None = None,
) -> list[GradientStop]:
    """Expand, merge and compress ``segments`` into unpainted stops."""
    config = config or GradientConfig()
    check_duration(duration_ms)

    expanded = expand_segments(segments, config)
    merged = merge_short_segments(expanded, config)
    stops = compress_stops(merged, duration_ms, config)

    logger.debug(
        "Gradient: %d segments -> %d expanded -> %d merged -> %d stops",
        len(segments), len(expanded), len(merged), len(stops),
    )
    return stops


def build_gradient(
    segments: Sequence[Segment],
    duration_ms: float,
    config: GradientConfig | None = None,
    color_fn: ColorFn | None = None,
) -> list[PaintedStop]:
    """Full gradient synthesis: painted stops with clamped offsets."""
    stops = synthesize_stops(segments, duration_ms, config)
    return [paint_stop(s, duration_ms, color_fn) for s in stops]
