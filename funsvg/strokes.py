"""Map speed-tagged segments to pixel-space stroke commands."""

import logging
from collections.abc import Sequence

from funsvg.colors import ColorFn, speed_to_hex
from funsvg.models import Keyframe, Segment, StrokeCommand, check_duration
from funsvg.segments import round2

logger = logging.getLogger(__name__)


class PixelMapper:
    """Converts (time, position) to pixel coordinates inside a padded box.

    Time runs left to right across ``width``; position 100 is at the top.
    Both axes are inset by ``line_width`` so round caps stay inside the box.
    """

    def __init__(self, width: float, height: float, line_width: float, duration_ms: float) -> None:
        check_duration(duration_ms)
        self.width = width
        self.height = height
        self.line_width = line_width
        self.duration_ms = duration_ms

    def x(self, at: float) -> float:
        lw = self.line_width
        return round2(at / self.duration_ms * (self.width - 2 * lw) + lw)

    def y(self, pos: float) -> float:
        lw = self.line_width
        return round2((100 - pos) * (self.height - 2 * lw) / 100 + lw)

    def point(self, k: Keyframe) -> tuple[float, float]:
        return self.x(k.at), self.y(k.pos)


def to_stroke_commands(
    segments: Sequence[Segment],
    width: float,
    height: float,
    line_width: float,
    duration_ms: float,
    color_fn: ColorFn | None = None,
) -> list[StrokeCommand]:
    """One stroke per segment, sorted so faster strokes paint last."""
    color_fn = color_fn or speed_to_hex
    mapper = PixelMapper(width, height, line_width, duration_ms)

    commands = []
    for seg in segments:
        x1, y1 = mapper.point(seg.start)
        x2, y2 = mapper.point(seg.end)
        commands.append(StrokeCommand(
            x1=x1, y1=y1, x2=x2, y2=y2,
            speed=seg.speed,
            color=color_fn(seg.speed),
        ))

    commands.sort(key=lambda c: c.speed)
    logger.debug("Built %d stroke commands", len(commands))
    return commands
