"""PNG preview — rasterized speed gradient plus stroke path.

Same inputs as the SVG renderer, drawn with Pillow. The background follows
SVG linearGradient semantics: colors interpolate between stops and the
first/last stop colors extend to the edges.
"""

import logging
from bisect import bisect_right
from collections.abc import Sequence
from pathlib import Path

from PIL import Image, ImageColor, ImageDraw

from funsvg.colors import ColorFn
from funsvg.config import Config
from funsvg.gradient import build_gradient
from funsvg.models import Funscript, PaintedStop, Segment, StrokeCommand
from funsvg.output.svg import resolve_duration
from funsvg.segments import actions_to_segments
from funsvg.strokes import to_stroke_commands

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


def _rgb(color: str) -> RGB:
    return ImageColor.getrgb(color)[:3]


def _mix(a: RGB, b: RGB, t: float) -> RGB:
    return tuple(round(x + (y - x) * t) for x, y in zip(a, b))


def sample_gradient(stops: Sequence[PaintedStop], offset: float) -> tuple[RGB, float]:
    """Color and opacity of the gradient at ``offset`` in [0, 1]."""
    offsets = [s.offset for s in stops]
    i = bisect_right(offsets, offset)
    if i == 0:
        return _rgb(stops[0].color), stops[0].opacity
    if i == len(stops):
        return _rgb(stops[-1].color), stops[-1].opacity

    lo, hi = stops[i - 1], stops[i]
    width = hi.offset - lo.offset
    t = (offset - lo.offset) / width if width > 0 else 1.0
    color = _mix(_rgb(lo.color), _rgb(hi.color), t)
    return color, lo.opacity + (hi.opacity - lo.opacity) * t


def draw_preview(
    stops: Sequence[PaintedStop],
    commands: Sequence[StrokeCommand],
    width: int,
    height: int,
    config: Config,
    scale: int = 2,
) -> Image.Image:
    page = _rgb(config.render.page_color)
    img = Image.new("RGB", (width * scale, height * scale), page)
    draw = ImageDraw.Draw(img)

    # --- Background ---
    if stops:
        px_width = width * scale
        for x in range(px_width):
            color, opacity = sample_gradient(stops, (x + 0.5) / px_width)
            alpha = max(0.0, min(1.0, opacity * config.render.graph_opacity))
            draw.line([(x, 0), (x, height * scale)], fill=_mix(page, color, alpha))

    # --- Strokes (already speed-ordered) ---
    line_px = max(1, round(config.render.line_width * scale))
    for c in commands:
        draw.line(
            [(c.x1 * scale, c.y1 * scale), (c.x2 * scale, c.y2 * scale)],
            fill=_rgb(c.color),
            width=line_px,
        )

    return img


def render_preview(
    script: Funscript,
    output_path: Path,
    config: Config | None = None,
    gradient_segments: Sequence[Segment] | None = None,
    color_fn: ColorFn | None = None,
    scale: int = 2,
) -> Path:
    """Render ``script`` to a PNG file. Returns output path."""
    config = config or Config()
    render = config.render
    duration_ms = resolve_duration(script, render)

    segments = actions_to_segments(script.actions)
    if gradient_segments is None:
        gradient_segments = segments

    stops = build_gradient(gradient_segments, duration_ms, config.gradient, color_fn)
    commands = to_stroke_commands(
        segments, render.width, render.height, render.line_width, duration_ms, color_fn,
    )

    img = draw_preview(stops, commands, round(render.width), round(render.height), config, scale)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(output_path), "PNG")
    logger.info("Preview saved to %s (%dx%d)", output_path, img.width, img.height)
    return output_path
