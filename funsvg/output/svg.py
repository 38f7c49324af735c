"""SVG markup for a funscript preview.

Serializes painted gradient stops and stroke commands. Numbers are rounded
half up to 2 decimals and printed without a trailing ``.0`` so identical
inputs give byte-identical markup.
"""

import logging
import math
from collections.abc import Sequence
from pathlib import Path

from funsvg.colors import ColorFn
from funsvg.config import Config, RenderConfig
from funsvg.gradient import build_gradient
from funsvg.models import Funscript, PaintedStop, Segment, StrokeCommand
from funsvg.segments import actions_to_segments, round2
from funsvg.strokes import to_stroke_commands

logger = logging.getLogger(__name__)

_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
}


def format_number(x: float) -> str:
    """Round to 2 decimals; integers print without a fractional part."""
    r = round2(x)
    if not math.isfinite(r):
        return str(r)
    if r == int(r):
        return str(int(r))
    return repr(r)


def escape_text(text: str) -> str:
    if not text:
        return text
    return "".join(_ENTITIES.get(ch, ch) for ch in text)


def gradient_id_for(script: Funscript) -> str:
    first_at = script.actions[0].at if script.actions else 0
    return f"funsvg-grad-{len(script.actions)}-{format_number(first_at)}"


# --- Fragments ---

def gradient_markup(stops: Sequence[PaintedStop], gradient_id: str) -> str:
    lines = [f'<linearGradient id="{escape_text(gradient_id)}">']
    for s in stops:
        opacity = "" if s.speed >= 100 else f' stop-opacity="{format_number(s.opacity)}"'
        lines.append(
            f'  <stop offset="{format_number(s.offset)}" stop-color="{s.color}"{opacity}></stop>'
        )
    lines.append("</linearGradient>")
    return "\n".join(lines)


def background_markup(
    stops: Sequence[PaintedStop],
    width: float,
    height: float,
    gradient_id: str,
    opacity: float = RenderConfig().graph_opacity,
    rect_id: str | None = None,
) -> str:
    rect_attr = f' id="{escape_text(rect_id)}"' if rect_id else ""
    return "\n".join([
        f"<defs>{gradient_markup(stops, gradient_id)}</defs>",
        f'<rect{rect_attr} width="{format_number(width)}" height="{format_number(height)}"'
        f' fill="url(#{escape_text(gradient_id)})" opacity="{format_number(opacity)}"></rect>',
    ])


def path_markup(cmd: StrokeCommand) -> str:
    f = format_number
    d = f"M {f(cmd.x1)} {f(cmd.y1)} L {f(cmd.x2)} {f(cmd.y2)}"
    return f'<path d="{d}" stroke="{cmd.color}"></path>'


def lines_markup(commands: Sequence[StrokeCommand]) -> list[str]:
    return [path_markup(c) for c in commands]


# --- Document ---

def resolve_duration(script: Funscript, render: RenderConfig) -> float:
    return render.duration_ms or script.duration_ms


def render_svg(
    script: Funscript,
    config: Config | None = None,
    gradient_segments: Sequence[Segment] | None = None,
    color_fn: ColorFn | None = None,
) -> str:
    """Render a single-channel SVG document for ``script``.

    Strokes come from the script's own segments. The background gradient is
    built from ``gradient_segments`` when given (e.g. an oversampled
    envelope of the same motion), else from the same segments.
    """
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
    grad_id = gradient_id_for(script)

    parts = [
        f'<svg class="funsvg" width="{format_number(render.width)}" height="{format_number(render.height)}"'
        ' xmlns="http://www.w3.org/2000/svg">',
        '  <g class="funsvg-bgs">',
        _indent(background_markup(stops, render.width, render.height, grad_id, render.graph_opacity), 4),
        "  </g>",
        f'  <g class="funsvg-lines" stroke-width="{format_number(render.line_width)}"'
        ' fill="none" stroke-linecap="round">',
        *(f"    {line}" for line in lines_markup(commands)),
        "  </g>",
        "</svg>",
    ]
    logger.info("Rendered SVG: %d stops, %d strokes", len(stops), len(commands))
    return "\n".join(parts)


def write_svg(svg: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg)
    logger.info("SVG saved to %s", output_path)
    return output_path


def _indent(text: str, n: int) -> str:
    pad = " " * n
    return "\n".join(pad + line for line in text.splitlines())
