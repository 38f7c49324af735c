"""CLI entry point for funsvg."""

import argparse
import logging
import sys
from pathlib import Path

from funsvg.config import load_config
from funsvg.gradient import build_gradient
from funsvg.models import Funscript
from funsvg.output.preview import render_preview
from funsvg.output.svg import format_number, render_svg, resolve_duration, write_svg
from funsvg.segments import actions_to_segments

logger = logging.getLogger(__name__)


def load_script(path: Path) -> Funscript:
    """Read a funscript JSON file ({"actions": [{"at": .., "pos": ..}, ..]})."""
    return Funscript.model_validate_json(path.read_text())


def _default_output(script_path: Path, output_dir: Path, suffix: str) -> Path:
    return output_dir / f"{script_path.stem}{suffix}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Funscript preview renderer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command")

    # svg command
    svg_parser = sub.add_parser("svg", help="Render an SVG preview")
    svg_parser.add_argument("script", type=Path, help="Path to a .funscript file")
    svg_parser.add_argument("-o", "--output", type=Path, default=None, help="Output .svg path")

    # png command
    png_parser = sub.add_parser("png", help="Render a PNG preview")
    png_parser.add_argument("script", type=Path, help="Path to a .funscript file")
    png_parser.add_argument("-o", "--output", type=Path, default=None, help="Output .png path")
    png_parser.add_argument("--scale", type=int, default=2, help="Pixels per SVG unit")

    # stops command
    stops_parser = sub.add_parser("stops", help="Print the background gradient stops")
    stops_parser.add_argument("script", type=Path, help="Path to a .funscript file")

    for p in (svg_parser, png_parser, stops_parser):
        p.add_argument(
            "--duration-ms", type=float, default=None,
            help="Timeline length in ms (default: last action time)",
        )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    config = load_config(args.config)
    if args.duration_ms is not None:
        config.render.duration_ms = args.duration_ms

    try:
        script = load_script(args.script)

        if args.command == "svg":
            svg = render_svg(script, config)
            output = args.output or _default_output(args.script, config.resolved_output_dir, ".svg")
            print(write_svg(svg, output))

        elif args.command == "png":
            output = args.output or _default_output(args.script, config.resolved_output_dir, ".png")
            print(render_preview(script, output, config, scale=args.scale))

        elif args.command == "stops":
            duration_ms = resolve_duration(script, config.render)
            stops = build_gradient(actions_to_segments(script.actions), duration_ms, config.gradient)
            for s in stops:
                print(
                    f"  {format_number(s.offset):>5}  speed={format_number(s.speed):<8} "
                    f"{s.color}  opacity={format_number(s.opacity)}"
                )
            print(f"\nTotal: {len(stops)} stops over {format_number(duration_ms)} ms")

    except (ValueError, FileNotFoundError) as e:
        logger.error("%s: %s", args.script, e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
