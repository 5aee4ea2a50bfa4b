"""Command line entry point: render a circuit document with Plotly.

Usage:
    lsviewer circuit.json [--config scene.yml] [--output circuit.html] [--no-edges] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from lsviewer.builder import load_circuit
from lsviewer.config import load_scene_config
from lsviewer.drawer import draw_circuit_plotly
from lsviewer.exceptions import CircuitValidationError, ConfigError
from lsviewer.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lsviewer", description="Render a lattice-surgery circuit in 3D")
    parser.add_argument("circuit", type=Path, help="Circuit document (.json, .yml or .yaml)")
    parser.add_argument("--config", type=Path, default=None, help="Scene configuration YAML")
    parser.add_argument("--output", type=Path, default=None, help="Write an HTML file instead of showing the figure")
    parser.add_argument("--no-edges", action="store_true", help="Do not draw edge overlays")
    parser.add_argument("--width", type=int, default=900, help="Figure width in pixels")
    parser.add_argument("--height", type=int, default=700, help="Figure height in pixels")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_scene_config(args.config)
        if args.no_edges:
            config = replace(config, display_edges=False)
        circuit = load_circuit(args.circuit, config)
    except (CircuitValidationError, ConfigError, OSError) as exc:
        print(f"lsviewer: error: {exc}", file=sys.stderr)
        return 1

    fig = draw_circuit_plotly(circuit, config, width=args.width, height=args.height)
    if args.output is not None:
        fig.write_html(args.output)
        logger.info("Wrote %s", args.output)
    else:
        fig.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
