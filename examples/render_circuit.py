#!/usr/bin/env python3
"""Demo: build a circuit from JSON and render it with Plotly.

Loads ``cnot_circuit.json`` next to this file, prints a short summary of the
emitted solids and writes an interactive HTML figure.

Usage:
  python examples/render_circuit.py [--config examples/scene.yml] [--output circuit.html] [--no-edges]
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from dataclasses import replace
from pathlib import Path

from lsviewer import CircuitDrawer, PlotlyScene, load_circuit, load_scene_config
from lsviewer.logging_config import setup_logging

HERE = Path(__file__).resolve().parent


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the bundled CNOT circuit")
    parser.add_argument("--circuit", type=Path, default=HERE / "cnot_circuit.json")
    parser.add_argument("--config", type=Path, default=None, help="Scene configuration YAML")
    parser.add_argument("--output", type=Path, default=Path("circuit.html"))
    parser.add_argument("--no-edges", action="store_true")
    args = parser.parse_args()

    setup_logging(logging.DEBUG)
    config = load_scene_config(args.config)
    if args.no_edges:
        config = replace(config, display_edges=False)

    circuit = load_circuit(args.circuit, config)
    meshes = circuit.create_meshes(config)
    print({
        "logical_qubits": len(circuit.logical_qubits),
        "edges": len(circuit.edges),
        "modules": len(circuit.modules),
        "solids": dict(Counter(m.shape.value for m in meshes)),
    })

    scene = PlotlyScene(config)
    CircuitDrawer(config).draw(circuit, scene)
    scene.figure().write_html(args.output)
    print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
