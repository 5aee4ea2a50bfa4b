"""Solid primitives and lattice defects."""

from lsviewer.geometry.defects import Edge, Vertex, create_edges, edge_axis
from lsviewer.geometry.polyhedron import (
    Polyhedron,
    Rectangular,
    SolidMesh,
    SquarePyramid,
    Visual,
    resolve_visual,
)

__all__ = [
    "Edge",
    "Polyhedron",
    "Rectangular",
    "SolidMesh",
    "SquarePyramid",
    "Vertex",
    "Visual",
    "create_edges",
    "edge_axis",
    "resolve_visual",
]
