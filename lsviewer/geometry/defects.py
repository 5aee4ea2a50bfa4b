"""Lattice defects: vertices and the edges spanning them.

An :class:`Edge` is a block, an injector or a cap. All three share one
geometry derivation; the kind only selects the default visual and the mesh
shape (box for blocks, two opposing pyramids for injectors and caps).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from lsviewer.consts import Axis, DefectKind, ShapeKind
from lsviewer.exceptions import MisalignedEndpointsError
from lsviewer.geometry.polyhedron import (
    Polyhedron,
    Rectangular,
    SolidMesh,
    SquarePyramid,
    Visual,
)
from lsviewer.mytype import AxisLike, Pos, Size, Vector3D

if TYPE_CHECKING:
    from lsviewer.config import SceneConfig

EndpointSpec: TypeAlias = "Vertex | Vector3D | Sequence[float]"

# Attribute overrides applied to the inherited visual per edge kind.
_KIND_VISUAL_DEFAULTS: dict[DefectKind, dict[str, object]] = {
    DefectKind.BLOCK: {},
    DefectKind.INJECTOR: {},
    DefectKind.CAP: {"transparent": True},
}

_PYRAMID_BASE = 1


def _to_pos(spec: Vector3D | Sequence[float]) -> Pos:
    if isinstance(spec, Vector3D):
        return Pos(*spec.to_array())
    x, y, z = spec
    return Pos(x, y, z)


@dataclass(frozen=True, eq=False)
class Vertex(Polyhedron):
    """Unit-size defect at a world position.

    Vertices compare and hash by ``pos`` only, so two vertices at the same
    position collapse in sets regardless of their visuals.
    """

    shape: ClassVar[ShapeKind] = ShapeKind.BOX

    pos: Pos
    visual: Visual | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.pos, Pos):
            object.__setattr__(self, "pos", _to_pos(self.pos))

    @classmethod
    def at(cls, lattice_pos: Vector3D | Sequence[float], config: SceneConfig, visual: Visual | None = None) -> Vertex:
        """Place a vertex at lattice coordinate ``lattice_pos`` (scaled by the pitch)."""

        return cls(_to_pos(lattice_pos).mul(config.pitch), visual)  # type: ignore[arg-type]

    @property
    def size(self) -> Size:  # type: ignore[override]
        return Size.unit()

    def get_next(self, axis: AxisLike, config: SceneConfig, n: int = 1) -> Vertex:
        """Return the vertex ``n`` lattice steps further along ``axis``."""

        return replace(self, pos=self.pos.add(n * config.pitch, axis))

    def with_visual(self, visual: Visual | None) -> Vertex:
        return replace(self, visual=visual)

    def clone(self) -> Vertex:
        return replace(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.pos == other.pos

    def __hash__(self) -> int:
        return hash(self.pos)

    @staticmethod
    def compare(a: Vertex, b: Vertex) -> int:
        return Pos.compare(a.pos, b.pos)

    @staticmethod
    def min(a: Vertex, b: Vertex) -> Vertex:
        return a if a.pos.is_less_than(b.pos) else b

    @staticmethod
    def max(a: Vertex, b: Vertex) -> Vertex:
        return b if a.pos.is_less_than(b.pos) else a


def edge_axis(a: Vector3D, b: Vector3D) -> Axis:
    """Return the single axis along which ``a`` and ``b`` differ.

    Raises
    ------
    MisalignedEndpointsError
        If the positions differ along zero or several axes.
    """

    differing = a.differing_axes(b)
    if len(differing) != 1:
        raise MisalignedEndpointsError(a, b)
    return Axis(differing[0])


@dataclass(frozen=True)
class Edge:
    """Axis-aligned edge between two vertices.

    Construction validates and normalises the endpoints: they must differ
    along exactly one axis, and ``vertices`` is stored lesser endpoint first
    in the z-major Pos order. ``axis``, ``pos`` (midpoint) and ``size`` (the
    open span strictly between the two endpoint cells) are derived from them.
    """

    kind: DefectKind
    vertices: tuple[Vertex, Vertex]
    visual: Visual | None = None
    axis: Axis = field(init=False)
    pos: Pos = field(init=False)
    size: Size = field(init=False)

    def __post_init__(self) -> None:
        a, b = self.vertices
        axis = edge_axis(a.pos, b.pos)
        lesser, greater = sorted((a, b), key=lambda v: v.pos.sort_key())
        span = greater.pos.component(axis) - lesser.pos.component(axis) - 1
        if span < 0:
            msg = f"Endpoint cells at {lesser.pos.to_array()} and {greater.pos.to_array()} overlap"
            raise ValueError(msg)

        object.__setattr__(self, "kind", DefectKind(self.kind))
        object.__setattr__(self, "vertices", (lesser, greater))
        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "pos", lesser.pos.add(greater.pos, axis).div(2, axis))
        object.__setattr__(self, "size", Size.unit().with_component(axis, span))

    @classmethod
    def create(
        cls,
        a: EndpointSpec,
        b: EndpointSpec,
        config: SceneConfig,
        *,
        kind: DefectKind = DefectKind.BLOCK,
        visual: Visual | None = None,
    ) -> Edge:
        """Build an edge from two endpoint specifications.

        Raw positions are lattice coordinates and are placed with the
        configured pitch. Existing vertices are kept as they are unless
        ``visual`` is given, in which case they take that visual.
        """

        return cls(kind, (_to_vertex(a, config, visual), _to_vertex(b, config, visual)), visual)

    @property
    def length(self) -> float:
        """Extent along the edge's axis."""
        return self.size.component(self.axis)

    def clone(self) -> Edge:
        return replace(self)

    def decompose_to_minimum_units(self, config: SceneConfig) -> list[Edge]:
        """Split into consecutive unit edges, one lattice step each.

        The units run from the lesser endpoint to the greater one and keep
        this edge's kind and visual.
        """

        start, end = self.vertices
        units: list[Edge] = []
        vertex = start
        while Vertex.compare(vertex, end) < 0:
            next_vertex = vertex.get_next(self.axis, config)
            if Vertex.compare(next_vertex, end) > 0:
                next_vertex = end
            units.append(Edge(self.kind, (vertex, next_vertex), self.visual))
            vertex = next_vertex
        return units

    def resolve_visual(self, config: SceneConfig, inherited: Visual | None = None) -> Visual:
        if self.visual is not None:
            return self.visual
        base = inherited if inherited is not None else Visual.default(config)
        return replace(base, **_KIND_VISUAL_DEFAULTS[self.kind])

    def solids(self) -> list[Polyhedron]:
        if self.kind is DefectKind.BLOCK:
            return [Rectangular(self.pos, self.size)]

        height = self.length / 2
        offset = height / 2
        return [
            SquarePyramid(self.pos.sub(offset, self.axis), _PYRAMID_BASE, height, self.axis),  # type: ignore[arg-type]
            SquarePyramid(self.pos.add(offset, self.axis), _PYRAMID_BASE, height, self.axis, reverse=True),  # type: ignore[arg-type]
        ]

    def create_meshes(self, config: SceneConfig, inherited: Visual | None = None) -> list[SolidMesh]:
        visual = self.resolve_visual(config, inherited)
        meshes: list[SolidMesh] = []
        for solid in self.solids():
            meshes.extend(solid.create_meshes(config, visual))
        return meshes


def _to_vertex(spec: EndpointSpec, config: SceneConfig, visual: Visual | None) -> Vertex:
    if isinstance(spec, Vertex):
        return spec if visual is None else spec.with_visual(visual)
    return Vertex.at(spec, config, visual)


def create_edges(
    vertices: Sequence[EndpointSpec],
    config: SceneConfig,
    is_loop: bool = False,
    *,
    kind: DefectKind = DefectKind.BLOCK,
    visual: Visual | None = None,
) -> list[Edge]:
    """Connect consecutive vertices; with ``is_loop`` also close last to first."""

    edges = [
        Edge.create(vertices[i], vertices[i + 1], config, kind=kind, visual=visual)
        for i in range(len(vertices) - 1)
    ]
    if is_loop and vertices:
        edges.append(Edge.create(vertices[-1], vertices[0], config, kind=kind, visual=visual))
    return edges
