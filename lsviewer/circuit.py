"""Logical qubits, modules and the circuit aggregate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lsviewer.consts import BoundaryType, ModuleKind
from lsviewer.geometry.defects import Edge, Vertex
from lsviewer.geometry.polyhedron import Rectangular, SolidMesh, Visual

if TYPE_CHECKING:
    from lsviewer.config import SceneConfig


@dataclass(frozen=True)
class LogicalQubit:
    """A logical qubit: a rough or smooth boundary made of lattice edges.

    The vertex set is always derived from ``edges``. Edges and vertices
    without a visual of their own are drawn with the qubit's visual, whose
    default colour depends on the boundary type.
    """

    boundary: BoundaryType
    edges: tuple[Edge, ...] = ()
    visual: Visual | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "boundary", BoundaryType(self.boundary))
        object.__setattr__(self, "edges", tuple(self.edges))

    @classmethod
    def rough(cls, edges: Iterable[Edge], visual: Visual | None = None) -> LogicalQubit:
        return cls(BoundaryType.ROUGH, tuple(edges), visual)

    @classmethod
    def smooth(cls, edges: Iterable[Edge], visual: Visual | None = None) -> LogicalQubit:
        return cls(BoundaryType.SMOOTH, tuple(edges), visual)

    @property
    def vertices(self) -> frozenset[Vertex]:
        """Union of all edge endpoints, deduplicated by position."""
        return frozenset(vertex for edge in self.edges for vertex in edge.vertices)

    def sorted_vertices(self) -> list[Vertex]:
        # Among vertices sharing a position the first endpoint in edge order wins.
        unique: dict[Vertex, Vertex] = {}
        for edge in self.edges:
            for vertex in edge.vertices:
                unique.setdefault(vertex, vertex)
        return sorted(unique.values(), key=lambda v: v.pos.sort_key())

    def resolve_visual(self, config: SceneConfig) -> Visual:
        if self.visual is not None:
            return self.visual
        return Visual(
            config.color_set.for_boundary(self.boundary),
            config.default_transparent,
            config.default_opacity,
        )

    def create_meshes(self, config: SceneConfig) -> list[SolidMesh]:
        """Meshes of every edge, then of every vertex.

        Vertices come last so their markers are drawn over the edge geometry.
        """

        visual = self.resolve_visual(config)
        meshes: list[SolidMesh] = []
        for edge in self.edges:
            meshes.extend(edge.create_meshes(config, visual))
        for vertex in self.sorted_vertices():
            meshes.extend(vertex.create_meshes(config, visual))
        return meshes


@dataclass(frozen=True)
class Module(Rectangular):
    """Free-standing rectangular volume, independent of the lattice."""

    kind: ModuleKind = ModuleKind.MODULE

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ModuleKind(self.kind))

    def resolve_visual(self, config: SceneConfig, inherited: Visual | None = None) -> Visual:
        if self.visual is not None:
            return self.visual
        return Visual(
            config.color_set.for_module(self.kind),
            config.default_transparent,
            config.default_opacity,
        )


@dataclass(frozen=True)
class Circuit:
    """Root of the scene: logical qubits followed by modules."""

    logical_qubits: tuple[LogicalQubit, ...] = field(default_factory=tuple)
    modules: tuple[Module, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "logical_qubits", tuple(self.logical_qubits))
        object.__setattr__(self, "modules", tuple(self.modules))

    @property
    def edges(self) -> list[Edge]:
        return [edge for qubit in self.logical_qubits for edge in qubit.edges]

    def create_meshes(self, config: SceneConfig) -> list[SolidMesh]:
        meshes: list[SolidMesh] = []
        for qubit in self.logical_qubits:
            meshes.extend(qubit.create_meshes(config))
        for module in self.modules:
            meshes.extend(module.create_meshes(config))
        return meshes
