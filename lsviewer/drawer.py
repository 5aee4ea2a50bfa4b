"""Hand a circuit's solids to a rendering collaborator.

:class:`CircuitDrawer` is the only place the scene model calls outward. It
talks to any object implementing :class:`SceneLike`; :class:`PlotlyScene` is
the bundled collaborator that turns each solid into a Plotly ``Mesh3d`` trace
and each edge overlay into a line trace.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import numpy as np
import plotly.graph_objects as go

from lsviewer.config import DEFAULT_CONFIG, SceneConfig
from lsviewer.consts import EDGE_OVERLAY_COLOR, ShapeKind

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from lsviewer.circuit import Circuit
    from lsviewer.geometry.polyhedron import SolidMesh

logger = logging.getLogger(__name__)

# Unit cube corners: 0-3 bottom face (z-), 4-7 top face (z+), counter-clockwise.
_BOX_CORNERS = np.array(
    [
        [-0.5, -0.5, -0.5],
        [0.5, -0.5, -0.5],
        [0.5, 0.5, -0.5],
        [-0.5, 0.5, -0.5],
        [-0.5, -0.5, 0.5],
        [0.5, -0.5, 0.5],
        [0.5, 0.5, 0.5],
        [-0.5, 0.5, 0.5],
    ]
)
_BOX_TRIANGLES = np.array(
    [
        [0, 1, 2], [0, 2, 3],  # bottom
        [4, 5, 6], [4, 6, 7],  # top
        [0, 1, 5], [0, 5, 4],  # y-
        [3, 2, 6], [3, 6, 7],  # y+
        [0, 3, 7], [0, 7, 4],  # x-
        [1, 2, 6], [1, 6, 5],  # x+
    ]
)  # fmt: skip
_BOX_EDGES = [(0, 1), (1, 2), (2, 3), (3, 0), (4, 5), (5, 6), (6, 7), (7, 4), (0, 4), (1, 5), (2, 6), (3, 7)]

# Canonical pyramid: square base (0-3) at z=-h/2, apex (4) at z=+h/2.
_PYRAMID_TRIANGLES = np.array(
    [
        [0, 1, 2], [0, 2, 3],  # base
        [0, 1, 4], [1, 2, 4], [2, 3, 4], [3, 0, 4],
    ]
)  # fmt: skip
_PYRAMID_EDGES = [(0, 1), (1, 2), (2, 3), (3, 0), (0, 4), (1, 4), (2, 4), (3, 4)]

_LIGHT_POSITION = {"x": 0.0, "y": -50.0, "z": 70.0}


class SceneLike(Protocol):
    """Rendering collaborator consuming positioned solids."""

    def add_solid(self, mesh: SolidMesh) -> None:
        """Display one solid."""

    def add_edges(self, mesh: SolidMesh) -> None:
        """Display the edge overlay of one solid."""


def rotation_matrix(rotation: tuple[float, float, float]) -> NDArray[np.float64]:
    """Rotation matrix for Euler XYZ angles (x applied first)."""

    rx, ry, rz = rotation
    cx, sx = np.cos(rx), np.sin(rx)
    cy, sy = np.cos(ry), np.sin(ry)
    cz, sz = np.cos(rz), np.sin(rz)
    mx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    my = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    mz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return mz @ my @ mx


def solid_vertices(mesh: SolidMesh) -> NDArray[np.float64]:
    """World-space corner coordinates of ``mesh``, one row per corner."""

    size = np.asarray(mesh.size, dtype=np.float64)
    rotation = rotation_matrix(mesh.rotation)
    if mesh.shape is ShapeKind.BOX:
        local = _BOX_CORNERS * size
    else:
        apex = rotation @ np.array([0.0, 0.0, 1.0])
        principal = int(np.argmax(np.abs(apex)))
        height = size[principal]
        base = size[(principal + 1) % 3]
        half_b, half_h = base / 2, height / 2
        local = np.array(
            [
                [-half_b, -half_b, -half_h],
                [half_b, -half_b, -half_h],
                [half_b, half_b, -half_h],
                [-half_b, half_b, -half_h],
                [0.0, 0.0, half_h],
            ]
        )
    return local @ rotation.T + np.asarray(mesh.position, dtype=np.float64)


def solid_triangles(shape: ShapeKind) -> NDArray[np.int_]:
    return _BOX_TRIANGLES if shape is ShapeKind.BOX else _PYRAMID_TRIANGLES


def solid_edges(shape: ShapeKind) -> list[tuple[int, int]]:
    return _BOX_EDGES if shape is ShapeKind.BOX else _PYRAMID_EDGES


def color_to_hex(color: int) -> str:
    return f"#{color:06x}"


class PlotlyScene:
    """Collect solids as Plotly traces.

    Parameters
    ----------
    config : SceneConfig | None
        Supplies the light levels.
    edge_width : float
        Width of edge overlay lines in pixels.
    """

    def __init__(self, config: SceneConfig | None = None, *, edge_width: float = 2.0) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self.edge_width = edge_width
        self.traces: list[go.Mesh3d | go.Scatter3d] = []

    def add_solid(self, mesh: SolidMesh) -> None:
        vertices = solid_vertices(mesh)
        triangles = solid_triangles(mesh.shape)
        self.traces.append(
            go.Mesh3d(
                x=vertices[:, 0],
                y=vertices[:, 1],
                z=vertices[:, 2],
                i=triangles[:, 0],
                j=triangles[:, 1],
                k=triangles[:, 2],
                color=color_to_hex(mesh.color),
                opacity=mesh.effective_opacity,
                flatshading=True,
                lighting={
                    "ambient": self.config.ambient_light_level,
                    "diffuse": self.config.directional_light_level,
                },
                lightposition=_LIGHT_POSITION,
                name=mesh.shape.value,
                showlegend=False,
                hoverinfo="skip",
            )
        )

    def add_edges(self, mesh: SolidMesh) -> None:
        vertices = solid_vertices(mesh)
        xs: list[float] = []
        ys: list[float] = []
        zs: list[float] = []
        for start, end in solid_edges(mesh.shape):
            for coords, axis in ((xs, 0), (ys, 1), (zs, 2)):
                coords.extend((float(vertices[start, axis]), float(vertices[end, axis]), float("nan")))
        self.traces.append(
            go.Scatter3d(
                x=xs,
                y=ys,
                z=zs,
                mode="lines",
                line={"color": color_to_hex(EDGE_OVERLAY_COLOR), "width": self.edge_width},
                showlegend=False,
                hoverinfo="skip",
            )
        )

    def figure(self, *, width: int = 900, height: int = 700) -> go.Figure:
        fig = go.Figure(data=self.traces)
        fig.update_layout(
            scene={
                "xaxis_title": "X",
                "yaxis_title": "Y",
                "zaxis_title": "Z",
                "aspectmode": "data",
            },
            width=width,
            height=height,
            paper_bgcolor="white",
            margin={"l": 0, "r": 0, "t": 0, "b": 0},
        )
        return fig


class CircuitDrawer:
    """Walk a circuit's meshes and hand them to a scene."""

    def __init__(self, config: SceneConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    def draw(self, circuit: Circuit, scene: SceneLike) -> int:
        """Add every solid of ``circuit`` to ``scene``; return the solid count.

        An edge overlay is requested for each solid whose ``show_edges`` flag
        is set.
        """

        meshes = circuit.create_meshes(self.config)
        for mesh in meshes:
            scene.add_solid(mesh)
            if mesh.show_edges:
                scene.add_edges(mesh)
        logger.info("Drew %d solids", len(meshes))
        return len(meshes)


def draw_circuit_plotly(
    circuit: Circuit,
    config: SceneConfig | None = None,
    *,
    width: int = 900,
    height: int = 700,
) -> go.Figure:
    """Draw ``circuit`` into a fresh :class:`PlotlyScene` and return its figure.

    Examples
    --------
    >>> fig = draw_circuit_plotly(circuit)
    >>> fig.show()
    """

    scene = PlotlyScene(config)
    CircuitDrawer(config).draw(circuit, scene)
    return scene.figure(width=width, height=height)
