"""3D scene construction for lattice-surgery circuits."""

from lsviewer.builder import CircuitCreator, load_circuit, load_circuit_data
from lsviewer.circuit import Circuit, LogicalQubit, Module
from lsviewer.config import DEFAULT_CONFIG, ColorSet, SceneConfig, load_scene_config
from lsviewer.consts import Axis, BoundaryType, DefectKind, ModuleKind, ShapeKind
from lsviewer.drawer import CircuitDrawer, PlotlyScene, SceneLike, draw_circuit_plotly
from lsviewer.exceptions import CircuitValidationError, ConfigError, MisalignedEndpointsError
from lsviewer.geometry import (
    Edge,
    Rectangular,
    SolidMesh,
    SquarePyramid,
    Vertex,
    Visual,
    create_edges,
)
from lsviewer.mytype import Pos, Size, Vector3D

__all__ = [
    "DEFAULT_CONFIG",
    "Axis",
    "BoundaryType",
    "Circuit",
    "CircuitCreator",
    "CircuitDrawer",
    "CircuitValidationError",
    "ColorSet",
    "ConfigError",
    "DefectKind",
    "Edge",
    "LogicalQubit",
    "MisalignedEndpointsError",
    "Module",
    "ModuleKind",
    "PlotlyScene",
    "Pos",
    "Rectangular",
    "SceneConfig",
    "SceneLike",
    "ShapeKind",
    "Size",
    "SolidMesh",
    "SquarePyramid",
    "Vector3D",
    "Vertex",
    "Visual",
    "create_edges",
    "draw_circuit_plotly",
    "load_circuit",
    "load_circuit_data",
    "load_scene_config",
]
