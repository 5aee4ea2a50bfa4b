# Constants shared by the scene model

from __future__ import annotations

import enum

AXES: tuple[str, str, str] = ("x", "y", "z")

# Coordinate triple arity in circuit documents
TRIPLE_SIZE = 3
# Endpoint count of an edge entry
EDGE_TUPLE_SIZE = 2

# Default palette (24-bit RGB)
ROUGH_COLOR = 0xFFFFFF
SMOOTH_COLOR = 0x1E90FF
MODULE_COLOR = 0xFFEFD5
PIN_COLOR = 0xFFF095
EDGE_OVERLAY_COLOR = 0x000000
MAX_COLOR = 0xFFFFFF


class Axis(str, enum.Enum):  # noqa: UP042
    """Lattice axis.

    The str mixin lets an Axis be used wherever an axis name is expected.
    """

    X = "x"
    Y = "y"
    Z = "z"


class BoundaryType(str, enum.Enum):  # noqa: UP042
    """Surface-code boundary type of a logical qubit.

    ROUGH: rough boundary
    SMOOTH: smooth boundary
    """

    ROUGH = "rough"
    SMOOTH = "smooth"


class DefectKind(str, enum.Enum):  # noqa: UP042
    """Kind of lattice edge.

    BLOCK: fabric edge, drawn as a box
    INJECTOR: coupling structure, drawn as two opposing pyramids
    CAP: terminating injector, transparent by default
    """

    BLOCK = "block"
    INJECTOR = "injector"
    CAP = "cap"


class ModuleKind(str, enum.Enum):  # noqa: UP042
    """Kind of free-standing module volume."""

    MODULE = "module"
    PIN = "pin"


class ShapeKind(str, enum.Enum):  # noqa: UP042
    """Shape of an emitted solid."""

    BOX = "box"
    PYRAMID = "pyramid"
