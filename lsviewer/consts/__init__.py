"""Constants used across lsviewer.

Expose constant enums and tables from `consts.py`.
"""

from __future__ import annotations

from lsviewer.consts.consts import (
    AXES,
    EDGE_OVERLAY_COLOR,
    EDGE_TUPLE_SIZE,
    MAX_COLOR,
    MODULE_COLOR,
    PIN_COLOR,
    ROUGH_COLOR,
    SMOOTH_COLOR,
    TRIPLE_SIZE,
    Axis,
    BoundaryType,
    DefectKind,
    ModuleKind,
    ShapeKind,
)

__all__ = [
    "AXES",
    "EDGE_OVERLAY_COLOR",
    "EDGE_TUPLE_SIZE",
    "MAX_COLOR",
    "MODULE_COLOR",
    "PIN_COLOR",
    "ROUGH_COLOR",
    "SMOOTH_COLOR",
    "TRIPLE_SIZE",
    "Axis",
    "BoundaryType",
    "DefectKind",
    "ModuleKind",
    "ShapeKind",
]
