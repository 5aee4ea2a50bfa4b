"""Solid primitives and the positioned-solid descriptor handed to renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from lsviewer.config import parse_color, validate_opacity
from lsviewer.consts import AXES, Axis, ShapeKind
from lsviewer.mytype import Pos, Size, axis_name

if TYPE_CHECKING:
    from lsviewer.config import SceneConfig

Triple: TypeAlias = tuple[float, float, float]

_HALF_PI = math.pi / 2

# Euler XYZ rotation taking the canonical apex direction (+z) onto +axis,
# or onto -axis when reversed.
_PYRAMID_ROTATIONS: dict[tuple[str, bool], Triple] = {
    ("x", False): (0.0, _HALF_PI, 0.0),
    ("x", True): (0.0, -_HALF_PI, 0.0),
    ("y", False): (-_HALF_PI, 0.0, 0.0),
    ("y", True): (_HALF_PI, 0.0, 0.0),
    ("z", False): (0.0, 0.0, 0.0),
    ("z", True): (math.pi, 0.0, 0.0),
}


@dataclass(frozen=True)
class Visual:
    """Colour, transparency flag and opacity of a solid."""

    color: int
    transparent: bool
    opacity: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", parse_color(self.color))
        object.__setattr__(self, "opacity", validate_opacity(self.opacity))
        object.__setattr__(self, "transparent", bool(self.transparent))

    @classmethod
    def default(cls, config: SceneConfig) -> Visual:
        return cls(config.default_color, config.default_transparent, config.default_opacity)


@dataclass(frozen=True)
class SolidMesh:
    """Positioned solid ready for a rendering collaborator.

    Attributes
    ----------
    shape : ShapeKind
        ``BOX`` or ``PYRAMID``.
    position : tuple[float, float, float]
        World-space centre of the solid's bounding box.
    size : tuple[float, float, float]
        World-space extents of the bounding box along x, y and z.
    rotation : tuple[float, float, float]
        Euler XYZ angles in radians orienting the canonical solid. Always zero
        for boxes; for pyramids it maps the canonical apex (+z) onto the apex
        direction.
    color : int
        24-bit RGB colour.
    transparent : bool
        Whether ``opacity`` applies.
    opacity : float
        Opacity in [0, 1].
    show_edges : bool
        Whether an edge overlay should be drawn for this solid.
    """

    shape: ShapeKind
    position: Triple
    size: Triple
    rotation: Triple
    color: int
    transparent: bool
    opacity: float
    show_edges: bool

    @property
    def effective_opacity(self) -> float:
        """Opacity to display: ``opacity`` when transparent, otherwise opaque."""
        return self.opacity if self.transparent else 1.0


def resolve_visual(own: Visual | None, inherited: Visual | None, config: SceneConfig) -> Visual:
    """Pick the most specific visual: own, then inherited, then the configured default."""

    if own is not None:
        return own
    if inherited is not None:
        return inherited
    return Visual.default(config)


def _as_triple(vector: Pos | Size) -> Triple:
    x, y, z = vector.to_array()
    return (float(x), float(y), float(z))


class Polyhedron:
    """Mesh emission shared by every solid.

    Subclasses provide ``pos``, ``size``, ``visual`` and a ``shape`` class
    attribute; pyramids also override ``rotation``.
    """

    shape: ClassVar[ShapeKind]
    pos: Pos
    size: Size
    visual: Visual | None

    @property
    def rotation(self) -> Triple:
        return (0.0, 0.0, 0.0)

    def resolve_visual(self, config: SceneConfig, inherited: Visual | None = None) -> Visual:
        return resolve_visual(self.visual, inherited, config)

    def create_meshes(self, config: SceneConfig, inherited: Visual | None = None) -> list[SolidMesh]:
        visual = self.resolve_visual(config, inherited)
        return [
            SolidMesh(
                shape=self.shape,
                position=_as_triple(self.pos.mul(config.scale)),
                size=_as_triple(self.size.mul(config.scale)),
                rotation=self.rotation,
                color=visual.color,
                transparent=visual.transparent,
                opacity=visual.opacity,
                show_edges=config.display_edges,
            )
        ]


@dataclass(frozen=True)
class Rectangular(Polyhedron):
    """Axis-aligned box centred on ``pos``."""

    shape: ClassVar[ShapeKind] = ShapeKind.BOX

    pos: Pos
    size: Size
    visual: Visual | None = None

    def clone(self) -> Rectangular:
        return replace(self)


@dataclass(frozen=True)
class SquarePyramid(Polyhedron):
    """Square pyramid whose bounding box is centred on ``pos``.

    The apex points along ``+axis``, or ``-axis`` when ``reverse`` is set.
    """

    shape: ClassVar[ShapeKind] = ShapeKind.PYRAMID

    pos: Pos
    base: float
    height: float
    axis: Axis = Axis.Z
    reverse: bool = False
    visual: Visual | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis", Axis(axis_name(self.axis)))
        if self.base < 0 or self.height < 0:
            msg = f"Pyramid base and height must be non-negative, got {self.base}, {self.height}"
            raise ValueError(msg)

    @property
    def size(self) -> Size:  # type: ignore[override]
        return Size(self.base, self.base, self.base).with_component(self.axis, self.height)  # type: ignore[return-value]

    @property
    def rotation(self) -> Triple:
        return _PYRAMID_ROTATIONS[(self.axis.value, self.reverse)]

    @property
    def apex_direction(self) -> Triple:
        sign = -1.0 if self.reverse else 1.0
        return tuple(sign if name == self.axis.value else 0.0 for name in AXES)  # type: ignore[return-value]

    def clone(self) -> SquarePyramid:
        return replace(self)
