"""Vector, position and size primitives for the scene model."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from lsviewer.consts import AXES, Axis

AxisLike: TypeAlias = Axis | str
Operand: TypeAlias = "float | Vector3D | Sequence[float] | Mapping[str, float]"
Basis: TypeAlias = "AxisLike | Iterable[AxisLike] | None"


def axis_name(axis: AxisLike) -> str:
    """Return the plain axis name ("x", "y" or "z") for ``axis``."""

    try:
        return Axis(axis).value
    except ValueError as exc:
        msg = f"Unknown axis {axis!r}; expected one of {', '.join(AXES)}."
        raise ValueError(msg) from exc


def _normalize_basis(basis: Basis) -> tuple[str, ...]:
    if basis is None:
        return AXES
    if isinstance(basis, str):
        return (axis_name(basis),)
    return tuple(axis_name(b) for b in basis)


def _operand_component(n: Operand, name: str) -> float:
    if isinstance(n, Vector3D):
        return n.component(name)
    if isinstance(n, Mapping):
        return n[name]
    if isinstance(n, int | float):
        return n
    return n[AXES.index(name)]


@dataclass(frozen=True)
class Vector3D:
    """Immutable real-number triple with componentwise arithmetic.

    Every arithmetic method accepts either a scalar, applied uniformly, or a
    per-axis operand (another vector, a 3-sequence or an axis-name mapping).
    ``basis`` restricts the operation to a subset of axes; the remaining axes
    are copied unchanged. The receiver is never modified.
    """

    x: float = 0
    y: float = 0
    z: float = 0

    def __post_init__(self) -> None:
        """Validation hook for subclasses."""

    def component(self, axis: AxisLike) -> float:
        return getattr(self, axis_name(axis))

    def to_array(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def clone(self) -> Vector3D:
        return type(self)(*self.to_array())

    def operate(
        self,
        operation: Callable[[float, float], float],
        n: Operand = 1,
        basis: Basis = None,
    ) -> Vector3D:
        names = _normalize_basis(basis)
        values = {name: self.component(name) for name in AXES}
        for name in names:
            values[name] = operation(values[name], _operand_component(n, name))
        return type(self)(values["x"], values["y"], values["z"])

    def add(self, n: Operand = 1, basis: Basis = None) -> Vector3D:
        return self.operate(operator.add, n, basis)

    def sub(self, n: Operand = 1, basis: Basis = None) -> Vector3D:
        return self.operate(operator.sub, n, basis)

    def mul(self, n: Operand = 1, basis: Basis = None) -> Vector3D:
        return self.operate(operator.mul, n, basis)

    def div(self, n: Operand = 1, basis: Basis = None) -> Vector3D:
        return self.operate(operator.truediv, n, basis)

    def mod(self, n: Operand = 1, basis: Basis = None) -> Vector3D:
        return self.operate(operator.mod, n, basis)

    def with_component(self, axis: AxisLike, value: float) -> Vector3D:
        """Return a copy with one axis replaced."""

        return self.operate(lambda _a, b: b, value, axis)

    def differing_axes(self, other: Vector3D) -> list[str]:
        """Names of the axes on which ``self`` and ``other`` differ."""

        return [name for name in AXES if self.component(name) != other.component(name)]


class Pos(Vector3D):
    """Lattice or world coordinate.

    Positions are totally ordered z-major: z first, then y, then x. This
    order fixes edge endpoint order and every deterministic sort in the scene.
    """

    def sort_key(self) -> tuple[float, float, float]:
        return (self.z, self.y, self.x)

    def is_less_than(self, other: Vector3D) -> bool:
        return Pos.compare(self, other) < 0

    @staticmethod
    def compare(a: Vector3D, b: Vector3D) -> int:
        """Return -1, 0 or 1 comparing ``a`` and ``b`` in z-major order."""

        for name in ("z", "y", "x"):
            lhs, rhs = a.component(name), b.component(name)
            if lhs < rhs:
                return -1
            if lhs > rhs:
                return 1
        return 0

    @staticmethod
    def min(a: Pos, b: Pos) -> Pos:
        return a if a.is_less_than(b) else b

    @staticmethod
    def max(a: Pos, b: Pos) -> Pos:
        return b if a.is_less_than(b) else a

    def __lt__(self, other: Vector3D) -> bool:
        return Pos.compare(self, other) < 0

    def __le__(self, other: Vector3D) -> bool:
        return Pos.compare(self, other) <= 0

    def __gt__(self, other: Vector3D) -> bool:
        return Pos.compare(self, other) > 0

    def __ge__(self, other: Vector3D) -> bool:
        return Pos.compare(self, other) >= 0


class Size(Vector3D):
    """Non-negative extents along each axis."""

    def __post_init__(self) -> None:
        for name in AXES:
            if self.component(name) < 0:
                msg = f"Size components must be non-negative, got {self.to_array()}."
                raise ValueError(msg)

    @staticmethod
    def diff(a: Vector3D, b: Vector3D) -> Size:
        """Size of the open span strictly between two unit cells at ``a`` and ``b``."""

        w = abs(abs(a.x - b.x) - 1)
        h = abs(abs(a.y - b.y) - 1)
        d = abs(abs(a.z - b.z) - 1)
        return Size(w, h, d)

    @staticmethod
    def unit() -> Size:
        return Size(1, 1, 1)
