"""Tests for the vector, position and size primitives."""

from __future__ import annotations

import itertools

import pytest

from lsviewer.consts import Axis
from lsviewer.mytype import Pos, Size, Vector3D, axis_name


class TestVectorArithmetic:
    def test_scalar_applies_to_every_axis(self) -> None:
        assert Vector3D(1, 2, 3).add(1) == Vector3D(2, 3, 4)
        assert Vector3D(1, 2, 3).mul(2) == Vector3D(2, 4, 6)

    def test_per_axis_operand(self) -> None:
        assert Vector3D(1, 2, 3).sub(Vector3D(1, 1, 1)) == Vector3D(0, 1, 2)
        assert Vector3D(4, 6, 8).div((2, 3, 4)) == Vector3D(2, 2, 2)
        assert Vector3D(5, 7, 9).mod({"x": 2, "y": 4, "z": 5}) == Vector3D(1, 3, 4)

    def test_basis_restricts_the_operation(self) -> None:
        assert Vector3D(1, 2, 3).add(10, "y") == Vector3D(1, 12, 3)
        assert Vector3D(1, 2, 3).mul(2, [Axis.X, "z"]) == Vector3D(2, 2, 6)

    def test_receiver_is_not_mutated(self) -> None:
        v = Vector3D(1, 2, 3)
        v.add(5)
        v.mul(0, "x")
        assert v == Vector3D(1, 2, 3)

    def test_operations_preserve_subclass(self) -> None:
        assert isinstance(Pos(1, 1, 1).add(1), Pos)
        assert isinstance(Size(1, 1, 1).mul(2), Size)

    def test_component_and_with_component(self) -> None:
        v = Vector3D(1, 2, 3)
        assert v.component("z") == 3
        assert v.with_component(Axis.Y, 9) == Vector3D(1, 9, 3)
        assert v.to_array() == (1, 2, 3)

    def test_differing_axes(self) -> None:
        assert Vector3D(0, 0, 0).differing_axes(Vector3D(0, 5, 0)) == ["y"]
        assert Vector3D(0, 0, 0).differing_axes(Vector3D(1, 5, 0)) == ["x", "y"]

    def test_unknown_axis_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown axis"):
            axis_name("w")


class TestPosOrder:
    def test_compare_is_z_major(self) -> None:
        assert Pos.compare(Pos(9, 9, 0), Pos(0, 0, 1)) == -1
        assert Pos.compare(Pos(9, 0, 1), Pos(0, 1, 1)) == -1
        assert Pos.compare(Pos(1, 1, 1), Pos(0, 1, 1)) == 1
        assert Pos.compare(Pos(1, 2, 3), Pos(1, 2, 3)) == 0

    def test_compare_is_a_strict_total_order(self) -> None:
        points = [Pos(x, y, z) for x, y, z in itertools.product(range(-1, 2), repeat=3)]
        for a, b in itertools.product(points, repeat=2):
            assert Pos.compare(a, b) == -Pos.compare(b, a)
            assert a.is_less_than(b) == (Pos.compare(a, b) == -1)
            assert (Pos.compare(a, b) == 0) == (a == b)
        for a, b, c in itertools.product(points[::3], repeat=3):
            if a < b and b < c:
                assert a < c

    def test_sorted_uses_the_same_order(self) -> None:
        points = [Pos(0, 0, 1), Pos(1, 0, 0), Pos(0, 1, 0), Pos(0, 0, 0)]
        assert sorted(points) == [Pos(0, 0, 0), Pos(1, 0, 0), Pos(0, 1, 0), Pos(0, 0, 1)]

    def test_min_and_max(self) -> None:
        a, b = Pos(5, 5, 0), Pos(0, 0, 1)
        assert Pos.min(a, b) is a
        assert Pos.max(a, b) is b
        assert Pos.min(b, a) is a


class TestSize:
    def test_negative_component_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Size(1, -1, 1)

    def test_diff_is_the_span_between_unit_cells(self) -> None:
        assert Size.diff(Pos(0, 0, 0), Pos(0, 0, 4)) == Size(1, 1, 3)
        assert Size.diff(Pos(3, 0, 0), Pos(0, 0, 0)) == Size(2, 1, 1)
