"""Tests for solid primitives and mesh descriptors."""

from __future__ import annotations

import math
from dataclasses import replace

import pytest

from lsviewer.config import SceneConfig
from lsviewer.consts import Axis, ShapeKind
from lsviewer.geometry.polyhedron import Rectangular, SolidMesh, SquarePyramid, Visual
from lsviewer.mytype import Pos, Size


class TestVisual:
    def test_default_comes_from_config(self) -> None:
        config = SceneConfig(default_color=0x123456, default_transparent=True, default_opacity=0.5)
        assert Visual.default(config) == Visual(0x123456, True, 0.5)

    def test_hex_color_is_normalized(self) -> None:
        assert Visual("#ff0000", False, 1).color == 0xFF0000  # type: ignore[arg-type]

    @pytest.mark.parametrize("opacity", [-0.1, 1.5])
    def test_opacity_out_of_range(self, opacity: float) -> None:
        with pytest.raises(ValueError, match="opacity"):
            Visual(0, True, opacity)

    def test_color_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="colour"):
            Visual(0x1000000, False, 1.0)


class TestRectangular:
    def test_mesh_is_scaled_box(self) -> None:
        config = SceneConfig(scale=2.0)
        [mesh] = Rectangular(Pos(1, 2, 3), Size(1, 2, 3)).create_meshes(config)

        assert mesh.shape is ShapeKind.BOX
        assert mesh.position == (2.0, 4.0, 6.0)
        assert mesh.size == (2.0, 4.0, 6.0)
        assert mesh.rotation == (0.0, 0.0, 0.0)
        assert (mesh.color, mesh.transparent, mesh.opacity) == (0xFFFFFF, False, 0.3)
        assert mesh.show_edges is True

    def test_own_visual_wins_over_inherited(self, config: SceneConfig) -> None:
        own = Visual(0xFF0000, True, 0.8)
        inherited = Visual(0x00FF00, False, 0.2)

        [mesh] = Rectangular(Pos(), Size(1, 1, 1), own).create_meshes(config, inherited)
        assert mesh.color == 0xFF0000

        [mesh] = Rectangular(Pos(), Size(1, 1, 1)).create_meshes(config, inherited)
        assert mesh.color == 0x00FF00

    def test_edge_flag_follows_config(self, config: SceneConfig) -> None:
        [mesh] = Rectangular(Pos(), Size(1, 1, 1)).create_meshes(replace(config, display_edges=False))
        assert mesh.show_edges is False

    def test_clone_is_equal_and_distinct(self) -> None:
        box = Rectangular(Pos(1, 1, 1), Size(2, 2, 2), Visual(1, False, 0.3))
        clone = box.clone()
        assert clone == box
        assert clone is not box


class TestSquarePyramid:
    def test_size_puts_height_on_principal_axis(self) -> None:
        assert SquarePyramid(Pos(), 1, 3, Axis.X).size == Size(3, 1, 1)
        assert SquarePyramid(Pos(), 2, 5, "y").size == Size(2, 5, 2)
        assert SquarePyramid(Pos(), 1, 4).size == Size(1, 1, 4)

    @pytest.mark.parametrize(
        ("axis", "reverse", "rotation", "apex"),
        [
            ("z", False, (0.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
            ("z", True, (math.pi, 0.0, 0.0), (0.0, 0.0, -1.0)),
            ("x", False, (0.0, math.pi / 2, 0.0), (1.0, 0.0, 0.0)),
            ("x", True, (0.0, -math.pi / 2, 0.0), (-1.0, 0.0, 0.0)),
            ("y", False, (-math.pi / 2, 0.0, 0.0), (0.0, 1.0, 0.0)),
            ("y", True, (math.pi / 2, 0.0, 0.0), (0.0, -1.0, 0.0)),
        ],
    )
    def test_rotation_orients_apex(
        self,
        axis: str,
        reverse: bool,
        rotation: tuple[float, float, float],
        apex: tuple[float, float, float],
    ) -> None:
        pyramid = SquarePyramid(Pos(), 1, 1, axis, reverse)  # type: ignore[arg-type]
        assert pyramid.rotation == rotation
        assert pyramid.apex_direction == apex

    def test_mesh_descriptor(self, config: SceneConfig) -> None:
        [mesh] = SquarePyramid(Pos(0, 0, 1), 1, 0.5, Axis.Z, reverse=True).create_meshes(config)
        assert mesh.shape is ShapeKind.PYRAMID
        assert mesh.size == (1.0, 1.0, 0.5)
        assert mesh.rotation == (math.pi, 0.0, 0.0)

    def test_negative_height_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            SquarePyramid(Pos(), 1, -1)


class TestSolidMesh:
    def test_effective_opacity_requires_transparency(self) -> None:
        mesh = SolidMesh(ShapeKind.BOX, (0, 0, 0), (1, 1, 1), (0, 0, 0), 0, False, 0.3, True)
        assert mesh.effective_opacity == 1.0
        assert replace(mesh, transparent=True).effective_opacity == 0.3
