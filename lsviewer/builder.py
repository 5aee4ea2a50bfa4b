"""Build a :class:`Circuit` from its JSON/YAML data model.

The accepted document shape is::

    {
      "logical_qubits": [
        {"type": "rough" | "smooth",
         "blocks": [[pos, pos], ...],
         "injectors": [[pos, pos], ...],
         "caps": [[pos, pos], ...]},
        ...
      ],
      "modules": [{"position": pos, "size": size, "kind": "module" | "pin"}, ...]
    }

``pos`` and ``size`` are ``[x, y, z]`` triples; edge endpoints are lattice
coordinates. Logical qubits, modules and individual edges may also carry
``color``, ``transparent`` and ``opacity`` overrides; an edge then takes the
mapping form ``{"vertices": [pos, pos], "color": ...}``.

Any malformed entry aborts the whole build with a
:class:`~lsviewer.exceptions.CircuitValidationError` naming the entry's path.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import TypeAlias

import yaml

from lsviewer.circuit import Circuit, LogicalQubit, Module
from lsviewer.config import DEFAULT_CONFIG, SceneConfig, parse_color, validate_opacity
from lsviewer.consts import EDGE_TUPLE_SIZE, TRIPLE_SIZE, BoundaryType, DefectKind, ModuleKind
from lsviewer.exceptions import CircuitValidationError, PathElement
from lsviewer.geometry.defects import Edge, Vertex
from lsviewer.geometry.polyhedron import Visual
from lsviewer.mytype import Pos, Size

logger = logging.getLogger(__name__)

DocPath: TypeAlias = tuple[PathElement, ...]
Triple: TypeAlias = tuple[float, float, float]

_EDGE_FIELDS: dict[str, DefectKind] = {
    "blocks": DefectKind.BLOCK,
    "injectors": DefectKind.INJECTOR,
    "caps": DefectKind.CAP,
}
_VISUAL_KEYS = ("color", "transparent", "opacity")
_YAML_SUFFIXES = {".yml", ".yaml"}


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _parse_list(value: object, path: DocPath) -> Sequence[object]:
    if value is None:
        return []
    if not _is_sequence(value):
        msg = f"expected a list, got {type(value).__name__}"
        raise CircuitValidationError(path, msg)
    return value  # type: ignore[return-value]


def _parse_mapping(value: object, path: DocPath) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        msg = f"expected an object, got {type(value).__name__}"
        raise CircuitValidationError(path, msg)
    return value


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _parse_triple(value: object, path: DocPath) -> Triple:
    if not _is_sequence(value) or len(value) != TRIPLE_SIZE:  # type: ignore[arg-type]
        msg = f"expected a coordinate triple [x, y, z], got {value!r}"
        raise CircuitValidationError(path, msg)
    for idx, component in enumerate(value):  # type: ignore[arg-type]
        if isinstance(component, bool) or not isinstance(component, int | float) or not _is_finite(component):
            msg = f"coordinate must be a finite number, got {component!r}"
            raise CircuitValidationError((*path, idx), msg)
    x, y, z = value  # type: ignore[misc]
    return (x, y, z)


def _parse_visual(entry: Mapping[str, object], base: Visual, path: DocPath) -> Visual | None:
    """Apply the entry's visual overrides on top of ``base``; None when there are none."""

    if not any(key in entry for key in _VISUAL_KEYS):
        return None

    color = base.color
    transparent = base.transparent
    opacity = base.opacity
    if "color" in entry:
        try:
            color = parse_color(entry["color"])
        except ValueError as exc:
            raise CircuitValidationError((*path, "color"), str(exc)) from exc
    if "opacity" in entry:
        try:
            opacity = validate_opacity(entry["opacity"])
        except ValueError as exc:
            raise CircuitValidationError((*path, "opacity"), str(exc)) from exc
    if "transparent" in entry:
        if not isinstance(entry["transparent"], bool):
            msg = f"transparent must be a boolean, got {entry['transparent']!r}"
            raise CircuitValidationError((*path, "transparent"), msg)
        transparent = entry["transparent"]
    return Visual(color, transparent, opacity)


class CircuitCreator:
    """Turn circuit documents into :class:`Circuit` objects.

    Parameters
    ----------
    config : SceneConfig | None
        Configuration providing the lattice pitch and visual defaults. The
        packaged defaults are used when omitted.
    """

    def __init__(self, config: SceneConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    def create(self, data: object) -> Circuit:
        """Build a circuit from a parsed document.

        Raises
        ------
        CircuitValidationError
            If any part of the document is malformed. No partial circuit is
            returned.
        """

        document = _parse_mapping(data, ())
        logical_qubits = self.create_logical_qubits(document.get("logical_qubits"))
        modules = self.create_modules(document.get("modules"))
        circuit = Circuit(tuple(logical_qubits), tuple(modules))
        logger.debug(
            "Built circuit with %d logical qubits, %d edges and %d modules",
            len(circuit.logical_qubits),
            len(circuit.edges),
            len(circuit.modules),
        )
        return circuit

    def create_logical_qubits(self, data: object) -> list[LogicalQubit]:
        path: DocPath = ("logical_qubits",)
        return [
            self.create_logical_qubit(entry, (*path, idx))
            for idx, entry in enumerate(_parse_list(data, path))
        ]

    def create_logical_qubit(self, data: object, path: DocPath) -> LogicalQubit:
        entry = _parse_mapping(data, path)

        raw_type = entry.get("type")
        if not isinstance(raw_type, str) or raw_type not in {b.value for b in BoundaryType}:
            msg = f"unknown logical qubit type {raw_type!r}; expected 'rough' or 'smooth'"
            raise CircuitValidationError((*path, "type"), msg)
        boundary = BoundaryType(raw_type)

        default_visual = Visual(
            self.config.color_set.for_boundary(boundary),
            self.config.default_transparent,
            self.config.default_opacity,
        )
        visual = _parse_visual(entry, default_visual, path)

        edges: list[Edge] = []
        for field_name, kind in _EDGE_FIELDS.items():
            edges.extend(
                self.create_edges_(
                    entry.get(field_name),
                    kind,
                    (*path, field_name),
                    visual if visual is not None else default_visual,
                )
            )
        return LogicalQubit(boundary, tuple(edges), visual)

    def create_blocks(self, data: object, path: DocPath = ("blocks",)) -> list[Edge]:
        return self.create_edges_(data, DefectKind.BLOCK, path)

    def create_injectors(self, data: object, path: DocPath = ("injectors",)) -> list[Edge]:
        return self.create_edges_(data, DefectKind.INJECTOR, path)

    def create_caps(self, data: object, path: DocPath = ("caps",)) -> list[Edge]:
        return self.create_edges_(data, DefectKind.CAP, path)

    def create_edges_(
        self,
        data: object,
        kind: DefectKind,
        path: DocPath,
        inherited: Visual | None = None,
    ) -> list[Edge]:
        base = inherited if inherited is not None else Visual.default(self.config)
        if kind is DefectKind.CAP:
            base = replace(base, transparent=True)
        return [
            self.create_edge(entry, kind, (*path, idx), base)
            for idx, entry in enumerate(_parse_list(data, path))
        ]

    def create_edge(self, data: object, kind: DefectKind, path: DocPath, base: Visual) -> Edge:
        visual: Visual | None = None
        endpoints = data
        if isinstance(data, Mapping):
            visual = _parse_visual(data, base, path)
            endpoints = data.get("vertices")

        if not _is_sequence(endpoints) or len(endpoints) != EDGE_TUPLE_SIZE:  # type: ignore[arg-type]
            msg = f"expected a pair of coordinate triples, got {endpoints!r}"
            raise CircuitValidationError(path, msg)

        a, b = (
            _parse_triple(endpoint, (*path, idx))
            for idx, endpoint in enumerate(endpoints)  # type: ignore[arg-type]
        )
        try:
            return Edge(kind, (Vertex.at(a, self.config), Vertex.at(b, self.config)), visual)
        except ValueError as exc:
            raise CircuitValidationError(path, str(exc)) from exc

    def create_modules(self, data: object) -> list[Module]:
        path: DocPath = ("modules",)
        return [self.create_module(entry, (*path, idx)) for idx, entry in enumerate(_parse_list(data, path))]

    def create_module(self, data: object, path: DocPath) -> Module:
        entry = _parse_mapping(data, path)
        position = _parse_triple(entry.get("position"), (*path, "position"))
        size = _parse_triple(entry.get("size"), (*path, "size"))
        if any(component < 0 for component in size):
            msg = f"size components must be non-negative, got {list(size)}"
            raise CircuitValidationError((*path, "size"), msg)

        raw_kind = entry.get("kind", ModuleKind.MODULE.value)
        if not isinstance(raw_kind, str) or raw_kind not in {k.value for k in ModuleKind}:
            msg = f"unknown module kind {raw_kind!r}; expected 'module' or 'pin'"
            raise CircuitValidationError((*path, "kind"), msg)
        kind = ModuleKind(raw_kind)

        base = Visual(
            self.config.color_set.for_module(kind),
            self.config.default_transparent,
            self.config.default_opacity,
        )
        visual = _parse_visual(entry, base, path)
        return Module(Pos(*position), Size(*size), visual, kind)


def load_circuit_data(path: str | Path) -> object:
    """Read a circuit document from a JSON or YAML file.

    Raises
    ------
    CircuitValidationError
        If the file cannot be parsed.
    """

    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as f:
        try:
            if file_path.suffix.lower() in _YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
            msg = f"could not parse '{file_path.name}': {exc}"
            raise CircuitValidationError((), msg) from exc


def load_circuit(path: str | Path, config: SceneConfig | None = None) -> Circuit:
    """Read and build a circuit in one step."""

    data = load_circuit_data(path)
    logger.info("Loaded circuit document %s", path)
    return CircuitCreator(config).create(data)
