"""Scene configuration.

A :class:`SceneConfig` is an immutable value passed explicitly to the circuit
builder, to mesh emission and to the drawer. ``load_scene_config`` reads one
from YAML, falling back to the packaged ``settings/default.yml``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from importlib import resources
from importlib.abc import Traversable
from pathlib import Path

import yaml

from lsviewer.consts import (
    MAX_COLOR,
    MODULE_COLOR,
    PIN_COLOR,
    ROUGH_COLOR,
    SMOOTH_COLOR,
    BoundaryType,
    ModuleKind,
)
from lsviewer.exceptions import ConfigError

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PACKAGE = "lsviewer.settings"
_DEFAULT_CONFIG_FILE = "default.yml"


def parse_color(value: object) -> int:
    """Parse a 24-bit RGB colour from an int, ``"#rrggbb"`` or ``"0xrrggbb"``."""

    if isinstance(value, bool):
        msg = f"colour must be an integer or hex string, got {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        color = value
    elif isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("#"):
            text = text[1:]
        elif text.startswith("0x"):
            text = text[2:]
        try:
            color = int(text, 16)
        except ValueError as exc:
            msg = f"colour must be an integer or hex string, got {value!r}"
            raise ValueError(msg) from exc
    else:
        msg = f"colour must be an integer or hex string, got {value!r}"
        raise ValueError(msg)

    if not 0 <= color <= MAX_COLOR:
        msg = f"colour must lie in [0x000000, 0xffffff], got {value!r}"
        raise ValueError(msg)
    return color


def validate_opacity(value: object) -> float:
    """Validate opacity values in [0, 1]."""

    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"opacity must be a number, got {value!r}"
        raise ValueError(msg)
    numeric = float(value)
    if not 0.0 <= numeric <= 1.0:
        msg = "opacity must be between 0.0 and 1.0."
        raise ValueError(msg)
    return numeric


@dataclass(frozen=True)
class ColorSet:
    """Default colour per defect category."""

    rough: int = ROUGH_COLOR
    smooth: int = SMOOTH_COLOR
    module: int = MODULE_COLOR
    pin: int = PIN_COLOR

    def for_boundary(self, boundary: BoundaryType) -> int:
        return self.rough if boundary is BoundaryType.ROUGH else self.smooth

    def for_module(self, kind: ModuleKind) -> int:
        return self.pin if kind is ModuleKind.PIN else self.module


@dataclass(frozen=True)
class SceneConfig:
    """Immutable scene configuration.

    Parameters
    ----------
    scale : float
        World-unit multiplier applied to every emitted position and size.
    margin : int
        Lattice spacing between unit cells, at least 1.
    color_set : ColorSet
        Default colours for rough/smooth qubits, modules and pins.
    default_color, default_transparent, default_opacity
        Visual attributes of solids with no more specific default.
    display_edges : bool
        Whether the drawer requests an edge overlay per solid.
    directional_light_level, ambient_light_level : float
        Light levels handed to the rendering collaborator.
    """

    scale: float = 1.0
    margin: int = 1
    color_set: ColorSet = field(default_factory=ColorSet)
    default_color: int = 0xFFFFFF
    default_transparent: bool = False
    default_opacity: float = 0.3
    display_edges: bool = True
    directional_light_level: float = 0.7
    ambient_light_level: float = 0.4

    def __post_init__(self) -> None:
        if isinstance(self.margin, bool) or not isinstance(self.margin, int) or self.margin < 1:
            msg = f"margin must be an integer >= 1, got {self.margin!r}"
            raise ConfigError(msg)
        if not math.isfinite(self.scale) or self.scale <= 0:
            msg = f"scale must be positive, got {self.scale!r}"
            raise ConfigError(msg)
        if not 0.0 <= self.default_opacity <= 1.0:
            msg = f"default_opacity must be between 0.0 and 1.0, got {self.default_opacity!r}"
            raise ConfigError(msg)
        for name in ("directional_light_level", "ambient_light_level"):
            if getattr(self, name) < 0:
                msg = f"{name} must be non-negative, got {getattr(self, name)!r}"
                raise ConfigError(msg)

    @property
    def pitch(self) -> int:
        """Lattice unit spacing, ``margin + 1``."""
        return self.margin + 1


DEFAULT_CONFIG = SceneConfig()


def _resolve_config_file(path: str | Path | None) -> Traversable | Path:
    if path is None:
        return resources.files(_DEFAULT_CONFIG_PACKAGE).joinpath(_DEFAULT_CONFIG_FILE)
    candidate = Path(path)
    if not candidate.is_file():
        msg = f"Configuration file '{path}' not found"
        raise FileNotFoundError(msg)
    return candidate


def _parse_color_set(spec: object) -> ColorSet:
    if spec is None:
        return ColorSet()
    if not isinstance(spec, Mapping):
        msg = f"color_set must be a mapping, got {spec!r}"
        raise ConfigError(msg)

    allowed = {f.name for f in fields(ColorSet)}
    values: dict[str, int] = {}
    for key, value in spec.items():
        name = str(key).lower()
        if name not in allowed:
            msg = f"Unknown color_set entry {key!r}; expected one of {sorted(allowed)}"
            raise ConfigError(msg)
        try:
            values[name] = parse_color(value)
        except ValueError as exc:
            msg = f"color_set.{name}: {exc}"
            raise ConfigError(msg) from exc
    return ColorSet(**values)


def scene_config_from_mapping(cfg: Mapping[str, object]) -> SceneConfig:
    """Build a :class:`SceneConfig` from a plain mapping such as parsed YAML."""

    allowed = {f.name for f in fields(SceneConfig)}
    unknown = sorted(str(k) for k in cfg if k not in allowed)
    if unknown:
        msg = f"Unknown configuration keys: {unknown}"
        raise ConfigError(msg)

    kwargs: dict[str, object] = {k: v for k, v in cfg.items() if k != "color_set"}
    kwargs["color_set"] = _parse_color_set(cfg.get("color_set"))
    if "default_color" in kwargs:
        try:
            kwargs["default_color"] = parse_color(kwargs["default_color"])
        except ValueError as exc:
            msg = f"default_color: {exc}"
            raise ConfigError(msg) from exc
    for name in ("default_transparent", "display_edges"):
        if name in kwargs and not isinstance(kwargs[name], bool):
            msg = f"{name} must be a boolean, got {kwargs[name]!r}"
            raise ConfigError(msg)
    for name in ("scale", "default_opacity", "directional_light_level", "ambient_light_level"):
        if name in kwargs and (isinstance(kwargs[name], bool) or not isinstance(kwargs[name], int | float)):
            msg = f"{name} must be a number, got {kwargs[name]!r}"
            raise ConfigError(msg)

    return SceneConfig(**kwargs)  # type: ignore[arg-type]


def load_scene_config(path: str | Path | None = None) -> SceneConfig:
    """Load a scene configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        YAML file to read. ``None`` loads the packaged defaults.

    Returns
    -------
    SceneConfig
        The validated configuration.

    Raises
    ------
    ConfigError
        If the file is not a mapping or holds unknown keys or invalid values.
    """

    traversable = _resolve_config_file(path)
    with traversable.open("r", encoding="utf-8") as f:
        try:
            cfg = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            msg = f"Could not parse configuration '{path}': {exc}"
            raise ConfigError(msg) from exc

    if cfg is None:
        cfg = {}
    if not isinstance(cfg, Mapping):
        msg = f"Configuration must be a mapping, got {type(cfg).__name__}"
        raise ConfigError(msg)

    config = scene_config_from_mapping(cfg)
    logger.debug("Loaded scene configuration from %s", path or "packaged defaults")
    return config
