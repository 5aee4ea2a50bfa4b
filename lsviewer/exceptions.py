"""Exception classes for lsviewer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from lsviewer.mytype import Vector3D

PathElement: TypeAlias = str | int


def format_path(path: Sequence[PathElement]) -> str:
    """Render a document path such as ``logical_qubits[0].blocks[2]``."""

    rendered = ""
    for element in path:
        if isinstance(element, int):
            rendered += f"[{element}]"
        elif rendered:
            rendered += f".{element}"
        else:
            rendered = element
    return rendered


class CircuitValidationError(ValueError):
    """Raised when a circuit document cannot be turned into a Circuit.

    ``path`` locates the offending entry inside the document, e.g.
    ``("logical_qubits", 0, "blocks", 2)``. An empty path refers to the
    document as a whole.
    """

    def __init__(self, path: Sequence[PathElement], message: str) -> None:
        self.path: tuple[PathElement, ...] = tuple(path)
        self.message = message
        location = format_path(self.path)
        super().__init__(f"{location}: {message}" if location else message)


class MisalignedEndpointsError(ValueError):
    """Raised when two edge endpoints do not differ along exactly one axis."""

    def __init__(self, a: Vector3D, b: Vector3D) -> None:
        self.a = a
        self.b = b
        super().__init__(
            f"misaligned endpoints {a.to_array()} and {b.to_array()}: "
            "edge endpoints must differ along exactly one axis"
        )


class ConfigError(ValueError):
    """Raised when a scene configuration is invalid."""
