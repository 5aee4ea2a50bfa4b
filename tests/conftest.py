from __future__ import annotations

import pytest

from lsviewer.builder import CircuitCreator
from lsviewer.config import SceneConfig


@pytest.fixture
def config() -> SceneConfig:
    """Default configuration: margin 1, so the lattice pitch is 2."""
    return SceneConfig()


@pytest.fixture
def creator(config: SceneConfig) -> CircuitCreator:
    return CircuitCreator(config)
