"""
Shared test fixtures and configuration.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_sbt_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that lays out a minimal sbt project.

    ``properties=None`` leaves project/build.properties out entirely.
    """

    def _make(
        name: str = "demo",
        properties: str | None = "sbt.version = 1.5.0\n",
        manifest: bool = True,
    ) -> Path:
        root = tmp_path / name
        root.mkdir()
        if manifest:
            (root / "build.sbt").write_text('name := "demo"\n')
        if properties is not None:
            (root / "project").mkdir()
            (root / "project" / "build.properties").write_text(properties)
        return root

    return _make


@pytest.fixture
def sbt_project(make_sbt_project) -> Path:
    """A supported single-version sbt project directory."""
    return make_sbt_project()
