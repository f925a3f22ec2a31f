"""
Sublime project model — the document written to <name>.sublime-project.

The JSON shape is fixed by the Scoggle plugin:

    {
      "folders": [{"path": "."}],
      "settings": {
        "Scoggle": {
          "production_srcs": [...],
          "test_srcs": [...],
          "test_suffixes": ["Spec.scala", "Suite.scala", "Test.scala"]
        }
      }
    }
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SourceRootPair(BaseModel):
    """Production and test source roots of one module."""

    model_config = ConfigDict(frozen=True)

    production: str
    test: str


class PathObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str = "."


class ScoggleSettings(BaseModel):
    """The ``Scoggle`` block read by the editor plugin."""

    model_config = ConfigDict(frozen=True)

    production_srcs: tuple[str, ...] = ()
    test_srcs: tuple[str, ...] = ()
    test_suffixes: tuple[str, ...] = ()

    @model_validator(mode="after")
    def roots_pair_up(self) -> ScoggleSettings:
        if len(self.production_srcs) != len(self.test_srcs):
            raise ValueError(
                f"production_srcs ({len(self.production_srcs)}) and "
                f"test_srcs ({len(self.test_srcs)}) must have the same length"
            )
        return self


class SettingsObject(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    scoggle: ScoggleSettings = Field(alias="Scoggle")


class ProjectDescriptor(BaseModel):
    """Root of a Sublime Text project file. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    folders: tuple[PathObject, ...] = (PathObject(),)
    settings: SettingsObject

    @property
    def production_srcs(self) -> list[str]:
        return list(self.settings.scoggle.production_srcs)

    @property
    def test_srcs(self) -> list[str]:
        return list(self.settings.scoggle.test_srcs)

    @property
    def test_suffixes(self) -> list[str]:
        return list(self.settings.scoggle.test_suffixes)

    @property
    def source_roots(self) -> list[SourceRootPair]:
        return [
            SourceRootPair(production=p, test=t)
            for p, t in zip(self.production_srcs, self.test_srcs)
        ]

    def to_json(self) -> str:
        """Serialize with the field names the plugin expects."""
        data = self.model_dump(mode="json", by_alias=True)
        return json.dumps(data, indent=2, ensure_ascii=False)
