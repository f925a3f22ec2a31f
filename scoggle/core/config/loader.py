"""
Configuration loader — reads .scoggle.yml into GeneratorSettings.

Every constant the pipeline relies on (minimum sbt version, marker
files, the sbt command, source layout) lives in GeneratorSettings and
is passed into each component. The file is optional; without it the
defaults reproduce the standard sbt/Scala layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from scoggle.core.models.version import MIN_SBT_VERSION, SupportedVersion

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = ".scoggle.yml"

DEFAULT_MEMORY_MB = 1024


class ConfigError(Exception):
    """Raised when generator configuration is invalid or unreadable."""


class SourceLayout(BaseModel):
    """Where sources live inside each module, and how tests are named."""

    production_suffix: str = "/src/main/scala"
    test_suffix: str = "/src/test/scala"
    test_suffixes: list[str] = Field(
        default_factory=lambda: ["Spec.scala", "Suite.scala", "Test.scala"]
    )


class BuildSettings(BaseModel):
    """How sbt is invoked."""

    command: str = "sbt"
    arguments: list[str] = Field(
        default_factory=lambda: ["set offline := true; print baseDirectory", "--error"]
    )
    memory_mb: int | None = None      # adds "-mem <MB>" when set
    timeout: float | None = None      # seconds; None waits for sbt indefinitely

    @field_validator("memory_mb")
    @classmethod
    def memory_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("memory_mb must be a positive number of megabytes")
        return v

    @field_validator("timeout")
    @classmethod
    def timeout_positive(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return v

    def argv(self) -> list[str]:
        """Full command line for the base-directory query."""
        argv = [self.command, *self.arguments]
        if self.memory_mb is not None:
            argv += ["-mem", str(self.memory_mb)]
        return argv


class GeneratorSettings(BaseModel):
    """Everything the generate pipeline needs besides the working directory."""

    manifest_file: str = "build.sbt"
    declaration_file: str = "project/build.properties"
    min_version: SupportedVersion = MIN_SBT_VERSION
    build: BuildSettings = Field(default_factory=BuildSettings)
    layout: SourceLayout = Field(default_factory=SourceLayout)
    overwrite: Literal["ask", "always", "never"] = "ask"
    relativize: Literal["replace", "prefix"] = "prefix"

    @field_validator("min_version", mode="before")
    @classmethod
    def parse_min_version(cls, v: object) -> object:
        if isinstance(v, str):
            return SupportedVersion.parse(v)
        return v


def parse_memory(value: str | None, default: int = DEFAULT_MEMORY_MB) -> int | None:
    """Parse a ``--memory`` value in megabytes.

    Values that are not an unsigned integer fall back to ``default``
    rather than failing the run.
    """
    if value is None:
        return None
    text = value.strip()
    if text.isascii() and text.isdigit() and int(text) > 0:
        return int(text)
    logger.warning("Ignoring memory value %r, using %d MB", value, default)
    return default


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Return .scoggle.yml in the given directory (default: cwd), if any."""
    candidate = (start_dir or Path.cwd()) / SETTINGS_FILE
    return candidate if candidate.is_file() else None


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load and validate generator settings.

    Args:
        path: Explicit path to a settings file. If None, defaults are used.

    Returns:
        Validated GeneratorSettings.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        return GeneratorSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = GeneratorSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings
