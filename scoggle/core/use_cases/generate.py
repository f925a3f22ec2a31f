"""
Generate use case — version gate, sbt, assemble, write.

Ties the four pipeline steps together. Each step strictly follows the
previous one and the first fatal outcome ends the run with an error
message; write conflicts are never fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from scoggle.adapters.base import CommandRunner
from scoggle.core.config.loader import GeneratorSettings
from scoggle.core.models.build import BuildOutcome
from scoggle.core.models.project import ProjectDescriptor
from scoggle.core.models.version import VersionOutcome
from scoggle.core.models.write import Delivery
from scoggle.core.persistence.project_file import Confirm, materialize_project_file
from scoggle.core.services.assembler import assemble, project_file_name
from scoggle.core.services.build_runner import run_build
from scoggle.core.services.version_gate import check_version

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    working_directory: Path | None = None
    version: VersionOutcome | None = None
    build: BuildOutcome | None = None
    descriptor: ProjectDescriptor | None = None
    delivery: Delivery | None = None
    error: str | None = None

    @property
    def completed(self) -> bool:
        """Whether the run got as far as delivering the document."""
        return self.error is None and self.delivery is not None

    def to_dict(self) -> dict:
        result: dict = {"completed": self.completed}
        if self.error:
            result["error"] = self.error
        if self.version:
            result["version"] = self.version.model_dump(mode="json", exclude_none=True)
        if self.build:
            result["build"] = self.build.model_dump(mode="json")
        if self.descriptor:
            result["project"] = self.descriptor.model_dump(mode="json", by_alias=True)
        if self.delivery:
            result["delivery"] = {
                "status": self.delivery.status,
                "path": self.delivery.path,
                "errors": self.delivery.errors,
            }
        return result


def gate(working_directory: Path, settings: GeneratorSettings) -> VersionOutcome:
    """Run the version gate against files under ``working_directory``."""
    return check_version(
        declaration_file=working_directory / settings.declaration_file,
        manifest_file=working_directory / settings.manifest_file,
        minimum=settings.min_version,
    )


def run_check_version(
    working_directory: Path,
    settings: GeneratorSettings | None = None,
) -> GenerateResult:
    """Only check the declared sbt version."""
    settings = settings or GeneratorSettings()
    result = GenerateResult(working_directory=working_directory)
    result.version = gate(working_directory, settings)
    if not result.version.ok:
        result.error = result.version.describe()
    return result


def run_list_modules(
    working_directory: Path,
    runner: CommandRunner,
    settings: GeneratorSettings | None = None,
    progress: Progress | None = None,
) -> GenerateResult:
    """Check the version, then ask sbt for the module base directories."""
    settings = settings or GeneratorSettings()
    result = run_check_version(working_directory, settings)
    if result.error:
        return result

    if progress:
        progress("Running sbt, this may take a while")
    result.build = run_build(runner, settings.build, cwd=str(working_directory))
    if not result.build.ok:
        result.error = result.build.describe()
    elif progress:
        progress(f"sbt execution completed in {result.build.duration_ms // 1000} seconds")
    return result


def run_generate(
    working_directory: Path,
    runner: CommandRunner,
    confirm: Confirm,
    settings: GeneratorSettings | None = None,
    progress: Progress | None = None,
) -> GenerateResult:
    """Generate ``<project>.sublime-project`` in ``working_directory``.

    Args:
        working_directory: Absolute sbt project directory.
        runner: Command runner used to launch sbt.
        confirm: Called with a yes/no question when the output file
            already exists.
        settings: Generator settings (defaults when None).
        progress: Optional sink for "sbt is running" style messages.

    Returns:
        GenerateResult; ``delivery.status == "stdout"`` means the caller
        must print the document.
    """
    settings = settings or GeneratorSettings()
    result = run_list_modules(working_directory, runner, settings, progress)
    if result.error:
        return result

    assert result.build is not None
    descriptor = assemble(
        str(working_directory),
        result.build.module_paths,
        layout=settings.layout,
        mode=settings.relativize,
    )
    result.descriptor = descriptor

    try:
        document = descriptor.to_json()
    except (TypeError, ValueError) as e:
        result.error = f"Could not convert Sublime Text project model to JSON: {e}"
        return result

    target = working_directory / project_file_name(working_directory)
    result.delivery = materialize_project_file(document, target, confirm)
    logger.info("Delivered %s via %s", target, result.delivery.status)
    return result
