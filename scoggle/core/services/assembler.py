"""
Project assembler — turn module base directories into a Sublime project.

Pure logic — no I/O.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import PurePath
from typing import Literal

from scoggle.core.config.loader import SourceLayout
from scoggle.core.models.project import (
    ProjectDescriptor,
    ScoggleSettings,
    SettingsObject,
    SourceRootPair,
)

logger = logging.getLogger(__name__)

PROJECT_FILE_EXTENSION = ".sublime-project"
GENERATED_NAME_PREFIX = "scoggle-gen-"


def relativize(
    module_path: str,
    working_directory: str,
    mode: Literal["replace", "prefix"] = "prefix",
) -> str:
    """Make a module base directory relative to the working directory.

    ``prefix`` strips the working directory only as a leading path
    component, leaving other paths untouched. ``replace`` removes every
    occurrence of the working directory string, wherever it appears.

    >>> relativize("/repo/core", "/repo")
    '/core'
    >>> relativize("/repo", "/repo")
    ''
    """
    if not working_directory:
        return module_path

    if mode == "replace":
        return module_path.replace(working_directory, "")

    base = working_directory.rstrip("/")
    if module_path.rstrip("/") == base:
        return ""
    if module_path.startswith(base + "/"):
        return module_path[len(base):]
    return module_path


def source_roots(
    working_directory: str,
    module_paths: list[str],
    layout: SourceLayout | None = None,
    mode: Literal["replace", "prefix"] = "prefix",
) -> list[SourceRootPair]:
    """One (production, test) pair per module, in module order."""
    layout = layout or SourceLayout()
    pairs = []
    for path in module_paths:
        relative = relativize(path, working_directory, mode)
        pairs.append(
            SourceRootPair(
                production=f"{relative}{layout.production_suffix}",
                test=f"{relative}{layout.test_suffix}",
            )
        )
    return pairs


def assemble(
    working_directory: str,
    module_paths: list[str],
    layout: SourceLayout | None = None,
    mode: Literal["replace", "prefix"] = "prefix",
) -> ProjectDescriptor:
    """Build the project descriptor for the given modules.

    Args:
        working_directory: Absolute path the project file is written in.
        module_paths: Absolute base directories as reported by sbt.
        layout: Source suffixes and test-file suffixes.
        mode: How module paths are made relative (see ``relativize``).

    Returns:
        An immutable ProjectDescriptor whose production and test roots
        line up index by index with ``module_paths``.
    """
    layout = layout or SourceLayout()
    pairs = source_roots(working_directory, module_paths, layout, mode)

    scoggle = ScoggleSettings(
        production_srcs=tuple(p.production for p in pairs),
        test_srcs=tuple(p.test for p in pairs),
        test_suffixes=tuple(layout.test_suffixes),
    )
    return ProjectDescriptor(settings=SettingsObject(scoggle=scoggle))


def project_file_name(working_directory: str | PurePath) -> str:
    """``<directory name>.sublime-project``, or a generated name.

    The generated name is used when the directory has no final
    segment (e.g. ``/``).
    """
    name = PurePath(working_directory).name
    if not name:
        name = f"{GENERATED_NAME_PREFIX}{uuid.uuid4()}"
        logger.warning("Could not retrieve project name. Using generated name: %s", name)
    return f"{name}{PROJECT_FILE_EXTENSION}"
