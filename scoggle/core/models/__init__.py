"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from scoggle.core.models import VersionOutcome, BuildOutcome, ProjectDescriptor
"""

from scoggle.core.models.build import BuildOutcome
from scoggle.core.models.project import (
    PathObject,
    ProjectDescriptor,
    ScoggleSettings,
    SettingsObject,
    SourceRootPair,
)
from scoggle.core.models.version import MIN_SBT_VERSION, SupportedVersion, VersionOutcome
from scoggle.core.models.write import Delivery, WriteOutcome

__all__ = [
    # build.py
    "BuildOutcome",
    # write.py
    "Delivery",
    # version.py
    "MIN_SBT_VERSION",
    # project.py
    "PathObject",
    "ProjectDescriptor",
    "ScoggleSettings",
    "SettingsObject",
    "SourceRootPair",
    "SupportedVersion",
    "VersionOutcome",
    "WriteOutcome",
]
