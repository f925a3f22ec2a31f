"""
Version gate — decide whether sbt may be run at all.

Reads project/build.properties, extracts ``sbt.version`` and classifies
it against the minimum supported version. Only 1.x builds at or above
the minimum are accepted; 0.x builds are never supported.

Pure text classification apart from the two file checks.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from scoggle.core.models.version import MIN_SBT_VERSION, SupportedVersion, VersionOutcome

logger = logging.getLogger(__name__)

SBT_VERSION_REGEX = re.compile(r"sbt.version\s*=\s*(.+)")

_NUMBER = re.compile(r"[0-9]+")


def check_version(
    declaration_file: Path,
    manifest_file: Path,
    minimum: SupportedVersion = MIN_SBT_VERSION,
) -> VersionOutcome:
    """Check the sbt version a project declares.

    Args:
        declaration_file: Path to project/build.properties.
        manifest_file: Path to build.sbt (existence only).
        minimum: Lowest supported sbt version.

    Returns:
        VersionOutcome; ``manifest_missing`` wins over
        ``declaration_missing`` when both files are absent.
    """
    if not manifest_file.is_file():
        logger.debug("No manifest at %s", manifest_file)
        return VersionOutcome.manifest_missing(str(manifest_file))

    try:
        content = declaration_file.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError):
        return VersionOutcome.declaration_missing(str(declaration_file))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", declaration_file, e)
        return VersionOutcome.declaration_missing(str(declaration_file))

    match = SBT_VERSION_REGEX.search(content)
    if match is None:
        return VersionOutcome.unparseable(content)

    outcome = classify_version(match.group(1), minimum)
    logger.info("sbt version %r: %s", match.group(1).strip(), outcome.status)
    return outcome


def classify_version(
    sbt_version: str,
    minimum: SupportedVersion = MIN_SBT_VERSION,
) -> VersionOutcome:
    """Classify a version token such as ``"1.5.0"``.

    The token must have exactly three dot-separated parts. A leading
    ``0`` is always unsupported; a leading ``1`` needs numeric minor and
    patch parts and must be at least ``minimum``. Anything else is
    unparseable.
    """
    token = sbt_version.strip()
    parts = token.split(".")

    if len(parts) != 3:
        return VersionOutcome.unparseable(token)

    major, minor, patch = parts

    if major == "0":
        return VersionOutcome.unsupported(token, minimum)

    if major != "1":
        return VersionOutcome.unparseable(token)

    if not (_NUMBER.fullmatch(minor) and _NUMBER.fullmatch(patch)):
        return VersionOutcome.unparseable(token)

    if (1, int(minor), int(patch)) >= minimum.as_tuple():
        return VersionOutcome.valid(token)

    return VersionOutcome.unsupported(token, minimum)
