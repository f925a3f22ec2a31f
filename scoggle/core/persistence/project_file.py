"""
Project file persistence — write <name>.sublime-project without clobbering.

The document is always fully built before any write, and every write
is a single whole-document call. An existing file is only replaced
after confirmation; when nothing can be written the caller prints the
document instead, so it is never lost.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from scoggle.core.models.write import Delivery, WriteOutcome

logger = logging.getLogger(__name__)

STDOUT_FENCE = "```"

Confirm = Callable[[str], bool]


def write_new_project_file(content: str, path: Path) -> WriteOutcome:
    """Create ``path`` and write ``content``; fail if it already exists."""
    try:
        with path.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except FileExistsError:
        return WriteOutcome.already_exists(str(path))
    except OSError as e:
        return WriteOutcome.io_failure(str(path), str(e))

    logger.debug("Created %s", path)
    return WriteOutcome.created(str(path))


def overwrite_project_file(content: str, path: Path) -> WriteOutcome:
    """Truncate ``path`` and write ``content``."""
    try:
        with path.open("w", encoding="utf-8") as fh:
            fh.write(content)
    except OSError as e:
        return WriteOutcome.io_failure(str(path), str(e))

    logger.debug("Overwrote %s", path)
    return WriteOutcome.overwritten(str(path))


def materialize_project_file(content: str, path: Path, confirm: Confirm) -> Delivery:
    """Write the project file, asking before replacing an existing one.

    One pass, no retries:

        create  -> created
        exists  -> confirm? -> overwrite -> overwritten
                                         -> (error) stdout
                            -> (no)      stdout
        other I/O error                  -> stdout

    Args:
        content: The serialized project document.
        path: Target file.
        confirm: Asked ``"<file> already exists. Overwrite Y/N ?"``;
            returns True to overwrite.

    Returns:
        Delivery telling the caller whether to print the document.
    """
    errors: list[str] = []
    outcome = write_new_project_file(content, path)

    if outcome.status == "created":
        return Delivery(status="created", path=str(path), content=content)

    if outcome.status == "already_exists":
        if confirm(f"{path.name} already exists. Overwrite Y/N ?"):
            logger.info("Overwriting %s", path)
            overwritten = overwrite_project_file(content, path)
            if overwritten.ok:
                return Delivery(status="overwritten", path=str(path), content=content)
            errors.append(f"Could not overwrite {path.name} because of error: {overwritten.reason}")
        else:
            logger.info("Keeping existing %s", path)
    else:
        errors.append(f"Could not write {path.name} due to: {outcome.reason}")

    logger.info("Falling back to stdout for %s", path)
    return Delivery(status="stdout", path=str(path), content=content, errors=errors)


def render_stdout_fallback(content: str) -> str:
    """The document fenced between two ``` lines."""
    return f"{STDOUT_FENCE}\n{content}\n{STDOUT_FENCE}"
