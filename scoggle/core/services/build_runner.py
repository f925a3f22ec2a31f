"""
Build runner — ask sbt for every module's base directory.

Runs ``sbt "set offline := true; print baseDirectory" --error`` and
classifies what it printed:

    single module:   /repo
    multi module:    core / baseDirectory
                     /repo/core
                     api / baseDirectory
                     /repo/api

One line is the project itself. An even number of lines is read as
(label, path) pairs and only the paths are kept. Any other shape is
malformed. No retries: a failing sbt is the operator's to fix.
"""

from __future__ import annotations

import logging

from scoggle.adapters.base import CommandRunner
from scoggle.core.config.loader import BuildSettings
from scoggle.core.models.build import BuildOutcome

logger = logging.getLogger(__name__)


def run_build(
    runner: CommandRunner,
    settings: BuildSettings | None = None,
    cwd: str | None = None,
) -> BuildOutcome:
    """Run sbt once and turn its output into module base directories.

    Args:
        runner: Command runner used to launch sbt.
        settings: Command, arguments, memory and timeout.
        cwd: Directory to run sbt in (default: current directory).

    Returns:
        BuildOutcome, never raises.
    """
    settings = settings or BuildSettings()
    argv = settings.argv()

    logger.info("Running %s", argv)
    receipt = runner.run(argv, cwd=cwd, timeout=settings.timeout)

    if receipt.status == "launch_failed":
        return BuildOutcome.launch_failed(receipt.error or "unknown error")
    if receipt.status == "timed_out":
        return BuildOutcome.timed_out(
            receipt.error or f"timed out after {settings.timeout}s",
            duration_ms=receipt.duration_ms,
        )

    if receipt.return_code:
        stderr = receipt.stderr.decode("utf-8", errors="replace").strip()
        logger.warning("sbt exited with code %s: %s", receipt.return_code, stderr)

    try:
        output = receipt.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        return BuildOutcome.not_decodable(str(e), duration_ms=receipt.duration_ms)

    logger.info("sbt completed in %dms", receipt.duration_ms)
    return parse_base_directories(output).model_copy(
        update={"duration_ms": receipt.duration_ms}
    )


def parse_base_directories(output: str) -> BuildOutcome:
    """Classify sbt output by its line count.

    Lines are stripped and blank lines dropped before counting.
    """
    raw_lines = output.splitlines()
    lines = [line.strip() for line in raw_lines if line.strip()]

    if len(lines) == 1:
        return BuildOutcome.success([lines[0]], raw_lines=raw_lines)

    if lines and len(lines) % 2 == 0:
        # label line, then path line, per module
        paths = lines[1::2]
        logger.debug("Multi-module build: %s", paths)
        return BuildOutcome.success(paths, raw_lines=raw_lines)

    return BuildOutcome.malformed(raw_lines)
