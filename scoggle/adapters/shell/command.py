"""
Shell command adapter — launch a command and capture its output.

Arguments are passed as a list, never through a shell, so the sbt
query string reaches sbt as a single argument.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

from scoggle.adapters.base import CommandReceipt, CommandRunner

logger = logging.getLogger(__name__)


class ShellCommandAdapter(CommandRunner):
    """Run commands with subprocess and capture stdout/stderr as bytes."""

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self, executable: str) -> bool:
        return shutil.which(executable) is not None

    def run(
        self,
        argv: list[str],
        cwd: str | None = None,
        timeout: float | None = None,
    ) -> CommandReceipt:
        logger.debug("Executing: %s (cwd=%s, timeout=%s)", argv, cwd, timeout)
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return CommandReceipt.timeout(
                command=argv,
                error=f"Command timed out after {timeout}s",
                duration_ms=_elapsed_ms(start),
            )
        except (OSError, ValueError) as e:
            # FileNotFoundError, PermissionError, bad argv, ...
            return CommandReceipt.launch_failure(
                command=argv,
                error=str(e),
                duration_ms=_elapsed_ms(start),
            )

        elapsed_ms = _elapsed_ms(start)
        logger.debug("%s exited with %d after %dms", argv[0], result.returncode, elapsed_ms)
        return CommandReceipt.completed(
            command=argv,
            return_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
            duration_ms=elapsed_ms,
        )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
