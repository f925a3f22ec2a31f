"""
Mock command runner — test double for sbt.

Returns canned output without launching anything. Configure it with
stdout text or bytes, a launch failure, or a timeout.
"""

from __future__ import annotations

from scoggle.adapters.base import CommandReceipt, CommandRunner


class MockCommandRunner(CommandRunner):
    """Command runner that replays a configured receipt.

    By default, every command succeeds with empty output.
    """

    def __init__(
        self,
        stdout: str | bytes = b"",
        available: bool = True,
        return_code: int = 0,
    ):
        self._stdout = stdout.encode("utf-8") if isinstance(stdout, str) else stdout
        self._available = available
        self._return_code = return_code
        self._failure: str | None = None
        self._timed_out = False
        self._call_log: list[list[str]] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[list[str]]:
        """Every argv this runner has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self, executable: str) -> bool:
        return self._available

    def set_failure(self, error: str = "No such file or directory: 'sbt'") -> None:
        """Make every run fail to launch."""
        self._failure = error

    def set_timeout(self) -> None:
        """Make every run time out."""
        self._timed_out = True

    def run(
        self,
        argv: list[str],
        cwd: str | None = None,
        timeout: float | None = None,
    ) -> CommandReceipt:
        self._call_log.append(list(argv))

        if self._failure is not None:
            return CommandReceipt.launch_failure(command=argv, error=self._failure)
        if self._timed_out:
            return CommandReceipt.timeout(command=argv, error=f"Command timed out after {timeout}s")

        return CommandReceipt.completed(
            command=argv,
            return_code=self._return_code,
            stdout=self._stdout,
            metadata={"mock": True},
        )
