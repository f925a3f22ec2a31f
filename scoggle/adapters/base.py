"""
Adapter base — the contract between the pipeline and external commands.

The build runner only talks to sbt through this protocol, never
directly through subprocess, so tests can substitute a mock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Literal

from pydantic import BaseModel, Field


class CommandReceipt(BaseModel):
    """Result of launching an external command.

    ``ok`` means the process was started and ran to completion; its
    exit code is recorded but not judged here. Output is kept as raw
    bytes so decoding stays the caller's decision.
    """

    command: list[str]
    status: Literal["ok", "launch_failed", "timed_out"] = "ok"
    return_code: int | None = None
    stdout: bytes = b""
    stderr: bytes = b""
    error: str | None = None
    duration_ms: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def completed(
        cls,
        command: list[str],
        return_code: int,
        stdout: bytes,
        stderr: bytes = b"",
        **kwargs: Any,
    ) -> CommandReceipt:
        return cls(
            command=command,
            status="ok",
            return_code=return_code,
            stdout=stdout,
            stderr=stderr,
            **kwargs,
        )

    @classmethod
    def launch_failure(cls, command: list[str], error: str, **kwargs: Any) -> CommandReceipt:
        return cls(command=command, status="launch_failed", error=error, **kwargs)

    @classmethod
    def timeout(cls, command: list[str], error: str, **kwargs: Any) -> CommandReceipt:
        return cls(command=command, status="timed_out", error=error, **kwargs)


class CommandRunner(ABC):
    """Abstract base class for anything that can run a command.

    Runners NEVER raise exceptions — failures are captured in the
    CommandReceipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def is_available(self, executable: str) -> bool:
        """Check whether ``executable`` can be launched. Never raises."""

    @abstractmethod
    def run(
        self,
        argv: list[str],
        cwd: str | None = None,
        timeout: float | None = None,
    ) -> CommandReceipt:
        """Run ``argv`` to completion and return a receipt.

        MUST never raise exceptions.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
