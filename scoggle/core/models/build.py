"""
Build outcome model — what one sbt invocation produced.

sbt either reports one base directory (single module) or a label line
followed by a path line for each module. Anything else is malformed.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class BuildOutcome(BaseModel):
    """Result of running sbt and classifying its output.

    Produced once per invocation and never raised.
    """

    status: Literal["launch_failed", "not_decodable", "malformed", "timed_out", "success"]
    module_paths: list[str] = Field(default_factory=list)
    raw_lines: list[str] = Field(default_factory=list)
    reason: str = ""
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @property
    def is_multi_module(self) -> bool:
        return self.ok and len(self.module_paths) > 1

    @classmethod
    def success(cls, module_paths: list[str], **kwargs) -> BuildOutcome:
        return cls(status="success", module_paths=module_paths, **kwargs)

    @classmethod
    def launch_failed(cls, reason: str, **kwargs) -> BuildOutcome:
        return cls(status="launch_failed", reason=reason, **kwargs)

    @classmethod
    def not_decodable(cls, reason: str, **kwargs) -> BuildOutcome:
        return cls(status="not_decodable", reason=reason, **kwargs)

    @classmethod
    def malformed(cls, raw_lines: list[str], **kwargs) -> BuildOutcome:
        return cls(status="malformed", raw_lines=raw_lines, **kwargs)

    @classmethod
    def timed_out(cls, reason: str, **kwargs) -> BuildOutcome:
        return cls(status="timed_out", reason=reason, **kwargs)

    def describe(self) -> str:
        """Human-readable message for this outcome."""
        if self.status == "success":
            count = len(self.module_paths)
            return f"Found {count} module{'s' if count != 1 else ''}"
        if self.status == "launch_failed":
            return f"Could not run sbt: {self.reason}"
        if self.status == "not_decodable":
            return f"Could not decode sbt output: {self.reason}"
        if self.status == "timed_out":
            return f"sbt did not finish: {self.reason}"
        return f"Unrecognised sbt output structure: {self.raw_lines!r}"
