"""
Version models — the minimum sbt version and the gate's verdict.

The gate never raises. Every way a version check can end is one
VersionOutcome, tagged by ``status``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class SupportedVersion(BaseModel):
    """A minimum supported sbt version (major.minor.patch)."""

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> SupportedVersion:
        """Parse a dotted triple such as ``"1.4.5"``.

        Raises:
            ValueError: If the text is not three non-negative integers.
        """
        parts = text.strip().split(".")
        if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
            raise ValueError(f"Expected a version like 1.4.5, got {text!r}")
        major, minor, patch = (int(p) for p in parts)
        return cls(major=major, minor=minor, patch=patch)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


MIN_SBT_VERSION = SupportedVersion(major=1, minor=4, patch=5)


class VersionOutcome(BaseModel):
    """Verdict of the sbt version gate.

    ``actual`` is the version token as read, ``minimum`` the supported
    bound (both for ``unsupported``). ``raw`` holds the text that could
    not be understood and ``path`` the missing file.
    """

    status: Literal[
        "valid",
        "unsupported",
        "unparseable",
        "declaration_missing",
        "manifest_missing",
    ]
    actual: str | None = None
    minimum: str | None = None
    raw: str | None = None
    path: str | None = None

    @property
    def ok(self) -> bool:
        """Whether sbt may be run."""
        return self.status == "valid"

    @classmethod
    def valid(cls, actual: str | None = None) -> VersionOutcome:
        return cls(status="valid", actual=actual)

    @classmethod
    def unsupported(cls, actual: str, minimum: SupportedVersion | str) -> VersionOutcome:
        return cls(status="unsupported", actual=actual, minimum=str(minimum))

    @classmethod
    def unparseable(cls, raw: str) -> VersionOutcome:
        return cls(status="unparseable", raw=raw)

    @classmethod
    def declaration_missing(cls, path: str) -> VersionOutcome:
        return cls(status="declaration_missing", path=path)

    @classmethod
    def manifest_missing(cls, path: str) -> VersionOutcome:
        return cls(status="manifest_missing", path=path)

    def describe(self) -> str:
        """Human-readable message for this outcome."""
        if self.status == "valid":
            return f"sbt version {self.actual} is supported" if self.actual else "sbt version is supported"
        if self.status == "unsupported":
            return (
                f"sbt version {self.actual} is not supported. "
                f"The minimum supported version is {self.minimum}"
            )
        if self.status == "unparseable":
            return f"Could not understand the sbt version declared: {self.raw!r}"
        if self.status == "declaration_missing":
            return (
                f"Could not find {self.path}. "
                "Unknown sbt version; please run this in an sbt project directory"
            )
        return (
            f"Could not find {self.path}. "
            "Please run this in an sbt project directory"
        )
