"""
Write models — the outcome of one file write and of the whole delivery.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class WriteOutcome(BaseModel):
    """Result of a single attempt to write the project file."""

    status: Literal["created", "overwritten", "already_exists", "io_failure"]
    path: str
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status in ("created", "overwritten")

    @classmethod
    def created(cls, path: str) -> WriteOutcome:
        return cls(status="created", path=path)

    @classmethod
    def overwritten(cls, path: str) -> WriteOutcome:
        return cls(status="overwritten", path=path)

    @classmethod
    def already_exists(cls, path: str) -> WriteOutcome:
        return cls(status="already_exists", path=path)

    @classmethod
    def io_failure(cls, path: str, reason: str) -> WriteOutcome:
        return cls(status="io_failure", path=path, reason=reason)


class Delivery(BaseModel):
    """Where the document ended up after the overwrite policy ran.

    ``stdout`` means the file could not (or should not) be written and
    the caller must print ``content`` instead.
    """

    status: Literal["created", "overwritten", "stdout"]
    path: str
    content: str
    errors: list[str] = Field(default_factory=list)

    @property
    def on_disk(self) -> bool:
        return self.status != "stdout"
