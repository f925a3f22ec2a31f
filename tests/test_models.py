"""
Tests for domain models — outcomes and the project descriptor.
"""

import pytest
from pydantic import ValidationError

from scoggle.core.models import (
    BuildOutcome,
    Delivery,
    ProjectDescriptor,
    ScoggleSettings,
    SettingsObject,
    VersionOutcome,
    WriteOutcome,
)


class TestVersionOutcome:
    def test_only_valid_is_ok(self):
        assert VersionOutcome.valid("1.5.0").ok
        assert not VersionOutcome.unsupported("0.13.18", "1.4.5").ok
        assert not VersionOutcome.unparseable("x").ok
        assert not VersionOutcome.declaration_missing("project/build.properties").ok
        assert not VersionOutcome.manifest_missing("build.sbt").ok

    def test_every_status_has_a_message(self):
        outcomes = [
            VersionOutcome.valid("1.5.0"),
            VersionOutcome.unsupported("0.13.18", "1.4.5"),
            VersionOutcome.unparseable("garbage"),
            VersionOutcome.declaration_missing("project/build.properties"),
            VersionOutcome.manifest_missing("build.sbt"),
        ]
        messages = {o.describe() for o in outcomes}
        assert len(messages) == len(outcomes)


class TestBuildOutcome:
    def test_success(self):
        outcome = BuildOutcome.success(["/a", "/b"])
        assert outcome.ok
        assert outcome.is_multi_module

    def test_failures_are_distinct(self):
        outcomes = [
            BuildOutcome.launch_failed("missing"),
            BuildOutcome.not_decodable("bad byte"),
            BuildOutcome.malformed(["a", "b", "c"]),
            BuildOutcome.timed_out("after 5s"),
        ]
        assert not any(o.ok for o in outcomes)
        assert len({o.describe() for o in outcomes}) == 4


class TestWriteModels:
    def test_write_outcome_ok(self):
        assert WriteOutcome.created("a").ok
        assert WriteOutcome.overwritten("a").ok
        assert not WriteOutcome.already_exists("a").ok
        assert not WriteOutcome.io_failure("a", "disk full").ok

    def test_delivery_on_disk(self):
        assert Delivery(status="created", path="a", content="{}").on_disk
        assert not Delivery(status="stdout", path="a", content="{}").on_disk


class TestProjectDescriptor:
    def test_mismatched_roots_rejected(self):
        with pytest.raises(ValidationError):
            ScoggleSettings(production_srcs=("/a",), test_srcs=())

    def test_frozen(self):
        descriptor = ProjectDescriptor(settings=SettingsObject(scoggle=ScoggleSettings()))
        with pytest.raises(ValidationError):
            descriptor.settings = SettingsObject(scoggle=ScoggleSettings())

    def test_alias_in_dump(self):
        descriptor = ProjectDescriptor(settings=SettingsObject(scoggle=ScoggleSettings()))
        assert "Scoggle" in descriptor.model_dump(by_alias=True)["settings"]
