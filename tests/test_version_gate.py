"""
Tests for the version gate — build.properties parsing and classification.
"""

from pathlib import Path

import pytest

from scoggle.core.models.version import SupportedVersion, VersionOutcome
from scoggle.core.services.version_gate import check_version, classify_version


def _check(root: Path) -> VersionOutcome:
    return check_version(root / "project" / "build.properties", root / "build.sbt")


class TestClassifyVersion:
    @pytest.mark.parametrize("version", ["1.4.5", "1.4.6", "1.5.0", "1.6.5", "1.10.0", "1.4.300"])
    def test_valid(self, version: str):
        assert classify_version(version).status == "valid"

    @pytest.mark.parametrize("version", ["1.4.4", "1.3.6", "1.0.0", "1.3.99"])
    def test_unsupported_1x(self, version: str):
        outcome = classify_version(version)
        assert outcome == VersionOutcome.unsupported(version, "1.4.5")

    @pytest.mark.parametrize("version", ["0.13.1", "0.13.18", "0.0.0", "0.x.y"])
    def test_legacy_major_always_unsupported(self, version: str):
        outcome = classify_version(version)
        assert outcome.status == "unsupported"
        assert outcome.actual == version
        assert outcome.minimum == "1.4.5"

    @pytest.mark.parametrize(
        "version",
        ["a.b.c", "1.b.5", "1.4.x", "2.0.0", "1.5", "1.5.0.1", "", "1.-1.5", "1.4.5-RC1"],
    )
    def test_unparseable(self, version: str):
        outcome = classify_version(version)
        assert outcome == VersionOutcome.unparseable(version)

    def test_token_is_trimmed(self):
        outcome = classify_version(" 0.13.18\r")
        assert outcome.actual == "0.13.18"

    def test_rule_matches_minimum_boundary(self):
        for minor in range(0, 8):
            for patch in range(0, 8):
                expected = minor > 4 or (minor == 4 and patch >= 5)
                assert classify_version(f"1.{minor}.{patch}").ok is expected

    def test_custom_minimum(self):
        minimum = SupportedVersion.parse("1.8.0")
        assert classify_version("1.7.9", minimum).status == "unsupported"
        assert classify_version("1.8.0", minimum).status == "valid"


class TestCheckVersion:
    def test_valid_declaration(self, make_sbt_project):
        root = make_sbt_project(properties="sbt.version = 1.5.0\n")
        assert _check(root).status == "valid"

    def test_legacy_declaration(self, make_sbt_project):
        root = make_sbt_project(properties="sbt.version = 0.13.18\n")
        outcome = _check(root)
        assert outcome.status == "unsupported"
        assert (outcome.actual, outcome.minimum) == ("0.13.18", "1.4.5")

    def test_no_spaces_around_equals(self, make_sbt_project):
        root = make_sbt_project(properties="# comment\nsbt.version=1.9.7\n")
        assert _check(root).status == "valid"

    def test_missing_manifest(self, make_sbt_project):
        root = make_sbt_project(manifest=False)
        outcome = _check(root)
        assert outcome.status == "manifest_missing"
        assert outcome.path.endswith("build.sbt")

    def test_manifest_checked_before_declaration(self, make_sbt_project):
        root = make_sbt_project(manifest=False, properties=None)
        assert _check(root).status == "manifest_missing"

    def test_missing_declaration(self, make_sbt_project):
        root = make_sbt_project(properties=None)
        outcome = _check(root)
        assert outcome.status == "declaration_missing"
        assert outcome.path.endswith("build.properties")

    def test_no_version_line(self, make_sbt_project):
        content = "scala.version = 2.13.12\n"
        root = make_sbt_project(properties=content)
        outcome = _check(root)
        assert outcome.status == "unparseable"
        assert outcome.raw == content

    def test_describe_mentions_files(self, make_sbt_project):
        root = make_sbt_project(properties=None)
        assert "build.properties" in _check(root).describe()


class TestSupportedVersion:
    def test_parse_and_str(self):
        version = SupportedVersion.parse("1.4.5")
        assert version.as_tuple() == (1, 4, 5)
        assert str(version) == "1.4.5"

    @pytest.mark.parametrize("text", ["1.4", "one.two.three", "1.4.5.6"])
    def test_parse_rejects(self, text: str):
        with pytest.raises(ValueError):
            SupportedVersion.parse(text)
