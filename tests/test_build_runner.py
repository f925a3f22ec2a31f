"""
Tests for the build runner — sbt invocation and output classification.
"""

import pytest

from scoggle.adapters.mock import MockCommandRunner
from scoggle.core.config.loader import BuildSettings
from scoggle.core.services.build_runner import parse_base_directories, run_build


class TestParseBaseDirectories:
    def test_single_module(self):
        outcome = parse_base_directories("/repo/moduleA\n")
        assert outcome.ok
        assert outcome.module_paths == ["/repo/moduleA"]
        assert not outcome.is_multi_module

    def test_single_line_is_trimmed(self):
        outcome = parse_base_directories("   /repo/moduleA   ")
        assert outcome.module_paths == ["/repo/moduleA"]

    def test_multi_module_keeps_path_lines(self):
        output = "modA / baseDirectory\n/repo/modA\nmodB / baseDirectory\n/repo/modB\n"
        outcome = parse_base_directories(output)
        assert outcome.ok
        assert outcome.module_paths == ["/repo/modA", "/repo/modB"]
        assert outcome.is_multi_module

    def test_multi_module_lines_trimmed(self):
        output = "  core / baseDirectory\n\t/repo/core  \r\n"
        assert parse_base_directories(output).module_paths == ["/repo/core"]

    def test_blank_lines_ignored(self):
        output = "\nmodA / baseDirectory\n\n/repo/modA\n\n"
        assert parse_base_directories(output).module_paths == ["/repo/modA"]

    def test_empty_output_is_malformed(self):
        outcome = parse_base_directories("")
        assert outcome.status == "malformed"
        assert outcome.raw_lines == []

    @pytest.mark.parametrize("count", [3, 5, 7])
    def test_odd_count_is_malformed(self, count: int):
        lines = [f"line{i}" for i in range(count)]
        outcome = parse_base_directories("\n".join(lines))
        assert outcome.status == "malformed"
        assert outcome.raw_lines == lines

    @pytest.mark.parametrize("count", [2, 4, 6, 8])
    def test_even_count_keeps_even_positions(self, count: int):
        lines = [f"line{i}" for i in range(1, count + 1)]
        outcome = parse_base_directories("\n".join(lines))
        assert outcome.module_paths == [f"line{i}" for i in range(2, count + 1, 2)]


class TestRunBuild:
    def test_default_command(self):
        runner = MockCommandRunner(stdout="/repo\n")
        run_build(runner)
        assert runner.call_log == [
            ["sbt", "set offline := true; print baseDirectory", "--error"]
        ]

    def test_memory_flag_appended(self):
        runner = MockCommandRunner(stdout="/repo\n")
        run_build(runner, BuildSettings(memory_mb=2048))
        assert runner.call_log[0][-2:] == ["-mem", "2048"]

    def test_success(self):
        runner = MockCommandRunner(stdout="/repo/moduleA\n")
        outcome = run_build(runner)
        assert outcome.ok
        assert outcome.module_paths == ["/repo/moduleA"]

    def test_launch_failure(self):
        runner = MockCommandRunner()
        runner.set_failure("No such file or directory: 'sbt'")
        outcome = run_build(runner)
        assert outcome.status == "launch_failed"
        assert "sbt" in outcome.reason
        assert runner.call_count == 1  # no retry

    def test_timeout(self):
        runner = MockCommandRunner()
        runner.set_timeout()
        outcome = run_build(runner, BuildSettings(timeout=1.5))
        assert outcome.status == "timed_out"
        assert "1.5" in outcome.reason

    def test_undecodable_output(self):
        runner = MockCommandRunner(stdout=b"/repo/\xff\xfe\n")
        outcome = run_build(runner)
        assert outcome.status == "not_decodable"
        assert outcome.reason

    def test_malformed_output(self):
        runner = MockCommandRunner(stdout="a\nb\nc\n")
        outcome = run_build(runner)
        assert outcome.status == "malformed"
        assert "Unrecognised" in outcome.describe()

    def test_nonzero_exit_still_parsed(self):
        runner = MockCommandRunner(stdout="/repo\n", return_code=1)
        assert run_build(runner).module_paths == ["/repo"]
