"""Tests for the ProcessRunner implementations."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from quickexec.process.dry_run import DryRunProcessRunner
from quickexec.process.fake import FakeProcessRunner
from quickexec.process.real import RealProcessRunner
from quickexec.process.types import ProcessOutput


def test_process_output_success() -> None:
    """Test that success is True only for exit code 0."""
    assert ProcessOutput(0, b"", b"").success
    assert not ProcessOutput(1, b"", b"").success
    assert not ProcessOutput(-9, b"", b"").success


def test_real_runner_calls_subprocess_run() -> None:
    """Test that RealProcessRunner captures bytes without checking the exit code."""
    with patch("quickexec.process.real.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 3
        mock_result.stdout = b"out"
        mock_result.stderr = b"err"
        mock_run.return_value = mock_result

        result = RealProcessRunner().run(["git", "status"])

        assert result == ProcessOutput(exit_code=3, stdout=b"out", stderr=b"err")
        mock_run.assert_called_once_with(
            ["git", "status"],
            capture_output=True,
            check=False,
        )


def test_real_runner_propagates_spawn_errors() -> None:
    """Test that OS errors from subprocess.run are not swallowed."""
    with patch("quickexec.process.real.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "nope")

        with pytest.raises(FileNotFoundError):
            RealProcessRunner().run(["nope"])


def test_fake_runner_defaults_to_empty_success() -> None:
    """Test that an unconfigured fake returns an empty successful output."""
    runner = FakeProcessRunner()

    assert runner.run(["anything"]) == ProcessOutput(0, b"", b"")


def test_fake_runner_returns_configured_output() -> None:
    """Test that outputs are matched on the full argv."""
    expected = ProcessOutput(0, b"main\n", b"")
    runner = FakeProcessRunner(outputs={("git", "branch", "--show-current"): expected})

    assert runner.run(["git", "branch", "--show-current"]) == expected
    assert runner.run(["git", "branch"]) == ProcessOutput(0, b"", b"")


def test_fake_runner_missing_program_raises() -> None:
    """Test that missing programs raise FileNotFoundError and are still recorded."""
    runner = FakeProcessRunner(missing_programs={"nope"})

    with pytest.raises(FileNotFoundError):
        runner.run(["nope", "--help"])

    assert runner.run_calls == [["nope", "--help"]]


def test_fake_runner_run_calls_returns_copy() -> None:
    """Test that mutating run_calls does not affect the fake."""
    runner = FakeProcessRunner()
    runner.run(["ls"])

    runner.run_calls.append(["rm"])

    assert runner.run_calls == [["ls"]]


def test_dry_run_runner_prints_and_does_not_delegate(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the dry-run wrapper reports the command without running it."""
    wrapped = FakeProcessRunner()
    runner = DryRunProcessRunner(wrapped)

    result = runner.run(["rm", "-rf", "build"])

    assert result == ProcessOutput(0, b"", b"")
    assert wrapped.run_calls == []
    assert runner.wrapped is wrapped
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Would run: rm -rf build" in captured.err
    assert "(dry run)" in captured.err


def test_fake_runner_rejects_nul_byte_like_subprocess() -> None:
    """Test that the fake raises ValueError for NUL bytes in arguments."""
    with pytest.raises(ValueError, match="embedded null byte"):
        FakeProcessRunner().run(["echo", "a\x00b"])
