"""Integration tests that run commands through the real POSIX shell."""

import sys

import pytest

from quickexec import CommandFailedError, sh, sh_line, sh_or_message
from quickexec.process.real import RealProcessRunner

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="requires sh")

RUNNER = RealProcessRunner()


def test_sh_single_script_argument() -> None:
    """Test that a single script string is executed by sh."""
    assert sh("echo hello", runner=RUNNER) == "hello\n"


def test_sh_separate_arguments_are_positional_parameters() -> None:
    """Test that extra arguments after the script bind to $0, $1, ..."""
    assert sh("echo $0 $1", "first", "second", runner=RUNNER) == "first second\n"


def test_sh_echo_hello_as_separate_tokens() -> None:
    """Test that ["echo", "hello"] runs `sh -c echo hello`, binding hello to $0."""
    assert sh("echo", "hello", runner=RUNNER) == "\n"


def test_sh_line_passes_tokens_through() -> None:
    """Test that sh_line splits the line and passes tokens through unjoined."""
    assert sh_line("echo hello", runner=RUNNER) == "\n"


def test_sh_pipes_are_handled_by_the_shell() -> None:
    """Test that shell syntax inside the script is interpreted by sh."""
    assert sh("printf 'b\\na\\n' | sort", runner=RUNNER) == "a\nb\n"


def test_sh_failure_raises_with_exit_code() -> None:
    """Test that a failing script raises CommandFailedError."""
    with pytest.raises(CommandFailedError) as exc_info:
        sh("echo oops >&2; exit 4", runner=RUNNER)

    assert exc_info.value.exit_code == 4
    assert exc_info.value.stderr == "oops\n"


def test_sh_or_message_failure_returns_text() -> None:
    """Test that the non-raising shell variant returns the error text."""
    result = sh_or_message("exit 2", runner=RUNNER)

    assert "exit status: 2" in result
