"""Run external commands and shell commands with one call."""

from quickexec.api import (
    command,
    run,
    run_line,
    run_line_or_message,
    run_or_message,
    sh,
    sh_line,
    sh_line_or_message,
    sh_or_message,
)
from quickexec.command import Command, decode_lossy
from quickexec.config import ExecConfig, load_config, read_config_from_pyproject
from quickexec.context import create_runner, default_runner
from quickexec.errors import (
    CommandFailedError,
    EmptyCommandError,
    ExecError,
    ParseError,
    QuickexecError,
    SpawnError,
)
from quickexec.process import (
    DryRunProcessRunner,
    FakeProcessRunner,
    ProcessOutput,
    ProcessRunner,
    RealProcessRunner,
)
from quickexec.shell import (
    ShellInvocation,
    resolve_shell_invocation,
    shell_command,
    shell_command_from_line,
)
from quickexec.tokenizer import split_line

__version__ = "0.1.0"

__all__ = [
    # One-call helpers
    "command",
    "run",
    "run_or_message",
    "run_line",
    "run_line_or_message",
    "sh",
    "sh_or_message",
    "sh_line",
    "sh_line_or_message",
    # Command value
    "Command",
    "decode_lossy",
    "split_line",
    # Shell adapter
    "ShellInvocation",
    "resolve_shell_invocation",
    "shell_command",
    "shell_command_from_line",
    # Process runners
    "ProcessRunner",
    "ProcessOutput",
    "RealProcessRunner",
    "FakeProcessRunner",
    "DryRunProcessRunner",
    # Configuration
    "ExecConfig",
    "load_config",
    "read_config_from_pyproject",
    "create_runner",
    "default_runner",
    # Errors
    "QuickexecError",
    "ParseError",
    "EmptyCommandError",
    "ExecError",
    "SpawnError",
    "CommandFailedError",
]
