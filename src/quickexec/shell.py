"""Run commands through the host's command interpreter.

On POSIX hosts commands go through ``sh -c``; on Windows through ``cmd /c``.
Caller arguments are passed through after the flag as separate elements, not
joined into one script string. With ``sh``, the first element is the script
and any further elements become its positional parameters (``$0``, ``$1``,
...), so ``["echo hello"]`` prints ``hello`` while ``["echo", "hello"]``
prints an empty line.
"""

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from quickexec.command import Command
from quickexec.errors import EmptyCommandError
from quickexec.tokenizer import split_line


@dataclass(frozen=True)
class ShellInvocation:
    """Interpreter program and the flag that makes it run a command string."""

    program: str
    flag: str


POSIX_SHELL = ShellInvocation(program="sh", flag="-c")
WINDOWS_SHELL = ShellInvocation(program="cmd", flag="/c")


def resolve_shell_invocation(platform: str | None = None) -> ShellInvocation:
    """Pick the command interpreter for a host platform.

    Args:
        platform: Platform identifier as in sys.platform. Defaults to the
            current host.

    Returns:
        WINDOWS_SHELL on Windows, POSIX_SHELL everywhere else
    """
    if platform is None:
        platform = sys.platform
    if platform == "win32":
        return WINDOWS_SHELL
    return POSIX_SHELL


def shell_command(
    args: Sequence[object], invocation: ShellInvocation | None = None
) -> Command:
    """Build a command that runs args through the command interpreter.

    Args:
        args: Script text, optionally followed by extra interpreter arguments.
            Each is converted with str().
        invocation: Interpreter to use. Defaults to the current host's.

    Returns:
        Command for ``<interpreter> <flag> <args...>``

    Raises:
        EmptyCommandError: If args is empty
    """
    if len(args) == 0:
        raise EmptyCommandError()
    if invocation is None:
        invocation = resolve_shell_invocation()
    return Command.from_explicit(
        invocation.program,
        [invocation.flag, *(str(arg) for arg in args)],
    )


def shell_command_from_line(line: str, invocation: ShellInvocation | None = None) -> Command:
    """Split line on single spaces and build a shell command from the tokens."""
    return shell_command(split_line(line), invocation)
