"""One-call helpers for running commands.

The raising helpers (run, run_line, sh, sh_line) are the primary interface:
they return decoded stdout or raise a QuickexecError subclass.

The ``*_or_message`` helpers never raise a QuickexecError. On failure they
return the error message in place of the output, so a caller cannot tell a
command that printed ``"empty command"`` from one that failed. Use them only
where that ambiguity is acceptable, e.g. quick scripts and display text.
"""

from quickexec.command import Command
from quickexec.errors import QuickexecError
from quickexec.process.abc import ProcessRunner
from quickexec.shell import shell_command, shell_command_from_line


def command(*args: object) -> Command:
    """Build a Command from a program and its arguments.

    Example:
        >>> command("git", "--version").argv
        ['git', '--version']

    Raises:
        EmptyCommandError: If called with no arguments
    """
    return Command.from_tokens(args)


def run(*args: object, runner: ProcessRunner | None = None) -> str:
    """Run a program with arguments and return its stdout.

    Raises:
        EmptyCommandError: If called with no arguments
        SpawnError: If the process could not be spawned
        CommandFailedError: If the process exited with a non-zero code
    """
    return Command.from_tokens(args).run(runner)


def run_or_message(*args: object, runner: ProcessRunner | None = None) -> str:
    """Like run(), but return the error message instead of raising."""
    try:
        return run(*args, runner=runner)
    except QuickexecError as e:
        return str(e)


def run_line(line: str, *, runner: ProcessRunner | None = None) -> str:
    """Split a command line on single spaces, run it and return its stdout.

    Raises:
        SpawnError: If the process could not be spawned
        CommandFailedError: If the process exited with a non-zero code
    """
    return Command.from_line(line).run(runner)


def run_line_or_message(line: str, *, runner: ProcessRunner | None = None) -> str:
    """Like run_line(), but return the error message instead of raising."""
    try:
        return run_line(line, runner=runner)
    except QuickexecError as e:
        return str(e)


def sh(*args: object, runner: ProcessRunner | None = None) -> str:
    """Run args through the host command interpreter and return its stdout.

    Example:
        >>> sh("echo hello")
        'hello\\n'

    Raises:
        EmptyCommandError: If called with no arguments
        SpawnError: If the interpreter could not be spawned
        CommandFailedError: If the interpreter exited with a non-zero code
    """
    return shell_command(args).run(runner)


def sh_or_message(*args: object, runner: ProcessRunner | None = None) -> str:
    """Like sh(), but return the error message instead of raising."""
    try:
        return sh(*args, runner=runner)
    except QuickexecError as e:
        return str(e)


def sh_line(line: str, *, runner: ProcessRunner | None = None) -> str:
    """Split line on single spaces and run the tokens through the interpreter."""
    return shell_command_from_line(line).run(runner)


def sh_line_or_message(line: str, *, runner: ProcessRunner | None = None) -> str:
    """Like sh_line(), but return the error message instead of raising."""
    try:
        return sh_line(line, runner=runner)
    except QuickexecError as e:
        return str(e)
