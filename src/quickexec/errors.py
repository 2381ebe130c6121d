"""Exception hierarchy for command parsing and execution.

QuickexecError
├── ParseError
│   └── EmptyCommandError
└── ExecError
    ├── SpawnError
    └── CommandFailedError
"""

import signal


class QuickexecError(Exception):
    """Base exception for all quickexec errors."""


class ParseError(QuickexecError):
    """Raised when caller input cannot be turned into a command."""


class EmptyCommandError(ParseError):
    """Raised when a command is built from zero tokens."""

    def __init__(self) -> None:
        super().__init__("empty command")


class ExecError(QuickexecError):
    """Raised when a command cannot be run or reports failure."""


class SpawnError(ExecError):
    """Raised when the platform could not start the process.

    Attributes:
        command: Rendered command line that was attempted
        cause: Underlying error (also chained as ``__cause__``): an OSError
            from the platform, or a ValueError for arguments the platform
            cannot accept (embedded NUL, unencodable text)
    """

    def __init__(self, command: str, cause: OSError | ValueError) -> None:
        self.command = command
        self.cause = cause
        super().__init__(f"error occurred: {cause}")


class CommandFailedError(ExecError):
    """Raised when a process ran but exited with a failure status.

    Attributes:
        command: Rendered command line that failed
        exit_code: Exit code (negative if terminated by a signal)
        stderr: Captured standard error, lossily decoded
    """

    def __init__(self, command: str, exit_code: int, stderr: str) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(
            f"error occurred: {stderr} \n exit with status: {describe_exit_status(exit_code)}"
        )


def describe_exit_status(exit_code: int) -> str:
    """Render an exit code the way a POSIX shell user would read it.

    Args:
        exit_code: Return code as reported by subprocess

    Returns:
        ``"exit status: N"`` for normal exits, ``"signal: N (NAME)"`` for
        processes killed by a signal.
    """
    if exit_code >= 0:
        return f"exit status: {exit_code}"

    signum = -exit_code
    try:
        name = signal.Signals(signum).name
    except ValueError:
        return f"signal: {signum}"
    return f"signal: {signum} ({name})"
