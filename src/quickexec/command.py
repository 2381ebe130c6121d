"""Immutable command value and its execution.

A Command holds a program name and its arguments. It does not own any
process resources: each run() spawns a fresh process through a
ProcessRunner and translates the outcome into decoded output or a typed
exception.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from quickexec.context import default_runner
from quickexec.errors import CommandFailedError, EmptyCommandError, SpawnError
from quickexec.process.abc import ProcessRunner
from quickexec.process.types import ProcessOutput
from quickexec.tokenizer import split_line


def decode_lossy(data: bytes) -> str:
    """Decode process output as UTF-8, replacing invalid byte sequences."""
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Command:
    """A program invocation that has not been executed yet.

    Attributes:
        program: Program name or path, resolved by the platform at spawn time
        arguments: Arguments passed to the program, in order

    Example:
        >>> cmd = Command.from_line("git --version")
        >>> cmd.program, cmd.arguments
        ('git', ('--version',))
        >>> cmd.run().startswith("git version")
        True
    """

    program: str
    arguments: tuple[str, ...] = ()

    @classmethod
    def from_tokens(cls, tokens: Sequence[object]) -> "Command":
        """Build a command from a token sequence.

        The first token becomes the program, the rest become arguments.
        Tokens are converted with str(). An empty first token is accepted;
        only an empty sequence is rejected.

        Args:
            tokens: Program followed by its arguments

        Returns:
            Command for the tokens

        Raises:
            EmptyCommandError: If tokens is empty
        """
        if len(tokens) == 0:
            raise EmptyCommandError()
        program, *arguments = (str(token) for token in tokens)
        return cls(program=program, arguments=tuple(arguments))

    @classmethod
    def from_line(cls, line: str) -> "Command":
        """Build a command by splitting a line on single spaces.

        Raises:
            EmptyCommandError: If tokenization produced no tokens (the
                tokenizer always yields at least one, so this is not expected)
        """
        return cls.from_tokens(split_line(line))

    @classmethod
    def from_explicit(cls, program: str, arguments: Sequence[str]) -> "Command":
        """Build a command from an explicit program and argument list."""
        return cls(program=program, arguments=tuple(arguments))

    @property
    def argv(self) -> list[str]:
        """Argument vector handed to the platform: program, then arguments."""
        return [self.program, *self.arguments]

    def to_line_string(self) -> str:
        """Render the command as a single space-joined line.

        For display only. Arguments containing spaces or empty arguments do
        not survive a round trip through split_line().
        """
        return " ".join(self.argv)

    def __str__(self) -> str:
        return self.to_line_string()

    def output(self, runner: ProcessRunner | None = None) -> ProcessOutput:
        """Run the command and return the raw outcome without checking it.

        Args:
            runner: Runner to use. Defaults to one built from the environment.

        Returns:
            ProcessOutput with exit code and raw stream bytes

        Raises:
            SpawnError: If the process could not be spawned, including when an
                argument contains a NUL byte or text the platform cannot encode
        """
        if runner is None:
            runner = default_runner()
        try:
            return runner.run(self.argv)
        except (OSError, ValueError) as e:
            raise SpawnError(self.to_line_string(), e) from e

    def run_bytes(self, runner: ProcessRunner | None = None) -> bytes:
        """Run the command and return raw stdout bytes.

        Raises:
            SpawnError: If the process could not be spawned
            CommandFailedError: If the process exited with a non-zero code
        """
        result = self.output(runner)
        if not result.success:
            raise CommandFailedError(
                self.to_line_string(),
                result.exit_code,
                decode_lossy(result.stderr),
            )
        return result.stdout

    def run(self, runner: ProcessRunner | None = None) -> str:
        """Run the command and return stdout as text.

        Blocks until the process exits. Both streams are captured in full
        and decoded as UTF-8 with invalid bytes replaced.

        Args:
            runner: Runner to use. Defaults to one built from the environment.

        Returns:
            Decoded standard output

        Raises:
            SpawnError: If the process could not be spawned
            CommandFailedError: If the process exited with a non-zero code;
                carries the exit code and decoded stderr
        """
        return decode_lossy(self.run_bytes(runner))
