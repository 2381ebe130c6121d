"""Fake ProcessRunner implementation for testing.

FakeProcessRunner is an in-memory implementation that returns canned outputs
and records calls without spawning anything.
"""

from collections.abc import Mapping, Sequence

from quickexec.process.abc import ProcessRunner
from quickexec.process.types import ProcessOutput


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation of process execution.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Only the call log changes after construction

    Examples:
        # Canned output for a specific command
        >>> runner = FakeProcessRunner(
        ...     outputs={("git", "--version"): ProcessOutput(0, b"git version 2.0\\n", b"")}
        ... )
        >>> runner.run(["git", "--version"]).stdout
        b'git version 2.0\\n'

        # Simulate a program that isn't installed
        >>> runner = FakeProcessRunner(missing_programs={"nope"})
        >>> runner.run(["nope"])
        Traceback (most recent call last):
        ...
        FileNotFoundError: [Errno 2] No such file or directory: 'nope'
    """

    def __init__(
        self,
        *,
        outputs: Mapping[tuple[str, ...], ProcessOutput] | None = None,
        default_output: ProcessOutput | None = None,
        missing_programs: set[str] | None = None,
    ) -> None:
        """Initialize fake with predetermined process outcomes.

        Args:
            outputs: Mapping of argv tuple to the output returned for it
            default_output: Output for argv not in ``outputs``. Defaults to a
                successful run with empty streams.
            missing_programs: Program names whose spawn raises FileNotFoundError
        """
        self._outputs = dict(outputs or {})
        self._default_output = default_output or ProcessOutput(exit_code=0, stdout=b"", stderr=b"")
        self._missing_programs = missing_programs or set()
        self._run_calls: list[list[str]] = []

    def run(self, argv: Sequence[str]) -> ProcessOutput:
        """Record the call and return the configured output.

        Like subprocess, arguments containing a NUL byte raise ValueError.
        """
        self._run_calls.append(list(argv))
        if any("\x00" in arg for arg in argv):
            raise ValueError("embedded null byte")
        program = argv[0]
        if program in self._missing_programs:
            raise FileNotFoundError(2, "No such file or directory", program)
        return self._outputs.get(tuple(argv), self._default_output)

    @property
    def run_calls(self) -> list[list[str]]:
        """Get the list of argv passed to run().

        This property is for test assertions only.
        """
        return [list(argv) for argv in self._run_calls]
