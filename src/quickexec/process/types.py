"""Type definitions for process execution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessOutput:
    """Raw outcome of a finished process.

    Attributes:
        exit_code: Exit code (negative if terminated by a signal)
        stdout: Captured standard output bytes
        stderr: Captured standard error bytes
    """

    exit_code: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        """True if the process exited with code 0."""
        return self.exit_code == 0
