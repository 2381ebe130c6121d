"""Process execution abstraction.

This module defines the boundary between quickexec and the host's process
API. Commands never call subprocess directly; they hand an argument vector to
a ProcessRunner, which makes it possible to swap in a fake for tests or a
dry-run wrapper that only reports what would have been executed.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from quickexec.process.types import ProcessOutput


class ProcessRunner(ABC):
    """Abstract process execution for dependency injection."""

    @abstractmethod
    def run(self, argv: Sequence[str]) -> ProcessOutput:
        """Spawn a process, wait for it to exit, and capture both streams.

        Args:
            argv: Program name followed by its arguments

        Returns:
            ProcessOutput with exit code and raw stdout/stderr bytes

        Raises:
            OSError: If the process could not be spawned (program not found,
                permission denied, etc.)
            ValueError: If an argument cannot be passed to the platform
                (embedded NUL byte, text that cannot be encoded)
        """
        ...
