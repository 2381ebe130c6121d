"""No-op wrapper for process execution."""

from collections.abc import Sequence

import click

from quickexec.process.abc import ProcessRunner
from quickexec.process.types import ProcessOutput


class DryRunProcessRunner(ProcessRunner):
    """No-op wrapper that reports commands instead of running them.

    Every run() prints the command to stderr and returns a successful, empty
    ProcessOutput. Nothing is spawned.

    Usage:
        real_runner = RealProcessRunner()
        noop_runner = DryRunProcessRunner(real_runner)

        # Prints "(dry run) Would run: rm -rf build" instead of deleting
        noop_runner.run(["rm", "-rf", "build"])
    """

    def __init__(self, wrapped: ProcessRunner) -> None:
        """Create a dry-run wrapper around a ProcessRunner.

        Args:
            wrapped: The runner to wrap (usually RealProcessRunner)
        """
        self._wrapped = wrapped

    @property
    def wrapped(self) -> ProcessRunner:
        """The runner that would have been used outside dry-run mode."""
        return self._wrapped

    def run(self, argv: Sequence[str]) -> ProcessOutput:
        """Print the command line and return success without executing."""
        dry_run_prefix = click.style("(dry run)", fg="bright_black")
        click.echo(f"{dry_run_prefix} Would run: {' '.join(argv)}", err=True)
        return ProcessOutput(exit_code=0, stdout=b"", stderr=b"")
