"""Production process runner using subprocess."""

import logging
import subprocess
from collections.abc import Sequence

from quickexec.process.abc import ProcessRunner
from quickexec.process.types import ProcessOutput

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess.run().

    Output is always captured as bytes and fully buffered. No timeout is
    applied, so a hung child blocks the caller.
    """

    def run(self, argv: Sequence[str]) -> ProcessOutput:
        """Run argv with subprocess.run() and capture stdout/stderr."""
        logger.debug("Spawning: %s", list(argv))
        result = subprocess.run(
            list(argv),
            capture_output=True,
            check=False,
        )
        logger.debug("Exited with code %d: %s", result.returncode, argv[0])
        return ProcessOutput(
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
