from quickexec.process.abc import ProcessRunner
from quickexec.process.dry_run import DryRunProcessRunner
from quickexec.process.fake import FakeProcessRunner
from quickexec.process.real import RealProcessRunner
from quickexec.process.types import ProcessOutput

__all__ = [
    "DryRunProcessRunner",
    "FakeProcessRunner",
    "ProcessOutput",
    "ProcessRunner",
    "RealProcessRunner",
]
