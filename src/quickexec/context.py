"""Runner construction from configuration."""

import logging

from quickexec.config import ExecConfig, load_config
from quickexec.process.abc import ProcessRunner
from quickexec.process.dry_run import DryRunProcessRunner
from quickexec.process.real import RealProcessRunner

PACKAGE_LOGGER_NAME = "quickexec"


def enable_debug_logging() -> None:
    """Send quickexec DEBUG records to stderr.

    Only the package logger is touched; the root logger and any handlers the
    application configured are left alone. Calling this more than once does
    not add duplicate handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[DEBUG %(name)s:%(lineno)d] %(message)s"))
        logger.addHandler(handler)


def create_runner(config: ExecConfig) -> ProcessRunner:
    """Create the production runner for a configuration.

    Args:
        config: Execution configuration

    Returns:
        RealProcessRunner, wrapped in DryRunProcessRunner if config.dry_run

    Example:
        >>> runner = create_runner(ExecConfig(dry_run=True))
        >>> runner.run(["rm", "-rf", "build"]).success
        True
    """
    if config.debug:
        enable_debug_logging()

    runner: ProcessRunner = RealProcessRunner()
    if config.dry_run:
        runner = DryRunProcessRunner(runner)
    return runner


def default_runner() -> ProcessRunner:
    """Create a runner from the current environment.

    Used whenever a caller does not pass a runner explicitly. Reads
    QUICKEXEC_DRY_RUN and QUICKEXEC_DEBUG only; pyproject.toml settings apply
    only through create_runner(read_config_from_pyproject(...)).
    """
    return create_runner(load_config())
