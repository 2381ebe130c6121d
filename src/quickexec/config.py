"""Runtime configuration for quickexec.

Configuration is read from environment variables (``QUICKEXEC_DRY_RUN``,
``QUICKEXEC_DEBUG``) or from a ``[tool.quickexec]`` table in a project's
pyproject.toml. Both sources produce the same immutable ExecConfig.

Only the environment is consulted implicitly (by context.default_runner);
a pyproject.toml table takes effect when its ExecConfig is passed to
context.create_runner.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DRY_RUN_ENV_VAR = "QUICKEXEC_DRY_RUN"
DEBUG_ENV_VAR = "QUICKEXEC_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ExecConfig:
    """Immutable execution configuration.

    Attributes:
        dry_run: Print commands instead of running them
        debug: Enable DEBUG logging for spawned processes
    """

    dry_run: bool = False
    debug: bool = False


def _is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str] | None = None) -> ExecConfig:
    """Load configuration from environment variables.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.

    Returns:
        ExecConfig built from the environment; unset variables are False
    """
    if environ is None:
        environ = os.environ
    return ExecConfig(
        dry_run=_is_truthy(environ.get(DRY_RUN_ENV_VAR)),
        debug=_is_truthy(environ.get(DEBUG_ENV_VAR)),
    )


def read_config_from_pyproject(project_root: Path) -> ExecConfig | None:
    """Read configuration from the [tool.quickexec] table of pyproject.toml.

    Args:
        project_root: Directory containing pyproject.toml

    Returns:
        ExecConfig from the table, or None if the file or table is missing

    Raises:
        ValueError: If a configured value is not a boolean
    """
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        return None

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    tool_section = data.get("tool")
    if tool_section is None:
        return None

    quickexec_section = tool_section.get("quickexec")
    if quickexec_section is None:
        return None

    values: dict[str, bool] = {}
    for key in ("dry_run", "debug"):
        if key not in quickexec_section:
            continue
        value = quickexec_section[key]
        if not isinstance(value, bool):
            raise ValueError(
                f"[tool.quickexec] {key} must be a boolean in {pyproject_path}, got {value!r}"
            )
        values[key] = value

    return ExecConfig(**values)
