# SPDX-License-Identifier: MIT
"""Version policy configuration loaded from pyproject.toml.

Settings live in the ``[tool.strict-semver]`` table::

    [tool.strict-semver]
    allow-pre-release = false
    allow-initial-development = false
    minimum-version = "1.0.0"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import VersionError
from .ordering import compare_versions
from .semver import parse

TOOL_TABLE = "strict-semver"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CheckConfig:
    """Project version and the policy it is checked against.

    Attributes:
        project_dir: Directory containing pyproject.toml
        version: The ``[project].version`` string
        allow_pre_release: Whether a pre-release version passes
        allow_initial_development: Whether a 0.y.z version passes
        minimum_version: Lowest acceptable version, "" for no bound
    """

    project_dir: Path
    version: str = ""
    allow_pre_release: bool = True
    allow_initial_development: bool = True
    minimum_version: str = ""

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CheckConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CheckConfig instance

        Raises:
            ConfigError: If the file is invalid or a setting has the wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CheckConfig":
        """Create CheckConfig from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool = pyproject.get("tool", {}).get(TOOL_TABLE, {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError("[project].version must be a string")

        allow_pre_release = tool.get("allow-pre-release", True)
        allow_initial_development = tool.get("allow-initial-development", True)
        for key, value in (
            ("allow-pre-release", allow_pre_release),
            ("allow-initial-development", allow_initial_development),
        ):
            if not isinstance(value, bool):
                raise ConfigError(f"[tool.{TOOL_TABLE}].{key} must be a boolean")

        minimum_version = tool.get("minimum-version", "")
        if not isinstance(minimum_version, str):
            raise ConfigError(f"[tool.{TOOL_TABLE}].minimum-version must be a string")
        if minimum_version:
            try:
                parse(minimum_version)
            except VersionError as e:
                raise ConfigError(
                    f"[tool.{TOOL_TABLE}].minimum-version is invalid: {e}"
                ) from e

        return cls(
            project_dir=project_dir,
            version=version,
            allow_pre_release=allow_pre_release,
            allow_initial_development=allow_initial_development,
            minimum_version=minimum_version,
        )


def check_version(config: CheckConfig) -> list[str]:
    """Check the project version against the configured policy.

    Returns a list of problems found; empty when the version passes.
    """
    issues: list[str] = []

    if not config.version:
        issues.append("Version is empty")
        return issues

    try:
        version = parse(config.version)
    except VersionError as e:
        issues.append(f"Version '{config.version}' is invalid: {e}")
        return issues

    if version.is_pre_release and not config.allow_pre_release:
        issues.append(f"Version '{version}' is a pre-release")

    if version.is_initial_development and not config.allow_initial_development:
        issues.append(f"Version '{version}' is in initial development (0.y.z)")

    if config.minimum_version and compare_versions(version, config.minimum_version) < 0:
        issues.append(
            f"Version '{version}' is lower than minimum version '{config.minimum_version}'"
        )

    return issues
