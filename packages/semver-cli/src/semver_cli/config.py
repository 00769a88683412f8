# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


ORDERINGS = ("legacy", "lexicographic")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.semver]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml
        prefix: Prefix expected in front of versions (e.g. "v")
        strict: Fail validation when a version carries a prefix
        ordering: Sort order used by ``semver sort``
    """

    project_dir: Path
    prefix: str = ""
    strict: bool = False
    ordering: str = "legacy"

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
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
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a value in ``[tool.semver]`` has the wrong type
        """
        tool_semver = pyproject.get("tool", {}).get("semver", {})

        prefix = tool_semver.get("prefix", "")
        if not isinstance(prefix, str):
            raise ConfigError("[tool.semver].prefix must be a string")

        strict = tool_semver.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError("[tool.semver].strict must be a boolean")

        ordering = tool_semver.get("ordering", "legacy")
        if ordering not in ORDERINGS:
            raise ConfigError(
                f"[tool.semver].ordering must be one of {', '.join(ORDERINGS)}, got {ordering!r}"
            )

        return cls(
            project_dir=project_dir,
            prefix=prefix,
            strict=strict,
            ordering=ordering,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Falls back to the defaults when no pyproject.toml is found.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return CLIConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
