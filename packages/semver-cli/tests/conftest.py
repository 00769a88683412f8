# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a [tool.semver] table."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "1.0.0"

[tool.semver]
prefix = "v"
ordering = "lexicographic"
"""
    )

    return project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a project directory with a pyproject.toml and no [tool.semver]."""
    project_dir = tmp_path / "empty_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text('[project]\nname = "empty"\nversion = "0.1.0"\n')
    return project_dir
