# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for strict-semver tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a pyproject.toml into a fresh project directory."""

    def _make(version: str = "1.0.0", tool: str = "") -> Path:
        project_dir = tmp_path / "test_project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(
            f"""[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "{version}"
description = "Test project"

{tool}
"""
        )
        return project_dir

    return _make
