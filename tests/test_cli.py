# SPDX-License-Identifier: MIT
"""Tests for the strict-semver command line."""

from __future__ import annotations

from click.testing import CliRunner

from strict_semver.cli import cli


class TestValidateCommand:
    """Tests for strict-semver validate."""

    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "2.0.0-rc.1+build.5"])

        assert result.exit_code == 0
        assert "1.0.0: valid" in result.output
        assert "2.0.0-rc.1+build.5: valid" in result.output

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "1.0.0", "01.0.0"])

        assert result.exit_code == 1
        assert "01.0.0" in result.output
        assert "format" in result.output

    def test_invalid_argument_kind(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "0.0.0"])

        assert result.exit_code == 1
        assert "invalid-argument" in result.output

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"])

        assert result.exit_code == 2


class TestCompareCommand:
    """Tests for strict-semver compare."""

    def test_less(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0-alpha < 1.0.0"

    def test_equal_ignores_build(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0+a", "1.0.0+b"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0+a = 1.0.0+b"

    def test_greater(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0-9"])

        assert result.output.strip() == "1.0.0-alpha > 1.0.0-9"

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0", "1.0.0"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSortCommand:
    """Tests for strict-semver sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["sort", "1.0.0", "1.0.0-beta.11", "1.0.0-beta.2", "0.9.0"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.0", "1.0.0-beta.2", "1.0.0-beta.11", "1.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--reverse", "0.9.0", "1.0.0"])

        assert result.output.splitlines() == ["1.0.0", "0.9.0"]

    def test_sort_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0-"])

        assert result.exit_code == 1


class TestCheckCommand:
    """Tests for strict-semver check."""

    def test_passes(self, cli_runner: CliRunner, make_project) -> None:
        result = cli_runner.invoke(cli, ["check", "-C", str(make_project("1.2.3"))])

        assert result.exit_code == 0
        assert "Version 1.2.3 passed" in result.output

    def test_policy_violation(self, cli_runner: CliRunner, make_project) -> None:
        project_dir = make_project(
            "1.0.0-rc.1",
            """[tool.strict-semver]
allow-pre-release = false
""",
        )
        result = cli_runner.invoke(cli, ["check", "-C", str(project_dir)])

        assert result.exit_code == 1
        assert "is a pre-release" in result.output

    def test_missing_pyproject(self, cli_runner: CliRunner, tmp_path) -> None:
        result = cli_runner.invoke(cli, ["check", "-C", str(tmp_path)])

        assert result.exit_code == 1
        assert "pyproject.toml not found" in result.output
