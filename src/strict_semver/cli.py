# SPDX-License-Identifier: MIT
"""CLI entry point for the strict-semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import CheckConfig, ConfigError, check_version
from .errors import VersionError
from .ordering import compare_versions, sort_versions
from .semver import try_parse

logger = logging.getLogger(__name__)

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="strict-semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
def cli(verbose: bool) -> None:
    """Validate, compare and sort semantic versions.

    \b
    Examples:
        strict-semver validate 1.0.0-rc.1
        strict-semver compare 1.0.0-alpha 1.0.0
        strict-semver sort 2.0.0 1.0.0 1.0.0-beta.11 1.0.0-beta.2
        strict-semver check -C path/to/project
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def validate(versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version."""
    failed = False
    for text in versions:
        result = try_parse(text)
        if result.ok:
            echo_success(f"{text}: valid")
        else:
            failed = True
            echo_error(f"{text}: {result.error} ({result.kind.value})")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Print how VERSION1 relates to VERSION2 by precedence (<, = or >)."""
    try:
        result = compare_versions(version1, version2)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)

    logger.debug("compare(%r, %r) = %d", version1, version2, result)
    echo_info(f"{version1} {_SYMBOLS[result]} {version2}")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
def sort_command(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS sorted by precedence, one per line."""
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)

    for version in ordered:
        echo_info(str(version))


@cli.command()
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory containing pyproject.toml (default: current).",
)
def check(directory: Optional[Path]) -> None:
    """Check the project version in pyproject.toml against its policy."""
    try:
        config = CheckConfig.from_pyproject(directory or Path.cwd())
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)

    issues = check_version(config)

    if issues:
        for issue in issues:
            echo_error(issue)
        sys.exit(1)

    echo_success(f"Version {config.version} passed")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (VersionError, ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
