# SPDX-License-Identifier: MIT
"""Convenience comparison helpers accepting strings or Version objects.

Strings are parsed with :func:`strict_semver.parse` first, so malformed input
raises the same errors as parsing does. Build metadata is ignored.
"""

from __future__ import annotations

from typing import Iterable, Union

from .errors import InvalidVersionArgumentError
from .precedence import NATURAL_ORDER, compare
from .semver import Version, parse

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return version if isinstance(version, Version) else parse(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionError: If either version is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha")
        1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    return compare(_coerce(version1), _coerce(version2))


def version_key(version: VersionLike):
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return NATURAL_ORDER(_coerce(version))


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable, so versions of equal precedence (differing only in
    build metadata) keep their input order.
    """
    return sorted((_coerce(v) for v in versions), key=NATURAL_ORDER, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        InvalidVersionArgumentError: If ``versions`` is empty
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise InvalidVersionArgumentError(parsed, "No versions given")
    return max(parsed, key=NATURAL_ORDER)
