# SPDX-License-Identifier: MIT
"""Version precedence as defined by SemVer 2.0.0, section 11.

Precedence is decided by the first difference found, in this order:

1. major, minor and patch, compared numerically
2. a version without a pre-release outranks one with a pre-release
3. pre-release identifiers, left to right: numeric identifiers compare as
   integers, others compare in ASCII order, and numeric identifiers always
   rank below non-numeric ones
4. if every shared identifier is equal, the longer pre-release wins

Build metadata never takes part in precedence.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .errors import InvalidVersionArgumentError
from .grammar import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import Version


def _sign(value1, value2) -> int:
    if value1 == value2:
        return 0
    return -1 if value1 < value2 else 1


def _compare_numeric(ident1: str, ident2: str) -> int:
    # Digit strings without leading zeros order by length first, which keeps
    # arbitrarily large identifiers exact without converting them to int.
    return _sign((len(ident1), ident1), (len(ident2), ident2))


def compare_identifiers(ident1: str, ident2: str) -> int:
    """Compare a single pair of pre-release identifiers.

    Returns:
        -1, 0 or 1 as ``ident1`` is lower than, equal to or higher than
        ``ident2``.
    """
    numeric1 = is_numeric_identifier(ident1)
    numeric2 = is_numeric_identifier(ident2)

    if numeric1 and numeric2:
        return _compare_numeric(ident1, ident2)
    if numeric1:
        return -1
    if numeric2:
        return 1
    # str ordering is by code point, which is ASCII order for these alphabets
    return _sign(ident1, ident2)


def compare_pre_release(pre1: str, pre2: str) -> int:
    """Compare two raw pre-release fields; an empty field means none.

    Examples:
        >>> compare_pre_release("alpha", "alpha.1")
        -1
        >>> compare_pre_release("9", "alpha")
        -1
        >>> compare_pre_release("", "rc.1")
        1
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # release > pre-release
    if not pre2:
        return -1  # pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for ident1, ident2 in zip(parts1, parts2):
        result = compare_identifiers(ident1, ident2)
        if result != 0:
            return result

    return _sign(len(parts1), len(parts2))


def compare(v1: Version, v2: Version) -> int:
    """Compare two versions by SemVer precedence.

    Args:
        v1: First version
        v2: Second version

    Returns:
        -1 if v1 < v2, 0 if they have equal precedence, 1 if v1 > v2

    Raises:
        InvalidVersionArgumentError: If either version is None

    Examples:
        >>> from strict_semver import parse
        >>> compare(parse("1.0.0-rc.1"), parse("1.0.0"))
        -1
        >>> compare(parse("1.0.0+build.1"), parse("1.0.0+build.2"))
        0
    """
    if v1 is None:
        raise InvalidVersionArgumentError(v1, "v1 is None")
    if v2 is None:
        raise InvalidVersionArgumentError(v2, "v2 is None")
    if v1 is v2:
        return 0

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    return compare_pre_release(v1.pre_release, v2.pre_release)


# Sort key implementing natural version order, e.g. sorted(versions, key=NATURAL_ORDER)
NATURAL_ORDER = functools.cmp_to_key(compare)
