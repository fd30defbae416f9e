# SPDX-License-Identifier: MIT
"""Structural grammar checks for semantic version strings.

Each grammar is recognized by a small character scanner instead of a regular
expression, so every check runs in a single linear pass with no backtracking:

- Numeric core: ``MAJOR.MINOR.PATCH``, each ``0`` or a digit run without a
  leading zero.
- Pre-release: dot-separated identifiers, each ``0``, a digit run without a
  leading zero, a letter followed by ``[0-9A-Za-z-]*``, or a digit run
  followed by a letter/hyphen and then ``[0-9A-Za-z-]*``.
- Build metadata: dot-separated identifiers of ``[0-9A-Za-z-]+``.

Nothing here interprets values or normalizes input; a string either matches
in full or it does not.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
IDENTIFIER_CHARS = DIGITS | LETTERS | {"-"}

PRE_RELEASE_SEPARATOR = "-"
BUILD_METADATA_SEPARATOR = "+"
IDENTIFIER_SEPARATOR = "."


@dataclass(frozen=True, slots=True)
class VersionParts:
    """Raw pieces of a version string that passed the full grammar.

    Absent pre-release or build metadata fields are empty strings.
    """

    major: str
    minor: str
    patch: str
    pre_release: str
    build_metadata: str


def is_numeric_identifier(text: str) -> bool:
    """Return True if ``text`` is a non-empty run of ASCII digits."""
    return bool(text) and all(ch in DIGITS for ch in text)


def _is_core_number(text: str) -> bool:
    if not is_numeric_identifier(text):
        return False
    return text == "0" or text[0] != "0"


def _is_pre_release_identifier(text: str) -> bool:
    if not text:
        return False

    first = text[0]
    if first in LETTERS:
        # letter-lead: anything from the identifier alphabet may follow
        return all(ch in IDENTIFIER_CHARS for ch in text[1:])
    if first not in DIGITS:
        return False

    # digit-run: stays numeric until the first letter or hyphen
    for index, ch in enumerate(text):
        if ch in DIGITS:
            continue
        if ch in IDENTIFIER_CHARS:
            return all(rest in IDENTIFIER_CHARS for rest in text[index + 1 :])
        return False

    return text == "0" or first != "0"


def _is_build_metadata_identifier(text: str) -> bool:
    return bool(text) and all(ch in IDENTIFIER_CHARS for ch in text)


def is_numeric_core(text: str) -> bool:
    """Check ``MAJOR.MINOR.PATCH`` with nothing before or after it.

    Examples:
        >>> is_numeric_core("1.0.0")
        True
        >>> is_numeric_core("1.0")
        False
        >>> is_numeric_core("01.0.0")
        False
    """
    groups = text.split(IDENTIFIER_SEPARATOR)
    return len(groups) == 3 and all(_is_core_number(group) for group in groups)


def is_pre_release(text: str) -> bool:
    """Check a complete pre-release field (without the leading ``-``).

    Examples:
        >>> is_pre_release("alpha.1")
        True
        >>> is_pre_release("0.3.7")
        True
        >>> is_pre_release("01")
        False
        >>> is_pre_release("alpha..1")
        False
    """
    return all(
        _is_pre_release_identifier(identifier)
        for identifier in text.split(IDENTIFIER_SEPARATOR)
    )


def is_build_metadata(text: str) -> bool:
    """Check a complete build metadata field (without the leading ``+``).

    Examples:
        >>> is_build_metadata("build.007")
        True
        >>> is_build_metadata("exp.sha.5114f85")
        True
        >>> is_build_metadata("build_1")
        False
    """
    return all(
        _is_build_metadata_identifier(identifier)
        for identifier in text.split(IDENTIFIER_SEPARATOR)
    )


def scan_version(text: str) -> Optional[VersionParts]:
    """Split a full version string into its raw parts in one pass.

    The build metadata starts at the first ``+`` and the pre-release at the
    first ``-`` before it; the numeric core never contains either character.
    A separator that is present must be followed by a non-empty, valid field.

    Args:
        text: Candidate version string, e.g. ``"1.0.0-rc.1+build.5"``

    Returns:
        The raw parts if ``text`` matches the complete grammar, else None.

    Examples:
        >>> scan_version("1.0.0-rc.1+build.5")
        VersionParts(major='1', minor='0', patch='0', pre_release='rc.1', build_metadata='build.5')
        >>> scan_version("1.0.0-") is None
        True
    """
    rest, plus, build_metadata = text.partition(BUILD_METADATA_SEPARATOR)
    if plus and not is_build_metadata(build_metadata):
        return None

    core, minus, pre_release = rest.partition(PRE_RELEASE_SEPARATOR)
    if minus and not is_pre_release(pre_release):
        return None

    if not is_numeric_core(core):
        return None

    major, minor, patch = core.split(IDENTIFIER_SEPARATOR)
    return VersionParts(major, minor, patch, pre_release, build_metadata)
