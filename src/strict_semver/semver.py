# SPDX-License-Identifier: MIT
"""Semantic version value type and its factories.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92, -rc.1
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Versions are immutable. Equality, ordering and hashing follow SemVer
precedence and ignore build metadata, so ``1.0.0+a == 1.0.0+b``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .errors import (
    ErrorKind,
    InvalidVersionArgumentError,
    VersionError,
    VersionFormatError,
)
from .grammar import IDENTIFIER_SEPARATOR, is_build_metadata, is_pre_release, scan_version
from .precedence import compare

logger = logging.getLogger(__name__)


def _check_numbers(major: int, minor: int, patch: int) -> None:
    for name, value in (("major", major), ("minor", minor), ("patch", patch)):
        if value is None:
            raise InvalidVersionArgumentError(value, f"{name} is None")
        # bool is an int subclass but never a meaningful version number
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidVersionArgumentError(
                value, f"{name} must be an int, got {type(value).__name__}"
            )
        if value < 0:
            logger.debug("Rejected %s=%d: negative", name, value)
            raise InvalidVersionArgumentError(value, f"{name} < 0")

    if major == 0 and minor == 0 and patch == 0:
        logger.debug("Rejected version 0.0.0")
        raise InvalidVersionArgumentError("0.0.0", "all parts are 0")


def _check_field(name: str, value: str, matches: Callable[[str], bool]) -> None:
    if value is None:
        raise InvalidVersionArgumentError(value, f"{name} is None")
    if not isinstance(value, str):
        raise InvalidVersionArgumentError(
            value, f"{name} must be a string, got {type(value).__name__}"
        )
    if value and not matches(value):
        logger.debug("Rejected %s %r: grammar mismatch", name, value)
        raise VersionFormatError(value, f"Invalid {name.replace('_', ' ')}: {value}")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Version:
    """A semantic version.

    Every way of building a Version, including calling the class directly,
    validates its fields; an instance that exists is always well formed.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release field (e.g. "alpha.1", "rc.2"), or ""
        build_metadata: Build metadata field (e.g. "build.123"), or ""
    """

    major: int
    minor: int
    patch: int
    pre_release: str = field(default="")
    build_metadata: str = field(default="")

    def __post_init__(self) -> None:
        _check_numbers(self.major, self.minor, self.patch)
        _check_field("pre_release", self.pre_release, is_pre_release)
        _check_field("build_metadata", self.build_metadata, is_build_metadata)

    @classmethod
    def create(
        cls,
        major: int,
        minor: int,
        patch: int,
        pre_release: str = "",
        build_metadata: str = "",
    ) -> Version:
        """Alias of :func:`create`."""
        return create(major, minor, patch, pre_release, build_metadata)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Alias of :func:`parse`."""
        return parse(text)

    @property
    def pre_release_identifiers(self) -> tuple[str, ...]:
        """The pre-release field split at dots.

        A version without a pre-release yields ``("",)``; use
        :attr:`is_pre_release` to tell the two cases apart.
        """
        return tuple(self.pre_release.split(IDENTIFIER_SEPARATOR))

    @property
    def build_metadata_identifiers(self) -> tuple[str, ...]:
        """The build metadata field split at dots, ``("",)`` when absent."""
        return tuple(self.build_metadata.split(IDENTIFIER_SEPARATOR))

    @property
    def is_initial_development(self) -> bool:
        """Return True for 0.y.z versions, whose public API is not yet stable."""
        return self.major == 0

    @property
    def is_pre_release(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.pre_release)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.pre_release:
            version += f"-{self.pre_release}"
        if self.build_metadata:
            version += f"+{self.build_metadata}"
        return version

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre_release))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0


def create(
    major: int,
    minor: int,
    patch: int,
    pre_release: str = "",
    build_metadata: str = "",
) -> Version:
    """Create a Version from its components.

    Args:
        major: Major version, >= 0
        minor: Minor version, >= 0
        patch: Patch version, >= 0; not all three may be 0
        pre_release: Pre-release field without the leading ``-``, or ""
        build_metadata: Build metadata without the leading ``+``, or ""

    Returns:
        The validated Version

    Raises:
        InvalidVersionArgumentError: If a component is None or of the wrong
            type, a number is negative, or all numbers are 0
        VersionFormatError: If a non-empty pre-release or build metadata
            field does not follow the grammar

    Examples:
        >>> create(1, 2, 3)
        Version('1.2.3')
        >>> create(1, 0, 0, "rc.1", "build.5")
        Version('1.0.0-rc.1+build.5')
    """
    return Version(major, minor, patch, pre_release, build_metadata)


def parse(text: str) -> Version:
    """Parse a semantic version string into a Version object.

    The string must match the grammar exactly; surrounding whitespace, a
    leading ``v`` and leading zeros are all rejected.

    Args:
        text: A string in the form MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionArgumentError: If ``text`` is None, not a string, empty,
            or names version 0.0.0
        VersionFormatError: If ``text`` does not follow semantic versioning

    Examples:
        >>> parse("1.2.3")
        Version('1.2.3')
        >>> parse("2.0.0-rc.1+build.456").pre_release
        'rc.1'
    """
    if text is None:
        raise InvalidVersionArgumentError(text, "Version string is None")
    if not isinstance(text, str):
        raise InvalidVersionArgumentError(
            text, f"Version must be a string, got {type(text).__name__}"
        )
    if not text:
        raise InvalidVersionArgumentError(text, "Version string cannot be empty")

    parts = scan_version(text)
    if parts is None:
        logger.debug("Rejected version string %r: grammar mismatch", text)
        raise VersionFormatError(text)

    try:
        major, minor, patch = int(parts.major), int(parts.minor), int(parts.patch)
    except ValueError as e:
        # only reachable past the interpreter's int string conversion limit
        raise VersionFormatError(text, f"Version number too large: {text}") from e

    return Version(major, minor, patch, parts.pre_release, parts.build_metadata)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :func:`try_parse`: exactly one of version or error is set."""

    version: Optional[Version] = None
    error: Optional[VersionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """The error kind, or None on success."""
        return self.error.kind if self.error is not None else None


def try_parse(text: str) -> ParseResult:
    """Parse ``text`` without raising for bad input.

    Examples:
        >>> try_parse("1.0.0").ok
        True
        >>> try_parse("1.0").kind
        <ErrorKind.FORMAT: 'format'>
        >>> try_parse("").kind
        <ErrorKind.INVALID_ARGUMENT: 'invalid-argument'>
    """
    try:
        return ParseResult(version=parse(text))
    except VersionError as e:
        return ParseResult(error=e)


def is_valid_semver(text: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0-alpha")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver(" 1.0.0")
        False
    """
    return try_parse(text).ok


# Semantic Versioning specification this package implements
COMPLIANCE = Version(2, 0, 0)
