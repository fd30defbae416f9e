# SPDX-License-Identifier: MIT
"""Exceptions raised when a version cannot be constructed or compared."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Distinguishes caller bugs from malformed version text."""

    INVALID_ARGUMENT = "invalid-argument"
    FORMAT = "format"


class VersionError(ValueError):
    """Base class for all version errors.

    Attributes:
        version: The offending input, rendered as text
        message: Human readable description of the failure
        kind: Which class of failure this is
    """

    kind: ErrorKind = ErrorKind.FORMAT

    def __init__(self, version: object, message: str = ""):
        self.version = version if isinstance(version, str) else repr(version)
        self.message = message or f"Invalid semantic version: {self.version}"
        super().__init__(self.message)


class InvalidVersionArgumentError(VersionError):
    """Raised for missing or ill-typed input and out-of-range numbers.

    Covers ``None`` values, negative major/minor/patch and the all-zero
    version ``0.0.0``.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class VersionFormatError(VersionError):
    """Raised when text does not follow the semantic versioning grammar."""

    kind = ErrorKind.FORMAT
