# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 values and precedence.

This package provides an immutable Version type that is only ever built from
input matching the SemVer 2.0.0 grammar exactly, and a comparison that
implements SemVer precedence (build metadata ignored).

Example:
    >>> from strict_semver import parse, create, compare
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release_identifiers
    ('alpha', '1')
    >>> compare(parse("1.0.0-9"), parse("1.0.0-alpha"))
    -1
    >>> create(1, 0, 0, "", "build.1") == parse("1.0.0+build.2")
    True
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    VersionError,
    InvalidVersionArgumentError,
    VersionFormatError,
)
from .precedence import (
    NATURAL_ORDER,
    compare,
)
from .semver import (
    COMPLIANCE,
    ParseResult,
    Version,
    create,
    parse,
    try_parse,
    is_valid_semver,
)
from .ordering import (
    compare_versions,
    max_version,
    sort_versions,
    version_key,
)

__all__ = [
    # Errors
    "ErrorKind",
    "VersionError",
    "InvalidVersionArgumentError",
    "VersionFormatError",
    # Version construction
    "COMPLIANCE",
    "ParseResult",
    "Version",
    "create",
    "parse",
    "try_parse",
    "is_valid_semver",
    # Precedence
    "NATURAL_ORDER",
    "compare",
    "compare_versions",
    "max_version",
    "sort_versions",
    "version_key",
]
