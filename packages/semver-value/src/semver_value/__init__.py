# SPDX-License-Identifier: MIT
"""Semantic version value type with validation, rendering and ordering.

Example:
    >>> from semver_value import Version, Versions, SetPrefix, sort
    >>>
    >>> v = Version.default()
    >>> str(v)
    '0.0.0'
    >>> v.validate()
    >>>
    >>> versions = Versions([Version(major="2"), Version(major="1")])
    >>> sort(versions)
    >>> [str(v) for v in versions]
    ['1..', '2..']
"""

__version__ = "0.1.0"

from .semver import (
    DEFAULTS,
    SEMVER_PATTERN,
    UNKNOWN_BUILD_TIME,
    InvalidVersionError,
    Validator,
    Version,
    VersionDefaults,
    is_valid_semver,
    parse_version,
    split_version,
)
from .options import (
    Option,
    SetBuildTime,
    SetPrefix,
    format_build_time,
)
from .ordering import (
    Sortable,
    Versions,
    is_sorted,
    parse_field,
    sort,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Version value
    "DEFAULTS",
    "SEMVER_PATTERN",
    "UNKNOWN_BUILD_TIME",
    "InvalidVersionError",
    "Validator",
    "Version",
    "VersionDefaults",
    "is_valid_semver",
    "parse_version",
    "split_version",
    # Options
    "Option",
    "SetBuildTime",
    "SetPrefix",
    "format_build_time",
    # Ordering
    "Sortable",
    "Versions",
    "is_sorted",
    "parse_field",
    "sort",
    # Lexicographic comparison
    "compare_versions",
    "version_key",
]
