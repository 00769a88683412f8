# SPDX-License-Identifier: MIT
"""Lexicographic version comparison.

Compares major, then minor, then patch. Pre-release and build metadata are
ignored, so this is not full SemVer precedence. Use it where a consistent
ascending order matters more than matching :meth:`Versions.less`.
"""

from __future__ import annotations

from typing import Union

from .ordering import parse_field
from .semver import Version, InvalidVersionError, split_version


def _numbers(version: Union[str, Version]) -> tuple[int, int, int]:
    v = split_version(version) if isinstance(version, str) else version

    numbers = []
    for attr in ("major", "minor", "patch"):
        number = parse_field(getattr(v, attr))
        if number is None:
            raise InvalidVersionError(str(v))
        numbers.append(number)
    return (numbers[0], numbers[1], numbers[2])


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions by major, minor and patch.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If a numeric field of either version is not a number

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.9.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0+build")
        0
    """
    n1 = _numbers(version1)
    n2 = _numbers(version2)

    for val1, val2 in zip(n1, n2):
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def version_key(version: Union[str, Version]) -> tuple[int, int, int]:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["2.0.0", "1.10.0", "1.9.0"], key=version_key)
        ['1.9.0', '1.10.0', '2.0.0']
    """
    return _numbers(version)
