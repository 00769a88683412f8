# SPDX-License-Identifier: MIT
"""In-place ordering of version collections.

:class:`Versions` implements the length/less/swap protocol consumed by
:func:`sort`. Its comparator looks at major, minor and patch only;
pre-release and build metadata never influence the order.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

from .semver import Version

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Sortable(Protocol):
    """A collection that can be sorted by index."""

    def __len__(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...

    def swap(self, i: int, j: int) -> None: ...


def parse_field(value: str) -> Optional[int]:
    """Parse a numeric version field as a signed 64-bit base-10 integer.

    Returns None for anything else: empty strings, whitespace, underscores,
    non-ASCII digits and values out of range.
    """
    if _INT_PATTERN.fullmatch(value) is None:
        return None
    number = int(value)
    if number < _INT64_MIN or number > _INT64_MAX:
        return None
    return number


def _numeric_fields(version: Version) -> Optional[tuple[int, int, int]]:
    fields = []
    for attr in ("major", "minor", "patch"):
        number = parse_field(getattr(version, attr))
        if number is None:
            logger.debug("Cannot order %r: %s is not a number", version, attr)
            return None
        fields.append(number)
    return (fields[0], fields[1], fields[2])


class Versions(list):
    """A mutable sequence of Version values sortable with :func:`sort`.

    Duplicates and versions with unparseable numbers are allowed.
    """

    def less(self, i: int, j: int) -> bool:
        """Report whether the element at ``i`` should sort before ``j``.

        Each of major, minor and patch is checked on its own: the element
        at ``i`` goes first as soon as one of its fields is greater. A
        smaller field does not decide anything. If a field of either
        element is not a number the answer is always True, which makes the
        order inconsistent when several such elements are compared.
        """
        ifields = _numeric_fields(self[i])
        if ifields is None:
            return True
        jfields = _numeric_fields(self[j])
        if jfields is None:
            return True

        imajor, iminor, ipatch = ifields
        jmajor, jminor, jpatch = jfields

        if imajor > jmajor:
            return True
        if iminor > jminor:
            return True
        if ipatch > jpatch:
            return True

        return False

    def swap(self, i: int, j: int) -> None:
        """Swap the elements at ``i`` and ``j``."""
        self[i], self[j] = self[j], self[i]


def sort(data: Sortable) -> None:
    """Sort ``data`` in place using only its len/less/swap methods.

    Insertion sort: every element moves left while it sorts before its
    left neighbour. The result is not guaranteed to be stable.

    Examples:
        >>> versions = Versions([Version(major="2"), Version(major="1")])
        >>> sort(versions)
        >>> [v.major for v in versions]
        ['1', '2']
    """
    for i in range(1, len(data)):
        j = i
        while j > 0 and data.less(j, j - 1):
            data.swap(j, j - 1)
            j -= 1


def is_sorted(data: Sortable) -> bool:
    """Return True if no element sorts before its left neighbour."""
    for i in range(len(data) - 1, 0, -1):
        if data.less(i, i - 1):
            return False
    return True
