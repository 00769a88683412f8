# SPDX-License-Identifier: MIT
"""Reversible options for Version.

Each option changes one internal field of a Version and returns another
option that puts the previous value back:

    >>> v = Version.default()
    >>> undo = v.option(SetPrefix("v"))
    >>> str(v)
    'v0.0.0'
    >>> _ = v.option(undo)
    >>> str(v)
    '0.0.0'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta

from .semver import Version


def format_build_time(timestamp: datetime) -> str:
    """Format a timestamp as RFC 3339 with a trimmed fractional second.

    The fraction is dropped when zero, UTC is written as "Z" and naive
    datetimes are taken to be UTC.

    Examples:
        >>> format_build_time(datetime(2009, 11, 10, 23, 0, 0))
        '2009-11-10T23:00:00Z'
        >>> format_build_time(datetime(2009, 11, 10, 23, 0, 0, 120000))
        '2009-11-10T23:00:00.12Z'
    """
    text = timestamp.strftime("%Y-%m-%dT%H:%M:%S")

    fraction = f"{timestamp.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction

    offset = timestamp.utcoffset()
    if not offset:
        return text + "Z"

    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


class Option(ABC):
    """A change to a Version that knows how to undo itself."""

    @abstractmethod
    def apply(self, version: Version) -> "Option":
        """Change ``version`` in place and return the inverse option."""


@dataclass(frozen=True)
class SetPrefix(Option):
    """Set the text rendered in front of the version."""

    prefix: str

    def apply(self, version: Version) -> Option:
        previous = version._prefix
        version._prefix = self.prefix
        return SetPrefix(previous)


@dataclass(frozen=True)
class SetBuildTime(Option):
    """Record the build time shown by :meth:`Version.verbose_string`.

    The returned option is a SetPrefix holding the previous build time:
    applying it writes the old build time into the prefix and leaves the
    build time alone.
    """

    timestamp: datetime

    def apply(self, version: Version) -> Option:
        previous = version._build_time
        version._build_time = format_build_time(self.timestamp)
        return SetPrefix(previous)


__all__ = [
    "Option",
    "SetPrefix",
    "SetBuildTime",
    "format_build_time",
]
