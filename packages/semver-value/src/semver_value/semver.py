# SPDX-License-Identifier: MIT
"""Semantic version value type.

A Version keeps every field as text so that malformed input survives until
validation is requested:

- major, minor, patch: numeric-looking strings ("0", "12", ...)
- pre_release: optional dot-separated identifiers (-alpha, -rc.1)
- metadata: optional dot-separated build metadata (+git-77cf5ba)

A prefix (for example "v") and a build time are carried alongside. They are
only changed through options, see :mod:`semver_value.options`.
"""

from __future__ import annotations

import copy
import json
import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .options import Option

logger = logging.getLogger(__name__)

SEPARATOR = "."
PRE_RELEASE_SEPARATOR = "-"
METADATA_SEPARATOR = "+"

UNKNOWN_BUILD_TIME = "<unknown>"

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class InvalidVersionError(Exception):
    """Raised when a version does not follow semantic versioning.

    The error never says which field is wrong, only which rendered string
    failed to match.
    """

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


@runtime_checkable
class Validator(Protocol):
    """Anything that can validate itself."""

    def validate(self) -> None: ...


@dataclass(frozen=True)
class VersionDefaults:
    """Field values used by :meth:`Version.default`.

    Attributes:
        major: Default major version
        minor: Default minor version
        patch: Default patch level
        pre_release: Default pre-release identifier (empty means absent)
        metadata: Default build metadata (empty means absent)
        build_time: Build time recorded when none was set
    """

    major: str = "0"
    minor: str = "0"
    patch: str = "0"
    pre_release: str = ""
    metadata: str = ""
    build_time: str = UNKNOWN_BUILD_TIME


DEFAULTS = VersionDefaults()


@dataclass
class Version:
    """A single semantic version.

    Fields that are not given stay empty strings; use :meth:`default` for a
    ``0.0.0`` version.

    Attributes:
        major: Major version (breaking changes)
        minor: Minor version (new features, backward compatible)
        patch: Patch level (bug fixes, backward compatible)
        pre_release: Pre-release identifier (e.g., "alpha.1", "rc.2")
        metadata: Build metadata (e.g., "git-77cf5ba")
    """

    major: str = ""
    minor: str = ""
    patch: str = ""
    pre_release: str = ""
    metadata: str = ""

    _prefix: str = field(default="", init=False, repr=False)
    _build_time: str = field(default="", init=False, repr=False)

    @classmethod
    def default(cls, defaults: VersionDefaults = DEFAULTS) -> "Version":
        """Return a ``0.0.0`` version with an unknown build time."""
        version = cls(
            major=defaults.major,
            minor=defaults.minor,
            patch=defaults.patch,
            pre_release=defaults.pre_release,
            metadata=defaults.metadata,
        )
        version._build_time = defaults.build_time
        return version

    @property
    def prefix(self) -> str:
        """Text rendered in front of the version, e.g. ``"v"``."""
        return self._prefix

    @property
    def build_time(self) -> str:
        """Build time as recorded by :class:`~semver_value.options.SetBuildTime`."""
        return self._build_time

    def option(self, *options: "Option") -> Optional["Option"]:
        """Apply options in order.

        Returns:
            An option restoring what the last option changed, or None if no
            option was given.
        """
        previous: Optional[Option] = None
        for opt in options:
            previous = opt.apply(self)
        return previous

    def copy(self) -> "Version":
        """Return an independent copy, prefix and build time included."""
        return copy.copy(self)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = SEPARATOR.join((self.major, self.minor, self.patch))
        if self.pre_release:
            version += PRE_RELEASE_SEPARATOR + self.pre_release
        if self.metadata:
            version += METADATA_SEPARATOR + self.metadata
        return self._prefix + version

    def verbose_string(self) -> str:
        """Return a multi-line dump of every field for debugging."""
        lines = [
            ("Major", self.major),
            ("Minor", self.minor),
            ("Patchlevel", self.patch),
            ("Pre Release", self.pre_release),
            ("Metadata", self.metadata),
            ("Build Time", self._build_time),
        ]
        return "".join(f"{label}: {json.dumps(value, ensure_ascii=False)}\n" for label, value in lines)

    def validate(self) -> None:
        """Check the rendered version against the SemVer 2.0.0 grammar.

        The prefix is part of the rendered string, so a prefixed version
        does not validate.

        Raises:
            InvalidVersionError: If the rendered string is not a semantic version
        """
        rendered = str(self)
        if SEMVER_PATTERN.fullmatch(rendered) is None:
            logger.debug("Version %r does not match the semver grammar", rendered)
            raise InvalidVersionError(rendered)

    def is_valid(self) -> bool:
        """Return True if :meth:`validate` passes."""
        try:
            self.validate()
        except InvalidVersionError:
            return False
        return True


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+metadata])

    Returns:
        A Version object holding the matched fields as strings

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.0.0-alpha.1")
        Version(major='1', minor='0', patch='0', pre_release='alpha.1', metadata='')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    return Version(
        major=match.group("major"),
        minor=match.group("minor"),
        patch=match.group("patch"),
        pre_release=match.group("prerelease") or "",
        metadata=match.group("buildmetadata") or "",
    )


def split_version(version_string: str) -> Version:
    """Split a version string into fields without checking the grammar.

    Metadata is everything after the first "+", the pre-release is
    everything after the first "-" that follows the numeric part, and the
    numeric part is split on "." into at most three fields. Missing fields
    stay empty, so ``split_version("2")`` equals ``Version(major="2")``.

    Never raises; combine with :meth:`Version.validate` where needed.
    """
    core, _, metadata = version_string.partition(METADATA_SEPARATOR)
    core, _, pre_release = core.partition(PRE_RELEASE_SEPARATOR)
    parts = core.split(SEPARATOR, 2)
    parts += [""] * (3 - len(parts))
    return Version(
        major=parts[0],
        minor=parts[1],
        patch=parts[2],
        pre_release=pre_release,
        metadata=metadata,
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string.strip()) is not None
