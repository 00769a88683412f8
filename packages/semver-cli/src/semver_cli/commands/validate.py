# SPDX-License-Identifier: MIT
"""Validate semantic versions."""

from __future__ import annotations

from typing import Optional

import click

from semver_value import SEMVER_PATTERN, InvalidVersionError

from ..main import echo_error, echo_info, echo_success, echo_warning, pass_context, Context


def _check_version(text: str, prefix: str, strict: bool) -> Optional[str]:
    """Check one version string.

    The text is matched as given; surrounding whitespace makes it invalid.
    Returns None if the version is valid, or the reason it is not.
    """
    if prefix and text.startswith(prefix):
        if strict:
            return f"prefix {prefix!r} is not allowed in strict mode"
        text = text[len(prefix) :]

    if SEMVER_PATTERN.fullmatch(text) is None:
        return InvalidVersionError(text).message
    return None


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--prefix",
    "-p",
    default=None,
    help="Prefix allowed in front of each version (e.g. 'v').",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject versions that carry a prefix.",
)
@pass_context
def validate(
    ctx: Context,
    versions: tuple[str, ...],
    prefix: Optional[str],
    strict: Optional[bool],
) -> None:
    """Validate versions against the SemVer 2.0.0 grammar.

    \b
    Examples:
        semver validate 1.2.3                 # Validate one version
        semver validate -p v v1.2.3 v2.0.0    # Allow a 'v' prefix
        semver validate --strict v1.2.3       # Prefixes are errors
    """
    config = ctx.load_config()
    if prefix is None:
        prefix = config.prefix
    if strict is None:
        strict = config.strict

    errors: list[str] = []
    for text in versions:
        reason = _check_version(text, prefix, strict)
        if reason is None:
            echo_info(f"{text}: valid")
        else:
            echo_warning(f"{text}: invalid")
            errors.append(f"{text}: {reason}")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {error}")
        raise SystemExit(1)

    echo_success("All versions are valid.")
