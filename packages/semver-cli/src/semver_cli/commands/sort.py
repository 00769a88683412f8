# SPDX-License-Identifier: MIT
"""Sort semantic versions."""

from __future__ import annotations

from typing import Optional

import click

import semver_value
from semver_value import InvalidVersionError, SetPrefix, Versions, split_version, version_key

from ..config import ORDERINGS
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--ordering",
    "-o",
    type=click.Choice(ORDERINGS),
    default=None,
    help="Comparator to sort with (default: from configuration, else legacy).",
)
@click.option(
    "--prefix",
    "-p",
    default=None,
    help="Prefix to strip before parsing each version.",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    ordering: Optional[str],
    prefix: Optional[str],
) -> None:
    """Sort versions and print them one per line.

    The legacy ordering puts a version first when any of its major, minor
    or patch numbers is greater, and puts versions with non-numeric fields
    first. The lexicographic ordering sorts ascending by major, minor and
    patch and rejects non-numeric fields.

    \b
    Examples:
        semver sort 1.0.0 3.0.0 2.0.0
        semver sort -o lexicographic 1.10.0 1.9.0
        semver sort -p v v1.0.0 v2.0.0
    """
    config = ctx.load_config()
    if ordering is None:
        ordering = config.ordering
    if prefix is None:
        prefix = config.prefix

    data = Versions()
    for text in versions:
        if prefix and text.startswith(prefix):
            version = split_version(text[len(prefix) :])
            version.option(SetPrefix(prefix))
        else:
            version = split_version(text)
        data.append(version)

    originals = {id(version): text for version, text in zip(data, versions)}

    if ordering == "lexicographic":
        try:
            ordered = sorted(data, key=version_key)
        except InvalidVersionError as e:
            echo_error(e.message)
            raise SystemExit(1)
    else:
        semver_value.sort(data)
        ordered = list(data)

    for version in ordered:
        echo_info(originals[id(version)])
