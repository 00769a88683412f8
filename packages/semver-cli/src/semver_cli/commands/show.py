# SPDX-License-Identifier: MIT
"""Show the fields of a semantic version."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import click

from semver_value import SetBuildTime, SetPrefix, Version, split_version

from ..main import echo_info, echo_success, echo_warning, pass_context, Context


@click.command()
@click.argument("version", required=False)
@click.option(
    "--build-time",
    "-b",
    type=click.DateTime(),
    default=None,
    help="Build time to record (naive times are UTC).",
)
@click.option(
    "--prefix",
    "-p",
    default=None,
    help="Prefix to strip before parsing the version.",
)
@pass_context
def show(
    ctx: Context,
    version: Optional[str],
    build_time: Optional[datetime],
    prefix: Optional[str],
) -> None:
    """Print every field of a version and whether it is valid.

    Without VERSION the default version 0.0.0 is shown.

    \b
    Examples:
        semver show
        semver show 1.2.3-rc.1+git-77cf5ba
        semver show -b 2009-11-10T23:00:00 1.0.0
    """
    config = ctx.load_config()
    if prefix is None:
        prefix = config.prefix

    if version is None:
        value = Version.default()
    elif prefix and version.startswith(prefix):
        value = split_version(version[len(prefix) :])
        value.option(SetPrefix(prefix))
    else:
        value = split_version(version)

    if build_time is not None:
        value.option(SetBuildTime(build_time))

    click.echo(value.verbose_string(), nl=False)
    echo_info(f"Version: {value}")

    # The prefix is rendered, so check the unprefixed form
    check = value.copy()
    check.option(SetPrefix(""))
    if check.is_valid():
        echo_success("Valid semantic version.")
    else:
        echo_warning(f"'{check}' is not a valid semantic version")
