# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import show, sort, validate

__all__ = ["show", "sort", "validate"]
