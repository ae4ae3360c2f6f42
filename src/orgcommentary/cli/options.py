# topmark:header:start
#
#   project      : OrgCommentary
#   file         : options.py
#   file_relpath : src/orgcommentary/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Reusable option decorators (verbosity, color, configuration, backend) live
here so that the group and its commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from orgcommentary.cli.errors import CommentaryUsageError
from orgcommentary.config.logging import TRACE_LEVEL
from orgcommentary.export.backends import BACKEND_WRITERS

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the program-output verbosity for the ``-v``/``-q`` counts.

    Raises:
        CommentaryUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CommentaryUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def log_level_for_verbosity(verbosity: int) -> int:
    """Map program-output verbosity to a logging level.

    ``-vvv`` is TRACE, ``-vv`` DEBUG, ``-v`` INFO, ``-q`` ERROR; default WARNING.
    """
    if verbosity >= 3:
        return TRACE_LEVEL
    if verbosity == 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    if verbosity < 0:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options (mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail (up to -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress program output; only errors are shown.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then the ``FORCE_COLOR`` and
    ``NO_COLOR`` environment variables, and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color {auto,always,never}`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra config file(s), merged after discovered ones.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore pyproject.toml and orgcommentary.toml files found near the target.",
    )(f)
    return f


def common_render_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--backend``, ``--dry-run`` and ``--diff``."""
    f = click.option(
        "--backend",
        type=click.Choice(sorted(BACKEND_WRITERS)),
        default=None,
        help="Export backend (overrides the configuration; default: ascii).",
    )(f)
    f = click.option(
        "--dry-run",
        is_flag=True,
        help="Convert but do not write; print the converted target instead.",
    )(f)
    f = click.option(
        "--diff",
        is_flag=True,
        help="Show a unified diff of the target before and after conversion.",
    )(f)
    return f
