# topmark:header:start
#
#   project      : OrgCommentary
#   file         : main.py
#   file_relpath : src/orgcommentary/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``org-commentary`` command.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

import click

from orgcommentary.cli.commands.cache import cache_command
from orgcommentary.cli.commands.config import config_command
from orgcommentary.cli.commands.convert import convert_command
from orgcommentary.cli.commands.in_place import in_place_command
from orgcommentary.cli.commands.version import version_command
from orgcommentary.cli.console import ClickConsole
from orgcommentary.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    log_level_for_verbosity,
    resolve_color_mode,
    resolve_verbosity,
)
from orgcommentary.config.logging import get_logger, resolve_env_log_level, setup_logging
from orgcommentary.pipeline.processors import register_all_processors

logger = get_logger(__name__)

register_all_processors()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    verbosity: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity

    # ORGCOMMENTARY_LOG_LEVEL wins over -v/-q for internal logging
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else log_level_for_verbosity(verbosity)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, verbosity=verbosity)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Keep the Commentary section of Lisp files in sync with an Org document.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the OrgCommentary CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'org-commentary convert TARGET' to update a Commentary section.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(convert_command)

cli.add_command(in_place_command)

cli.add_command(cache_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
