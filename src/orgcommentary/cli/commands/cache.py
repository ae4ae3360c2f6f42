# topmark:header:start
#
#   project      : OrgCommentary
#   file         : cache.py
#   file_relpath : src/orgcommentary/cli/commands/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary `cache` command.

Shows the companion document remembered in a target's Local Variables block.
Exits with status 0 when a valid entry exists and 1 when the entry is
missing or points at a file that no longer exists.
"""

from __future__ import annotations

from pathlib import Path

import click

from orgcommentary.cache import get_cached
from orgcommentary.cli.cmd_common import build_config, get_console
from orgcommentary.cli.errors import CommentaryFileNotFoundError, CommentaryIOError
from orgcommentary.cli.options import common_config_options
from orgcommentary.constants import VALUE_NOT_SET
from orgcommentary.core.exit_codes import ExitCode
from orgcommentary.localvars import get_local_variable
from orgcommentary.utils.file import read_text_exact


@click.command(
    name="cache",
    help="Show the companion document remembered in TARGET.",
)
@click.argument("target", type=click.Path(dir_okay=False, path_type=Path))
@common_config_options
@click.pass_context
def cache_command(
    ctx: click.Context,
    *,
    target: Path,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    console = get_console(ctx)
    if not target.is_file():
        raise CommentaryFileNotFoundError(f"Target file not found: {target}")
    config = build_config(start=target, config_paths=config_paths, no_config=no_config)

    try:
        text: str = read_text_exact(target)
    except (OSError, UnicodeDecodeError) as exc:
        raise CommentaryIOError(f"Cannot read {target}: {exc}") from exc

    raw: str | None = get_local_variable(text, config.cache_key)
    if not raw:
        console.print(f"{config.cache_key}: {VALUE_NOT_SET}")
        ctx.exit(ExitCode.FAILURE)

    cached: Path | None = get_cached(text, target.parent, config.cache_key)
    if cached is None:
        console.print(f"{config.cache_key}: {raw} " + console.styled("(stale)", fg="yellow"))
        ctx.exit(ExitCode.FAILURE)

    console.print(f"{config.cache_key}: {raw}")
    console.detail(f"  -> {cached}")
