# topmark:header:start
#
#   project      : OrgCommentary
#   file         : convert.py
#   file_relpath : src/orgcommentary/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary `convert` command.

Converts a companion document into the Commentary section of a target file,
from anywhere: the target is read from disk, the companion comes from
``--companion``, from the target's cache, or from a prompt. The target file
is left untouched when another editing session holds its lock.

Examples:
    Convert using the cached (or prompted) companion document:

        $ org-commentary convert foo.el

    Preview the change with a markdown rendering, without writing:

        $ org-commentary convert foo.el --companion README.org --backend md --diff --dry-run
"""

from __future__ import annotations

from pathlib import Path

import click

from orgcommentary.api import convert_by_path
from orgcommentary.cli.cmd_common import build_config, get_console, report
from orgcommentary.cli.errors import CommentaryIOError, from_domain_error
from orgcommentary.cli.options import common_config_options, common_render_options
from orgcommentary.cli.prompter import ClickPrompter
from orgcommentary.config.logging import get_logger
from orgcommentary.core.errors import CommentaryError

logger = get_logger(__name__)


@click.command(
    name="convert",
    help="Convert the companion document into the Commentary section of TARGET.",
)
@click.argument(
    "target",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)
@click.option(
    "--companion",
    type=click.Path(dir_okay=False, path_type=Path, resolve_path=True),
    default=None,
    help="Companion document (default: the cached one, else ask).",
)
@click.option(
    "--save-cache/--no-save-cache",
    "save_cache",
    default=None,
    help="Remember the companion in TARGET without asking (or never). Default: ask.",
)
@common_render_options
@common_config_options
@click.pass_context
def convert_command(
    ctx: click.Context,
    *,
    target: Path | None,
    companion: Path | None,
    save_cache: bool | None,
    backend: str | None,
    dry_run: bool,
    diff: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Convert by path (the command-line counterpart of `convert_by_path`).

    Args:
        ctx (click.Context): Click context (console in ``ctx.obj``).
        target (Path | None): Target file; asked for when omitted.
        companion (Path | None): Explicit companion document.
        save_cache (bool | None): Cache decision; None asks.
        backend (str | None): Backend override.
        dry_run (bool): Print the converted target instead of writing it.
        diff (bool): Print a unified diff of the change.
        config_paths (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    console = get_console(ctx)
    if target is None:
        target = click.prompt(
            "Target file", type=click.Path(dir_okay=False, path_type=Path)
        )
    assert target is not None

    config = build_config(
        start=target,
        config_paths=config_paths,
        no_config=no_config,
        backend=backend,
    )
    logger.debug("Effective config: %s", config.to_toml_dict())

    try:
        result = convert_by_path(
            target,
            companion,
            config=config,
            prompter=ClickPrompter(),
            save_cache=save_cache,
            dry_run=dry_run,
        )
    except CommentaryError as exc:
        raise from_domain_error(exc) from exc
    except OSError as exc:
        raise CommentaryIOError(f"Cannot write {target}: {exc}") from exc

    report(console, result, dry_run=dry_run, diff=diff)
