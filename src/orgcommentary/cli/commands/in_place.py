# topmark:header:start
#
#   project      : OrgCommentary
#   file         : in_place.py
#   file_relpath : src/orgcommentary/cli/commands/in_place.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary `in-place` command.

Opens TARGET as a buffer, renders the companion content (from a file or
standard input) into its Commentary section, and saves the buffer. This is
the command-line counterpart of `convert_in_place`, where the companion is
the document at hand rather than a file found through the cache.

Examples:
    Pipe the document in:

        $ cat README.org | org-commentary in-place foo.el
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from orgcommentary.api import convert_in_place
from orgcommentary.buffers import Buffer
from orgcommentary.cli.cmd_common import build_config, get_console, report
from orgcommentary.cli.errors import (
    CommentaryFileNotFoundError,
    CommentaryIOError,
    CommentaryLockedError,
    from_domain_error,
)
from orgcommentary.cli.options import common_config_options, common_render_options
from orgcommentary.config.logging import get_logger
from orgcommentary.core.errors import CommentaryError, LockedTargetError
from orgcommentary.locking import locked_by_other

if TYPE_CHECKING:
    from orgcommentary.locking import LockOwner

logger = get_logger(__name__)


@click.command(
    name="in-place",
    help="Render the companion content (FILE or '-' for stdin) into TARGET.",
)
@click.argument("target", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--companion",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default=True,
    help="Companion document content; '-' reads standard input.",
)
@common_render_options
@common_config_options
@click.pass_context
def in_place_command(
    ctx: click.Context,
    *,
    target: Path,
    companion: TextIO,
    backend: str | None,
    dry_run: bool,
    diff: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Convert in place and save the buffer unless ``dry_run``."""
    console = get_console(ctx)
    if not target.is_file():
        raise CommentaryFileNotFoundError(f"Target file not found: {target}")

    config = build_config(
        start=target,
        config_paths=config_paths,
        no_config=no_config,
        backend=backend,
    )
    buffer: Buffer = Buffer.visit(target)
    companion_text: str = companion.read()

    def highlight(start: int, end: int) -> None:
        first: int = buffer.line_number_at(start)
        last: int = buffer.line_number_at(max(start, end - 1))
        console.detail(f"Commentary updated: lines {first}-{last}")

    try:
        result = convert_in_place(buffer, companion_text, config=config, highlight=highlight)
    except CommentaryError as exc:
        raise from_domain_error(exc) from exc

    report(console, result, dry_run=dry_run, diff=diff)
    if dry_run or not buffer.modified:
        return

    owner: LockOwner | None = locked_by_other(target)
    if owner is not None:
        raise CommentaryLockedError(str(LockedTargetError(target, str(owner))))
    try:
        buffer.save()
    except OSError as exc:
        raise CommentaryIOError(f"Cannot write {target}: {exc}") from exc
