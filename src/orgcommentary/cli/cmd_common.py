# topmark:header:start
#
#   project      : OrgCommentary
#   file         : cmd_common.py
#   file_relpath : src/orgcommentary/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the conversion commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from orgcommentary.cli.errors import CommentaryConfigError, CommentaryLockedError
from orgcommentary.config import MutableConfig
from orgcommentary.config.logging import get_logger
from orgcommentary.core.diagnostics import DiagnosticLevel, count_by_level
from orgcommentary.core.errors import LockedTargetError
from orgcommentary.pipeline.status import WriteStatus
from orgcommentary.utils.diff import make_patch, render_patch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orgcommentary.cli.console import ConsoleLike
    from orgcommentary.config import Config
    from orgcommentary.pipeline.context import ProcessingContext

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console set up by the command group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def build_config(
    *,
    start: Path,
    config_paths: Iterable[Path] = (),
    no_config: bool = False,
    backend: str | None = None,
) -> Config:
    """Load, merge, override and freeze the configuration for a target at ``start``.

    Raises:
        CommentaryConfigError: If the merged configuration is invalid.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        start=start,
        extra_files=config_paths,
        use_local=not no_config,
    )
    draft.apply_overrides(backend=backend)
    try:
        return draft.freeze()
    except ValueError as exc:
        raise CommentaryConfigError(str(exc)) from exc


def report(
    console: ConsoleLike,
    ctx: ProcessingContext,
    *,
    dry_run: bool = False,
    diff: bool = False,
) -> None:
    """Print the outcome of one conversion.

    Raises:
        CommentaryLockedError: If the target was locked by another session.
    """
    color: bool = console.enable_color

    if diff and ctx.original is not None and ctx.updated is not None:
        patch: list[str] = make_patch(ctx.original, ctx.updated, str(ctx.path or "<buffer>"))
        if patch:
            console.print(render_patch(patch, color=color), nl=False)
        else:
            console.detail("No changes.")
    elif dry_run and ctx.updated is not None:
        console.print(ctx.updated, nl=False)

    # Warnings were already logged where they arose
    for diagnostic in ctx.diagnostics:
        console.detail(diagnostic.render(color=color))

    counts: dict[DiagnosticLevel, int] = count_by_level(ctx.diagnostics)
    console.detail(
        f"{counts[DiagnosticLevel.WARNING]} warning(s), {counts[DiagnosticLevel.INFO]} note(s)",
        level=2,
    )
    if not dry_run:
        console.print(ctx.summary(color=color))

    if ctx.status.write == WriteStatus.LOCKED and ctx.path is not None:
        owner: str | None = str(ctx.lock_owner) if ctx.lock_owner else None
        raise CommentaryLockedError(str(LockedTargetError(ctx.path, owner)))
