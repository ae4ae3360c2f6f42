# topmark:header:start
#
#   project      : OrgCommentary
#   file         : updater.py
#   file_relpath : src/orgcommentary/pipeline/steps/updater.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Updater step: splice the comment block into the target text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.pipeline.processors.base import splice
from orgcommentary.pipeline.status import UpdateStatus
from orgcommentary.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class UpdaterStep(BaseStep):
    """Set ``ctx.updated`` and ``ctx.inserted_range``."""

    name: str = "updater"
    axes_written: tuple[str, ...] = ("update",)

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.image is not None and ctx.bounds is not None and ctx.block is not None

        ctx.updated = splice(ctx.image, ctx.bounds, ctx.block)
        # "\n" + block + "\n"
        ctx.inserted_range = (ctx.bounds.start, ctx.bounds.start + len(ctx.block) + 2)

        if ctx.would_change:
            ctx.status.update = UpdateStatus.UPDATED
        else:
            ctx.status.update = UpdateStatus.UNCHANGED
        logger.debug("Update: %s", ctx.status.update.value)
