# topmark:header:start
#
#   project      : OrgCommentary
#   file         : resolver.py
#   file_relpath : src/orgcommentary/pipeline/steps/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolver step: pick the commentary processor for the target's file type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.filetypes import resolve_file_type
from orgcommentary.pipeline.processors import get_processor
from orgcommentary.pipeline.status import ResolveStatus
from orgcommentary.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext
    from orgcommentary.pipeline.processors.base import CommentaryProcessor

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class ResolverStep(BaseStep):
    """Set ``ctx.file_type`` and ``ctx.processor``.

    A target with an unknown suffix (or no path at all) is handled as the
    default file type.
    """

    name: str = "resolver"
    axes_written: tuple[str, ...] = ("resolve",)

    def run(self, ctx: ProcessingContext) -> None:
        ctx.file_type = resolve_file_type(ctx.path)
        processor: CommentaryProcessor | None = get_processor(ctx.file_type.name)
        if processor is None:
            ctx.status.resolve = ResolveStatus.NO_PROCESSOR
            ctx.add_error(f"No commentary processor for file type {ctx.file_type.name}")
            ctx.stop_flow("no-processor", self)
            return
        ctx.processor = processor
        ctx.status.resolve = ResolveStatus.RESOLVED
        logger.debug("Resolved %s as %s", ctx.path, ctx.file_type.name)
