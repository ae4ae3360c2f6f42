# topmark:header:start
#
#   project      : OrgCommentary
#   file         : scanner.py
#   file_relpath : src/orgcommentary/pipeline/steps/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scanner step: locate the Commentary region in the target text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.pipeline.status import ScanStatus
from orgcommentary.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext
    from orgcommentary.pipeline.processors.base import RegionBounds

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class ScannerStep(BaseStep):
    """Set ``ctx.bounds``; halts the flow when the markers are missing.

    No later step (rendering included) runs for a malformed target.
    """

    name: str = "scanner"
    axes_written: tuple[str, ...] = ("scan",)

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.processor is not None and ctx.image is not None

        bounds: RegionBounds | None = ctx.processor.locate_region(ctx.image)
        if bounds is None:
            ctx.status.scan = ScanStatus.MALFORMED
            marker: str = ctx.processor.marker_prefix
            ctx.add_error(f"'{marker} Commentary:' followed by '{marker} Code:' not found")
            ctx.stop_flow("malformed", self)
            return

        ctx.bounds = bounds
        ctx.status.scan = ScanStatus.FOUND
        logger.debug("Commentary region: [%d, %d)", bounds.start, bounds.end)
