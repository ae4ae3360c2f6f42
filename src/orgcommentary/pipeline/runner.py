# topmark:header:start
#
#   project      : OrgCommentary
#   file         : runner.py
#   file_relpath : src/orgcommentary/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a conversion pipeline over a single processing context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext
    from orgcommentary.pipeline.steps.base import BaseStep

logger: CommentaryLogger = get_logger(__name__)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[BaseStep]): Ordered pipeline steps. A halted flow makes
            the remaining steps decline to run.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    logger.info("backend: %s, target: %s", ctx.config.backend, ctx.path or "<buffer>")
    for step in steps:
        ctx = step(ctx)
    logger.debug("Steps run: %s", ", ".join(ctx.steps))
    logger.trace("Final context: %s", ctx.to_dict())
    return ctx
