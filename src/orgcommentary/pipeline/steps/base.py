# topmark:header:start
#
#   project      : OrgCommentary
#   file         : base.py
#   file_relpath : src/orgcommentary/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle::

    ctx = step(ctx)  # internally: may_proceed → run

A step that cannot complete calls ``ctx.stop_flow()``; later steps then
decline to run because the default ``may_proceed`` honors the halt flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Attributes:
        name (str): Stable step identifier for logs.
        axes_written (tuple[str, ...]): Status axes this step may write.
    """

    name: str
    axes_written: tuple[str, ...] = ()

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Run the step when ``may_proceed`` allows it and return the context."""
        if not self.may_proceed(ctx):
            logger.debug("Step %s skipped", self.name)
            return ctx
        ctx.steps.append(self.name)
        logger.debug("Step %s running", self.name)
        self.run(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run; default: the flow is not halted."""
        return not ctx.flow.halt

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place."""
        raise NotImplementedError
