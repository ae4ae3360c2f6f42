# topmark:header:start
#
#   project      : OrgCommentary
#   file         : renderer.py
#   file_relpath : src/orgcommentary/pipeline/steps/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer step: export the companion document and format it as comments.

Export failures are not caught here: `ExportError` propagates to the caller
and nothing is spliced. A companion file that cannot be read or decoded halts
the flow instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.pipeline.status import RenderStatus
from orgcommentary.pipeline.steps.base import BaseStep
from orgcommentary.utils.file import read_text_exact

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.export import Exporter
    from orgcommentary.pipeline.context import ProcessingContext

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class RendererStep(BaseStep):
    """Set ``ctx.rendered`` and ``ctx.block``.

    The companion content is ``ctx.companion_text`` when already provided (the
    active document), otherwise the full content of ``ctx.companion_path``.

    Attributes:
        exporter (Exporter | None): Export engine for the configured backend.
    """

    name: str = "renderer"
    axes_written: tuple[str, ...] = ("render",)
    exporter: Exporter | None = None

    def run(self, ctx: ProcessingContext) -> None:
        assert self.exporter is not None and ctx.processor is not None

        if ctx.companion_text is None:
            assert ctx.companion_path is not None
            try:
                ctx.companion_text = read_text_exact(ctx.companion_path)
            except (OSError, UnicodeDecodeError) as exc:
                ctx.status.render = RenderStatus.UNREADABLE
                ctx.add_error(f"Cannot read companion {ctx.companion_path}: {exc}")
                ctx.stop_flow("unreadable-companion", self)
                return

        ctx.rendered = self.exporter.export(ctx.companion_text)
        ctx.block = ctx.processor.format_block(ctx.rendered)
        ctx.status.render = RenderStatus.RENDERED
        logger.debug(
            "Rendered %d lines with backend %s",
            ctx.block.count("\n"),
            self.exporter.backend,
        )
