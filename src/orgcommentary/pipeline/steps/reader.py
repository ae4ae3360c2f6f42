# topmark:header:start
#
#   project      : OrgCommentary
#   file         : reader.py
#   file_relpath : src/orgcommentary/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: load the target text.

An open buffer takes precedence over the file on disk, so unsaved edits are
the text that gets converted (and later updated in place).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.pipeline.status import ReadStatus
from orgcommentary.pipeline.steps.base import BaseStep
from orgcommentary.utils.file import read_text_exact

if TYPE_CHECKING:
    from orgcommentary.buffers import BufferRegistry
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class ReaderStep(BaseStep):
    """Set ``ctx.original`` and ``ctx.image`` from the open buffer or the file.

    Attributes:
        buffers (BufferRegistry | None): Open buffers to look the target up in.
    """

    name: str = "reader"
    axes_written: tuple[str, ...] = ("read",)
    buffers: BufferRegistry | None = None

    def run(self, ctx: ProcessingContext) -> None:
        if ctx.buffer is None and ctx.path is not None and self.buffers is not None:
            ctx.buffer = self.buffers.find(ctx.path)

        if ctx.buffer is not None:
            ctx.original = ctx.image = ctx.buffer.text
            ctx.status.read = ReadStatus.FROM_BUFFER
            logger.debug("Target read from open buffer (%d chars)", len(ctx.image))
            return

        if ctx.path is None or not ctx.path.is_file():
            ctx.status.read = ReadStatus.NOT_FOUND
            ctx.add_error(f"Target file not found: {ctx.path}")
            ctx.stop_flow("not-found", self)
            return

        try:
            text: str = read_text_exact(ctx.path)
        except (OSError, UnicodeDecodeError) as exc:
            ctx.status.read = ReadStatus.UNREADABLE
            ctx.add_error(f"Cannot read {ctx.path}: {exc}")
            ctx.stop_flow("unreadable", self)
            return

        ctx.original = ctx.image = text
        ctx.status.read = ReadStatus.FROM_DISK
        logger.debug("Target read from %s (%d chars)", ctx.path, len(text))
