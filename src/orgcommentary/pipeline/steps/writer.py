# topmark:header:start
#
#   project      : OrgCommentary
#   file         : writer.py
#   file_relpath : src/orgcommentary/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step: commit the updated text to a sink.

Sinks
-----
- BufferSink: replaces the content of the target's open buffer.
- FileSystemSink: writes the whole text to the target file in one write.
- NullSink: no-op (dry run).

Selection (the sink resolver):
    1. dry run                         -> NullSink    (PREVIEWED)
    2. nothing changed                 -> no sink     (UNCHANGED)
    3. an open buffer exists           -> BufferSink  (BUFFER_UPDATED)
    4. no file to write                -> no sink     (NO_TARGET)
    5. locked by another live session  -> no sink     (LOCKED, warning)
    6. otherwise                       -> FileSystemSink (WRITTEN)

The lock is checked last, after all rendering work, and discards that work.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from orgcommentary.config.logging import get_logger
from orgcommentary.locking import locked_by_other
from orgcommentary.pipeline.status import WriteStatus
from orgcommentary.pipeline.steps.base import BaseStep
from orgcommentary.utils.file import write_text_exact

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.locking import LockOwner
    from orgcommentary.pipeline.context import ProcessingContext

logger: CommentaryLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Destination for the updated text of a context."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Commit ``ctx.updated`` and report the outcome."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        return WriteResult(status=WriteStatus.PREVIEWED)


class BufferSink:
    """Replace the whole content of the open buffer, keeping its cursor if possible."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        assert ctx.buffer is not None and ctx.updated is not None
        ctx.buffer.replace_contents(ctx.updated)
        logger.debug("BufferSink: updated buffer for %s", ctx.path)
        return WriteResult(status=WriteStatus.BUFFER_UPDATED)


class FileSystemSink:
    """Write the updated text to ``ctx.path`` in place."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        assert ctx.path is not None and ctx.updated is not None
        written: int = write_text_exact(ctx.path, ctx.updated)
        logger.debug("FileSystemSink: wrote %d bytes to file %s", written, ctx.path)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=written)


@dataclass
class WriterStep(BaseStep):
    """Select a sink for ``ctx`` and write through it.

    Attributes:
        dry_run (bool): Compute everything but write nothing.
    """

    name: str = "writer"
    axes_written: tuple[str, ...] = ("write",)
    dry_run: bool = False

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return super().may_proceed(ctx) and ctx.updated is not None

    def select_sink(self, ctx: ProcessingContext) -> WriteSink | None:
        """Return the sink for ``ctx``, or None after recording why nothing is written."""
        if self.dry_run:
            return NullSink()
        if not ctx.would_change:
            ctx.status.write = WriteStatus.UNCHANGED
            return None
        if ctx.buffer is not None:
            return BufferSink()
        if ctx.path is None:
            ctx.status.write = WriteStatus.NO_TARGET
            ctx.add_error("No open buffer and no file to write to")
            return None

        owner: LockOwner | None = locked_by_other(ctx.path)
        if owner is not None:
            ctx.lock_owner = owner
            ctx.status.write = WriteStatus.LOCKED
            ctx.add_warning(f"{ctx.path} is locked by {owner}; not written")
            logger.warning("%s is locked by %s; not writing", ctx.path, owner)
            return None
        return FileSystemSink()

    def run(self, ctx: ProcessingContext) -> None:
        sink: WriteSink | None = self.select_sink(ctx)
        if sink is None:
            return
        result: WriteResult = sink.write(ctx=ctx)
        ctx.status.write = result.status
