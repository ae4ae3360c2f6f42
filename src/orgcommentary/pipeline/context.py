# topmark:header:start
#
#   project      : OrgCommentary
#   file         : context.py
#   file_relpath : src/orgcommentary/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context for one conversion.

A `ProcessingContext` holds the complete, mutable state of a single
invocation as it flows through the pipeline: the target text, the companion
document, the located region, the rendered block, the spliced result and the
per-axis status. Nothing in it survives the invocation; only the target file
(or its open buffer) is changed, by the writer step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from yachalk import chalk

from orgcommentary.config.logging import get_logger
from orgcommentary.core.diagnostics import Diagnostic, DiagnosticLevel
from orgcommentary.pipeline.status import ConversionStatus

if TYPE_CHECKING:
    from pathlib import Path

    from orgcommentary.buffers import Buffer
    from orgcommentary.config import Config
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.filetypes import FileType
    from orgcommentary.locking import LockOwner
    from orgcommentary.pipeline.processors.base import CommentaryProcessor, RegionBounds
    from orgcommentary.pipeline.steps.base import BaseStep

logger: CommentaryLogger = get_logger(__name__)

__all__: list[str] = ["FlowControl", "ProcessingContext"]


@dataclass
class FlowControl:
    """Execution flow control for the current conversion."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "malformed", "missing-companion"
    at_step: str = ""


@dataclass
class ProcessingContext:
    """State of one conversion.

    Attributes:
        path (Path | None): Target file; None for a buffer that visits no file.
        config (Config): Process-wide configuration.
        buffer (Buffer | None): Open buffer of the target, when there is one.
        file_type (FileType | None): Resolved file type of the target.
        processor (CommentaryProcessor | None): Processor for ``file_type``.
        original (str | None): Target text exactly as read.
        image (str | None): Target text the region is located in; equals
            ``original`` unless the companion cache was added to it.
        companion_path (Path | None): Companion document, when it is a file.
        companion_text (str | None): Raw companion content.
        bounds (RegionBounds | None): Located region in ``image``.
        rendered (str | None): Export engine output.
        block (str | None): ``rendered`` as comment lines.
        updated (str | None): Result of splicing ``block`` into ``image``.
        inserted_range (tuple[int, int] | None): ``[start, end)`` of the inserted
            text (framing newlines included) in ``updated``.
        lock_owner (LockOwner | None): Foreign lock holder that blocked the write.
        status (ConversionStatus): Per-axis status.
        flow (FlowControl): Early-termination request.
        diagnostics (list[Diagnostic]): Messages collected along the way.
        steps (list[str]): Names of the steps that ran, in order.
    """

    path: Path | None
    config: Config
    buffer: Buffer | None = None
    file_type: FileType | None = None
    processor: CommentaryProcessor | None = None

    original: str | None = None
    image: str | None = None

    companion_path: Path | None = None
    companion_text: str | None = None

    bounds: RegionBounds | None = None
    rendered: str | None = None
    block: str | None = None
    updated: str | None = None
    inserted_range: tuple[int, int] | None = None

    lock_owner: LockOwner | None = None

    status: ConversionStatus = field(default_factory=ConversionStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])
    steps: list[str] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(
        cls,
        *,
        path: Path | None,
        config: Config,
        buffer: Buffer | None = None,
    ) -> ProcessingContext:
        """Create a fresh context with no derived state."""
        return cls(path=path, config=config, buffer=buffer)

    @property
    def would_change(self) -> bool:
        """True when the spliced result differs from the text as read."""
        return self.updated is not None and self.updated != self.original

    def stop_flow(self, reason: str, at_step: BaseStep) -> None:
        """Request a terminal stop for the rest of the pipeline."""
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)

    # --- Convenience helpers -------------------------------------------------
    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self.diagnostics.append(Diagnostic(DiagnosticLevel.ERROR, message))

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly snapshot (no text payloads)."""
        return {
            "path": str(self.path) if self.path else None,
            "file_type": self.file_type.name if self.file_type else None,
            "companion": str(self.companion_path) if self.companion_path else None,
            "bounds": (self.bounds.start, self.bounds.end) if self.bounds else None,
            "inserted_range": self.inserted_range,
            "status": self.status.to_dict(),
            "flow": {"halt": self.flow.halt, "reason": self.flow.reason},
            "diagnostics": [d.render() for d in self.diagnostics],
        }

    def summary(self, *, color: bool = False) -> str:
        """Return a one-line summary such as ``foo.el: open buffer updated (from cache)``."""
        name: str = str(self.path) if self.path else "<buffer>"
        status = self.status
        headline = status.write
        if self.flow.halt:
            for axis in (status.read, status.resolve, status.companion, status.render, status.scan):
                if axis.name in {"NOT_FOUND", "UNREADABLE", "NO_PROCESSOR", "MISSING", "MALFORMED"}:
                    headline = axis
                    break
        label: str = headline.colored() if color else headline.value
        parts: list[str] = [f"{name}: {label}"]
        if status.companion.name in {"CACHED", "PROMPTED", "EXPLICIT"}:
            parts.append(f"(companion {status.companion.value})")
        if status.cache.name == "SAVED":
            parts.append(chalk.blue("[cache saved]") if color else "[cache saved]")
        return " ".join(parts)
