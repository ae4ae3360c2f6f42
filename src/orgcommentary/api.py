# topmark:header:start
#
#   project      : OrgCommentary
#   file         : api.py
#   file_relpath : src/orgcommentary/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public OrgCommentary API (stable surface).

Two entry points convert an Org companion document into the Commentary
section of a source file:

- `convert_in_place` renders the companion text the caller already has (the
  active document) into an open `Buffer`.
- `convert_by_path` works from anywhere: it reads the target (from its open
  buffer when one is registered, otherwise from disk), resolves the companion
  (explicit, cached in the target, or asked for), and writes the result to the
  open buffer or to the file, unless another session holds the file's lock.

Both return the final `ProcessingContext`, whose ``status`` records what
happened on every axis. Conditions that prevent a conversion are raised as
`orgcommentary.core.errors.CommentaryError` subclasses; a locked target is
not one of them: it is reported as ``WriteStatus.LOCKED`` with a warning.

```python
from pathlib import Path

from orgcommentary import api
from orgcommentary.config import MutableConfig

config = MutableConfig.load_merged(start=Path("foo.el")).freeze()
ctx = api.convert_by_path("foo.el", "README.org", config=config, save_cache=True)
print(ctx.summary())
```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable

from orgcommentary.config.logging import get_logger
from orgcommentary.core.diagnostics import DiagnosticLevel
from orgcommentary.core.errors import (
    CommentaryError,
    MalformedTargetError,
    MissingCompanionError,
    TargetNotFoundError,
)
from orgcommentary.export import PandocExporter
from orgcommentary.pipeline.context import ProcessingContext
from orgcommentary.pipeline.pipelines import by_path_pipeline, in_place_pipeline
from orgcommentary.pipeline.runner import run
from orgcommentary.pipeline.status import (
    CompanionStatus,
    ReadStatus,
    RenderStatus,
    ResolveStatus,
    ScanStatus,
)
from orgcommentary.pipeline.steps.companion import Prompter

if TYPE_CHECKING:
    from orgcommentary.buffers import Buffer, BufferRegistry
    from orgcommentary.config import Config
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.export import Exporter

logger: CommentaryLogger = get_logger(__name__)

__all__: list[str] = [
    "Highlighter",
    "Prompter",
    "convert_by_path",
    "convert_in_place",
]

Highlighter = Callable[[int, int], None]


def _last_error(ctx: ProcessingContext) -> str | None:
    errors: list[str] = [d.message for d in ctx.diagnostics if d.level == DiagnosticLevel.ERROR]
    return errors[-1] if errors else None


def _raise_for_status(ctx: ProcessingContext) -> None:
    """Translate a halted flow into the matching domain exception."""
    if not ctx.flow.halt:
        return
    status = ctx.status
    if status.read == ReadStatus.NOT_FOUND:
        raise TargetNotFoundError(ctx.path or Path())
    if (
        status.read == ReadStatus.UNREADABLE
        or status.resolve == ResolveStatus.NO_PROCESSOR
        or status.render == RenderStatus.UNREADABLE
    ):
        raise CommentaryError(_last_error(ctx) or f"Cannot convert {ctx.path}")
    if status.companion == CompanionStatus.MISSING:
        raise MissingCompanionError(ctx.path, _last_error(ctx))
    if status.scan == ScanStatus.MALFORMED:
        raise MalformedTargetError(ctx.path)
    raise CommentaryError(f"Conversion of {ctx.path} stopped: {ctx.flow.reason}")


def convert_in_place(
    target: Buffer,
    companion_text: str,
    *,
    config: Config,
    exporter: Exporter | None = None,
    highlight: Highlighter | None = None,
) -> ProcessingContext:
    """Render ``companion_text`` into the Commentary section of the open buffer ``target``.

    The buffer content is replaced (nothing is written to disk), its cursor
    moves to the start of the new region, and ``highlight(start, end)`` is
    called with the inserted range.

    Args:
        target (Buffer): The open target document.
        companion_text (str): Content of the active companion document.
        config (Config): Runtime configuration.
        exporter (Exporter | None): Export engine; defaults to pandoc for ``config``.
        highlight (Highlighter | None): Called with the inserted ``[start, end)`` range.

    Returns:
        ProcessingContext: The final context.

    Raises:
        MalformedTargetError: If the buffer has no Commentary/Code markers.
        ExportError: If the export engine fails.
    """
    ctx: ProcessingContext = ProcessingContext.bootstrap(
        path=target.path, config=config, buffer=target
    )
    ctx.companion_text = companion_text
    ctx.status.companion = CompanionStatus.ACTIVE

    steps = in_place_pipeline(exporter or PandocExporter.from_config(config))
    ctx = run(ctx, steps)
    _raise_for_status(ctx)

    if ctx.inserted_range is not None:
        start, end = ctx.inserted_range
        target.goto(start)
        if highlight is not None:
            highlight(start, end)
    return ctx


def convert_by_path(
    target_path: Path | str,
    companion_path: Path | str | None = None,
    *,
    config: Config,
    exporter: Exporter | None = None,
    prompter: Prompter | None = None,
    buffers: BufferRegistry | None = None,
    save_cache: bool | None = None,
    dry_run: bool = False,
) -> ProcessingContext:
    """Render a companion file into the Commentary section of ``target_path``.

    Args:
        target_path (Path | str): The target source file.
        companion_path (Path | str | None): Companion document; when None the
            target's cached value is used, else ``prompter`` is asked. A relative
            path is taken relative to the target's directory.
        config (Config): Runtime configuration.
        exporter (Exporter | None): Export engine; defaults to pandoc for ``config``.
        prompter (Prompter | None): Interactive questions (companion choice and
            whether to remember it).
        buffers (BufferRegistry | None): Open buffers; an open target is read
            from and written to its buffer.
        save_cache (bool | None): Store the companion path in the target without
            asking (True) or never (False). None asks ``prompter``.
        dry_run (bool): Compute everything but write nothing.

    Returns:
        ProcessingContext: The final context. ``status.write`` is
            ``WriteStatus.LOCKED`` when another session holds the target.

    Raises:
        TargetNotFoundError: If the target does not exist and is not open.
        MissingCompanionError: If no companion can be resolved or the prompt was
            cancelled.
        MalformedTargetError: If the target has no Commentary/Code markers.
        ExportError: If the export engine fails.
        CommentaryError: If the target or the companion cannot be read or decoded.
    """
    ctx: ProcessingContext = ProcessingContext.bootstrap(path=Path(target_path), config=config)
    if companion_path is not None:
        ctx.companion_path = Path(companion_path)

    steps = by_path_pipeline(
        exporter or PandocExporter.from_config(config),
        prompter=prompter,
        buffers=buffers,
        save_cache=save_cache,
        dry_run=dry_run,
    )
    ctx = run(ctx, steps)
    _raise_for_status(ctx)

    logger.info("%s", ctx.summary())
    return ctx
