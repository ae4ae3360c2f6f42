# topmark:header:start
#
#   project      : OrgCommentary
#   file         : pipelines.py
#   file_relpath : src/orgcommentary/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (typed step sequences).

Steps carry per-invocation collaborators (exporter, prompter, open buffers),
so pipelines are assembled by factory functions rather than shared as
module-level tuples.

Overview
--------
- ``IN_PLACE``: reader → resolver → scanner → renderer → updater → writer
- ``BY_PATH``: reader → resolver → companion → cache → scanner → renderer
  → updater → writer

Mermaid (orientation)
---------------------
```mermaid
flowchart TD
  D[reader] --> R[resolver]
  R -->|by path| C[companion] --> K[cache] --> N[scanner]
  R -->|in place| N
  N --> T[renderer] --> U[updater] --> W[writer]
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgcommentary.pipeline.steps import (
    companion,
    reader,
    renderer,
    resolver,
    scanner,
    updater,
    writer,
)

if TYPE_CHECKING:
    from orgcommentary.buffers import BufferRegistry
    from orgcommentary.export import Exporter
    from orgcommentary.pipeline.steps.base import BaseStep
    from orgcommentary.pipeline.steps.companion import Prompter


def in_place_pipeline(
    exporter: Exporter,
    *,
    dry_run: bool = False,
) -> tuple[BaseStep, ...]:
    """Steps converting the companion text already on the context into its buffer."""
    return (
        reader.ReaderStep(),  # Take the text of the open buffer
        resolver.ResolverStep(),  # Assign the commentary processor
        scanner.ScannerStep(),  # Locate the Commentary region
        renderer.RendererStep(exporter=exporter),  # Export and format as comments
        updater.UpdaterStep(),  # Splice the block into the text
        writer.WriterStep(dry_run=dry_run),  # Replace the buffer content
    )


def by_path_pipeline(
    exporter: Exporter,
    *,
    prompter: Prompter | None = None,
    buffers: BufferRegistry | None = None,
    save_cache: bool | None = None,
    dry_run: bool = False,
) -> tuple[BaseStep, ...]:
    """Steps converting a target file, wherever its companion comes from."""
    return (
        reader.ReaderStep(buffers=buffers),  # Open buffer first, else the file
        resolver.ResolverStep(),  # Assign the commentary processor
        companion.CompanionStep(prompter=prompter),  # Explicit, cached or prompted
        companion.CacheStep(prompter=prompter, save=save_cache),  # Offer to remember it
        scanner.ScannerStep(),  # Locate the Commentary region
        renderer.RendererStep(exporter=exporter),  # Export and format as comments
        updater.UpdaterStep(),  # Splice the block into the text
        writer.WriterStep(dry_run=dry_run),  # Buffer, file, or nothing when locked
    )
