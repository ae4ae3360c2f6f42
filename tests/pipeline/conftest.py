# topmark:header:start
#
#   project      : OrgCommentary
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for running the conversion pipelines directly in tests."""

from __future__ import annotations

import os
import socket
from typing import TYPE_CHECKING

from orgcommentary.locking import lock_file_for
from orgcommentary.pipeline.context import ProcessingContext
from orgcommentary.pipeline.pipelines import by_path_pipeline
from orgcommentary.pipeline.runner import run
from tests.conftest import FakeExporter, FakePrompter, make_config

if TYPE_CHECKING:
    from pathlib import Path

    from orgcommentary.buffers import BufferRegistry
    from orgcommentary.config import Config

# A host name that can never be the local one
FOREIGN_HOST: str = "lock-test-host.invalid"


def run_by_path(
    target: Path,
    companion: Path | None = None,
    *,
    config: Config | None = None,
    exporter: FakeExporter | None = None,
    prompter: FakePrompter | None = None,
    buffers: BufferRegistry | None = None,
    save_cache: bool | None = False,
    dry_run: bool = False,
) -> ProcessingContext:
    """Run the by-path pipeline without translating halts into exceptions."""
    ctx: ProcessingContext = ProcessingContext.bootstrap(path=target, config=config or make_config())
    ctx.companion_path = companion
    steps = by_path_pipeline(
        exporter or FakeExporter(),
        prompter=prompter,
        buffers=buffers,
        save_cache=save_cache,
        dry_run=dry_run,
    )
    return run(ctx, steps)


def lock_foreign(path: Path) -> Path:
    """Create an Emacs-style lock on ``path`` held by a session on another host."""
    lock: Path = lock_file_for(path)
    lock.write_text(f"someone@{FOREIGN_HOST}.4242:1700000000", encoding="utf-8")
    return lock


def lock_own(path: Path) -> Path:
    """Create a lock on ``path`` held by the current process."""
    lock: Path = lock_file_for(path)
    lock.write_text(f"me@{socket.gethostname()}.{os.getpid()}:1700000000", encoding="utf-8")
    return lock
