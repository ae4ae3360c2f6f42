# topmark:header:start
#
#   project      : OrgCommentary
#   file         : companion.py
#   file_relpath : src/orgcommentary/pipeline/steps/companion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Companion steps: find the companion document and offer to remember it.

Resolution order: explicit path, then the cache in the target's Local
Variables block, then an interactive prompt. Relative explicit or prompted
paths are taken relative to the target's directory. When no valid cache
existed, the cache step offers to store the path; the store is an edit of
``ctx.image`` and is therefore persisted only together with the converted
text.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from orgcommentary.cache import get_cached, set_cached
from orgcommentary.config.logging import get_logger
from orgcommentary.pipeline.status import CacheStatus, CompanionStatus
from orgcommentary.pipeline.steps.base import BaseStep
from orgcommentary.utils.file import resolve_against

if TYPE_CHECKING:
    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.pipeline.context import ProcessingContext

logger: CommentaryLogger = get_logger(__name__)


class Prompter(Protocol):
    """Interactive questions asked during a conversion.

    Returning None from `ask_companion` cancels the conversion.
    """

    def ask_companion(self, target: Path | None) -> Path | None:
        """Ask for the companion document of ``target``."""
        ...

    def confirm_save_cache(self, target: Path | None, companion: Path) -> bool:
        """Ask whether to remember ``companion`` in ``target``."""
        ...


def _target_dir(ctx: ProcessingContext) -> Path:
    return ctx.path.parent if ctx.path is not None else Path.cwd()


@dataclass
class CompanionStep(BaseStep):
    """Set ``ctx.companion_path``; halts when none can be resolved.

    Attributes:
        prompter (Prompter | None): Asked when neither an explicit nor a cached
            path is available.
    """

    name: str = "companion"
    axes_written: tuple[str, ...] = ("companion", "cache")
    prompter: Prompter | None = None

    def run(self, ctx: ProcessingContext) -> None:
        cached: Path | None = get_cached(ctx.image or "", _target_dir(ctx), ctx.config.cache_key)
        if cached is not None:
            ctx.status.cache = CacheStatus.HIT

        if ctx.companion_path is not None:
            ctx.companion_path = resolve_against(_target_dir(ctx), ctx.companion_path)
            ctx.status.companion = CompanionStatus.EXPLICIT
        elif cached is not None:
            ctx.companion_path = cached
            ctx.status.companion = CompanionStatus.CACHED
        elif self.prompter is not None:
            answer: Path | None = self.prompter.ask_companion(ctx.path)
            if answer is not None:
                ctx.companion_path = resolve_against(_target_dir(ctx), answer)
                ctx.status.companion = CompanionStatus.PROMPTED

        if ctx.companion_path is None:
            ctx.status.companion = CompanionStatus.MISSING
            ctx.add_error(f"No companion document for {ctx.path}")
            ctx.stop_flow("missing-companion", self)
            return

        if not ctx.companion_path.is_file():
            ctx.status.companion = CompanionStatus.MISSING
            ctx.add_error(f"Companion document not found: {ctx.companion_path}")
            ctx.stop_flow("missing-companion", self)
            return
        logger.debug("Companion: %s (%s)", ctx.companion_path, ctx.status.companion.value)


@dataclass
class CacheStep(BaseStep):
    """Offer to store the companion path when no valid cache existed.

    Attributes:
        prompter (Prompter | None): Asked for confirmation when ``save`` is None.
        save (bool | None): Force (True) or refuse (False) storing without asking.
    """

    name: str = "cache"
    axes_written: tuple[str, ...] = ("cache",)
    prompter: Prompter | None = None
    save: bool | None = None

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return super().may_proceed(ctx) and ctx.status.cache != CacheStatus.HIT

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.companion_path is not None and ctx.processor is not None

        decision: bool | None = self.save
        if decision is None and self.prompter is not None:
            decision = self.prompter.confirm_save_cache(ctx.path, ctx.companion_path)
        if not decision:
            ctx.status.cache = CacheStatus.DECLINED
            return

        ctx.image = set_cached(
            ctx.image or "",
            _target_dir(ctx),
            ctx.companion_path,
            ctx.config.cache_key,
            prefix=ctx.processor.local_variables_prefix,
        )
        ctx.status.cache = CacheStatus.SAVED
        ctx.add_info(f"Remembered companion {ctx.companion_path.name} in {ctx.path}")
