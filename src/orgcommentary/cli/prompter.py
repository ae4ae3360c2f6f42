# topmark:header:start
#
#   project      : OrgCommentary
#   file         : prompter.py
#   file_relpath : src/orgcommentary/cli/prompter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal implementation of the interactive questions asked by a conversion."""

from __future__ import annotations

from pathlib import Path

import click

from orgcommentary.config.logging import get_logger
from orgcommentary.constants import DEFAULT_COMPANION_NAME

logger = get_logger(__name__)


class ClickPrompter:
    """Ask on the terminal with `click.prompt` and `click.confirm`.

    An empty answer to the companion question cancels the conversion; Ctrl-C
    or end of input raise `click.Abort` and end the command.
    """

    def ask_companion(self, target: Path | None) -> Path | None:
        default: str = ""
        if target is not None and (target.parent / DEFAULT_COMPANION_NAME).is_file():
            default = str(target.parent / DEFAULT_COMPANION_NAME)
        answer: str = click.prompt(
            f"Companion document for {target.name if target else 'the target'}",
            default=default,
            show_default=bool(default),
        )
        if not answer.strip():
            logger.info("No companion document chosen")
            return None
        return Path(answer.strip()).expanduser().resolve()

    def confirm_save_cache(self, target: Path | None, companion: Path) -> bool:
        return click.confirm(
            f"Remember {companion.name} as the companion of "
            f"{target.name if target else 'this buffer'}?",
            default=True,
        )
