# topmark:header:start
#
#   project      : OrgCommentary
#   file         : diff.py
#   file_relpath : src/orgcommentary/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs of a target before and after conversion, with a colorized preview."""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from orgcommentary.config.logging import get_logger

logger = get_logger(__name__)


def make_patch(before: str, after: str, label: str) -> list[str]:
    """Return the unified diff lines (line endings included) turning ``before`` into ``after``.

    An empty list means the texts are identical.
    """
    patch: list[str] = list(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{label} (current)",
            tofile=f"{label} (updated)",
            n=3,
        )
    )
    logger.debug("Patch for %s: %d lines", label, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str, *, color: bool = True) -> str:
    """Render a unified diff for display.

    Args:
        patch: A unified diff as either a sequence of lines or a single
            multiline string.
        color: Colorize added, removed and hunk lines.

    Returns:
        The formatted preview, one line per diff line.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines()
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # Carriage returns would otherwise be invisible (or garble the terminal)
        content: str = line.replace("\r", "\\r")
        if not color or not content:
            return content
        match content[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
