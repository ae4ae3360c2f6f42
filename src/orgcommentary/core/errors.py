# topmark:header:start
#
#   project      : OrgCommentary
#   file         : errors.py
#   file_relpath : src/orgcommentary/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the OrgCommentary library.

The CLI translates these into `orgcommentary.cli.errors` exceptions carrying
exit codes; library callers catch `CommentaryError` to handle them all.
"""

from __future__ import annotations

from pathlib import Path


class CommentaryError(Exception):
    """Base class for all OrgCommentary errors."""


class MalformedTargetError(CommentaryError):
    """The target lacks a Commentary: marker followed by a Code: marker."""

    def __init__(self, target: Path | str | None) -> None:
        self.target = target
        where: str = f" in {target}" if target else ""
        super().__init__(f"Cannot find ';;; Commentary:' followed by ';;; Code:'{where}")


class LockedTargetError(CommentaryError):
    """The target file is locked by another editing session."""

    def __init__(self, target: Path, owner: str | None = None) -> None:
        self.target = target
        self.owner = owner
        by: str = f" by {owner}" if owner else ""
        super().__init__(f"{target} is locked{by}; not writing")


class MissingCompanionError(CommentaryError):
    """No companion document could be resolved (or the prompt was cancelled)."""

    def __init__(self, target: Path | str | None, reason: str | None = None) -> None:
        self.target = target
        super().__init__(reason or f"No companion document given for {target}")


class TargetNotFoundError(CommentaryError):
    """The target path does not exist and no buffer is open for it."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"Target file not found: {target}")


class ExportError(CommentaryError):
    """The export engine failed to render the companion document."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
