# topmark:header:start
#
#   project      : OrgCommentary
#   file         : errors.py
#   file_relpath : src/orgcommentary/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the OrgCommentary CLI.

Usage:
    Commands translate library errors (`orgcommentary.core.errors`) into these
    exceptions with `from_domain_error`; Click prints the message and exits
    with the class's exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from orgcommentary.core.errors import (
    CommentaryError,
    ExportError,
    LockedTargetError,
    MalformedTargetError,
    MissingCompanionError,
    TargetNotFoundError,
)
from orgcommentary.core.exit_codes import ExitCode


class CommentaryCliError(click.ClickException):
    """Base class for all OrgCommentary CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CommentaryUsageError(CommentaryCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class CommentaryConfigError(CommentaryCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class CommentaryFileNotFoundError(CommentaryCliError):
    """Target or companion does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CommentaryMalformedTargetError(CommentaryCliError):
    """Target lacks the Commentary/Code markers."""

    exit_code = ExitCode.MALFORMED_TARGET


class CommentaryExportError(CommentaryCliError):
    """Export engine failure."""

    exit_code = ExitCode.EXPORT_ERROR


class CommentaryIOError(CommentaryCliError):
    """I/O error reading or writing a file."""

    exit_code = ExitCode.IO_ERROR


class CommentaryLockedError(CommentaryCliError):
    """Target locked by another editing session."""

    exit_code = ExitCode.LOCKED


def from_domain_error(exc: CommentaryError) -> CommentaryCliError:
    """Return the CLI exception (with its exit code) for a library error."""
    message: str = str(exc)
    if isinstance(exc, MalformedTargetError):
        return CommentaryMalformedTargetError(message)
    if isinstance(exc, (TargetNotFoundError, MissingCompanionError)):
        return CommentaryFileNotFoundError(message)
    if isinstance(exc, ExportError):
        return CommentaryExportError(message)
    if isinstance(exc, LockedTargetError):
        return CommentaryLockedError(message)
    return CommentaryIOError(message)
