# topmark:header:start
#
#   project      : OrgCommentary
#   file         : status.py
#   file_relpath : src/orgcommentary/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the conversion pipeline.

Each step writes only to the axes listed in its ``axes_written`` contract.
Values are human-readable labels; compare members with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from yachalk import chalk

from orgcommentary.rendering.colored_enum import ColoredStrEnum


class ReadStatus(ColoredStrEnum):
    """Where the target text came from."""

    PENDING = ("read pending", chalk.gray)
    FROM_DISK = ("read from disk", chalk.green)
    FROM_BUFFER = ("read from open buffer", chalk.green)
    NOT_FOUND = ("target not found", chalk.red)
    UNREADABLE = ("target unreadable", chalk.red_bright)


class ResolveStatus(ColoredStrEnum):
    """Processor selection for the target's file type."""

    PENDING = ("resolve pending", chalk.gray)
    RESOLVED = ("resolved", chalk.green)
    NO_PROCESSOR = ("no processor for file type", chalk.red)


class CompanionStatus(ColoredStrEnum):
    """How the companion document was obtained."""

    PENDING = ("companion pending", chalk.gray)
    ACTIVE = ("active document", chalk.green)
    EXPLICIT = ("given explicitly", chalk.green)
    CACHED = ("from cache", chalk.green)
    PROMPTED = ("chosen interactively", chalk.green)
    MISSING = ("no companion", chalk.red)


class CacheStatus(ColoredStrEnum):
    """Companion-path cache outcome."""

    PENDING = ("cache pending", chalk.gray)
    HIT = ("cache present", chalk.green)
    SAVED = ("cache saved", chalk.blue)
    DECLINED = ("cache not saved", chalk.yellow)


class ScanStatus(ColoredStrEnum):
    """Marker detection in the target."""

    PENDING = ("scan pending", chalk.gray)
    FOUND = ("markers found", chalk.green)
    MALFORMED = ("markers missing or out of order", chalk.red_bright)


class RenderStatus(ColoredStrEnum):
    """Rendering of the companion document into a comment block."""

    PENDING = ("render pending", chalk.gray)
    RENDERED = ("rendered", chalk.green)
    UNREADABLE = ("companion unreadable", chalk.red_bright)


class UpdateStatus(ColoredStrEnum):
    """Result of splicing the block into the target text."""

    PENDING = ("update pending", chalk.gray)
    UPDATED = ("commentary updated", chalk.blue)
    UNCHANGED = ("commentary up-to-date", chalk.green)


class WriteStatus(ColoredStrEnum):
    """Outcome of the sink resolver."""

    PENDING = ("write pending", chalk.gray)
    BUFFER_UPDATED = ("open buffer updated", chalk.green)
    WRITTEN = ("written to disk", chalk.green)
    UNCHANGED = ("nothing to write", chalk.green)
    PREVIEWED = ("previewed (dry run)", chalk.blue)
    LOCKED = ("locked by another session", chalk.yellow)
    NO_TARGET = ("no target to write", chalk.red)


@dataclass
class ConversionStatus:
    """Per-axis status of one conversion; the single source of truth for outcomes."""

    read: ReadStatus = ReadStatus.PENDING
    resolve: ResolveStatus = ResolveStatus.PENDING
    companion: CompanionStatus = CompanionStatus.PENDING
    cache: CacheStatus = CacheStatus.PENDING
    scan: ScanStatus = ScanStatus.PENDING
    render: RenderStatus = RenderStatus.PENDING
    update: UpdateStatus = UpdateStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING

    def to_dict(self) -> dict[str, str]:
        """Return ``{axis: label}`` for every axis."""
        return {f.name: getattr(self, f.name).value for f in fields(self)}
