# topmark:header:start
#
#   project      : OrgCommentary
#   file         : diagnostics.py
#   file_relpath : src/orgcommentary/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while converting a single target."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this severity (human output only)."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A severity level paired with a message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``"<level>: <message>"``, colorized when ``color`` is True."""
        text: str = f"{self.level.value}: {self.message}"
        return self.level.color(text) if color else text


def count_by_level(diags: Sequence[Diagnostic]) -> dict[DiagnosticLevel, int]:
    """Return per-level counts for a sequence of diagnostics."""
    counts: dict[DiagnosticLevel, int] = {level: 0 for level in DiagnosticLevel}
    for diag in diags:
        counts[diag.level] += 1
    return counts
