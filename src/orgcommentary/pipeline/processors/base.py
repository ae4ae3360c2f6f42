# topmark:header:start
#
#   project      : OrgCommentary
#   file         : base.py
#   file_relpath : src/orgcommentary/pipeline/processors/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Commentary processor base module.

A *commentary processor* knows the comment syntax of one family of file types
and implements the two text operations that depend on it:

- **Locating** the region between the ``Commentary:`` and ``Code:`` marker
  lines (`CommentaryProcessor.locate_region`).
- **Formatting** rendered text as a block of line comments
  (`CommentaryProcessor.format_block`).

Splicing the block into the file is syntax-independent and lives in
`splice`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.constants import CODE_LABEL, COMMENTARY_LABEL

if TYPE_CHECKING:
    from collections.abc import Iterator

    from orgcommentary.config.logging import CommentaryLogger
    from orgcommentary.filetypes import FileType

logger: CommentaryLogger = get_logger(__name__)

_LINE_END_RE: re.Pattern[str] = re.compile(r"(?<=\n)")


@dataclass(frozen=True)
class RegionBounds:
    """Half-open character interval ``[start, end)`` of the replaceable region.

    ``start`` is the offset of the line following the ``Commentary:`` marker and
    ``end`` is the offset where the ``Code:`` marker line begins.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid region bounds: start={self.start}, end={self.end}")


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` with their terminators, splitting on ``\\n`` only.

    Unlike `str.splitlines`, form feeds and other Unicode line separators do
    not end a line.
    """
    for line in _LINE_END_RE.split(text):
        if line:
            yield line


def _strip_eol(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def splice(full_text: str, bounds: RegionBounds, block: str) -> str:
    """Replace the region of ``full_text`` with ``block``, framed by newlines.

    A newline is always inserted before and after ``block``, whatever the
    replaced region contained; everything outside ``bounds`` is kept verbatim.
    """
    return full_text[: bounds.start] + "\n" + block + "\n" + full_text[bounds.end :]


class CommentaryProcessor:
    """Base class for processors of line-comment languages.

    Attributes:
        file_type (FileType | None): The file type this instance is bound to.
        line_prefix (str): Comment token put in front of every block line.
        marker_prefix (str): Comment token in front of the marker labels.
    """

    file_type: FileType | None = None

    line_prefix: str = ""
    marker_prefix: str = ""

    def __init__(self) -> None:
        self.file_type = None
        self._commentary_re: re.Pattern[str] = self._marker_pattern(COMMENTARY_LABEL)
        self._code_re: re.Pattern[str] = self._marker_pattern(CODE_LABEL)

    def _marker_pattern(self, label: str) -> re.Pattern[str]:
        return re.compile(rf"^{re.escape(self.marker_prefix)}\s*{re.escape(label)}\s*$")

    @property
    def local_variables_prefix(self) -> str:
        """Prefix for lines of a newly created Local Variables block."""
        return f"{self.line_prefix} "

    def is_commentary_marker(self, line: str) -> bool:
        """Return True for a ``Commentary:`` marker line (surrounding whitespace ignored)."""
        return bool(self._commentary_re.match(line.strip()))

    def is_code_marker(self, line: str) -> bool:
        """Return True for a ``Code:`` marker line (surrounding whitespace ignored)."""
        return bool(self._code_re.match(line.strip()))

    def locate_region(self, text: str) -> RegionBounds | None:
        """Find the region between the Commentary: and Code: marker lines.

        The ``Code:`` marker is only searched for after the ``Commentary:``
        marker, so markers in the wrong order are reported as missing.

        Args:
            text (str): Full text of the target document.

        Returns:
            RegionBounds | None: The bounds, or None when either marker is missing.
        """
        offset: int = 0
        start: int | None = None
        for line in iter_lines(text):
            if start is None:
                if self.is_commentary_marker(line):
                    start = offset + len(line)
                    logger.trace("Commentary marker at offset %d", offset)
            elif self.is_code_marker(line):
                logger.trace("Code marker at offset %d", offset)
                return RegionBounds(start=start, end=offset)
            offset += len(line)

        logger.debug(
            "Markers not found (commentary=%s)", "found" if start is not None else "missing"
        )
        return None

    def format_line(self, line: str) -> str:
        """Return one comment line (without newline); blank lines get the bare token."""
        if not line.strip():
            return self.line_prefix
        return f"{self.line_prefix} {line}"

    def format_block(self, text: str) -> str:
        """Prefix every line of ``text`` with the comment token.

        Only ``\\n`` ends a line; other Unicode separators such as form feeds
        stay inside their line. Each output line is newline-terminated and the
        line count is preserved; empty input yields empty output. Existing
        comment tokens are not recognized, so formatting twice prefixes twice.
        """
        return "".join(f"{self.format_line(_strip_eol(line))}\n" for line in iter_lines(text))
