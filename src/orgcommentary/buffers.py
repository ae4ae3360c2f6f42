# topmark:header:start
#
#   project      : OrgCommentary
#   file         : buffers.py
#   file_relpath : src/orgcommentary/buffers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory document buffers.

A `Buffer` is an open, possibly unsaved, copy of a file's text together with a
cursor position. The `BufferRegistry` tracks which files currently have an open
buffer so that conversions update those in place instead of overwriting the
file behind an editing session's back.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from orgcommentary.config.logging import get_logger
from orgcommentary.utils.file import read_text_exact, write_text_exact

logger = get_logger(__name__)


@dataclass
class Buffer:
    """An open text document.

    Attributes:
        path (Path | None): File the buffer visits, if any.
        text (str): Current content.
        point (int): Cursor offset into ``text``.
        modified (bool): True when ``text`` differs from what was last saved.
    """

    path: Path | None
    text: str = ""
    point: int = 0
    modified: bool = False

    @classmethod
    def visit(cls, path: Path) -> Buffer:
        """Open ``path`` into a new, unmodified buffer with the cursor at the start."""
        return cls(path=path, text=read_text_exact(path))

    def replace_contents(self, text: str) -> None:
        """Replace the whole content, keeping the cursor where it was if possible."""
        if text == self.text:
            return
        self.text = text
        self.point = min(self.point, len(text))
        self.modified = True

    def goto(self, offset: int) -> None:
        """Move the cursor to ``offset`` (clamped to the buffer)."""
        self.point = max(0, min(offset, len(self.text)))

    def line_number_at(self, offset: int) -> int:
        """Return the 1-based line number of ``offset``."""
        return self.text.count("\n", 0, max(0, offset)) + 1

    def save(self) -> int:
        """Write the buffer to its file and return the number of bytes written.

        Raises:
            ValueError: If the buffer does not visit a file.
        """
        if self.path is None:
            raise ValueError("Buffer is not visiting a file")
        written: int = write_text_exact(self.path, self.text)
        self.modified = False
        logger.debug("Saved buffer to %s (%d bytes)", self.path, written)
        return written


class BufferRegistry:
    """The set of open buffers, keyed by resolved file path."""

    def __init__(self) -> None:
        self._buffers: dict[Path, Buffer] = {}

    @staticmethod
    def _key(path: Path) -> Path:
        return path.expanduser().resolve()

    def register(self, buffer: Buffer) -> Buffer:
        """Track ``buffer`` as the open buffer for its file."""
        if buffer.path is None:
            raise ValueError("Only buffers visiting a file can be registered")
        self._buffers[self._key(buffer.path)] = buffer
        return buffer

    def open(self, path: Path) -> Buffer:
        """Return the open buffer for ``path``, visiting the file if needed."""
        existing: Buffer | None = self.find(path)
        if existing is not None:
            return existing
        return self.register(Buffer.visit(path))

    def find(self, path: Path) -> Buffer | None:
        """Return the open buffer visiting ``path``, or None."""
        return self._buffers.get(self._key(path))

    def close(self, path: Path) -> None:
        """Forget the buffer visiting ``path`` (unsaved changes are dropped)."""
        self._buffers.pop(self._key(path), None)

    def __len__(self) -> int:
        return len(self._buffers)
