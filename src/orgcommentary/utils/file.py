# topmark:header:start
#
#   project      : OrgCommentary
#   file         : file.py
#   file_relpath : src/orgcommentary/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path helpers."""

from __future__ import annotations

import os
from pathlib import Path

from orgcommentary.config.logging import get_logger

logger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Return ``file_path`` relative to ``root_path``.

    Both paths are resolved first. Paths outside ``root_path`` are expressed with
    ``..`` segments.
    """
    resolved_path: Path = file_path.resolve()
    resolved_root: Path = root_path.resolve()
    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def resolve_against(base: Path, raw: str | Path) -> Path:
    """Return an absolute path for ``raw``, anchoring relative paths at ``base``."""
    p = Path(raw).expanduser()
    return p.resolve() if p.is_absolute() else (base / p).resolve()


def read_text_exact(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation."""
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def write_text_exact(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` as UTF-8 in one call; return the bytes written."""
    data: bytes = text.encode("utf-8")
    path.write_bytes(data)
    return len(data)
