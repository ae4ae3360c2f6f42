# topmark:header:start
#
#   project      : OrgCommentary
#   file         : cache.py
#   file_relpath : src/orgcommentary/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Companion-path cache stored in the target file's Local Variables block.

The cached value is the companion document's path relative to the target's
directory. It is resolved to an absolute path only when read, and a value
pointing at a file that no longer exists is treated as absent; it is never
corrected automatically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger
from orgcommentary.localvars import get_local_variable, set_local_variable
from orgcommentary.utils.file import compute_relpath, resolve_against

if TYPE_CHECKING:
    from pathlib import Path

    from orgcommentary.config.logging import CommentaryLogger

logger: CommentaryLogger = get_logger(__name__)


def get_cached(target_text: str, target_dir: Path, key: str) -> Path | None:
    """Return the cached companion path, or None when missing or stale.

    Args:
        target_text (str): Content of the target, freshly read.
        target_dir (Path): Directory of the target file.
        key (str): Local-variable name holding the relative path.

    Returns:
        Path | None: Absolute path of an existing companion document.
    """
    raw: str | None = get_local_variable(target_text, key)
    if not raw:
        return None
    candidate: Path = resolve_against(target_dir, raw)
    if not candidate.is_file():
        logger.info("Cached companion %s (%s) no longer exists", raw, candidate)
        return None
    logger.debug("Cached companion: %s", candidate)
    return candidate


def set_cached(
    target_text: str,
    target_dir: Path,
    companion: Path,
    key: str,
    *,
    prefix: str,
) -> str:
    """Return ``target_text`` with the companion path stored under ``key``.

    Args:
        target_text (str): Content of the target.
        target_dir (Path): Directory of the target file.
        companion (Path): Companion document to remember.
        key (str): Local-variable name.
        prefix (str): Comment prefix for a newly created block (e.g. ``";; "``).

    Returns:
        str: The updated target text.
    """
    relative: str = compute_relpath(companion, target_dir).as_posix()
    logger.debug("Caching companion path %s under %s", relative, key)
    return set_local_variable(target_text, key, relative, prefix=prefix)
