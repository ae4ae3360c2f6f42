# topmark:header:start
#
#   project      : OrgCommentary
#   file         : backends.py
#   file_relpath : src/orgcommentary/export/backends.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Backend identifiers and the pandoc writers they select."""

from __future__ import annotations

from typing import Final

# backend identifier -> pandoc output format
BACKEND_WRITERS: Final[dict[str, str]] = {
    "ascii": "plain",
    "utf-8": "plain",
    "markdown": "markdown",
    "md": "markdown",
    "gfm": "gfm",
    "org": "org",
}


def writer_for_backend(backend: str) -> str:
    """Return the pandoc writer for ``backend``.

    Raises:
        ValueError: If the backend is unknown.
    """
    try:
        return BACKEND_WRITERS[backend]
    except KeyError:
        known: str = ", ".join(sorted(BACKEND_WRITERS))
        raise ValueError(f"Unknown export backend {backend!r} (known: {known})") from None
