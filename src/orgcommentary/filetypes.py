# topmark:header:start
#
#   project      : OrgCommentary
#   file         : filetypes.py
#   file_relpath : src/orgcommentary/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File types whose sources can carry a Commentary section.

A `FileType` is matched by file-name suffix. Which comment syntax applies to a
file type is decided by the processor registered for it (see
`orgcommentary.pipeline.processors`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgcommentary.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

# Used for targets whose suffix matches no known file type.
DEFAULT_FILETYPE: str = "emacs-lisp"


@dataclass(frozen=True)
class FileType:
    """A named family of files recognized by suffix."""

    name: str
    extensions: tuple[str, ...]
    description: str = ""

    def matches(self, path: Path) -> bool:
        """Return True when ``path`` has one of this type's suffixes."""
        return path.suffix.lower() in self.extensions


_BUILTIN_FILETYPES: tuple[FileType, ...] = (
    FileType("emacs-lisp", (".el",), "Emacs Lisp package"),
    FileType("common-lisp", (".lisp", ".lsp", ".cl", ".asd"), "Common Lisp source"),
    FileType("scheme", (".scm", ".ss", ".sld"), "Scheme source"),
    FileType("clojure", (".clj", ".cljs", ".cljc"), "Clojure source"),
)

_registry: dict[str, FileType] = {ft.name: ft for ft in _BUILTIN_FILETYPES}


def get_file_type_registry() -> dict[str, FileType]:
    """Return a copy of the file type registry, keyed by name."""
    return dict(_registry)


def resolve_file_type(path: Path | None) -> FileType:
    """Return the file type of ``path``, falling back to `DEFAULT_FILETYPE`."""
    if path is not None:
        for ft in _registry.values():
            if ft.matches(path):
                return ft
        logger.debug("No file type matches %s; using %s", path, DEFAULT_FILETYPE)
    return _registry[DEFAULT_FILETYPE]
