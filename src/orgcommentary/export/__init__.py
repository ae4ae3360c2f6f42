# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/export/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Export engine adapters."""

from __future__ import annotations

from orgcommentary.export.backends import BACKEND_WRITERS, writer_for_backend
from orgcommentary.export.pandoc import Exporter, PandocExporter

__all__: list[str] = [
    "BACKEND_WRITERS",
    "Exporter",
    "PandocExporter",
    "writer_for_backend",
]
