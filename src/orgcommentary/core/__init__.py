# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across OrgCommentary.

- ``diagnostics``: levels and messages collected while converting a target.
- ``errors``: the `CommentaryError` hierarchy raised by the library.
- ``exit_codes``: process exit codes, aligned with BSD ``sysexits``.
"""

from __future__ import annotations
