# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary package.

OrgCommentary keeps the Commentary section of Lisp source files in sync with
an Org companion document (typically a README). It renders the document with
an export engine, formats the result as comment lines and splices it between
the ``;;; Commentary:`` and ``;;; Code:`` markers. It exposes both a CLI and
a small typed API.
"""

from __future__ import annotations
