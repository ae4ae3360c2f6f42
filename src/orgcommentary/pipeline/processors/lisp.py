# topmark:header:start
#
#   project      : OrgCommentary
#   file         : lisp.py
#   file_relpath : src/orgcommentary/pipeline/processors/lisp.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Commentary processor for semicolon-comment (Lisp family) sources.

Block lines use ``;;`` and the section markers use the three-semicolon
heading convention (``;;; Commentary:`` / ``;;; Code:``).
"""

from __future__ import annotations

from orgcommentary.pipeline.processors import register_filetype
from orgcommentary.pipeline.processors.base import CommentaryProcessor


@register_filetype("clojure")
@register_filetype("common-lisp")
@register_filetype("emacs-lisp")
@register_filetype("scheme")
class LispCommentaryProcessor(CommentaryProcessor):
    """Processor for ``;``-commented languages (Emacs Lisp, Common Lisp, Scheme, Clojure)."""

    line_prefix = ";;"
    marker_prefix = ";;;"
