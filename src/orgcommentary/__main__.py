# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __main__.py
#   file_relpath : src/orgcommentary/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running OrgCommentary via ``python -m orgcommentary``.

Equivalent to the ``org-commentary`` console script.
"""

from __future__ import annotations

from orgcommentary.cli.main import cli

if __name__ == "__main__":
    cli()
