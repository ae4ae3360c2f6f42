# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    org-commentary = "orgcommentary.cli.main:cli"

All subcommands live in `orgcommentary.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
