# topmark:header:start
#
#   project      : OrgCommentary
#   file         : keys.py
#   file_relpath : src/orgcommentary/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML keys understood in ``orgcommentary.toml`` and ``[tool.orgcommentary]``."""

from __future__ import annotations

from typing import Final


class Toml:
    """Names of the supported configuration keys.

    The configuration is flat: every key lives at the top level of
    ``orgcommentary.toml`` (or of the ``[tool.orgcommentary]`` table).
    """

    KEY_ROOT: Final[str] = "root"
    KEY_BACKEND: Final[str] = "backend"
    KEY_TEXT_WIDTH: Final[str] = "text_width"
    KEY_PANDOC: Final[str] = "pandoc"
    KEY_INPUT_FORMAT: Final[str] = "input_format"
    KEY_CACHE_KEY: Final[str] = "cache_key"

    ALL: Final[frozenset[str]] = frozenset(
        {KEY_ROOT, KEY_BACKEND, KEY_TEXT_WIDTH, KEY_PANDOC, KEY_INPUT_FORMAT, KEY_CACHE_KEY}
    )
