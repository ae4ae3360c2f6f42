# topmark:header:start
#
#   project      : OrgCommentary
#   file         : constants.py
#   file_relpath : src/orgcommentary/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ORGCOMMENTARY_VERSION: str = get_version("org-commentary")
except PackageNotFoundError:  # running from a source checkout
    ORGCOMMENTARY_VERSION = "0.0.0"

# Config file names discovered next to (or above) the target file:
CONFIG_FILE_NAME: str = "orgcommentary.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "orgcommentary"

# Marker labels delimiting the replaceable region (comment prefix is per file type):
COMMENTARY_LABEL: str = "Commentary:"
CODE_LABEL: str = "Code:"

# Local Variables footer:
LOCAL_VARIABLES_START: str = "Local Variables:"
LOCAL_VARIABLES_END: str = "End:"
# Only the tail of a file is searched for the footer
LOCAL_VARIABLES_SEARCH_WINDOW: int = 3000

DEFAULT_BACKEND: str = "ascii"
DEFAULT_TEXT_WIDTH: int = 72
DEFAULT_PANDOC: str = "pandoc"
DEFAULT_INPUT_FORMAT: str = "org"
DEFAULT_CACHE_KEY: str = "org-commentary-file"
# Suggested when asking for a companion document
DEFAULT_COMPANION_NAME: str = "README.org"

# Emacs-style lock files: ".#<name>" next to the locked file
LOCK_FILE_PREFIX: str = ".#"

VALUE_NOT_SET: str = "<not set>"
