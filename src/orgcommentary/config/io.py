# topmark:header:start
#
#   project      : OrgCommentary
#   file         : io.py
#   file_relpath : src/orgcommentary/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures.
Runtime defaults are defined in code so the tool works without any file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from orgcommentary.config.keys import Toml
from orgcommentary.config.logging import get_logger
from orgcommentary.constants import (
    DEFAULT_BACKEND,
    DEFAULT_CACHE_KEY,
    DEFAULT_INPUT_FORMAT,
    DEFAULT_PANDOC,
    DEFAULT_TEXT_WIDTH,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from orgcommentary.config.logging import CommentaryLogger

TomlTable = dict[str, Any]

logger: CommentaryLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a new dict (no I/O)."""
    return {
        Toml.KEY_BACKEND: DEFAULT_BACKEND,
        Toml.KEY_TEXT_WIDTH: DEFAULT_TEXT_WIDTH,
        Toml.KEY_PANDOC: DEFAULT_PANDOC,
        Toml.KEY_INPUT_FORMAT: DEFAULT_INPUT_FORMAT,
        Toml.KEY_CACHE_KEY: DEFAULT_CACHE_KEY,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content; an empty dict when the file cannot be read
            or parsed (the failure is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data: Any = doc.unwrap()
        return cast("TomlTable", data) if isinstance(data, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_section(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the OrgCommentary table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.orgcommentary]`` (None when absent);
    any other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    return cast("TomlTable", section) if isinstance(section, dict) else None


def to_toml(data: TomlTable) -> str:
    """Render a config dict as TOML text."""
    return tomlkit.dumps(data)
