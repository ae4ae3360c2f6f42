# topmark:header:start
#
#   project      : OrgCommentary
#   file         : localvars.py
#   file_relpath : src/orgcommentary/localvars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse and edit the trailing "Local Variables" block of a file.

The block is a run of comment lines near the end of a file::

    ;; Local Variables:
    ;; org-commentary-file: "README.org"
    ;; End:

Whatever precedes ``Local Variables:`` on its line is the *prefix* and
whatever follows is the *suffix*; every line of the block repeats both. Only
the last `LOCAL_VARIABLES_SEARCH_WINDOW` characters of the text are searched.

Values written as Lisp strings (``"..."``, backslash escapes) are unquoted;
anything else is returned verbatim. This is a key/value store, not a Lisp
reader.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from orgcommentary.config.logging import get_logger
from orgcommentary.constants import (
    LOCAL_VARIABLES_END,
    LOCAL_VARIABLES_SEARCH_WINDOW,
    LOCAL_VARIABLES_START,
)

logger = get_logger(__name__)

_START_RE: re.Pattern[str] = re.compile(
    r"^(?P<prefix>[^\n]*?)" + re.escape(LOCAL_VARIABLES_START) + r"(?P<suffix>[^\r\n]*)\r?$",
    re.MULTILINE | re.IGNORECASE,
)
_ENTRY_RE: re.Pattern[str] = re.compile(r"^(?P<key>[^\s:]+)\s*:\s*(?P<value>.*)$")

_ESCAPES: dict[str, str] = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}


@dataclass
class LocalVariablesBlock:
    """A located block and its entries.

    Attributes:
        prefix (str): Text before ``Local Variables:`` on the opening line.
        suffix (str): Text after it (often empty).
        entries (dict[str, str]): Parsed key/value pairs, in file order.
        entry_spans (dict[str, tuple[int, int]]): Offsets ``[start, end)`` of each
            entry line, newline included.
        end_line_start (int): Offset where the ``End:`` line begins.
    """

    prefix: str
    suffix: str
    entries: dict[str, str] = field(default_factory=lambda: {})
    entry_spans: dict[str, tuple[int, int]] = field(default_factory=lambda: {})
    end_line_start: int = 0


def parse_value(raw: str) -> str:
    """Return the value of a local-variable entry, unquoting Lisp strings."""
    raw = raw.strip()
    if not (len(raw) >= 2 and raw.startswith('"')):
        return raw
    out: list[str] = []
    i = 1
    while i < len(raw):
        ch: str = raw[i]
        if ch == "\\" and i + 1 < len(raw):
            nxt: str = raw[i + 1]
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        if ch == '"':
            break
        out.append(ch)
        i += 1
    return "".join(out)


def quote_value(value: str) -> str:
    """Return ``value`` as a Lisp string literal."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _strip_affixes(line: str, prefix: str, suffix: str) -> str | None:
    body: str = line.rstrip("\r\n")
    head: str = prefix.rstrip()
    if not body.startswith(head):
        return None
    body = body[len(head) :]
    tail: str = suffix.strip()
    if tail and body.rstrip().endswith(tail):
        body = body.rstrip()[: -len(tail)]
    return body.strip()


def find_block(text: str) -> LocalVariablesBlock | None:
    """Locate and parse the Local Variables block of ``text``.

    Returns:
        LocalVariablesBlock | None: The block, or None when there is no complete
            block (no opening line, a line without the prefix, or no ``End:``).
    """
    base: int = max(0, len(text) - LOCAL_VARIABLES_SEARCH_WINDOW)
    matches: list[re.Match[str]] = list(_START_RE.finditer(text, base))
    if not matches:
        return None
    m: re.Match[str] = matches[-1]
    block = LocalVariablesBlock(prefix=m.group("prefix"), suffix=m.group("suffix"))

    pos: int = text.find("\n", m.end())
    if pos < 0:
        return None
    pos += 1
    while pos < len(text):
        nl: int = text.find("\n", pos)
        line_end: int = len(text) if nl < 0 else nl + 1
        body: str | None = _strip_affixes(text[pos:line_end], block.prefix, block.suffix)
        if body is None:
            logger.debug("Local Variables line without prefix %r at offset %d", block.prefix, pos)
            return None
        if body.lower() == LOCAL_VARIABLES_END.lower():
            block.end_line_start = pos
            return block
        entry: re.Match[str] | None = _ENTRY_RE.match(body)
        if entry:
            key: str = entry.group("key")
            block.entries[key] = parse_value(entry.group("value"))
            block.entry_spans[key] = (pos, line_end)
        elif body:
            logger.debug("Ignoring malformed Local Variables entry: %r", body)
        pos = line_end
    logger.debug("Local Variables block without %r", LOCAL_VARIABLES_END)
    return None


def get_local_variable(text: str, key: str) -> str | None:
    """Return the value stored under ``key`` in the block of ``text``, if any."""
    block: LocalVariablesBlock | None = find_block(text)
    if block is None:
        return None
    return block.entries.get(key)


def set_local_variable(text: str, key: str, value: str, *, prefix: str) -> str:
    """Return ``text`` with ``key`` set to ``value`` in its Local Variables block.

    An existing entry is replaced in place; a new entry is added just before
    ``End:``; without a block a new one is appended at the end of the text.

    Args:
        text (str): The file content.
        key (str): Variable name.
        value (str): Value, stored as a quoted string.
        prefix (str): Line prefix (e.g. ``";; "``) for a newly created block.

    Returns:
        str: The updated text.
    """
    block: LocalVariablesBlock | None = find_block(text)
    if block is not None:
        line: str = f"{block.prefix}{key}: {quote_value(value)}{block.suffix}\n"
        if key in block.entry_spans:
            start, end = block.entry_spans[key]
            if not text[start:end].endswith("\n"):
                line = line.rstrip("\n")
            return text[:start] + line + text[end:]
        at: int = block.end_line_start
        return text[:at] + line + text[at:]

    lines: list[str] = [
        f"{prefix}{LOCAL_VARIABLES_START}\n",
        f"{prefix}{key}: {quote_value(value)}\n",
        f"{prefix}{LOCAL_VARIABLES_END}\n",
    ]
    head: str = text if not text or text.endswith("\n") else text + "\n"
    separator: str = "\n" if head else ""
    return head + separator + "".join(lines)
