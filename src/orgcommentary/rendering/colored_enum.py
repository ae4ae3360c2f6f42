# topmark:header:start
#
#   project      : OrgCommentary
#   file         : colored_enum.py
#   file_relpath : src/orgcommentary/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums that carry a colorizer for human-facing status output.

`ColoredStrEnum` members are plain strings (``.value`` is the label) and keep
their colorizer separately in ``.color``, so Enum hashing, equality and
``repr`` are unaffected.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    Outcome.OK.value          # 'ok'
    Outcome.OK.color("done")  # green "done"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with ``yachalk.ChalkBuilder.__call__``."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Join and decorate ``args`` for terminal display."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a label string and which exposes a colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Build a member from a ``(label, colorizer)`` tuple."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the label of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer of the member."""
        return self._color

    def colored(self) -> str:
        """Return the label decorated with the member's colorizer."""
        return self._color(self._value_)
