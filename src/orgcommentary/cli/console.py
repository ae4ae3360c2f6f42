# topmark:header:start
#
#   project      : OrgCommentary
#   file         : console.py
#   file_relpath : src/orgcommentary/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Commands print results through a console kept in ``ctx.obj["console"]``, while
diagnostics go through `logging`. Output volume follows the ``-v``/``-q``
flags: ``verbosity`` is 0 by default, positive with ``-v`` and negative with
``-q``.
"""

from __future__ import annotations

from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    enable_color: bool
    verbosity: int

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def detail(self, text: str, *, level: int = 1) -> None:
        """Write a message to stdout when ``verbosity >= level``."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Program-output console backed by ``click.echo``.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        verbosity (int): Output volume; messages from `detail` need a positive value.
        out (TextIO | None): Stream for standard output (None: the current stdout).
        err (TextIO | None): Stream for error output (None: the current stderr).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity: int = 0,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.verbosity = verbosity
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        if self.verbosity < 0:
            return
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def detail(self, text: str, *, level: int = 1) -> None:
        if self.verbosity >= level:
            click.echo(text, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(
            text, nl=nl, file=self.err, err=True, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
