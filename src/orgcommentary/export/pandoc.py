# topmark:header:start
#
#   project      : OrgCommentary
#   file         : pandoc.py
#   file_relpath : src/orgcommentary/export/pandoc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render companion documents with the ``pandoc`` executable.

The exporter is a pass-through: it performs no parsing of the document and
only selects the pandoc writer that corresponds to the configured backend.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Protocol

from orgcommentary.config.logging import get_logger
from orgcommentary.core.errors import ExportError
from orgcommentary.export.backends import writer_for_backend

if TYPE_CHECKING:
    from orgcommentary.config import Config
    from orgcommentary.config.logging import CommentaryLogger

logger: CommentaryLogger = get_logger(__name__)


class Exporter(Protocol):
    """Renders raw document text to plain text for one fixed backend."""

    backend: str

    def export(self, text: str) -> str:
        """Return the rendered representation of ``text``."""
        ...


class PandocExporter:
    """Exporter that pipes the document through ``pandoc``.

    Attributes:
        backend (str): Backend identifier (see `BACKEND_WRITERS`).
        text_width (int): Passed as ``--columns``.
        executable (str): Pandoc executable name or path.
        input_format (str): Pandoc reader for the source document.
    """

    def __init__(
        self,
        *,
        backend: str,
        text_width: int,
        executable: str = "pandoc",
        input_format: str = "org",
    ) -> None:
        self.backend = backend
        self.writer: str = writer_for_backend(backend)
        self.text_width = text_width
        self.executable = executable
        self.input_format = input_format

    @classmethod
    def from_config(cls, config: Config) -> PandocExporter:
        """Create an exporter for the process-wide configuration."""
        return cls(
            backend=config.backend,
            text_width=config.text_width,
            executable=config.pandoc,
            input_format=config.input_format,
        )

    def command(self) -> list[str]:
        """Return the pandoc argument vector (input is read from stdin)."""
        return [
            self.executable,
            "--from",
            self.input_format,
            "--to",
            self.writer,
            f"--columns={self.text_width}",
        ]

    def export(self, text: str) -> str:
        """Render ``text`` with pandoc.

        Raises:
            ExportError: If pandoc is missing or exits with a non-zero status.
        """
        cmd: list[str] = self.command()
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                input=text,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExportError(f"Export engine not found: {self.executable}") from exc

        if proc.returncode != 0:
            stderr: str = proc.stderr.strip()
            raise ExportError(
                f"{self.executable} exited with status {proc.returncode}: {stderr}",
                returncode=proc.returncode,
                stderr=stderr,
            )
        logger.trace("Rendered %d characters with backend %s", len(proc.stdout), self.backend)
        return proc.stdout
