# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for OrgCommentary.

`MutableConfig` is the builder: it is populated from the runtime defaults,
merged with discovered and explicit TOML files, adjusted with CLI overrides
and finally frozen into an immutable `Config`, which is the single
process-wide setting passed to the pipeline and the exporter.

Layering (later wins):
    1. runtime defaults (`orgcommentary.config.io.load_defaults_dict`)
    2. discovered files, root-most first (`pyproject.toml` before
       `orgcommentary.toml` in the same directory)
    3. explicit ``--config`` files, in order
    4. CLI overrides (`MutableConfig.apply_overrides`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from orgcommentary.config.io import extract_section, load_defaults_dict, load_toml_dict
from orgcommentary.config.keys import Toml
from orgcommentary.config.logging import get_logger
from orgcommentary.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BACKEND,
    DEFAULT_CACHE_KEY,
    DEFAULT_INPUT_FORMAT,
    DEFAULT_PANDOC,
    DEFAULT_TEXT_WIDTH,
    PYPROJECT_FILE_NAME,
)
from orgcommentary.export.backends import writer_for_backend

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orgcommentary.config.io import TomlTable
    from orgcommentary.config.logging import CommentaryLogger

logger: CommentaryLogger = get_logger(__name__)

__all__: list[str] = ["Config", "MutableConfig"]


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        backend (str): Export backend identifier (``ascii``, ``markdown``, ...).
        text_width (int): Column width the export engine wraps at.
        pandoc (str): Name or path of the pandoc executable.
        input_format (str): Pandoc reader for companion documents.
        cache_key (str): Local-variable name holding the cached companion path.
        config_files (tuple[Path, ...]): Files that contributed to this config.
        diagnostics (tuple[str, ...]): Problems found while loading the files.
    """

    backend: str = DEFAULT_BACKEND
    text_width: int = DEFAULT_TEXT_WIDTH
    pandoc: str = DEFAULT_PANDOC
    input_format: str = DEFAULT_INPUT_FORMAT
    cache_key: str = DEFAULT_CACHE_KEY
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-compatible dict (no provenance)."""
        return {
            Toml.KEY_BACKEND: self.backend,
            Toml.KEY_TEXT_WIDTH: self.text_width,
            Toml.KEY_PANDOC: self.pandoc,
            Toml.KEY_INPUT_FORMAT: self.input_format,
            Toml.KEY_CACHE_KEY: self.cache_key,
        }

    def thaw(self) -> MutableConfig:
        """Return a `MutableConfig` copy of this config."""
        return MutableConfig(
            backend=self.backend,
            text_width=self.text_width,
            pandoc=self.pandoc,
            input_format=self.input_format,
            cache_key=self.cache_key,
            root=False,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


@dataclass
class MutableConfig:
    """Mutable builder for `Config`; ``None`` fields are unset and do not override."""

    backend: str | None = None
    text_width: int | None = None
    pandoc: str | None = None
    input_format: str | None = None
    cache_key: str | None = None
    root: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate and freeze into an immutable `Config`.

        Raises:
            ValueError: If the backend is unknown or the text width is not positive.
        """
        backend: str = self.backend or DEFAULT_BACKEND
        writer_for_backend(backend)
        text_width: int = DEFAULT_TEXT_WIDTH if self.text_width is None else self.text_width
        if text_width <= 0:
            raise ValueError(f"text_width must be a positive integer, got {text_width}")
        return Config(
            backend=backend,
            text_width=text_width,
            pandoc=self.pandoc or DEFAULT_PANDOC,
            input_format=self.input_format or DEFAULT_INPUT_FORMAT,
            cache_key=self.cache_key or DEFAULT_CACHE_KEY,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a `MutableConfig` from a parsed TOML table.

        Values of the wrong type and unknown keys are reported as diagnostics and
        otherwise ignored.

        Args:
            data (TomlTable): The OrgCommentary table (already extracted from
                ``pyproject.toml`` when applicable).
            config_file (Path | None): Source file, used in diagnostics.

        Returns:
            MutableConfig: The populated builder.
        """
        draft = cls()
        origin: str = str(config_file) if config_file else "<defaults>"

        def _get(key: str, kind: type) -> Any:
            value: Any = data.get(key)
            if value is None:
                return None
            # bool is an int subclass; never accept it where a number is expected
            if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
                draft.diagnostics.append(
                    f"{origin}: '{key}' must be of type {kind.__name__}, "
                    f"got {type(value).__name__}; ignored"
                )
                return None
            return value

        draft.backend = _get(Toml.KEY_BACKEND, str)
        draft.text_width = _get(Toml.KEY_TEXT_WIDTH, int)
        draft.pandoc = _get(Toml.KEY_PANDOC, str)
        draft.input_format = _get(Toml.KEY_INPUT_FORMAT, str)
        draft.cache_key = _get(Toml.KEY_CACHE_KEY, str)
        draft.root = bool(_get(Toml.KEY_ROOT, bool))

        for key in sorted(set(data) - Toml.ALL):
            draft.diagnostics.append(f"{origin}: unknown key '{key}' ignored")

        for message in draft.diagnostics:
            logger.warning(message)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Returns:
            MutableConfig | None: The builder; None for a ``pyproject.toml`` without
                a ``[tool.orgcommentary]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        section: TomlTable | None = extract_section(path, load_toml_dict(path))
        if section is None:
            logger.debug("No [tool.orgcommentary] section in %s", path)
            return None
        draft: MutableConfig = cls.from_toml_dict(section, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first. Within a directory ``pyproject.toml``
        precedes ``orgcommentary.toml`` so the latter wins on merge. A file
        setting ``root = true`` stops the walk after its directory.

        Args:
            start (Path): A file or directory to start from.

        Returns:
            list[Path]: Discovered files, root-most to nearest.
        """
        anchor: Path = start.resolve()
        if not anchor.is_dir():
            anchor = anchor.parent

        per_dir: list[list[Path]] = []
        for directory in (anchor, *anchor.parents):
            found: list[Path] = []
            stop: bool = False
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                candidate: Path = directory / name
                if not candidate.is_file():
                    continue
                section: TomlTable | None = extract_section(candidate, load_toml_dict(candidate))
                if section is None:
                    continue
                found.append(candidate)
                stop = stop or section.get(Toml.KEY_ROOT) is True
            if found:
                per_dir.append(found)
            if stop:
                logger.debug("Config discovery stopped at root config in %s", directory)
                break

        ordered: list[Path] = [path for group in reversed(per_dir) for path in group]
        logger.debug("Discovered config files: %s", ordered)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        use_local: bool = True,
    ) -> MutableConfig:
        """Load defaults, discovered files and explicit files into one builder.

        Args:
            start (Path | None): Where discovery begins (default: the CWD).
            extra_files (Iterable[Path]): Explicit config files, applied last.
            use_local (bool): When False, skip discovery entirely.

        Returns:
            MutableConfig: The merged builder (not yet frozen).
        """
        merged: MutableConfig = cls.from_defaults()
        paths: list[Path] = []
        if use_local:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(extra_files)

        for path in paths:
            draft: MutableConfig | None = cls.from_toml_file(path)
            if draft is None:
                merged.diagnostics.append(f"{path}: no [tool.orgcommentary] section; ignored")
                continue
            merged = merged.merge_with(draft)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where set fields of ``other`` override ``self``."""
        return MutableConfig(
            backend=other.backend if other.backend is not None else self.backend,
            text_width=other.text_width if other.text_width is not None else self.text_width,
            pandoc=other.pandoc if other.pandoc is not None else self.pandoc,
            input_format=(
                other.input_format if other.input_format is not None else self.input_format
            ),
            cache_key=other.cache_key if other.cache_key is not None else self.cache_key,
            root=other.root,
            config_files=[*self.config_files, *other.config_files],
            diagnostics=[*self.diagnostics, *other.diagnostics],
        )

    def apply_overrides(
        self,
        *,
        backend: str | None = None,
        text_width: int | None = None,
        pandoc: str | None = None,
    ) -> MutableConfig:
        """Apply CLI overrides in place; ``None`` leaves a value untouched."""
        if backend is not None:
            self.backend = backend
        if text_width is not None:
            self.text_width = text_width
        if pandoc is not None:
            self.pandoc = pandoc
        return self
