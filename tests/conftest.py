# topmark:header:start
#
#   project      : OrgCommentary
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the OrgCommentary test suite.

Sets up typed mark helpers, global logging for test runs, and fixtures that
replace the external export engine so that no test needs ``pandoc``.

Notes:
    Build configs with `orgcommentary.config.MutableConfig` (mutable), then
    `freeze()` into a `orgcommentary.config.Config` for API calls. Do not
    mutate a frozen `Config`; call `Config.thaw()` and freeze again.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from orgcommentary.config import Config, MutableConfig, logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_api: DecoratorType[Any] = as_typed_mark(pytest.mark.api)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_orgcommentary_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during the test run so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Export engine doubles ---------------------------------------------------


@dataclass
class FakeExporter:
    """Exporter double: returns the document unchanged (or a canned rendering).

    Attributes:
        backend (str): Reported backend identifier.
        output (str | None): Fixed rendering; None echoes the input.
        calls (list[str]): Every document passed to `export`.
    """

    backend: str = "ascii"
    output: str | None = None
    calls: list[str] = field(default_factory=lambda: [])

    def export(self, text: str) -> str:
        self.calls.append(text)
        return text if self.output is None else self.output


@pytest.fixture
def exporter() -> FakeExporter:
    """An echoing `FakeExporter`."""
    return FakeExporter()


@pytest.fixture
def fake_pandoc(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    """Replace the pandoc subprocess with an echo; return the recorded commands."""
    commands: list[list[str]] = []

    def _run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        commands.append(list(cmd))
        return subprocess.CompletedProcess(cmd, 0, stdout=kwargs.get("input", ""), stderr="")

    monkeypatch.setattr("orgcommentary.export.pandoc.subprocess.run", _run)
    return commands


# --- Prompter double -----------------------------------------------------------


@dataclass
class FakePrompter:
    """Scripted answers for the interactive questions.

    Attributes:
        companion (Path | None): Answer to `ask_companion` (None cancels).
        save (bool): Answer to `confirm_save_cache`.
        asked (list[str]): Names of the questions asked, in order.
    """

    companion: Path | None = None
    save: bool = False
    asked: list[str] = field(default_factory=lambda: [])

    def ask_companion(self, target: Path | None) -> Path | None:
        self.asked.append("companion")
        return self.companion

    def confirm_save_cache(self, target: Path | None, companion: Path) -> bool:
        self.asked.append("save")
        return self.save


# --- Builders ------------------------------------------------------------------------


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and keyword overrides."""
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


TARGET_TEMPLATE: str = (
    ";;; foo.el --- Frobnicate things  -*- lexical-binding: t -*-\n"
    "\n"
    ";;; Commentary:\n"
    "{commentary}"
    ";;; Code:\n"
    "\n"
    "(defun foo () t)\n"
    "\n"
    "(provide 'foo)\n"
    ";;; foo.el ends here\n"
)


def make_target(commentary: str = "\n;; Old text.\n\n", footer: str = "") -> str:
    """Return the text of a small Emacs Lisp file with the given Commentary body."""
    return TARGET_TEMPLATE.format(commentary=commentary) + footer


def write_exact(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` without newline translation and return ``path``."""
    path.write_bytes(text.encode("utf-8"))
    return path


def read_exact(path: Path) -> str:
    """Read ``path`` without newline translation."""
    return path.read_bytes().decode("utf-8")
