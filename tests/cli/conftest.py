# topmark:header:start
#
#   project      : OrgCommentary
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running OrgCommentary in a controlled working directory.

`run_cli_in()` changes the process working directory to the given
``tmp_path`` before invoking the Click CLI, so relative TARGET and
``--companion`` arguments resolve against the temporary test directory, the
way users run the tool from a project directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from orgcommentary.cli.main import cli
from orgcommentary.config.logging import TRACE_LEVEL, setup_logging
from orgcommentary.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def _invoke(argv: str | Sequence[str] | None, input_text: str | bytes | IO[Any] | None) -> Result:
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv, input=input_text)
    finally:
        # The CLI bound its log handler to the runner's (now discarded) stderr
        setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["convert", "foo.el", "--companion", "README.org"]``.
        input_text (str | bytes | IO[Any] | None): Standard input, used for
            prompts and for ``in-place`` companion content.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return _invoke(argv, input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use it for commands that touch no files (``version``, ``--help``).
    """
    return _invoke(argv, input_text)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert a zero exit code, showing the output on failure."""
    assert result.exit_code == ExitCode.SUCCESS, result.output
