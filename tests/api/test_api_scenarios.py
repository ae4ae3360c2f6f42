# topmark:header:start
#
#   project      : OrgCommentary
#   file         : test_api_scenarios.py
#   file_relpath : tests/api/test_api_scenarios.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end scenarios through the public API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from orgcommentary import api
from orgcommentary.buffers import Buffer, BufferRegistry
from orgcommentary.core.errors import (
    ExportError,
    MalformedTargetError,
    MissingCompanionError,
    TargetNotFoundError,
)
from orgcommentary.pipeline.status import CompanionStatus, UpdateStatus, WriteStatus
from tests.conftest import (
    FakeExporter,
    FakePrompter,
    make_config,
    make_target,
    mark_api,
    read_exact,
    write_exact,
)
from tests.pipeline.conftest import lock_foreign

if TYPE_CHECKING:
    from pathlib import Path

    from orgcommentary.config import Config


class FailingExporter:
    backend: str = "ascii"

    def export(self, text: str) -> str:
        raise ExportError("pandoc exited with status 64: boom", returncode=64, stderr="boom")


@pytest.fixture
def config() -> Config:
    return make_config()


@mark_api
def test_hello_world_file_scenario(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", ";;; Commentary:\n\n;;; Code:\n(code)")
    companion: Path = write_exact(tmp_path / "README.org", "* Hello World\n")

    ctx = api.convert_by_path(
        target, companion, config=config, exporter=FakeExporter(output="Hello\nWorld")
    )

    assert read_exact(target) == ";;; Commentary:\n\n;; Hello\n;; World\n\n;;; Code:\n(code)"
    assert ctx.status.write == WriteStatus.WRITTEN


@mark_api
def test_exporter_receives_raw_companion_text(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    companion: Path = write_exact(tmp_path / "README.org", "#+TITLE: x\r\n* Head\r\n")
    exporter = FakeExporter(output="x")

    api.convert_by_path(str(target), str(companion), config=config, exporter=exporter)

    assert exporter.calls == ["#+TITLE: x\r\n* Head\r\n"]


@mark_api
def test_in_place_moves_point_and_highlights(config: Config) -> None:
    buffer = Buffer(path=None, text=make_target(), point=3)
    ranges: list[tuple[int, int]] = []

    ctx = api.convert_in_place(
        buffer,
        "Hello\nWorld\n",
        config=config,
        exporter=FakeExporter(),
        highlight=lambda start, end: ranges.append((start, end)),
    )

    assert buffer.text == make_target("\n;; Hello\n;; World\n\n")
    assert buffer.modified
    assert ctx.status.companion == CompanionStatus.ACTIVE
    assert ctx.status.write == WriteStatus.BUFFER_UPDATED
    assert ranges == [ctx.inserted_range]
    start, end = ranges[0]
    assert buffer.point == start
    assert buffer.text[start:end] == "\n;; Hello\n;; World\n\n"


@mark_api
def test_in_place_does_not_touch_the_file(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    buffer: Buffer = Buffer.visit(target)

    api.convert_in_place(buffer, "New\n", config=config, exporter=FakeExporter())

    assert read_exact(target) == make_target()
    assert ";; New\n" in buffer.text


@mark_api
def test_in_place_without_highlighter(config: Config) -> None:
    buffer = Buffer(path=None, text=make_target())
    api.convert_in_place(buffer, "Hi\n", config=config, exporter=FakeExporter())
    assert ";; Hi\n" in buffer.text


@mark_api
def test_in_place_malformed_buffer_raises_and_is_untouched(config: Config) -> None:
    buffer = Buffer(path=None, text=";;; Code:\n;;; Commentary:\n")
    exporter = FakeExporter()

    with pytest.raises(MalformedTargetError):
        api.convert_in_place(buffer, "Hi\n", config=config, exporter=exporter)

    assert buffer.text == ";;; Code:\n;;; Commentary:\n"
    assert not buffer.modified
    assert exporter.calls == []


@mark_api
def test_malformed_file_raises(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", ";;; Commentary:\n(no code marker)\n")
    companion: Path = write_exact(tmp_path / "README.org", "x\n")

    with pytest.raises(MalformedTargetError):
        api.convert_by_path(target, companion, config=config, exporter=FakeExporter())


@mark_api
def test_missing_target_raises(tmp_path: Path, config: Config) -> None:
    with pytest.raises(TargetNotFoundError):
        api.convert_by_path(tmp_path / "nope.el", config=config, exporter=FakeExporter())


@mark_api
def test_open_buffer_counts_as_existing_target(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    companion: Path = write_exact(tmp_path / "README.org", "Hi\n")
    buffers = BufferRegistry()
    buffer: Buffer = buffers.open(target)
    target.unlink()

    ctx = api.convert_by_path(
        target, companion, config=config, exporter=FakeExporter(), buffers=buffers
    )

    assert ctx.status.write == WriteStatus.BUFFER_UPDATED
    assert ";; Hi\n" in buffer.text
    assert not target.exists()


@mark_api
def test_cancelled_prompt_raises_missing_companion(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())

    with pytest.raises(MissingCompanionError):
        api.convert_by_path(
            target, config=config, exporter=FakeExporter(), prompter=FakePrompter()
        )

    assert read_exact(target) == make_target()


@mark_api
def test_no_prompter_and_no_cache_raises_missing_companion(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())

    with pytest.raises(MissingCompanionError):
        api.convert_by_path(target, config=config, exporter=FakeExporter())


@mark_api
def test_export_failure_propagates_without_mutation(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    companion: Path = write_exact(tmp_path / "README.org", "x\n")

    with pytest.raises(ExportError):
        api.convert_by_path(target, companion, config=config, exporter=FailingExporter())

    assert read_exact(target) == make_target()


@mark_api
def test_locked_target_is_reported_not_raised(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    companion: Path = write_exact(tmp_path / "README.org", "x\n")
    lock_foreign(target)
    before: bytes = target.read_bytes()

    ctx = api.convert_by_path(target, companion, config=config, exporter=FakeExporter())

    assert ctx.status.write == WriteStatus.LOCKED
    assert target.read_bytes() == before
    assert "locked" in ctx.summary()


@mark_api
def test_conversion_is_idempotent(tmp_path: Path, config: Config) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    companion: Path = write_exact(tmp_path / "README.org", "Para one.\n\nPara two.\n")

    api.convert_by_path(target, companion, config=config, exporter=FakeExporter())
    first: str = read_exact(target)
    ctx = api.convert_by_path(target, companion, config=config, exporter=FakeExporter())

    assert read_exact(target) == first
    assert ctx.status.update == UpdateStatus.UNCHANGED
    assert first == make_target("\n;; Para one.\n;;\n;; Para two.\n\n")


@mark_api
def test_default_exporter_uses_pandoc(
    tmp_path: Path, config: Config, fake_pandoc: list[list[str]]
) -> None:
    target: Path = write_exact(tmp_path / "foo.el", make_target())
    companion: Path = write_exact(tmp_path / "README.org", "Text\n")

    api.convert_by_path(target, companion, config=config)

    assert fake_pandoc[0][:5] == ["pandoc", "--from", "org", "--to", "plain"]
    assert ";; Text\n" in read_exact(target)
