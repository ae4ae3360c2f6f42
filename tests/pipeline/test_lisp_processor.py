# topmark:header:start
#
#   project      : OrgCommentary
#   file         : test_lisp_processor.py
#   file_relpath : tests/pipeline/test_lisp_processor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lisp commentary processor: marker detection, region location and formatting."""

from __future__ import annotations

import pytest

from orgcommentary.pipeline.processors import get_processor, get_processor_registry, register_filetype
from orgcommentary.pipeline.processors.base import CommentaryProcessor, RegionBounds
from orgcommentary.pipeline.processors.lisp import LispCommentaryProcessor
from tests.conftest import make_target, mark_pipeline, parametrize


@pytest.fixture
def processor() -> CommentaryProcessor:
    proc: CommentaryProcessor | None = get_processor("emacs-lisp")
    assert proc is not None
    return proc


@mark_pipeline
def test_all_lisp_file_types_share_the_processor_class() -> None:
    registry = get_processor_registry()
    for name in ("emacs-lisp", "common-lisp", "scheme", "clojure"):
        assert isinstance(registry[name], LispCommentaryProcessor)
        assert registry[name].file_type is not None
        assert registry[name].file_type.name == name


@mark_pipeline
def test_register_filetype_rejects_duplicates_and_unknown_types() -> None:
    with pytest.raises(ValueError, match="already has a processor"):
        register_filetype("emacs-lisp")(LispCommentaryProcessor)
    with pytest.raises(ValueError, match="Unknown file type"):
        register_filetype("no-such-type")


@mark_pipeline
@parametrize(
    "line",
    [
        ";;; Commentary:\n",
        ";;;Commentary:",
        "  ;;;   Commentary:   \n",
        ";;; Commentary:\r\n",
    ],
)
def test_commentary_marker_accepts_whitespace_variants(
    processor: CommentaryProcessor, line: str
) -> None:
    assert processor.is_commentary_marker(line)


@mark_pipeline
@parametrize(
    "line",
    [
        ";; Commentary:",
        ";;; Commentary: see below",
        ";;; commentary:",
        ";;;; Commentary:",
        "(message \";;; Commentary:\")",
    ],
)
def test_commentary_marker_rejects_other_lines(processor: CommentaryProcessor, line: str) -> None:
    assert not processor.is_commentary_marker(line)


@mark_pipeline
def test_locate_region_spans_from_after_commentary_to_code_line(
    processor: CommentaryProcessor,
) -> None:
    text: str = make_target("\n;; Old text.\n\n")
    bounds: RegionBounds | None = processor.locate_region(text)

    assert bounds is not None
    assert text[: bounds.start].endswith(";;; Commentary:\n")
    assert text[bounds.start : bounds.end] == "\n;; Old text.\n\n"
    assert text[bounds.end :].startswith(";;; Code:\n")


@mark_pipeline
def test_locate_region_with_adjacent_markers_is_empty(processor: CommentaryProcessor) -> None:
    text: str = ";;; Commentary:\n;;; Code:\n"
    assert processor.locate_region(text) == RegionBounds(16, 16)


@mark_pipeline
@parametrize(
    "text",
    [
        "",
        "(defun foo () t)\n",
        ";;; Commentary:\n;; no code marker\n",
        ";;; Code:\n(foo)\n",
        ";;; Code:\n(foo)\n;;; Commentary:\n;; late\n",
    ],
)
def test_locate_region_missing_or_misordered_markers(
    processor: CommentaryProcessor, text: str
) -> None:
    assert processor.locate_region(text) is None


@mark_pipeline
def test_locate_region_uses_first_code_marker_after_commentary(
    processor: CommentaryProcessor,
) -> None:
    text: str = ";;; Code:\n;;; Commentary:\nA\n;;; Code:\nB\n;;; Code:\n"
    bounds = processor.locate_region(text)
    assert bounds is not None
    assert text[bounds.start : bounds.end] == "A\n"


@mark_pipeline
def test_locate_region_does_not_break_lines_at_form_feeds(
    processor: CommentaryProcessor,
) -> None:
    text: str = ";;; Commentary:\n\n(foo)\x0c;;; Code:\n;;; Code:\n(code)"
    bounds: RegionBounds | None = processor.locate_region(text)

    assert bounds == RegionBounds(16, 33)
    assert text[bounds.end :].startswith(";;; Code:\n(code)")


@mark_pipeline
def test_format_block_prefixes_lines_and_keeps_blank_lines_bare(
    processor: CommentaryProcessor,
) -> None:
    assert processor.format_block("Hello\n\n  indented\n") == ";; Hello\n;;\n;;   indented\n"


@mark_pipeline
def test_format_block_of_empty_text_is_empty(processor: CommentaryProcessor) -> None:
    assert processor.format_block("") == ""


@mark_pipeline
def test_format_block_terminates_last_line(processor: CommentaryProcessor) -> None:
    assert processor.format_block("Hello\nWorld") == ";; Hello\n;; World\n"


@mark_pipeline
@parametrize(
    ("text", "expected"),
    [
        ("one\x0ctwo\n", ";; one\x0ctwo\n"),
        ("a b\x85c\n", ";; a b\x85c\n"),
        ("dos\r\nline\r\n", ";; dos\n;; line\n"),
    ],
)
def test_format_block_splits_on_newlines_only(
    processor: CommentaryProcessor, text: str, expected: str
) -> None:
    assert processor.format_block(text) == expected


@mark_pipeline
def test_format_block_is_not_idempotent(processor: CommentaryProcessor) -> None:
    once: str = processor.format_block("x")
    assert processor.format_block(once) == ";; ;; x\n"


@mark_pipeline
def test_region_bounds_reject_inverted_or_negative_offsets() -> None:
    with pytest.raises(ValueError):
        RegionBounds(5, 4)
    with pytest.raises(ValueError):
        RegionBounds(-1, 3)
