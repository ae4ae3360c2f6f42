# topmark:header:start
#
#   project      : OrgCommentary
#   file         : test_cache.py
#   file_relpath : tests/unit/test_cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Companion-path cache stored in the target's Local Variables block."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgcommentary.cache import get_cached, set_cached
from orgcommentary.constants import DEFAULT_CACHE_KEY
from orgcommentary.localvars import get_local_variable
from tests.conftest import make_target, write_exact

if TYPE_CHECKING:
    from pathlib import Path


def test_set_then_get_resolves_relative_to_target_dir(tmp_path: Path) -> None:
    docs: Path = tmp_path / "docs"
    docs.mkdir()
    companion: Path = write_exact(docs / "README.org", "* Doc\n")

    text: str = set_cached(make_target(), tmp_path, companion, DEFAULT_CACHE_KEY, prefix=";; ")

    assert get_local_variable(text, DEFAULT_CACHE_KEY) == "docs/README.org"
    assert get_cached(text, tmp_path, DEFAULT_CACHE_KEY) == companion.resolve()


def test_companion_outside_target_dir_is_stored_with_parent_segments(tmp_path: Path) -> None:
    src: Path = tmp_path / "src"
    src.mkdir()
    companion: Path = write_exact(tmp_path / "README.org", "* Doc\n")

    text: str = set_cached(make_target(), src, companion, DEFAULT_CACHE_KEY, prefix=";; ")

    assert get_local_variable(text, DEFAULT_CACHE_KEY) == "../README.org"
    assert get_cached(text, src, DEFAULT_CACHE_KEY) == companion.resolve()


def test_stale_entry_reads_as_absent_and_is_kept(tmp_path: Path) -> None:
    companion: Path = write_exact(tmp_path / "README.org", "* Doc\n")
    text: str = set_cached(make_target(), tmp_path, companion, DEFAULT_CACHE_KEY, prefix=";; ")
    companion.unlink()

    assert get_cached(text, tmp_path, DEFAULT_CACHE_KEY) is None
    assert get_local_variable(text, DEFAULT_CACHE_KEY) == "README.org"


def test_missing_entry_reads_as_absent(tmp_path: Path) -> None:
    assert get_cached(make_target(), tmp_path, DEFAULT_CACHE_KEY) is None


def test_custom_key_is_independent(tmp_path: Path) -> None:
    companion: Path = write_exact(tmp_path / "README.org", "* Doc\n")
    text: str = set_cached(make_target(), tmp_path, companion, "my-doc", prefix=";; ")

    assert get_cached(text, tmp_path, DEFAULT_CACHE_KEY) is None
    assert get_cached(text, tmp_path, "my-doc") == companion.resolve()
