# topmark:header:start
#
#   project      : OrgCommentary
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layering, validation and TOML round trips."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from orgcommentary.config import Config, MutableConfig
from orgcommentary.config.io import extract_section, load_toml_dict, to_toml
from orgcommentary.constants import DEFAULT_BACKEND, DEFAULT_CACHE_KEY, DEFAULT_TEXT_WIDTH
from tests.conftest import mark_config, parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


@mark_config
def test_defaults_freeze_to_default_config() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    assert config.backend == DEFAULT_BACKEND == "ascii"
    assert config.text_width == DEFAULT_TEXT_WIDTH
    assert config.cache_key == DEFAULT_CACHE_KEY
    assert config.config_files == ()
    assert config.diagnostics == ()


@mark_config
def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == Config()


@mark_config
def test_standalone_file_is_taken_whole(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "orgcommentary.toml", 'backend = "markdown"\ntext_width = 60\n')

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    config: Config = draft.freeze()
    assert config.backend == "markdown"
    assert config.text_width == 60
    assert config.config_files == (path,)


@mark_config
def test_pyproject_without_tool_table_is_skipped(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    assert MutableConfig.from_toml_file(path) is None
    assert extract_section(path, load_toml_dict(path)) is None


@mark_config
def test_pyproject_tool_table_is_used(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", '[tool.orgcommentary]\nbackend = "gfm"\n')

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None and draft.backend == "gfm"


@mark_config
def test_wrong_types_and_unknown_keys_become_diagnostics(tmp_path: Path) -> None:
    path: Path = _write(
        tmp_path / "orgcommentary.toml",
        'text_width = "wide"\nbackend = true\nflavour = "x"\n',
    )

    draft = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.text_width is None
    assert draft.backend is None
    assert len(draft.diagnostics) == 3
    assert any("flavour" in d for d in draft.diagnostics)
    assert draft.freeze().text_width == DEFAULT_TEXT_WIDTH


@mark_config
def test_boolean_is_not_accepted_as_width(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "orgcommentary.toml", "text_width = true\n")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None and draft.text_width is None


@mark_config
def test_unparsable_file_yields_empty_table(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "orgcommentary.toml", "backend = \n")
    assert load_toml_dict(path) == {}


@mark_config
def test_discovery_orders_root_most_first_and_stops_at_root(tmp_path: Path) -> None:
    outer: Path = _write(tmp_path / "orgcommentary.toml", 'backend = "org"\n')
    project: Path = tmp_path / "project"
    (project / "lisp").mkdir(parents=True)
    pyproject: Path = _write(
        project / "pyproject.toml", '[tool.orgcommentary]\nroot = true\nbackend = "md"\n'
    )
    local: Path = _write(project / "orgcommentary.toml", "text_width = 50\n")
    target: Path = project / "lisp" / "foo.el"

    found: list[Path] = MutableConfig.discover_local_config_files(target)

    assert found == [pyproject, local]
    assert outer not in found


@mark_config
def test_load_merged_layers_discovered_then_explicit(tmp_path: Path) -> None:
    _write(tmp_path / "orgcommentary.toml", 'root = true\nbackend = "md"\ntext_width = 50\n')
    explicit: Path = _write(tmp_path / "extra.toml", 'backend = "gfm"\n')

    config: Config = MutableConfig.load_merged(start=tmp_path, extra_files=[explicit]).freeze()

    assert config.backend == "gfm"
    assert config.text_width == 50
    assert config.config_files == (tmp_path / "orgcommentary.toml", explicit)


@mark_config
def test_load_merged_without_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "orgcommentary.toml", 'root = true\nbackend = "md"\n')

    config: Config = MutableConfig.load_merged(start=tmp_path, use_local=False).freeze()

    assert config.backend == DEFAULT_BACKEND


@mark_config
def test_explicit_pyproject_without_table_is_reported(tmp_path: Path) -> None:
    path: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    draft: MutableConfig = MutableConfig.load_merged(use_local=False, extra_files=[path])

    assert any("no [tool.orgcommentary] section" in d for d in draft.diagnostics)


@mark_config
def test_overrides_win_and_none_is_ignored() -> None:
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_overrides(backend="org", text_width=None, pandoc="/opt/pandoc")

    config: Config = draft.freeze()

    assert config.backend == "org"
    assert config.text_width == DEFAULT_TEXT_WIDTH
    assert config.pandoc == "/opt/pandoc"


@mark_config
@parametrize(
    "overrides",
    [
        {"backend": "latex"},
        {"text_width": 0},
        {"text_width": -5},
    ],
)
def test_invalid_values_are_rejected_at_freeze(overrides: dict[str, object]) -> None:
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)

    with pytest.raises(ValueError):
        draft.freeze()


@mark_config
def test_thaw_round_trips() -> None:
    config: Config = MutableConfig.from_defaults().apply_overrides(backend="md").freeze()
    assert config.thaw().freeze() == config


@mark_config
def test_to_toml_lists_every_setting() -> None:
    text: str = to_toml(Config().to_toml_dict())

    assert 'backend = "ascii"' in text
    assert "text_width = 72" in text
    assert 'cache_key = "org-commentary-file"' in text
