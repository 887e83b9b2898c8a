from __future__ import annotations

import dataclasses

import pytest

from filewalker import ConfigurationError, SearchConfig
from filewalker.core.config import MAX_LINE_LENGTH, MAX_PATH_LENGTH


def test_defaults_follow_command_line_tool() -> None:
    cfg = SearchConfig(keywords=("x",))

    assert cfg.case_sensitive is True
    assert cfg.recursive is True
    assert cfg.search_filenames is True
    assert cfg.search_content is True
    assert cfg.show_line_numbers is True
    assert cfg.only_matching_files is False
    assert cfg.count_only is False
    assert cfg.max_depth == -1 and cfg.depth_unlimited
    assert (cfg.min_size, cfg.max_size) == (0, -1)
    assert cfg.file_pattern == ""
    assert cfg.start_dir == "."
    assert cfg.max_line_length == MAX_LINE_LENGTH
    assert cfg.max_path_length == MAX_PATH_LENGTH


def test_keywords_are_an_ordered_set() -> None:
    cfg = SearchConfig(keywords=["b", "a", "b", "c", "a"])
    assert cfg.keywords == ("b", "a", "c")


def test_config_is_immutable() -> None:
    cfg = SearchConfig(keywords=("x",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_depth = 3  # type: ignore[misc]


def test_validate_accepts_keywords() -> None:
    SearchConfig(keywords=("x",)).validate()


@pytest.mark.parametrize(
    "options",
    [
        {"keywords": ()},
        {"keywords": ("",)},
        {"keywords": ("x",), "max_line_length": 0},
        {"keywords": ("x",), "max_path_length": -1},
    ],
)
def test_validate_rejects(options: dict) -> None:
    with pytest.raises(ConfigurationError):
        SearchConfig(**options).validate()
