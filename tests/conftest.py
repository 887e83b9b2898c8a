"""
Shared test fixtures and utilities for filewalker tests.

This module provides common directory trees, a recording sink and helpers
to reduce duplication across the test suite.
"""

from pathlib import Path

import pytest

from filewalker import MatchRecord, SearchConfig, SearchStats
from filewalker.core.evaluator import FileEvaluator
from filewalker.utils.logging_config import configure_logging

SAMPLE_LOG = """\
service started
error: disk full
retrying
warning: slow response
ERROR: giving up
"""


class RecordingSink:
    """Collects MatchRecords handed out by the engine."""

    def __init__(self) -> None:
        self.records: list[MatchRecord] = []

    def __call__(self, record: MatchRecord) -> None:
        self.records.append(record)

    @property
    def paths(self) -> set[str]:
        return {r.path for r in self.records}


@pytest.fixture(autouse=True)
def quiet_logging():
    """Reset the global logger so tests never depend on earlier configuration."""
    configure_logging()
    yield


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def hello_tree(tmp_path: Path) -> Path:
    """
    d/a.txt      "hello world"
    d/b.txt      "HELLO"
    d/sub/c.txt  "hello"
    """
    root = tmp_path / "d"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("hello world\n", encoding="utf-8")
    (root / "b.txt").write_text("HELLO\n", encoding="utf-8")
    (root / "sub" / "c.txt").write_text("hello\n", encoding="utf-8")
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """One matching file at each of depths 0, 1 and 2."""
    root = tmp_path / "deep"
    (root / "l1" / "l2").mkdir(parents=True)
    (root / "top.txt").write_text("needle\n", encoding="utf-8")
    (root / "l1" / "mid.txt").write_text("needle\n", encoding="utf-8")
    (root / "l1" / "l2" / "bottom.txt").write_text("needle\n", encoding="utf-8")
    return root


@pytest.fixture
def run_evaluator():
    """Run a FileEvaluator over one file with a fresh SearchStats."""

    def _run(path: Path, sink=None, **options) -> tuple[bool, SearchStats]:
        cfg = SearchConfig(**options)
        stats = SearchStats()
        matched = FileEvaluator(cfg, sink=sink).evaluate(str(path), stats)
        return matched, stats

    return _run


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
