"""
Core data types for filewalker.

MatchRecord is what the core hands to the reporting sink, one per reported
match. SearchStats is the mutable aggregate threaded through a walk, and
SearchResult bundles collected records with the stats for callers that want
everything at the end (JSON output, tests).
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


class RecordKind(str, Enum):
    """Shape of a MatchRecord."""

    LINE = "line"  # content match: path, optional line number, line text
    FILENAME = "filename"  # basename contained a keyword
    FILE = "file"  # bare path, only-matching-files mode


@dataclass(frozen=True, slots=True)
class MatchRecord:
    path: str
    kind: RecordKind
    line_number: Optional[int] = None
    text: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "kind": self.kind.value,
            "line_number": self.line_number,
            "text": self.text,
        }


MatchSink = Callable[[MatchRecord], None]


@dataclass(slots=True)
class SearchStats:
    files_searched: int = 0
    files_matched: int = 0
    total_matches: int = 0
    total_size_bytes: int = 0
    start_time: float = 0.0

    def start(self) -> None:
        """Capture the walk start time."""
        self.start_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        return time.time() - self.start_time if self.start_time else 0.0

    @property
    def average_file_size(self) -> float:
        """Mean size in bytes of the files searched (0.0 when none were)."""
        if self.files_searched == 0:
            return 0.0
        return self.total_size_bytes / self.files_searched

    @property
    def matches_per_file(self) -> Optional[float]:
        if self.files_searched == 0:
            return None
        return self.total_matches / self.files_searched

    def to_dict(self) -> dict[str, Any]:
        return {
            "files_searched": self.files_searched,
            "files_matched": self.files_matched,
            "total_matches": self.total_matches,
            "total_size_bytes": self.total_size_bytes,
            "elapsed_seconds": self.elapsed_seconds,
            "average_file_size": self.average_file_size,
            "matches_per_file": self.matches_per_file,
        }


@dataclass(slots=True)
class SearchResult:
    records: List[MatchRecord] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)
