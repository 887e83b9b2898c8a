"""
Core functionality for the filewalker package.

This module contains the traversal and matching engine:
- Main API class (FileWalker)
- Configuration (SearchConfig)
- Match records and run statistics
- Pattern matcher, line scanner, file evaluator and directory walker
"""

from .api import FileWalker, search
from .config import MAX_LINE_LENGTH, MAX_PATH_LENGTH, SearchConfig
from .evaluator import FileEvaluator
from .matchers import LineScanner, matches_pattern
from .types import MatchRecord, MatchSink, OutputFormat, RecordKind, SearchResult, SearchStats
from .walker import DirectoryWalker

__all__ = [
    # Main classes
    "FileWalker",
    "search",
    "SearchConfig",
    "MAX_LINE_LENGTH",
    "MAX_PATH_LENGTH",
    # Engine
    "DirectoryWalker",
    "FileEvaluator",
    "LineScanner",
    "matches_pattern",
    # Data types
    "MatchRecord",
    "MatchSink",
    "OutputFormat",
    "RecordKind",
    "SearchResult",
    "SearchStats",
]
