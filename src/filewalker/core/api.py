"""
Main API for filewalker.

FileWalker wires a SearchConfig to a DirectoryWalker and FileEvaluator, owns
the SearchStats for one walk and logs the walk's start and completion.

Example:
    Streaming matches to a callback:
        >>> from filewalker import FileWalker, SearchConfig
        >>> from filewalker.utils.formatter import format_record
        >>>
        >>> config = SearchConfig(keywords=("TODO",), start_dir="src", file_pattern="*.py")
        >>> stats = FileWalker(config, sink=lambda r: print(format_record(r))).run()
        >>> print(stats.files_searched, stats.total_matches)

    Collecting everything:
        >>> result = FileWalker(config).collect()
        >>> for record in result.records:
        ...     print(record.path, record.line_number)
"""

from __future__ import annotations

from typing import List, Optional

from ..utils.error_handling import ErrorCollector
from ..utils.logging_config import get_logger
from .config import SearchConfig
from .evaluator import FileEvaluator
from .types import MatchRecord, MatchSink, SearchResult, SearchStats
from .walker import DirectoryWalker


class FileWalker:
    def __init__(
        self,
        config: SearchConfig,
        sink: Optional[MatchSink] = None,
        error_collector: Optional[ErrorCollector] = None,
    ) -> None:
        self.cfg = config
        self.sink = sink
        self.error_collector = error_collector
        self.logger = get_logger()

    def _walk(self, sink: Optional[MatchSink]) -> SearchStats:
        # Refuse to touch the filesystem with an unusable configuration
        self.cfg.validate()

        evaluator = FileEvaluator(self.cfg, sink=sink, error_collector=self.error_collector)
        walker = DirectoryWalker(self.cfg, evaluator, error_collector=self.error_collector)

        stats = SearchStats()
        self.logger.log_search_start(list(self.cfg.keywords), self.cfg.start_dir)
        stats.start()
        walker.walk(self.cfg.start_dir, 0, stats)
        self.logger.log_search_complete(
            stats.files_searched,
            stats.files_matched,
            stats.total_matches,
            stats.elapsed_seconds,
        )
        return stats

    def run(self) -> SearchStats:
        """Walk from the configured start directory, streaming records to the sink."""
        return self._walk(self.sink)

    def collect(self) -> SearchResult:
        """Walk and return every emitted record together with the stats."""
        records: List[MatchRecord] = []

        def sink(record: MatchRecord) -> None:
            records.append(record)
            if self.sink is not None:
                self.sink(record)

        stats = self._walk(sink)
        return SearchResult(records=records, stats=stats)


def search(config: SearchConfig, sink: Optional[MatchSink] = None) -> SearchStats:
    """Convenience wrapper: run one walk and return its stats."""
    return FileWalker(config, sink=sink).run()
