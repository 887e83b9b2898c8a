"""
Per-file evaluation: size and pattern gates, then content and filename search.

FileEvaluator decides whether one regular file matches, updates the shared
SearchStats and hands MatchRecords to the sink. Accounting rules:

    - total_size_bytes grows by the file's size as soon as the file is open,
      before any gate is applied
    - files_searched grows once per file that passes both gates
    - files_matched grows at most once per file
    - total_matches grows once per keyword found on a matching line, or
      once for a filename hit

With ``only_matching_files`` set, content scanning stops at the first
keyword of the first matching line and only the bare path is reported. A
content match always takes precedence over a filename match.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Optional

from ..utils.error_handling import ErrorCollector, handle_file_error
from ..utils.logging_config import get_logger
from .config import SearchConfig
from .matchers import LineScanner, basename, decode_line, matches_pattern
from .types import MatchRecord, MatchSink, RecordKind, SearchStats


class FileEvaluator:
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
        self.scanner = LineScanner(
            config.keywords,
            case_sensitive=config.case_sensitive,
            max_line_length=config.max_line_length,
        )

    def _emit(self, record: MatchRecord) -> None:
        if self.sink is not None and not self.cfg.count_only:
            self.sink(record)

    def _passes_size_gate(self, size: int) -> bool:
        cfg = self.cfg
        if cfg.min_size > 0 and size < cfg.min_size:
            return False
        if cfg.max_size >= 0 and size > cfg.max_size:
            return False
        return True

    def evaluate(self, path: str, stats: SearchStats) -> bool:
        """Evaluate one regular file. Returns True iff it matched."""
        try:
            handle = open(path, "rb")
        except OSError as e:
            handle_file_error(Path(path), "open file", e, self.error_collector, self.logger)
            return False

        with handle:
            try:
                size: Optional[int] = os.fstat(handle.fileno()).st_size
            except OSError as e:
                handle_file_error(Path(path), "stat file", e, self.error_collector, self.logger)
                size = None

            if size is not None:
                stats.total_size_bytes += size
                if not self._passes_size_gate(size):
                    return False

            if self.cfg.file_pattern and not matches_pattern(path, self.cfg.file_pattern):
                return False

            stats.files_searched += 1

            content_matched = False
            if self.cfg.search_content:
                content_matched = self._search_content(path, handle, stats)
                if content_matched and self.cfg.only_matching_files:
                    return True

        if not content_matched and self.cfg.search_filenames:
            if self.scanner.contains_name(basename(path)):
                stats.total_matches += 1
                stats.files_matched += 1
                self._emit(MatchRecord(path=path, kind=RecordKind.FILENAME))
                return True

        if content_matched:
            stats.files_matched += 1
        return content_matched

    def _search_content(self, path: str, handle: BinaryIO, stats: SearchStats) -> bool:
        matched = False
        first_hit_only = self.cfg.only_matching_files
        try:
            for line_number, line, hits in self.scanner.scan(handle, first_hit_only):
                matched = True

                if first_hit_only:
                    stats.total_matches += 1
                    stats.files_matched += 1
                    self._emit(MatchRecord(path=path, kind=RecordKind.FILE))
                    break

                # One match, and one record, per keyword found on the line
                stats.total_matches += hits
                record = MatchRecord(
                    path=path,
                    kind=RecordKind.LINE,
                    line_number=line_number if self.cfg.show_line_numbers else None,
                    text=decode_line(line),
                )
                for _ in range(hits):
                    self._emit(record)
        except OSError as e:
            # Read failure mid-file: keep what was matched so far
            handle_file_error(Path(path), "read file", e, self.error_collector, self.logger)
        return matched
