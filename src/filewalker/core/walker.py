"""
Depth-bounded directory traversal.

DirectoryWalker enumerates a tree depth-first and dispatches every regular
file to a FileEvaluator. Symbolic links, sockets, devices and FIFOs are
never followed or opened. An inaccessible directory, a failed stat or an
over-long path only skips that entry; a walk always runs to completion over
whatever part of the tree it can read.

Pending directories are kept on an explicit stack rather than the Python
call stack, so tree depth is bounded by the path-length limit alone. The
depth limit is checked before a directory is listed.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Optional

from ..utils.error_handling import ErrorCollector, PathTooLongError, handle_file_error
from ..utils.logging_config import get_logger
from .config import SearchConfig
from .evaluator import FileEvaluator
from .types import SearchStats


class DirectoryWalker:
    def __init__(
        self,
        config: SearchConfig,
        evaluator: FileEvaluator,
        error_collector: Optional[ErrorCollector] = None,
    ) -> None:
        self.cfg = config
        self.evaluator = evaluator
        self.error_collector = error_collector
        self.logger = get_logger()

    def walk(self, path: str, depth: int, stats: SearchStats) -> None:
        """Walk ``path``, which sits ``depth`` levels below the start directory."""
        stack: list[tuple[str, int]] = [(path, depth)]
        while stack:
            current, current_depth = stack.pop()
            subdirs = self._visit(current, current_depth, stats)
            # Reversed so subdirectories are entered in listing order
            stack.extend((sub, current_depth + 1) for sub in reversed(subdirs))

    def _visit(self, path: str, depth: int, stats: SearchStats) -> list[str]:
        """List one directory, evaluate its files and return its subdirectories."""
        if not self.cfg.depth_unlimited and depth > self.cfg.max_depth:
            return []

        subdirs: list[str] = []
        path_bytes = len(os.fsencode(path))
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    # scandir never yields "." or ".."
                    if path_bytes + len(os.fsencode(entry.name)) + 2 > self.cfg.max_path_length:
                        self._skip_long_path(path, entry.name)
                        continue

                    full_path = os.path.join(path, entry.name)
                    try:
                        mode = entry.stat(follow_symlinks=False).st_mode
                    except OSError as e:
                        handle_file_error(
                            Path(full_path), "stat entry", e, self.error_collector, self.logger
                        )
                        continue

                    if stat.S_ISDIR(mode):
                        if self.cfg.recursive:
                            subdirs.append(full_path)
                    elif stat.S_ISREG(mode):
                        self.evaluator.evaluate(full_path, stats)
                    else:
                        self.logger.debug(f"Skipped non-regular entry: {full_path}")
        except OSError as e:
            handle_file_error(Path(path), "list directory", e, self.error_collector, self.logger)

        return subdirs

    def _skip_long_path(self, path: str, name: str) -> None:
        error = PathTooLongError(
            f"Path too long: {path}/{name}",
            Path(path) / name,
            limit=self.cfg.max_path_length,
        )
        handle_file_error(
            Path(path) / name, "join path", error, self.error_collector, self.logger
        )
