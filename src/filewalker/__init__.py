"""
filewalker: recursive keyword search over a directory tree.

Given a start directory and a set of keywords, filewalker walks the tree and
reports every regular file whose name or content contains a keyword, subject
to depth, size and filename-pattern limits, and aggregates run statistics.

Key Features:
    - **Substring Matching**: Case-sensitive (byte-exact) or ASCII case-insensitive
    - **Content and Filename Search**: Either, both, content taking precedence
    - **Bounded Traversal**: Maximum depth, recursion toggle, no symlink following
    - **File Gates**: Minimum/maximum size and a ``*.ext`` or exact-name filter
    - **Fault Tolerant**: Unreadable files and directories are skipped, never fatal
    - **Output Formats**: Plain text, JSON and highlighted console output

Main Classes:
    FileWalker: Runs one walk and owns its statistics
    SearchConfig: Read-only walk configuration
    MatchRecord: One reported match
    SearchStats: Files searched/matched, total matches, bytes, elapsed time

Example Usage:
    API usage:
        >>> from filewalker import FileWalker, SearchConfig
        >>> config = SearchConfig(keywords=("hello",), start_dir="docs", case_sensitive=False)
        >>> result = FileWalker(config).collect()
        >>> print(result.stats.files_matched)

    CLI usage:
        $ filewalker find -i docs hello
        $ filewalker find -f "*.c" -d 2 -s 1000 main
"""

from .core.api import FileWalker, search
from .core.config import SearchConfig
from .core.types import MatchRecord, OutputFormat, RecordKind, SearchResult, SearchStats
from .utils.error_handling import ConfigurationError, ErrorCollector, SearchError

__all__ = [
    "FileWalker",
    "search",
    "SearchConfig",
    "MatchRecord",
    "OutputFormat",
    "RecordKind",
    "SearchResult",
    "SearchStats",
    "SearchError",
    "ConfigurationError",
    "ErrorCollector",
]

__version__ = "0.1.0"
