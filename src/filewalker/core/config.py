"""
Configuration module for filewalker.

This module defines the SearchConfig class, the single read-only object that
drives a walk: what to look for, where to start, how deep to go and which
files to consider.

Classes:
    SearchConfig: Main configuration class with all walk parameters

Key Configuration Areas:
    - Keywords: ordered, de-duplicated set of substrings to look for
    - Matching: case sensitivity, filename and/or content search
    - Scope: start directory, recursion toggle, maximum depth
    - Gates: minimum/maximum file size, filename pattern
    - Output shape: line numbers, only-matching-files, count-only
    - Limits: maximum line length and maximum path length in bytes

Example:
    Basic configuration:
        >>> from filewalker.core.config import SearchConfig
        >>>
        >>> config = SearchConfig(
        ...     keywords=("TODO", "FIXME"),
        ...     start_dir="src",
        ...     case_sensitive=False,
        ...     file_pattern="*.py",
        ... )

    Shallow, size-bounded walk:
        >>> config = SearchConfig(keywords=("error",), max_depth=1, min_size=1024)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..utils.error_handling import ConfigurationError

MAX_LINE_LENGTH = 2048
MAX_PATH_LENGTH = 4096


@dataclass(frozen=True, slots=True)
class SearchConfig:
    # Keywords
    keywords: tuple[str, ...] = field(default_factory=tuple)
    case_sensitive: bool = True

    # Scope
    start_dir: str = "."
    recursive: bool = True
    max_depth: int = -1  # -1 = unlimited, 0 = start directory only

    # What to search
    search_filenames: bool = True
    search_content: bool = True

    # Output shape
    show_line_numbers: bool = True
    only_matching_files: bool = False
    count_only: bool = False

    # Gates
    min_size: int = 0
    max_size: int = -1  # -1 = unbounded
    file_pattern: str = ""  # "" = every file

    # Limits (bytes)
    max_line_length: int = MAX_LINE_LENGTH
    max_path_length: int = MAX_PATH_LENGTH

    def __post_init__(self) -> None:
        # Ordered set: first occurrence wins
        object.__setattr__(self, "keywords", tuple(dict.fromkeys(self.keywords)))

    @property
    def depth_unlimited(self) -> bool:
        return self.max_depth < 0

    def validate(self) -> None:
        """Raise ConfigurationError if a walk cannot start with this configuration."""
        if not self.keywords:
            raise ConfigurationError("No keywords specified")
        if any(keyword == "" for keyword in self.keywords):
            raise ConfigurationError(
                "Empty keyword specified", context={"keywords": list(self.keywords)}
            )
        if self.max_line_length <= 0:
            raise ConfigurationError(
                "max_line_length must be positive", context={"value": self.max_line_length}
            )
        if self.max_path_length <= 0:
            raise ConfigurationError(
                "max_path_length must be positive", context={"value": self.max_path_length}
            )
