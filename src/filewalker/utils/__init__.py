"""
Utility modules used around the core engine.

- Error classification and collection for skipped entries
- Logging configuration
- Output formatting and highlighting
"""

from .error_handling import (
    ConfigurationError,
    ErrorCollector,
    FileAccessError,
    PathTooLongError,
    PermissionError,
    SearchError,
    create_error_report,
    handle_file_error,
)
from .formatter import format_header, format_record, format_result, format_stats
from .logging_config import configure_logging, enable_debug_logging, get_logger

__all__ = [
    # Error handling
    "ConfigurationError",
    "ErrorCollector",
    "FileAccessError",
    "PathTooLongError",
    "PermissionError",
    "SearchError",
    "create_error_report",
    "handle_file_error",
    # Formatting
    "format_header",
    "format_record",
    "format_result",
    "format_stats",
    # Logging
    "configure_logging",
    "enable_debug_logging",
    "get_logger",
]
