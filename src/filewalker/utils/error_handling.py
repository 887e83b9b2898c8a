"""
Error classification and collection for filewalker.

A walk over a real filesystem meets unreadable files, vanished directories
and over-long paths all the time. None of these abort a walk: the walker and
the file evaluator hand the underlying ``OSError`` to :func:`handle_file_error`,
which classifies it, optionally records it in an :class:`ErrorCollector` and
logs it, after which the entry is skipped.

The only error raised to the caller before a walk starts is
:class:`ConfigurationError` (for example an empty keyword set).

Error Categories:
    - FILE_ACCESS: entry vanished, not a directory, not a file
    - PERMISSION: access denied
    - PATH_LENGTH: joined path exceeds the configured limit
    - CONFIGURATION: invalid search configuration
    - UNKNOWN: any other OS-level failure

Example:
    >>> from filewalker.utils.error_handling import ErrorCollector, create_error_report
    >>> from filewalker import FileWalker, SearchConfig
    >>>
    >>> collector = ErrorCollector()
    >>> FileWalker(SearchConfig(keywords=("TODO",)), error_collector=collector).run()
    >>> print(create_error_report(collector))
"""

from __future__ import annotations

# Import built-in exceptions before defining custom ones
import builtins
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

BuiltinPermissionError = builtins.PermissionError


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    FILE_ACCESS = "file_access"
    PERMISSION = "permission"
    PATH_LENGTH = "path_length"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Detailed error information."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    file_path: Path | None = None
    operation: str | None = None
    exception_type: str | None = None
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)


class SearchError(Exception):
    """Base exception for filewalker errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        file_path: Path | None = None,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.file_path: Path | None = file_path
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()


class FileAccessError(SearchError):
    """An entry could not be opened, listed or stat'ed."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.FILE_ACCESS,
            severity=ErrorSeverity.LOW,
            file_path=file_path,
            context=context,
        )


class PermissionError(SearchError):
    """Access to an entry was denied."""

    def __init__(
        self, message: str, file_path: Path, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PERMISSION,
            severity=ErrorSeverity.MEDIUM,
            file_path=file_path,
            suggestions=[
                "Check file permissions",
                "Run with appropriate user privileges",
            ],
            context=context,
        )


class PathTooLongError(SearchError):
    """Joining a directory and an entry name would exceed the path limit."""

    def __init__(self, message: str, file_path: Path, limit: int) -> None:
        super().__init__(
            message,
            category=ErrorCategory.PATH_LENGTH,
            severity=ErrorSeverity.LOW,
            file_path=file_path,
            suggestions=["Start the walk closer to the deep subtree"],
            context={"limit": limit},
        )


class ConfigurationError(SearchError):
    """The search configuration cannot start a walk."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.CRITICAL,
            suggestions=["Provide at least one non-empty keyword"],
            context=context,
        )


class ErrorCollector:
    """Collects skipped-entry errors during a walk."""

    def __init__(self, max_errors: int = 100) -> None:
        self.max_errors = max_errors
        self.errors: list[ErrorInfo] = []
        self.error_counts: dict[ErrorCategory, int] = {}

    def add_error(self, error: SearchError, operation: str | None = None) -> None:
        """Add an error to the collection."""
        info = ErrorInfo(
            category=error.category,
            severity=error.severity,
            message=error.message,
            file_path=error.file_path,
            operation=operation,
            exception_type=type(error).__name__,
            context=dict(error.context),
            suggestions=list(error.suggestions),
        )

        # Details are capped, counts are not
        if len(self.errors) < self.max_errors:
            self.errors.append(info)
        self.error_counts[error.category] = self.error_counts.get(error.category, 0) + 1

    def total(self) -> int:
        """Number of errors seen, including those past ``max_errors``."""
        return sum(self.error_counts.values())

    def get_summary(self) -> dict[str, Any]:
        """Get error summary statistics."""
        return {
            "total_errors": self.total(),
            "recorded_errors": len(self.errors),
            "by_category": {category.value: n for category, n in self.error_counts.items()},
        }


def classify_os_error(exception: OSError, operation: str, file_path: Path) -> SearchError:
    """Map an ``OSError`` raised during ``operation`` onto the error taxonomy."""
    if isinstance(exception, BuiltinPermissionError):
        return PermissionError(f"Permission denied during {operation}: {exception}", file_path)
    if isinstance(exception, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return FileAccessError(f"Cannot {operation}: {exception}", file_path)
    return SearchError(f"Unexpected error during {operation}: {exception}", file_path=file_path)


def handle_file_error(
    file_path: Path,
    operation: str,
    exception: OSError | SearchError,
    error_collector: ErrorCollector | None = None,
    logger: Any | None = None,
) -> None:
    """
    Record a skipped entry.

    Args:
        file_path: Path of the entry that was skipped
        operation: What was being attempted (e.g. "open file", "list directory")
        exception: The ``OSError`` raised, or an already classified ``SearchError``
        error_collector: Optional collector to add the error to
        logger: Optional ``SearchLogger``; the skip is logged at DEBUG level
    """
    if isinstance(exception, SearchError):
        error = exception
    else:
        error = classify_os_error(exception, operation, file_path)

    if error_collector is not None:
        error_collector.add_error(error, operation=operation)

    if logger is not None:
        logger.log_entry_skipped(str(file_path), error.message, operation=operation)


def create_error_report(error_collector: ErrorCollector) -> str:
    """Create a human-readable error report."""
    if not error_collector.errors:
        return "No entries were skipped during the walk."

    summary = error_collector.get_summary()

    report = ["Skipped Entries Report", "=" * 50, ""]
    report.append(f"Total skipped: {summary['total_errors']}")
    report.append("")

    report.append("Skipped by category:")
    for category, count in summary["by_category"].items():
        report.append(f"  {category}: {count}")
    report.append("")

    report.append("Details:")
    for error in error_collector.errors:
        report.append(f"  - {error.message}")
        if error.suggestions:
            report.append(f"    Suggestions: {', '.join(error.suggestions)}")
    if summary["total_errors"] > summary["recorded_errors"]:
        report.append(
            f"  ... {summary['total_errors'] - summary['recorded_errors']} more not shown"
        )

    return "\n".join(report)
