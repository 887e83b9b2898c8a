"""
Tests for error classification, collection and reporting.
"""

from __future__ import annotations

import builtins
from pathlib import Path
from unittest.mock import Mock

from filewalker.utils.error_handling import (
    ConfigurationError,
    ErrorCategory,
    ErrorCollector,
    ErrorSeverity,
    FileAccessError,
    PathTooLongError,
    PermissionError,
    SearchError,
    classify_os_error,
    create_error_report,
    handle_file_error,
)


class TestClassification:
    def test_permission_denied(self) -> None:
        err = classify_os_error(builtins.PermissionError(13, "denied"), "open file", Path("x"))
        assert isinstance(err, PermissionError)
        assert err.category == ErrorCategory.PERMISSION

    def test_missing_entries(self) -> None:
        for exc in (FileNotFoundError(), NotADirectoryError(), IsADirectoryError()):
            err = classify_os_error(exc, "list directory", Path("x"))
            assert isinstance(err, FileAccessError)
            assert err.file_path == Path("x")

    def test_other_os_errors(self) -> None:
        err = classify_os_error(OSError(5, "I/O error"), "read file", Path("x"))
        assert type(err) is SearchError
        assert err.category == ErrorCategory.UNKNOWN
        assert "read file" in err.message

    def test_configuration_error_is_critical(self) -> None:
        err = ConfigurationError("No keywords specified")
        assert err.severity == ErrorSeverity.CRITICAL
        assert str(err) == "No keywords specified"


class TestCollector:
    def test_counts_past_max_errors(self) -> None:
        collector = ErrorCollector(max_errors=2)
        for i in range(5):
            collector.add_error(FileAccessError(f"gone {i}", Path(f"f{i}")))

        assert len(collector.errors) == 2
        assert collector.total() == 5
        assert collector.get_summary()["by_category"] == {"file_access": 5}

    def test_path_length_error_keeps_limit(self) -> None:
        collector = ErrorCollector()
        collector.add_error(PathTooLongError("too long", Path("p"), limit=10), "list directory")

        assert collector.errors[0].category == ErrorCategory.PATH_LENGTH
        assert collector.errors[0].context == {"limit": 10}
        assert collector.errors[0].operation == "list directory"


class TestHandleFileError:
    def test_records_and_logs(self) -> None:
        collector = ErrorCollector()
        logger = Mock()

        handle_file_error(Path("a.txt"), "open file", FileNotFoundError("nope"), collector, logger)

        assert collector.errors[0].operation == "open file"
        logger.log_entry_skipped.assert_called_once()
        args, kwargs = logger.log_entry_skipped.call_args
        assert args[0] == "a.txt"
        assert kwargs == {"operation": "open file"}

    def test_accepts_classified_error(self) -> None:
        collector = ErrorCollector()
        handle_file_error(Path("p"), "join path", PathTooLongError("long", Path("p"), 8), collector)
        assert collector.error_counts == {ErrorCategory.PATH_LENGTH: 1}


class TestReport:
    def test_empty_report(self) -> None:
        assert "No entries were skipped" in create_error_report(ErrorCollector())

    def test_report_lists_categories(self) -> None:
        collector = ErrorCollector(max_errors=1)
        collector.add_error(FileAccessError("gone", Path("a")))
        collector.add_error(PermissionError("denied", Path("b")))

        report = create_error_report(collector)

        assert "Total skipped: 2" in report
        assert "file_access: 1" in report
        assert "permission: 1" in report
        assert "1 more not shown" in report
