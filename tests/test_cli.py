"""
Tests for the command-line interface.

This module tests argument handling, streamed output, the statistics block
and the JSON output format of ``filewalker find``.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from filewalker.cli import cli
from filewalker.cli.main import split_positionals


class TestSplitPositionals:
    def test_directory_then_keywords(self, tmp_path: Path):
        assert split_positionals((str(tmp_path), "a", "b")) == (str(tmp_path), ["a", "b"])

    def test_keywords_only(self):
        assert split_positionals(("no-such-dir-xyz", "b")) == (".", ["no-such-dir-xyz", "b"])

    def test_directory_after_keyword_is_a_keyword(self, tmp_path: Path):
        assert split_positionals(("a", str(tmp_path))) == (".", ["a", str(tmp_path)])


class TestCLI:
    """Test CLI functionality."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_find_with_line_numbers(self, hello_tree: Path):
        result = self.runner.invoke(cli, ["find", "-i", str(hello_tree), "hello"])

        assert result.exit_code == 0, result.output
        assert 'Searching for: "hello"' in result.output
        assert "Case insensitive" in result.output
        assert f"{hello_tree / 'a.txt'}:1:hello world" in result.output
        assert f"{hello_tree / 'b.txt'}:1:HELLO" in result.output
        assert "Files searched:    3" in result.output
        assert "Files matched:     3" in result.output
        assert "Total matches:     3" in result.output

    def test_no_line_numbers(self, hello_tree: Path):
        result = self.runner.invoke(cli, ["find", "--no-line-numbers", str(hello_tree), "world"])

        assert result.exit_code == 0, result.output
        assert f"{hello_tree / 'a.txt'}:hello world" in result.output

    def test_files_with_matches(self, hello_tree: Path):
        result = self.runner.invoke(cli, ["find", "-l", "-i", str(hello_tree), "hello"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert str(hello_tree / "a.txt") in lines
        assert str(hello_tree / "sub" / "c.txt") in lines

    def test_count_only(self, hello_tree: Path):
        result = self.runner.invoke(cli, ["find", "-c", "-i", str(hello_tree), "hello"])

        assert result.exit_code == 0, result.output
        assert "hello world" not in result.output
        assert "Total matches:     3" in result.output

    def test_max_depth_and_pattern(self, hello_tree: Path):
        result = self.runner.invoke(
            cli, ["find", "-d", "0", "-f", "*.txt", "-i", str(hello_tree), "hello"]
        )

        assert result.exit_code == 0, result.output
        assert "File pattern: *.txt" in result.output
        assert "Files searched:    2" in result.output
        assert "c.txt" not in result.output

    def test_filename_match_output(self, tmp_path: Path):
        (tmp_path / "todo_list.md").write_text("groceries\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["find", str(tmp_path), "todo"])

        assert result.exit_code == 0, result.output
        assert f"Filename match: {tmp_path / 'todo_list.md'}" in result.output

    def test_json_output(self, hello_tree: Path):
        result = self.runner.invoke(
            cli, ["find", "--format", "json", "-i", str(hello_tree), "hello"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["records"]) == 3
        assert data["stats"]["files_matched"] == 3

    def test_json_output_without_stats(self, hello_tree: Path):
        result = self.runner.invoke(
            cli, ["find", "--format", "json", "--no-stats", "-i", str(hello_tree), "hello"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["records"]) == 3
        assert "stats" not in data

    def test_no_stats(self, hello_tree: Path):
        result = self.runner.invoke(cli, ["find", "--no-stats", str(hello_tree), "hello"])

        assert result.exit_code == 0, result.output
        assert "Search Statistics" not in result.output

    def test_missing_keywords_is_usage_error(self, tmp_path: Path):
        result = self.runner.invoke(cli, ["find", str(tmp_path)])

        assert result.exit_code == 2
        assert "No keywords specified" in result.output

    def test_help(self):
        result = self.runner.invoke(cli, ["find", "-h"])

        assert result.exit_code == 0
        assert "--file-pattern" in result.output
        assert "--max-depth" in result.output
