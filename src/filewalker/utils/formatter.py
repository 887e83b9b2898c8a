"""
Output formatting for filewalker.

Turns MatchRecords, the run header and SearchStats into text, JSON (via
orjson) or highlighted console output (via rich).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

import orjson
from rich.console import Console
from rich.text import Text

from ..core.types import MatchRecord, OutputFormat, RecordKind, SearchResult, SearchStats

if TYPE_CHECKING:
    from ..core.config import SearchConfig

SEPARATOR = "-" * 40


def format_record(record: MatchRecord) -> str:
    if record.kind == RecordKind.FILENAME:
        return f"Filename match: {record.path}"
    if record.kind == RecordKind.FILE:
        return record.path
    if record.line_number is not None:
        return f"{record.path}:{record.line_number}:{record.text}"
    return f"{record.path}:{record.text}"


def format_header(config: SearchConfig) -> str:
    keywords = " ".join(f'"{k}"' for k in config.keywords)
    out: List[str] = [
        f"Searching for: {keywords}",
        f"Starting directory: {config.start_dir}",
        f"Case {'sensitive' if config.case_sensitive else 'insensitive'}",
    ]
    if config.file_pattern:
        out.append(f"File pattern: {config.file_pattern}")
    out.append(SEPARATOR)
    return "\n".join(out)


def format_stats(stats: SearchStats) -> str:
    out: List[str] = [
        "=== Search Statistics ===",
        f"Files searched:    {stats.files_searched}",
        f"Files matched:     {stats.files_matched}",
        f"Total matches:     {stats.total_matches}",
        f"Total size:        {stats.total_size_bytes} bytes",
        f"Time elapsed:      {stats.elapsed_seconds:.2f} seconds",
    ]
    if stats.files_searched > 0:
        out.append(f"Avg file size:     {stats.average_file_size / 1024:.2f} KB")
        if stats.total_matches > 0:
            out.append(f"Matches per file:  {stats.matches_per_file:.2f}")
    return "\n".join(out)


def to_json_bytes(result: SearchResult, include_stats: bool = True) -> bytes:
    payload: dict[str, Any] = {"records": [record.to_dict() for record in result.records]}
    if include_stats:
        payload["stats"] = result.stats.to_dict()
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_result(result: SearchResult, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result).decode("utf-8")
    lines = [format_record(record) for record in result.records]
    lines.append("")
    lines.append(format_stats(result.stats))
    return "\n".join(lines)


def render_record_console(
    record: MatchRecord,
    keywords: tuple[str, ...],
    case_sensitive: bool = True,
    console: Console | None = None,
) -> None:
    """Print one record with its path emphasised and keywords highlighted."""
    console = console or Console()
    text = Text()
    if record.kind == RecordKind.FILENAME:
        text.append("Filename match: ", style="dim")
        name = Text(record.path, style="bold")
        name.highlight_words(keywords, style="bold red", case_sensitive=case_sensitive)
        text.append_text(name)
    elif record.kind == RecordKind.FILE:
        text.append(record.path, style="bold magenta")
    else:
        text.append(record.path, style="magenta")
        text.append(":")
        if record.line_number is not None:
            text.append(str(record.line_number), style="green")
            text.append(":")
        line = Text(record.text or "")
        line.highlight_words(keywords, style="bold red", case_sensitive=case_sensitive)
        text.append_text(line)
    console.print(text, highlight=False, soft_wrap=True)
