"""
Command-line interface for filewalker.

Main Commands:
    find: Walk a directory tree and report files matching keywords

Usage:
    filewalker find [OPTIONS] [DIRECTORY] KEYWORD [KEYWORD ...]

The first positional argument is taken as the start directory when it names
an existing directory; every other positional argument is a keyword.

Example Usage:
    Search the current directory:
        $ filewalker find error

    Search /etc, case-insensitively:
        $ filewalker find -i /etc error

    Search 'main' in .c files at most two levels deep, larger than 1KB:
        $ filewalker find -f "*.c" -d 2 -s 1000 main

For more information, run: filewalker find --help
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click
from rich.console import Console

from ..core.api import FileWalker
from ..core.config import SearchConfig
from ..core.types import MatchRecord, OutputFormat
from ..utils.error_handling import ConfigurationError, ErrorCollector, create_error_report
from ..utils.formatter import (
    format_header,
    format_record,
    format_stats,
    render_record_console,
    to_json_bytes,
)
from ..utils.logging_config import LogFormat, LogLevel, configure_logging, enable_debug_logging

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def split_positionals(args: tuple[str, ...]) -> tuple[str, list[str]]:
    """Split positional arguments into (start_dir, keywords)."""
    start_dir = "."
    keywords: list[str] = []
    for arg in args:
        if not keywords and start_dir == "." and os.path.isdir(arg):
            start_dir = arg
            continue
        keywords.append(arg)
    return start_dir, keywords


@click.group(context_settings=CONTEXT_SETTINGS)
def cli() -> None:
    """filewalker - recursive keyword search over a directory tree"""
    pass


@cli.command("find", context_settings=CONTEXT_SETTINGS)
@click.argument("args", nargs=-1, metavar="[DIRECTORY] KEYWORD...")
@click.option("-i", "--ignore-case", is_flag=True, default=False, help="Case-insensitive search")
@click.option(
    "-r", "--recursive/--no-recursive", default=True, help="Descend into subdirectories (default: on)"
)
@click.option(
    "-l",
    "--files-with-matches",
    "only_matching",
    is_flag=True,
    default=False,
    help="Only show names of files with matches",
)
@click.option("-c", "--count", "count_only", is_flag=True, default=False, help="Only count matches, don't show them")
@click.option(
    "-n", "--line-numbers/--no-line-numbers", default=True, help="Show line numbers (default: on)"
)
@click.option("-f", "--file-pattern", default="", help='Search only files matching pattern (e.g. "*.c")')
@click.option("-d", "--max-depth", type=int, default=-1, help="Maximum directory depth (default: unlimited)")
@click.option("-s", "--min-size", type=int, default=0, help="Minimum file size in bytes")
@click.option("-S", "--max-size", type=int, default=-1, help="Maximum file size in bytes")
@click.option("--filenames/--no-filenames", default=True, help="Match keywords against file names")
@click.option("--content/--no-content", default=True, help="Match keywords against file content")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option(
    "--stats/--no-stats", default=True, help="Print search statistics (also the JSON stats key)"
)
# Logging and debugging options
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel]),
    default=LogLevel.WARNING.value,
    help="Log level",
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), help="Log file path")
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=LogFormat.SIMPLE.value,
    help="Log format",
)
@click.option("--show-errors", is_flag=True, default=False, help="Report skipped entries after the walk")
def find_cmd(
    args: tuple[str, ...],
    ignore_case: bool,
    recursive: bool,
    only_matching: bool,
    count_only: bool,
    line_numbers: bool,
    file_pattern: str,
    max_depth: int,
    min_size: int,
    max_size: int,
    filenames: bool,
    content: bool,
    fmt: str,
    stats: bool,
    debug: bool,
    log_level: str,
    log_file: Path | None,
    log_format: str,
    show_errors: bool,
) -> None:
    """Search DIRECTORY (default: current directory) for files matching KEYWORDs."""
    configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=log_file,
        enable_file=log_file is not None,
    )
    if debug:
        enable_debug_logging()

    start_dir, keywords = split_positionals(args)
    cfg = SearchConfig(
        keywords=tuple(keywords),
        case_sensitive=not ignore_case,
        start_dir=start_dir,
        recursive=recursive,
        max_depth=max_depth,
        search_filenames=filenames,
        search_content=content,
        show_line_numbers=line_numbers,
        only_matching_files=only_matching,
        count_only=count_only,
        min_size=min_size,
        max_size=max_size,
        file_pattern=file_pattern,
    )
    try:
        cfg.validate()
    except ConfigurationError as e:
        raise click.UsageError(e.message) from e

    output = OutputFormat(fmt)
    collector = ErrorCollector()

    if output == OutputFormat.JSON:
        result = FileWalker(cfg, error_collector=collector).collect()
        click.echo(to_json_bytes(result, include_stats=stats).decode("utf-8"))
    else:
        click.echo(format_header(cfg))
        if output == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
            console = Console()

            def sink(record: MatchRecord) -> None:
                render_record_console(record, cfg.keywords, cfg.case_sensitive, console)

        else:

            def sink(record: MatchRecord) -> None:
                click.echo(format_record(record))

        walk_stats = FileWalker(cfg, sink=sink, error_collector=collector).run()

        if stats:
            if not cfg.count_only and not cfg.only_matching_files:
                click.echo("")
            click.echo("")
            click.echo(format_stats(walk_stats))

    if show_errors:
        click.echo(create_error_report(collector), err=True)


def main() -> None:
    cli(prog_name="filewalker")


if __name__ == "__main__":
    main()
