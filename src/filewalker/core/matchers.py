"""
Filename pattern matching and keyword line scanning.

Both matchers work on plain substrings; there is no regex or glob engine
behind them. Content is compared as bytes so a case-sensitive search is a
byte-exact substring test, and case-insensitive search folds ASCII letters
only, independent of locale.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from typing import BinaryIO

from .config import MAX_LINE_LENGTH

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def basename(path: str) -> str:
    """Substring after the last ``/``, or the whole path."""
    return path.rsplit("/", 1)[-1]


def fold_ascii(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def matches_pattern(filename: str, pattern: str) -> bool:
    """
    Check a filename against a simple file filter.

    ``""`` matches everything, ``*.ext`` matches on the extension after the
    last dot of the basename, anything else must equal the basename. Both
    comparisons ignore ASCII case.

    Example:
        >>> matches_pattern("a/b/report.LOG", "*.log")
        True
        >>> matches_pattern("report", "*.log")
        False
    """
    if not pattern:
        return True

    name = basename(filename)
    if pattern.startswith("*."):
        if "." not in name:
            return False
        ext = name.rsplit(".", 1)[1]
        return fold_ascii(ext) == fold_ascii(pattern[2:])

    return fold_ascii(name) == fold_ascii(pattern)


def iter_bounded_lines(stream: BinaryIO, limit: int = MAX_LINE_LENGTH) -> Iterator[bytes]:
    """
    Yield the lines of a binary stream without their terminator.

    A line longer than ``limit`` bytes is truncated to ``limit`` bytes; the
    remainder is consumed in ``limit``-sized chunks and dropped, so it never
    shows up as a line of its own. ``\\n`` and ``\\r\\n`` terminators are both
    stripped, including a ``\\r`` that lands right at the cap.
    """
    while True:
        line = stream.readline(limit)
        if not line:
            return
        if line.endswith(b"\n"):
            line = line[:-1]
            if line.endswith(b"\r"):
                line = line[:-1]
        elif len(line) >= limit:
            rest_was_newline = _discard_rest_of_line(stream, limit)
            if rest_was_newline and line.endswith(b"\r"):
                line = line[:-1]
        yield line


def _discard_rest_of_line(stream: BinaryIO, limit: int) -> bool:
    """Drop the rest of the current line; True if it was only the ``\\n``."""
    first = True
    while True:
        chunk = stream.readline(limit)
        if not chunk:
            return False
        if chunk.endswith(b"\n"):
            return first and chunk == b"\n"
        first = False


def decode_line(line: bytes) -> str:
    return line.decode("utf-8", errors="replace")


class LineScanner:
    """
    Finds lines containing keywords.

    Keywords are encoded (and folded, for case-insensitive search) once, at
    construction. ``scan`` reports how many distinct keywords each matching
    line holds; with ``first_hit_only`` it stops checking a line at the first
    keyword found, for callers that only need to know whether a file matches.

    Example:
        >>> import io
        >>> scanner = LineScanner(["error", "caf"], case_sensitive=False)
        >>> list(scanner.scan(io.BytesIO(b"ok\\ncaf\\xc3\\xa9 ERROR\\n")))
        [(2, b'caf\\xc3\\xa9 ERROR', 2)]
    """

    def __init__(
        self,
        keywords: Iterable[str],
        case_sensitive: bool = True,
        max_line_length: int = MAX_LINE_LENGTH,
    ) -> None:
        self.case_sensitive = case_sensitive
        self.max_line_length = max_line_length
        needles = [keyword.encode("utf-8") for keyword in keywords]
        if not case_sensitive:
            needles = [needle.lower() for needle in needles]
        self._needles: tuple[bytes, ...] = tuple(needles)

    def _fold(self, haystack: bytes) -> bytes:
        # bytes.lower() only touches ASCII letters
        return haystack if self.case_sensitive else haystack.lower()

    def contains(self, haystack: bytes) -> bool:
        """True if any keyword is a substring of ``haystack``."""
        haystack = self._fold(haystack)
        return any(needle in haystack for needle in self._needles)

    def count_hits(self, haystack: bytes) -> int:
        """Number of keywords that are substrings of ``haystack``."""
        haystack = self._fold(haystack)
        return sum(1 for needle in self._needles if needle in haystack)

    def contains_name(self, name: str) -> bool:
        return self.contains(name.encode("utf-8", errors="surrogateescape"))

    def scan(
        self, stream: BinaryIO, first_hit_only: bool = False
    ) -> Iterator[tuple[int, bytes, int]]:
        """Lazily yield ``(line_number, line, hits)`` for each matching line, 1-based."""
        for line_number, line in enumerate(
            iter_bounded_lines(stream, self.max_line_length), start=1
        ):
            hits = int(self.contains(line)) if first_hit_only else self.count_hits(line)
            if hits:
                yield line_number, line, hits
