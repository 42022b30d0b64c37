#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line-by-line matching over an in-memory text buffer."""

from __future__ import annotations

from typing import Iterator

from tinygrep.matcher import Matcher
from tinygrep.types import MatchRecord


def split_lines(content: str) -> Iterator[str]:
    """Yield the lines of ``content`` without their terminators.

    Lines end at ``"\\n"``; a ``"\\r"`` immediately before it is dropped so
    CRLF content splits the same way. A trailing terminator does not yield
    an extra empty line, and empty content yields nothing.

    Parameters
    ----------
    content : str
        Full text of a source

    Yields
    ------
    str
        Each line, in order

    """
    if not content:
        return
    segments = content.split("\n")
    if content.endswith("\n"):
        segments.pop()
    for segment in segments:
        yield segment[:-1] if segment.endswith("\r") else segment


class ScanResult:
    """Lazy, restartable sequence of :class:`MatchRecord`.

    Every iteration rescans the content from the start, so iterating twice
    yields the same records in the same order.
    """

    __slots__ = ("_matcher", "_content", "_ignore_case")

    def __init__(self, matcher: Matcher, content: str, ignore_case: bool | None = None):
        self._matcher = matcher
        self._content = content
        self._ignore_case = ignore_case

    def __iter__(self) -> Iterator[MatchRecord]:
        matcher = self._matcher
        ignore_case = self._ignore_case
        for line_number, line in enumerate(split_lines(self._content), start=1):
            if matcher.matches(line, ignore_case):
                yield MatchRecord(line_number=line_number, line_text=line)

    def __repr__(self) -> str:
        return f"ScanResult(matcher={self._matcher!r}, chars={len(self._content)})"

    def to_list(self) -> list[MatchRecord]:
        return list(self)


def scan(matcher: Matcher, content: str, ignore_case: bool | None = None) -> ScanResult:
    """Apply ``matcher`` to each line of ``content``.

    Parameters
    ----------
    matcher : Matcher
        Compiled matcher from :func:`tinygrep.matcher.compile_pattern`
    content : str
        Full text to scan
    ignore_case : bool, optional
        Case folding for literal matchers. Regex matchers ignore it; their
        case sensitivity was fixed at compile time.

    Returns
    -------
    ScanResult
        Matching lines with 1-based line numbers, in content order

    """
    return ScanResult(matcher, content, ignore_case)


__all__ = ["ScanResult", "scan", "split_lines"]
