#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Wrap matched text in terminal highlight markers.

Regex matches are wrapped by their span offsets, left to right. Literal
queries wrap only the first case-adjusted occurrence on a line.

The historical regex highlighter replaced every textual occurrence of each
matched substring, which over-highlights when the same text appears outside
a located match (and double-wraps repeated matches). That behaviour is kept
behind ``legacy_replace=True`` for output compatibility.
"""

from __future__ import annotations

import re

HIGHLIGHT_START = "\x1b[1;33m"
HIGHLIGHT_END = "\x1b[0m"


def apply_highlight(text: str) -> str:
    """Wrap ``text`` in the highlight start/end markers."""
    return f"{HIGHLIGHT_START}{text}{HIGHLIGHT_END}"


def _wrap_spans(line: str, spans: list[tuple[int, int]]) -> str:
    if not spans:
        return line

    result: list[str] = []
    cursor = 0
    for start, end in spans:
        result.append(line[cursor:start])
        result.append(apply_highlight(line[start:end]))
        cursor = end
    result.append(line[cursor:])
    return "".join(result)


def highlight_with_regex(pattern: re.Pattern[str], line: str, *, legacy_replace: bool = False) -> str:
    """Highlight every non-overlapping match of ``pattern`` in ``line``.

    Parameters
    ----------
    pattern : re.Pattern
        Compiled regular expression
    line : str
        Line to render
    legacy_replace : bool, default False
        Replace all textual occurrences of each matched substring instead of
        wrapping located spans

    Returns
    -------
    str
        The line with matches wrapped in markers

    """
    if legacy_replace:
        highlighted = line
        for match in pattern.finditer(line):
            matched = match.group(0)
            if not matched:
                continue
            highlighted = highlighted.replace(matched, apply_highlight(matched))
        return highlighted

    spans = [match.span() for match in pattern.finditer(line) if match.end() > match.start()]
    return _wrap_spans(line, spans)


def highlight_with_substring(query: str, line: str, ignore_case: bool) -> str:
    """Highlight the first occurrence of ``query`` in ``line``.

    ``query`` is expected to be lower-cased already when ``ignore_case`` is
    set. Offsets are taken from the lower-cased line, which is only exact
    when lower-casing preserves the line's length.
    """
    if not query:
        return line
    search_line = line.lower() if ignore_case else line
    pos = search_line.find(query)
    if pos == -1:
        return line
    return _wrap_spans(line, [(pos, pos + len(query))])


def highlight_match(
    query: str,
    line: str,
    ignore_case: bool,
    pattern: re.Pattern[str] | None = None,
    *,
    legacy_replace: bool = False,
) -> str:
    """Render ``line`` with its match highlighted.

    Parameters
    ----------
    query : str
        Raw query text, used in literal mode
    line : str
        Matched line
    ignore_case : bool
        Case-insensitive literal matching
    pattern : re.Pattern, optional
        Compiled regex; selects regex mode when provided
    legacy_replace : bool, default False
        See :func:`highlight_with_regex`

    Returns
    -------
    str
        Highlighted line, or ``line`` unchanged when nothing matches

    """
    if pattern is not None:
        return highlight_with_regex(pattern, line, legacy_replace=legacy_replace)
    return highlight_with_substring(query.lower() if ignore_case else query, line, ignore_case)


__all__ = [
    "HIGHLIGHT_START",
    "HIGHLIGHT_END",
    "apply_highlight",
    "highlight_with_regex",
    "highlight_with_substring",
    "highlight_match",
]
