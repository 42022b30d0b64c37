#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Compile raw queries into executable matchers.

A run compiles its query exactly once. Literal queries become a
:class:`LiteralMatcher`; regex queries become a :class:`RegexMatcher` with
case-insensitivity baked into the compiled pattern, so no per-line flag is
ever reapplied in regex mode.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from tinygrep.exceptions import InvalidPatternError
from tinygrep.types import Query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiteralMatcher:
    """Plain substring matcher.

    ``pattern`` is stored lower-cased when the matcher is case-insensitive.
    """

    pattern: str
    case_sensitive: bool = True

    @classmethod
    def from_query(cls, query: str, ignore_case: bool) -> LiteralMatcher:
        return cls(pattern=query.lower() if ignore_case else query, case_sensitive=not ignore_case)

    def matches(self, line: str, ignore_case: bool | None = None) -> bool:
        """Return True when the pattern occurs in ``line``.

        Parameters
        ----------
        line : str
            Line to test
        ignore_case : bool, optional
            Override the matcher's own case sensitivity for this call

        """
        fold = (not self.case_sensitive) if ignore_case is None else ignore_case
        if fold:
            return self.pattern.lower() in line.lower()
        return self.pattern in line

    def find_spans(self, line: str, ignore_case: bool | None = None) -> list[tuple[int, int]]:
        """Return the span of the first occurrence, or an empty list.

        Offsets refer to the case-adjusted line. Only the first occurrence is
        reported; repeated occurrences on the same line are not.
        """
        fold = (not self.case_sensitive) if ignore_case is None else ignore_case
        needle = self.pattern.lower() if fold else self.pattern
        if not needle:
            return []
        haystack = line.lower() if fold else line
        idx = haystack.find(needle)
        if idx == -1:
            return []
        return [(idx, idx + len(needle))]


@dataclass(frozen=True)
class RegexMatcher:
    """Matcher backed by a compiled regular expression."""

    regex: re.Pattern[str]

    @property
    def case_sensitive(self) -> bool:
        return not (self.regex.flags & re.IGNORECASE)

    def matches(self, line: str, ignore_case: bool | None = None) -> bool:
        """Return True when the regex matches anywhere in ``line``.

        ``ignore_case`` is accepted for interface parity and ignored: case
        sensitivity is fixed when the pattern is compiled.
        """
        return self.regex.search(line) is not None

    def find_spans(self, line: str, ignore_case: bool | None = None) -> list[tuple[int, int]]:
        """Return all non-overlapping, non-empty match spans, left to right."""
        spans: list[tuple[int, int]] = []
        for match in self.regex.finditer(line):
            start, end = match.span()
            if start == end:
                continue
            spans.append((start, end))
        return spans


Matcher = Union[LiteralMatcher, RegexMatcher]


def compile_pattern(pattern: str, use_regex: bool, ignore_case: bool) -> Matcher:
    """Compile a raw query into a matcher.

    Parameters
    ----------
    pattern : str
        Raw query text
    use_regex : bool
        Interpret ``pattern`` as a regular expression
    ignore_case : bool
        Match without regard to case

    Returns
    -------
    Matcher
        A ``LiteralMatcher`` or ``RegexMatcher``

    Raises
    ------
    InvalidPatternError
        If ``use_regex`` is set and ``pattern`` is not a valid expression

    """
    if not use_regex:
        logger.debug("Compiled literal matcher (ignore_case=%s)", ignore_case)
        return LiteralMatcher.from_query(pattern, ignore_case)

    flags = re.IGNORECASE if ignore_case else 0
    try:
        regex = re.compile(pattern, flags)
    except re.error as e:
        logger.debug("Regex compilation failed for %r: %s", pattern, e)
        raise InvalidPatternError(pattern, original_error=e) from e

    logger.debug("Compiled regex matcher %r (ignore_case=%s)", pattern, ignore_case)
    return RegexMatcher(regex=regex)


def compile_query(query: Query) -> Matcher:
    """Compile a :class:`~tinygrep.types.Query` value."""
    return compile_pattern(query.pattern, query.use_regex, query.ignore_case)


__all__ = ["LiteralMatcher", "RegexMatcher", "Matcher", "compile_pattern", "compile_query"]
