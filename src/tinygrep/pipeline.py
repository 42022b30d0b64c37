#  Copyright (c) 2025 Tom Villani, Ph.D.
"""High-level orchestration of a search run.

``run`` compiles the query once, resolves each configured source in order,
scans it, optionally highlights each matched line, and hands the formatted
lines to an output sink. The first error raised anywhere aborts the run and
propagates unchanged.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Protocol, TextIO, Union, runtime_checkable

from tinygrep.highlight import highlight_match
from tinygrep.matcher import Matcher, RegexMatcher, compile_query
from tinygrep.options import GrepOptions
from tinygrep.scanner import scan
from tinygrep.types import MatchRecord, Query, SourceEntry
from tinygrep.walker import read_stdin, resolve

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]


@runtime_checkable
class MatchSink(Protocol):
    """Sink that receives each match as parts rather than one formatted line.

    Sinks that style the source identifier or line number implement this
    instead of parsing the formatted line.
    """

    def write_match(self, source: str, record: MatchRecord, rendered: str) -> None:
        """Receive one matched line of ``source``, with ``rendered`` highlighted or raw."""
        ...


Sink = Union[OutputSink, MatchSink]


@dataclass
class RunSummary:
    """Counters collected over a run."""

    sources_searched: int = 0
    lines_matched: int = 0
    elapsed_s: float = 0.0


def format_match(source: str, record: MatchRecord, rendered: str, show_line_numbers: bool) -> str:
    """Format one matched line for output.

    Parameters
    ----------
    source : str
        Source identifier (path or ``"stdin"``)
    record : MatchRecord
        The matched line
    rendered : str
        Line text to print, highlighted or raw
    show_line_numbers : bool
        Include the 1-based line number

    Returns
    -------
    str
        ``"<source>:<n>: <line>"`` or ``"<source>:<line>"``

    """
    if show_line_numbers:
        return f"{source}:{record.line_number}: {rendered}"
    return f"{source}:{rendered}"


def _stdout_sink(line: str) -> None:
    print(line)


def iter_sources(options: GrepOptions, stdin: TextIO | None = None) -> Iterator[SourceEntry]:
    """Yield every source entry for a run, in configured order."""
    if options.read_from_stdin:
        yield read_stdin(stdin, encoding=options.encoding)
        return
    for path in options.sources:
        yield from resolve(
            path,
            options.recursive,
            sort_entries=options.sort_entries,
            encoding=options.encoding,
        )


def render_matches(
    entry: SourceEntry,
    matcher: Matcher,
    query: Query,
    options: GrepOptions,
) -> Iterable[str]:
    """Yield formatted output lines for one source entry."""
    for record, rendered in render_records(entry, matcher, query, options):
        yield format_match(entry.identifier, record, rendered, options.show_line_numbers)


def render_records(
    entry: SourceEntry,
    matcher: Matcher,
    query: Query,
    options: GrepOptions,
) -> Iterator[tuple[MatchRecord, str]]:
    """Yield each matched record of one source entry with its rendered text."""
    pattern = matcher.regex if isinstance(matcher, RegexMatcher) else None
    for record in scan(matcher, entry.content, query.ignore_case):
        if options.enable_highlighting:
            rendered = highlight_match(
                query.pattern,
                record.line_text,
                query.ignore_case,
                pattern,
                legacy_replace=options.legacy_highlight,
            )
        else:
            rendered = record.line_text
        yield record, rendered


def run(
    options: GrepOptions,
    *,
    sink: Sink | None = None,
    stdin: TextIO | None = None,
) -> RunSummary:
    """Execute a search run.

    Parameters
    ----------
    options : GrepOptions
        Validated run configuration
    sink : callable or MatchSink, optional
        A callable receives each formatted output line. A :class:`MatchSink`
        receives the source, record and rendered text of each match instead.
        Defaults to printing formatted lines to stdout.
    stdin : TextIO, optional
        Stream read when no sources are configured. Defaults to ``sys.stdin``.

    Returns
    -------
    RunSummary
        Counters for the completed run

    Raises
    ------
    InvalidPatternError
        If the query is not a valid regular expression. Raised before any
        source is read.
    DirectoryWithoutRecursiveError
        If a directory is configured without ``recursive``
    SourceError
        If a source cannot be read (``SourceNotFoundError`` for files)

    """
    match_sink = sink if isinstance(sink, MatchSink) else None
    emit = sink or _stdout_sink
    summary = RunSummary()
    started = time.perf_counter()

    query = Query.from_options(options)
    matcher = compile_query(query)

    try:
        for entry in iter_sources(options, stdin):
            summary.sources_searched += 1
            logger.debug("Searching %s (%d chars)", entry.identifier, len(entry.content))
            if match_sink is not None:
                for record, rendered in render_records(entry, matcher, query, options):
                    match_sink.write_match(entry.identifier, record, rendered)
                    summary.lines_matched += 1
                continue
            for line in render_matches(entry, matcher, query, options):
                emit(line)
                summary.lines_matched += 1
    finally:
        summary.elapsed_s = time.perf_counter() - started
        logger.info(
            "Searched %d source(s), %d matching line(s) in %.6fs",
            summary.sources_searched,
            summary.lines_matched,
            summary.elapsed_s,
        )

    return summary


__all__ = [
    "MatchSink",
    "OutputSink",
    "RunSummary",
    "Sink",
    "format_match",
    "iter_sources",
    "render_matches",
    "render_records",
    "run",
]
