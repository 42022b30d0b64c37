"""tinygrep - a minimal grep: literal or regex line search with highlighting.

tinygrep searches files, directory trees, or standard input for lines that
match a query, optionally printing line numbers and highlighting the matched
text.

Basic usage::

    >>> from tinygrep import GrepOptions, run
    >>> options = GrepOptions(query="duct", sources=("poem.txt",), show_line_numbers=True)
    >>> summary = run(options)  # prints "poem.txt:2: safe, fast, productive."

The building blocks are available individually::

    >>> from tinygrep import compile_pattern, scan
    >>> matcher = compile_pattern("rUsT", use_regex=False, ignore_case=True)
    >>> [record.line_number for record in scan(matcher, "Rust:\\nPick three.")]
    [1]

"""

from tinygrep.exceptions import (
    DependencyError,
    DirectoryWithoutRecursiveError,
    InvalidPatternError,
    SourceError,
    SourceNotFoundError,
    TinyGrepError,
    ValidationError,
)
from tinygrep.highlight import HIGHLIGHT_END, HIGHLIGHT_START, apply_highlight, highlight_match
from tinygrep.matcher import LiteralMatcher, Matcher, RegexMatcher, compile_pattern, compile_query
from tinygrep.options import GrepOptions
from tinygrep.pipeline import RunSummary, format_match, run
from tinygrep.scanner import ScanResult, scan, split_lines
from tinygrep.types import MatchMode, MatchRecord, Query, SourceEntry
from tinygrep.walker import read_stdin, resolve

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "run",
    "RunSummary",
    "format_match",
    "GrepOptions",
    "Query",
    "MatchMode",
    "MatchRecord",
    "SourceEntry",
    "Matcher",
    "LiteralMatcher",
    "RegexMatcher",
    "compile_pattern",
    "compile_query",
    "ScanResult",
    "scan",
    "split_lines",
    "HIGHLIGHT_START",
    "HIGHLIGHT_END",
    "apply_highlight",
    "highlight_match",
    "resolve",
    "read_stdin",
    "TinyGrepError",
    "ValidationError",
    "InvalidPatternError",
    "SourceError",
    "SourceNotFoundError",
    "DirectoryWithoutRecursiveError",
    "DependencyError",
]
