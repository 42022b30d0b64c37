#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser and exit-code mapping for the tinygrep CLI."""

from __future__ import annotations

import argparse

from tinygrep.exceptions import DependencyError, SourceError, ValidationError

HELP_DESCRIPTION = """\
TinyGrep - A simplified version of the `grep` command

Search for PATTERN in each FILE or standard input."""

HELP_EPILOG = """\
Examples:
  tinygrep -i "rust" file1.txt       # Case-insensitive search for 'rust'
  tinygrep -n "error" file1.txt      # Search for 'error' and show line numbers
  tinygrep -r "R\\w+" file1.txt       # Search for words starting with 'R' using regex
  tinygrep -i -n "hello" file1.txt file2.txt # Case-insensitive search with line numbers
  tinygrep -R -n "TODO" src/         # Search every file under src/

Configuration defaults are read from .tinygrep.toml, .tinygrep.yaml,
.tinygrep.json or [tool.tinygrep] in pyproject.toml (see --config)."""

# Options a config file may provide defaults for, mapped to their argparse dest
CONFIGURABLE_FLAGS = (
    "ignore_case",
    "show_line_numbers",
    "use_regex",
    "enable_highlighting",
    "recursive",
    "sort_entries",
    "legacy_highlight",
    "rich",
)
CONFIGURABLE_VALUES = ("encoding",)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ``tinygrep``.

    Boolean flags default to ``None`` so that values merged in from a config
    file can be told apart from flags given on the command line.
    """
    from tinygrep import __version__

    parser = argparse.ArgumentParser(
        prog="tinygrep",
        usage="%(prog)s [OPTION]... PATTERN [FILE]...",
        description=HELP_DESCRIPTION,
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("query", metavar="PATTERN", help="Text or regular expression to search for")
    parser.add_argument(
        "sources",
        metavar="FILE",
        nargs="*",
        help="Files or directories to search (standard input when omitted)",
    )

    match_group = parser.add_argument_group("Matching")
    match_group.add_argument(
        "-i",
        "--ignore-case",
        dest="ignore_case",
        action="store_const",
        const=True,
        help="Perform case-insensitive matching",
    )
    match_group.add_argument(
        "-r",
        "--use-regex",
        dest="use_regex",
        action="store_const",
        const=True,
        help="Treat PATTERN as a regular expression",
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "-n",
        "--line-numbers",
        dest="show_line_numbers",
        action="store_const",
        const=True,
        help="Show line numbers with output lines",
    )
    output_group.add_argument(
        "-c",
        "--color",
        dest="enable_highlighting",
        action="store_const",
        const=True,
        help="Highlight matching text in output",
    )
    output_group.add_argument(
        "--legacy-highlight",
        dest="legacy_highlight",
        action="store_const",
        const=True,
        help="Highlight every occurrence of each regex match's text (pre-1.0 behaviour)",
    )
    output_group.add_argument(
        "--rich",
        dest="rich",
        action="store_const",
        const=True,
        help="Render output with rich styling when writing to a terminal",
    )

    source_group = parser.add_argument_group("Sources")
    source_group.add_argument(
        "-R",
        "--recursive",
        dest="recursive",
        action="store_const",
        const=True,
        help="Search recursively in directories",
    )
    source_group.add_argument(
        "--sort",
        dest="sort_entries",
        action="store_const",
        const=True,
        help="Visit directory entries in name order for reproducible output",
    )
    source_group.add_argument("--encoding", dest="encoding", help="Text encoding for files (default: utf-8)")

    config_group = parser.add_argument_group("Configuration and logging")
    config_group.add_argument("--config", help="Path to a configuration file (JSON, TOML or YAML)")
    config_group.add_argument(
        "--no-config", action="store_true", help="Ignore TINYGREP_CONFIG and auto-discovered config files"
    )
    config_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    config_group.add_argument("--log-file", help="Also write log records to this file")
    config_group.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names"
    )
    config_group.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_INTERRUPTED = 130


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, SourceError):
        return EXIT_FILE_ERROR

    return EXIT_ERROR
