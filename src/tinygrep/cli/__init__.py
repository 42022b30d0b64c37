"""Command-line interface for tinygrep.

The CLI parses flags, merges config-file defaults, configures logging,
builds a :class:`~tinygrep.options.GrepOptions` and hands it to the search
pipeline. Errors raised by the pipeline are rendered here and mapped to
process exit codes.

Examples
--------
Case-insensitive search::

    $ tinygrep -i rust poem.txt

Regex search with highlighting and line numbers::

    $ tinygrep -r -c -n "R\\w+" poem.txt

Search a directory tree::

    $ tinygrep -R TODO src/

Read from standard input::

    $ cat poem.txt | tinygrep duct

"""

import argparse
import logging
import os
import sys

from tinygrep.cli.builder import (
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from tinygrep.cli.config import CONFIG_ENV_VAR, apply_config_defaults, load_config_with_priority
from tinygrep.exceptions import TinyGrepError
from tinygrep.logging_utils import configure_logging
from tinygrep.options import GrepOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "build_options"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    if parsed_args.trace:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> GrepOptions:
    """Convert parsed (and config-merged) arguments into run options."""
    return GrepOptions(
        query=parsed_args.query,
        sources=tuple(parsed_args.sources),
        ignore_case=bool(parsed_args.ignore_case),
        show_line_numbers=bool(parsed_args.show_line_numbers),
        use_regex=bool(parsed_args.use_regex),
        enable_highlighting=bool(parsed_args.enable_highlighting),
        recursive=bool(parsed_args.recursive),
        sort_entries=bool(parsed_args.sort_entries),
        legacy_highlight=bool(parsed_args.legacy_highlight),
        encoding=parsed_args.encoding or "utf-8",
    )


def main(args: list[str] | None = None) -> int:
    """Execute the tinygrep CLI and return a process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_intermixed_args(args)

    _setup_logging_level(parsed_args)

    try:
        config = load_config_with_priority(
            explicit_path=parsed_args.config,
            env_var_path=None if parsed_args.no_config else os.environ.get(CONFIG_ENV_VAR),
            discover=not parsed_args.no_config,
        )
        apply_config_defaults(parsed_args, config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    logger.debug("Arguments: %s", vars(parsed_args))

    # Lazy import keeps --help and --version free of pipeline imports
    from tinygrep.cli.output import make_output_sink
    from tinygrep.pipeline import run

    try:
        options = build_options(parsed_args)
        sink = make_output_sink(bool(parsed_args.rich), options.show_line_numbers)
        run(options, sink=sink)
    except TinyGrepError as e:
        logger.debug("Run aborted: %r", e, exc_info=e.original_error is not None)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C).")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
