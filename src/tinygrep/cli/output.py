"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/tinygrep/cli/output.py
import sys
from typing import Any, TextIO

from tinygrep.exceptions import DependencyError
from tinygrep.pipeline import Sink
from tinygrep.types import MatchRecord


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    use_rich: bool, raise_on_missing: bool = False, stream: TextIO | None = None, force: bool = False
) -> bool:
    """Determine if Rich output should be used based on TTY and flags.

    Parameters
    ----------
    use_rich : bool
        Whether --rich was requested
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.
    force : bool, default False
        Use rich even when the stream is not a TTY

    Returns
    -------
    bool
        True if Rich output should be used

    """
    if not use_rich:
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature="rich-output",
                missing_packages=["rich"],
                message="Rich output requires the 'rich' package. Install with: pip install rich",
            )
        return False

    if force:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:  # pragma: no cover - closed stream
            return False

    return False


class RichLineSink:
    """Output sink that prints match lines through a rich console.

    The source identifier is shown in bold magenta, line numbers in green and
    highlight markers in the rendered text become ``bold yellow`` spans. The
    prefix is styled from the parts handed to :meth:`write_match`, so paths
    containing ``":"`` are styled whole.
    """

    def __init__(self, show_line_numbers: bool, console: Any = None):
        if console is None:
            from rich.console import Console

            console = Console(highlight=False)
        self.console = console
        self.show_line_numbers = show_line_numbers

    def render(self, source: str, record: MatchRecord, rendered: str) -> Any:
        from rich.text import Text

        text = Text()
        text.append(source, style="bold magenta")
        text.append(":")
        if self.show_line_numbers:
            text.append(str(record.line_number), style="green")
            text.append(": ")
        text.append_text(Text.from_ansi(rendered))
        return text

    def write_match(self, source: str, record: MatchRecord, rendered: str) -> None:
        self.console.print(self.render(source, record, rendered), soft_wrap=True)

    def __call__(self, line: str) -> None:
        """Print an already formatted line, converting its ANSI markers."""
        from rich.text import Text

        self.console.print(Text.from_ansi(line), soft_wrap=True)


def make_output_sink(use_rich: bool, show_line_numbers: bool, stream: TextIO | None = None) -> Sink | None:
    """Return the sink for a run, or None to use the pipeline's plain stdout sink."""
    if should_use_rich_output(use_rich, raise_on_missing=True, stream=stream):
        return RichLineSink(show_line_numbers)
    return None
