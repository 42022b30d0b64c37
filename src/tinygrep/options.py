#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Run configuration for the search pipeline.

``GrepOptions`` is the validated configuration object handed to
:func:`tinygrep.pipeline.run`. The CLI builds one from parsed arguments and
config-file defaults; library callers may construct it directly.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from tinygrep.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class GrepOptions(CloneFrozenMixin):
    """Search configuration toggles used by the CLI and API."""

    query: str = field(
        metadata={"help": "Text or regular expression to search for"},
    )
    sources: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Files or directories to search; empty reads standard input"},
    )
    ignore_case: bool = field(
        default=False,
        metadata={"help": "Perform case-insensitive matching"},
    )
    show_line_numbers: bool = field(
        default=False,
        metadata={"help": "Prefix each matching line with its 1-based line number"},
    )
    use_regex: bool = field(
        default=False,
        metadata={"help": "Interpret the query as a regular expression"},
    )
    enable_highlighting: bool = field(
        default=False,
        metadata={"help": "Wrap matched text in highlight markers"},
    )
    recursive: bool = field(
        default=False,
        metadata={"help": "Recurse into directories"},
    )
    sort_entries: bool = field(
        default=False,
        metadata={"help": "Visit directory entries in name order instead of filesystem order"},
    )
    legacy_highlight: bool = field(
        default=False,
        metadata={"help": "Highlight every occurrence of each regex match's text, not just its span"},
    )
    encoding: str = field(
        default="utf-8",
        metadata={"help": "Text encoding used when reading files"},
    )

    def __post_init__(self) -> None:
        """Validate option values at construction time."""
        if not self.query:
            raise ValidationError("A search query is required", parameter_name="query", parameter_value=self.query)
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValidationError(
                f"Unknown encoding: '{self.encoding}'",
                parameter_name="encoding",
                parameter_value=self.encoding,
                original_error=e,
            ) from e
        # Lists from argparse or config files are frozen into a tuple
        if not isinstance(self.sources, tuple):
            object.__setattr__(self, "sources", tuple(self.sources))

    @property
    def read_from_stdin(self) -> bool:
        """Return True when no sources were configured."""
        return not self.sources


__all__ = ["CloneFrozenMixin", "GrepOptions"]
