"""Shared data structures for the search pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinygrep.options import GrepOptions


class MatchMode(Enum):
    """Enumerate the supported query interpretations."""

    LITERAL = auto()
    REGEX = auto()


@dataclass(frozen=True)
class Query:
    """Normalized query inputs, built once per run."""

    pattern: str
    mode: MatchMode = MatchMode.LITERAL
    case_sensitive: bool = True

    @classmethod
    def from_options(cls, options: GrepOptions) -> Query:
        """Build a query from validated run options."""
        return cls(
            pattern=options.query,
            mode=MatchMode.REGEX if options.use_regex else MatchMode.LITERAL,
            case_sensitive=not options.ignore_case,
        )

    @property
    def use_regex(self) -> bool:
        return self.mode is MatchMode.REGEX

    @property
    def ignore_case(self) -> bool:
        return not self.case_sensitive


@dataclass(frozen=True)
class MatchRecord:
    """A single line that satisfied the matcher."""

    line_number: int
    line_text: str


@dataclass(frozen=True)
class SourceEntry:
    """One unit of searchable content paired with its display name."""

    identifier: str
    content: str


__all__ = ["MatchMode", "Query", "MatchRecord", "SourceEntry"]
