#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Resolve configured sources into searchable text entries.

A source is standard input, a single file, or a directory. Directories are
walked depth-first with an explicit stack: a subdirectory is exhausted
before the walk moves on to the entries that follow it. Entries are produced
lazily, so a read failure surfaces at the point the walk reaches it and any
output already produced for earlier files stands.

Directory symlinks are followed. A directory that resolves to one of its own
ancestors closes a cycle and is skipped. A directory reachable through
several non-cyclic links is walked once per link, so its files are reported
under each path.

Standard input is decoded with the run's encoding when the stream exposes a
byte buffer; a read or decode failure is an I/O error on ``stdin``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Iterator, TextIO

from tinygrep.exceptions import DirectoryWithoutRecursiveError, SourceError, SourceNotFoundError
from tinygrep.types import SourceEntry

logger = logging.getLogger(__name__)

STDIN_IDENTIFIER = "stdin"


def read_source_file(path: str, encoding: str = "utf-8") -> SourceEntry:
    """Read a file fully into a :class:`SourceEntry`.

    Line terminators are preserved as written (``newline=""``); the scanner
    decides how to split them.

    Raises
    ------
    SourceNotFoundError
        If the file is missing, unreadable, or not valid text in ``encoding``

    """
    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", path, e)
        raise SourceNotFoundError(path, original_error=e) from e
    return SourceEntry(identifier=path, content=content)


def read_stdin(stream: TextIO | None = None, encoding: str | None = None) -> SourceEntry:
    """Read standard input to end-of-stream once.

    Parameters
    ----------
    stream : TextIO, optional
        Stream to read instead of ``sys.stdin``
    encoding : str, optional
        Decode the stream's underlying byte buffer with this encoding, the
        same way files are decoded. Streams without a ``buffer`` (such as
        ``io.StringIO``), or a missing ``encoding``, are read as text in
        the stream's own encoding.

    Raises
    ------
    SourceError
        If the stream cannot be read or decoded

    """
    target = stream if stream is not None else sys.stdin
    buffer = getattr(target, "buffer", None) if encoding else None
    try:
        if buffer is not None:
            content = buffer.read().decode(encoding)
        else:
            content = target.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", STDIN_IDENTIFIER, e)
        raise SourceError(
            f"I/O error reading {STDIN_IDENTIFIER}: {e}",
            source_path=STDIN_IDENTIFIER,
            original_error=e,
        ) from e
    return SourceEntry(identifier=STDIN_IDENTIFIER, content=content)


def _list_directory(path: str, sort_entries: bool) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise SourceNotFoundError(path, original_error=e) from e
    if sort_entries:
        entries.sort(key=lambda entry: entry.name)
    return entries


def _walk_directory(root: str, sort_entries: bool, encoding: str) -> Iterator[SourceEntry]:
    # Stack holds (path, is_dir, real paths of the directories above it);
    # children are pushed in reverse so they pop in listing order
    stack: list[tuple[str, bool, frozenset[str]]] = [(root, True, frozenset())]

    while stack:
        path, is_dir, ancestors = stack.pop()
        if not is_dir:
            yield read_source_file(path, encoding=encoding)
            continue

        real = os.path.realpath(path)
        if real in ancestors:
            logger.debug("Skipping symlink cycle at %s (resolves to ancestor %s)", path, real)
            continue
        below = ancestors | {real}

        entries = _list_directory(path, sort_entries)
        logger.debug("Listing %s: %d entries", path, len(entries))
        children: list[tuple[str, bool, frozenset[str]]] = []
        for entry in entries:
            try:
                child_is_dir = entry.is_dir()
            except OSError:
                child_is_dir = False
            children.append((entry.path, child_is_dir, below))
        stack.extend(reversed(children))


def resolve(
    path: str,
    recursive: bool,
    *,
    sort_entries: bool = False,
    encoding: str = "utf-8",
) -> Iterator[SourceEntry]:
    """Resolve a file or directory path into source entries.

    Parameters
    ----------
    path : str
        File or directory path
    recursive : bool
        Whether directories may be walked
    sort_entries : bool, default False
        Visit directory entries in name order. Filesystem order otherwise,
        which differs across platforms.
    encoding : str, default "utf-8"
        Text encoding for file contents

    Returns
    -------
    Iterator[SourceEntry]
        One entry for a file; one per contained file for a directory

    Raises
    ------
    DirectoryWithoutRecursiveError
        If ``path`` is a directory and ``recursive`` is false. Raised before
        anything is read.
    SourceNotFoundError
        If ``path`` (or, lazily, a file beneath it) cannot be read

    """
    if os.path.isdir(path):
        if not recursive:
            raise DirectoryWithoutRecursiveError(path)
        return _walk_directory(path, sort_entries, encoding)
    return iter([read_source_file(path, encoding=encoding)])


__all__ = ["STDIN_IDENTIFIER", "read_source_file", "read_stdin", "resolve"]
