#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tinygrep library.

This module defines the exception classes raised by the search pipeline.
Every error is terminal for a run: the first one raised aborts all remaining
work and is handed to the caller unchanged.

Exception Hierarchy
-------------------
- TinyGrepError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidPatternError (regular expression failed to compile)

  - SourceError (source resolution and I/O)
    - SourceNotFoundError (file or directory unreadable)
    - DirectoryWithoutRecursiveError (directory given without ``-R``)

  - DependencyError (missing optional packages)

"""

from typing import Any


class TinyGrepError(Exception):
    """Base exception class for all tinygrep-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TinyGrepError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidPatternError(ValidationError):
    """Exception raised when a query cannot be compiled as a regular expression.

    Parameters
    ----------
    pattern : str
        The raw pattern that failed to compile
    original_error : Exception, optional
        The ``re.error`` raised by the regex engine

    """

    def __init__(self, pattern: str, original_error: Exception | None = None):
        """Initialize the invalid pattern error."""
        super().__init__(
            f"Invalid regular expression: '{pattern}'",
            parameter_name="query",
            parameter_value=pattern,
            original_error=original_error,
        )
        self.pattern = pattern


class SourceError(TinyGrepError):
    """Base exception for source resolution and read failures.

    Parameters
    ----------
    message : str
        Description of the source error
    source_path : str, optional
        Path of the problematic source
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, source_path: str | None = None, original_error: Exception | None = None):
        """Initialize the source error with path and message."""
        super().__init__(message, original_error=original_error)
        self.source_path = source_path


class SourceNotFoundError(SourceError):
    """Exception raised when a file or directory cannot be read.

    Missing paths, permission problems and undecodable content all collapse
    into this one kind; ``original_error`` keeps the underlying cause.
    """

    def __init__(self, source_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the not-found error."""
        if message is None:
            message = f"File '{source_path}' not found."
        super().__init__(message, source_path=source_path, original_error=original_error)


class DirectoryWithoutRecursiveError(SourceError):
    """Exception raised when a directory is given without the recursive flag."""

    def __init__(self, source_path: str | None = None):
        """Initialize the directory error."""
        super().__init__(
            "You provided a directory, but did not use the '-R' option for recursive search.",
            source_path=source_path,
        )


class DependencyError(TinyGrepError):
    """Exception raised when an optional dependency is missing.

    Parameters
    ----------
    feature : str
        Name of the feature that needs the dependency
    missing_packages : list[str]
        Distribution names that could not be imported
    message : str, optional
        Custom error message

    """

    def __init__(self, feature: str, missing_packages: list[str], message: str | None = None):
        """Initialize the dependency error."""
        if message is None:
            packages = ", ".join(missing_packages)
            message = f"'{feature}' requires the following packages: {packages}"
        super().__init__(message)
        self.feature = feature
        self.missing_packages = missing_packages


__all__ = [
    "TinyGrepError",
    "ValidationError",
    "InvalidPatternError",
    "SourceError",
    "SourceNotFoundError",
    "DirectoryWithoutRecursiveError",
    "DependencyError",
]
