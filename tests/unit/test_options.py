"""Unit tests for GrepOptions and the exception hierarchy."""

from dataclasses import FrozenInstanceError, fields

import pytest

from tinygrep.exceptions import (
    DependencyError,
    DirectoryWithoutRecursiveError,
    InvalidPatternError,
    SourceError,
    SourceNotFoundError,
    TinyGrepError,
    ValidationError,
)
from tinygrep.options import GrepOptions


@pytest.mark.unit
class TestGrepOptions:
    """Test option defaults, validation and cloning."""

    def test_defaults(self):
        options = GrepOptions(query="x")
        assert options.sources == ()
        assert options.read_from_stdin
        assert not options.ignore_case
        assert not options.show_line_numbers
        assert not options.use_regex
        assert not options.enable_highlighting
        assert not options.recursive
        assert not options.sort_entries
        assert not options.legacy_highlight
        assert options.encoding == "utf-8"

    def test_sources_list_is_frozen_to_tuple(self):
        options = GrepOptions(query="x", sources=["a.txt", "b.txt"])
        assert options.sources == ("a.txt", "b.txt")
        assert not options.read_from_stdin

    def test_is_frozen(self):
        options = GrepOptions(query="x")
        with pytest.raises(FrozenInstanceError):
            options.query = "y"

    def test_create_updated(self):
        options = GrepOptions(query="x", ignore_case=True)
        updated = options.create_updated(use_regex=True)
        assert updated.use_regex and updated.ignore_case
        assert not options.use_regex

    def test_empty_query_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            GrepOptions(query="")
        assert exc_info.value.parameter_name == "query"

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            GrepOptions(query="x", encoding="klingon")
        assert exc_info.value.parameter_name == "encoding"
        assert isinstance(exc_info.value.original_error, LookupError)

    def test_create_updated_revalidates(self):
        with pytest.raises(ValidationError):
            GrepOptions(query="x").create_updated(query="")

    def test_every_field_has_help(self):
        for f in fields(GrepOptions):
            assert f.metadata.get("help"), f.name


@pytest.mark.unit
class TestExceptions:
    """Test exception messages and hierarchy."""

    def test_hierarchy(self):
        assert issubclass(InvalidPatternError, ValidationError)
        assert issubclass(SourceNotFoundError, SourceError)
        assert issubclass(DirectoryWithoutRecursiveError, SourceError)
        for cls in (ValidationError, SourceError, DependencyError):
            assert issubclass(cls, TinyGrepError)

    def test_invalid_pattern(self):
        error = InvalidPatternError("[x")
        assert str(error) == "Invalid regular expression: '[x'"
        assert error.parameter_value == "[x"
        assert error.original_error is None

    def test_source_not_found(self):
        error = SourceNotFoundError("a.txt")
        assert str(error) == "File 'a.txt' not found."
        assert error.source_path == "a.txt"

    def test_source_not_found_custom_message(self):
        assert SourceNotFoundError("a.txt", message="gone").message == "gone"

    def test_directory_without_recursive(self):
        error = DirectoryWithoutRecursiveError("src")
        assert error.source_path == "src"
        assert "'-R'" in error.message

    def test_dependency_error(self):
        error = DependencyError("rich-output", ["rich", "pygments"])
        assert error.message == "'rich-output' requires the following packages: rich, pygments"
        assert error.feature == "rich-output"
