"""Property-based tests for matching, scanning and highlighting.

These use Hypothesis to check invariants that must hold for any query and
any input text.
"""

import re

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from tinygrep.highlight import highlight_match, highlight_with_substring
from tinygrep.matcher import LiteralMatcher, compile_pattern
from tinygrep.scanner import scan, split_lines

# Lines never contain the terminator they are split on
line_text = st.text(alphabet=st.characters(blacklist_characters="\n\r"), max_size=40)
lines = st.lists(line_text, min_size=1, max_size=20)
queries = st.text(min_size=1, max_size=8)

regex_patterns = st.one_of(
    st.sampled_from([r"\w+", r"\d+", r"a.c", r"^R", r"e$", r"[aeiou]{2}", r"(ab|cd)+", r"\s"]),
    queries.map(re.escape),
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestMatchingProperties:
    @given(query=queries, line=line_text)
    def test_literal_ignore_case_is_lowercase_containment(self, query, line):
        matcher = LiteralMatcher.from_query(query, ignore_case=True)
        assert matcher.matches(line) == (query.lower() in line.lower())

    @given(query=queries, line=line_text)
    def test_literal_case_sensitive_is_containment(self, query, line):
        matcher = compile_pattern(query, use_regex=False, ignore_case=False)
        assert matcher.matches(line) == (query in line)

    @given(pattern=regex_patterns, ignore_case=st.booleans(), inputs=lines)
    def test_regex_compilation_is_deterministic(self, pattern, ignore_case, inputs):
        first = compile_pattern(pattern, use_regex=True, ignore_case=ignore_case)
        second = compile_pattern(pattern, use_regex=True, ignore_case=ignore_case)
        assert [first.matches(line) for line in inputs] == [second.matches(line) for line in inputs]

    @given(query=queries)
    def test_escaped_query_matches_like_literal(self, query):
        regex_matcher = compile_pattern(re.escape(query), use_regex=True, ignore_case=False)
        assert regex_matcher.matches(f"xx{query}yy")


@pytest.mark.unit
@pytest.mark.fuzzing
class TestScanProperties:
    @given(body=lines)
    def test_split_lines_inverts_join(self, body):
        assert list(split_lines("\n".join(body) + "\n")) == body

    @given(body=lines, query=queries)
    def test_line_numbers_are_in_range_and_increasing(self, body, query):
        content = "\n".join(body)
        matcher = compile_pattern(query, use_regex=False, ignore_case=True)
        numbers = [record.line_number for record in scan(matcher, content)]

        assert all(1 <= n <= len(body) for n in numbers)
        assert numbers == sorted(set(numbers))

    @given(body=lines, query=queries)
    def test_scan_returns_exactly_the_matching_lines(self, body, query):
        content = "\n".join(body)
        matcher = compile_pattern(query, use_regex=False, ignore_case=False)
        expected = [(i, line) for i, line in enumerate(body, start=1) if query in line]
        assert [(r.line_number, r.line_text) for r in scan(matcher, content)] == expected

    @given(body=lines)
    def test_matching_everything_numbers_every_line(self, body):
        matcher = compile_pattern(".*", use_regex=True, ignore_case=False)
        assert [r.line_number for r in scan(matcher, "\n".join(body) + "\n")] == list(range(1, len(body) + 1))


@pytest.mark.unit
@pytest.mark.fuzzing
class TestHighlightProperties:
    @given(query=queries, line=line_text, ignore_case=st.booleans())
    def test_literal_identity_without_occurrence(self, query, line, ignore_case):
        if ignore_case:
            assume(query.lower() not in line.lower())
        else:
            assume(query not in line)
        assert highlight_match(query, line, ignore_case) == line

    @given(pattern=regex_patterns, line=line_text, legacy=st.booleans())
    def test_regex_identity_without_match(self, pattern, line, legacy):
        regex = re.compile(pattern)
        assume(regex.search(line) is None)
        assert highlight_match(pattern, line, False, regex, legacy_replace=legacy) == line

    @given(query=queries, line=line_text)
    def test_literal_highlight_keeps_text(self, query, line):
        assume("\x1b" not in line)
        result = highlight_with_substring(query, line, False)
        assert result.replace("\x1b[1;33m", "", 1).replace("\x1b[0m", "", 1) == line
