"""
Unit tests for the predefined pattern registry.
"""

import re

import pytest

from formrules.core.patterns import (
    PREDEFINED_PATTERNS,
    check_sample,
    combine_patterns,
    compile_pattern,
    find_pattern_id,
    get_pattern,
    lookup_description,
    translate_pattern,
)


class TestRegistry:
    """Tests for PREDEFINED_PATTERNS"""

    @pytest.mark.parametrize("pattern_id", list(PREDEFINED_PATTERNS))
    def test_every_pattern_compiles(self, pattern_id):
        re.compile(PREDEFINED_PATTERNS[pattern_id].pattern)

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            PREDEFINED_PATTERNS["email"] = PREDEFINED_PATTERNS["url"]

    @pytest.mark.parametrize("pattern_id,good,bad", [
        ("email", "student@example.com", "student@example"),
        ("indianPhone", "9876543210", "5876543210"),
        ("postalCode", "560001", "060001"),
        ("usZipCode", "94105-1234", "9410"),
        ("date", "2024-02-29", "2024-13-01"),
        ("time", "23:59", "24:00"),
        ("hexColor", "#1a2B3c", "#12345"),
        ("password", "Secret123", "secret123"),
        ("username", "ada_l", "1ada"),
        ("rollNumber", "CB21CS001", "cb21cs001"),
        ("collegeEmail", "a.b@iitm.ac.in", "a.b@gmail.com"),
        ("cgpa", "9.75", "10.5"),
        ("percentage", "100.00", "100.5"),
        ("semester", "8", "9"),
        ("batchYear", "2024", "1999"),
        ("section", "B", "b"),
        ("department", "Computer Science & Engineering", "CSE-1"),
    ])
    def test_pattern_samples(self, pattern_id, good, bad):
        compiled = compile_pattern(get_pattern(pattern_id))
        assert compiled.search(good)
        assert not compiled.search(bad)

    def test_get_unknown_pattern_raises(self):
        with pytest.raises(KeyError):
            get_pattern("nope")


class TestLookupDescription:
    """Tests for lookup_description / find_pattern_id"""

    def test_known_pattern(self):
        first = next(iter(PREDEFINED_PATTERNS.values()))
        assert lookup_description(first.pattern) == first.description

    def test_unknown_pattern(self):
        assert lookup_description("^unknown$") == "Custom pattern"

    def test_exact_match_only(self):
        # equivalent regex, different spelling
        assert lookup_description(r"^\d+$") == "Custom pattern"
        assert lookup_description("^[0-9]+$") == "Numbers only"

    def test_find_pattern_id(self):
        assert find_pattern_id(PREDEFINED_PATTERNS["cgpa"].pattern) == "cgpa"
        assert find_pattern_id("^nope$") is None


class TestCombinePatterns:
    """Tests for combine_patterns"""

    def test_empty(self):
        assert combine_patterns([]) == ""

    def test_single_pattern_unchanged(self):
        assert combine_patterns(["^abc$"]) == "^abc$"

    def test_combines_with_lookaheads(self):
        combined = combine_patterns(["abc", "def"])

        assert combined == "^(?=.*abc)(?=.*def).*$"
        assert compile_pattern(combined).search("xx def abc")
        assert not compile_pattern(combined).search("abc only")


class TestCheckSample:
    """Tests for check_sample"""

    def test_match_and_mismatch(self):
        assert check_sample("^[0-9]+$", "123") is True
        assert check_sample("^[0-9]+$", "12a") is False

    def test_malformed_pattern(self):
        assert check_sample("[", "anything") is None

    def test_trailing_newline_is_not_a_match(self):
        assert check_sample("^[0-9]+$", "123\n") is False


class TestBrowserDialect:
    """Tests for translate_pattern / compile_pattern"""

    def test_dollar_only_matches_at_end(self):
        assert compile_pattern("^ok$").search("ok")
        assert not compile_pattern("^ok$").search("ok\n")

    def test_escaped_and_class_dollar_kept(self):
        assert translate_pattern(r"^\$[0-9$]+$") == r"^\$[0-9$]+\Z"
        assert compile_pattern(r"^\$[0-9$]+$").search("$12$")

    def test_digits_and_word_chars_are_ascii(self):
        assert not compile_pattern(r"^\d+$").search("१२")
        assert not compile_pattern(r"^\w+$").search("café")
        assert compile_pattern(r"^\w+$").search("cafe_1")

    def test_whitespace_includes_unicode_spaces(self):
        assert compile_pattern(r"^a\sb$").search("a b")
        assert not compile_pattern(r"^\S+$").search("a\u3000b")

    def test_dot_stops_at_line_terminators(self):
        assert compile_pattern("^a.b$").search("a-b")
        assert not compile_pattern("^a.b$").search("a\rb")
        assert not compile_pattern("^a.b$").search("a\u2028b")

    def test_empty_classes(self):
        assert not compile_pattern("a[]").search("a]")
        assert compile_pattern("^[^]$").search("\n")

    def test_named_groups(self):
        assert translate_pattern(r"(?<year>[0-9]{4})-\k<year>") == r"(?P<year>[0-9]{4})-(?P=year)"
        assert compile_pattern(r"^(?<year>[0-9]{4})-\k<year>$").search("2024-2024")

    def test_lookbehind_untouched(self):
        assert translate_pattern("(?<=a)b") == "(?<=a)b"
        assert translate_pattern("(?<!a)b") == "(?<!a)b"

    def test_malformed_pattern_still_raises(self):
        with pytest.raises(re.error):
            compile_pattern("(unclosed")
