"""Unit tests for StringOptionsSyntax."""

import pytest

from syntaxparts import StringOptionsSyntax, Suggestion, SyntaxMatch
from syntaxparts.exceptions import InvalidSyntaxPartException, NoMatchException


class TestStringOptionsSyntaxMatch:
    """Tests for StringOptionsSyntax.match."""

    def test_full_preferred_over_partial(self):
        """Test a full match wins over a longer option that is only partial."""
        assert StringOptionsSyntax(["a", "ab"]).match("a", 0) == SyntaxMatch.full(1)

    def test_longest_full_match_preferred(self):
        """Test the longest full match wins when options prefix each other."""
        syntax = StringOptionsSyntax(["a", "ab"])
        assert syntax.match("ab", 0) == SyntaxMatch.full(2)
        assert syntax.match("abc", 0) == SyntaxMatch.full(2)

    def test_partial_when_no_full_match(self):
        """Test the first partial match is returned when nothing is full."""
        syntax = StringOptionsSyntax(["GET", "POST", "PUT"])
        assert syntax.match("P", 0) == SyntaxMatch.partial(1)
        assert syntax.match("PO", 0) == SyntaxMatch.partial(2)

    def test_end_of_string_is_partial(self):
        """Test the end of the input is a partial match."""
        assert StringOptionsSyntax(["GET", "POST"]).match("", 0) == SyntaxMatch.partial(0)

    def test_no_option_matches(self):
        """Test input that matches no option is rejected."""
        assert StringOptionsSyntax(["GET", "POST"]).match("DELETE", 0) is None

    def test_match_at_index(self):
        """Test matching starts at the given index."""
        syntax = StringOptionsSyntax(["http", "https"])
        assert syntax.match("=https", 1) == SyntaxMatch.full(5)
        assert syntax.match("=http:", 1) == SyntaxMatch.full(4)


class TestStringOptionsSyntaxSuggestions:
    """Tests for StringOptionsSyntax.get_suggestions."""

    def test_all_viable_options_suggested(self):
        """Test every option still matching is offered, not just the best."""
        assert StringOptionsSyntax(["a", "ab"]).get_suggestions("a", 0) == [
            Suggestion(show_as="ab", value="ab"),
            Suggestion(show_as="a", value="a"),
        ]

    def test_rejected_options_not_suggested(self):
        """Test options that no longer match are dropped."""
        assert StringOptionsSyntax(["GET", "POST", "PUT"]).get_suggestions(
            "PU", 0
        ) == [Suggestion(show_as="PUT", value="PUT")]

    def test_everything_suggested_at_end(self):
        """Test all options are offered when nothing has been typed."""
        suggestions = StringOptionsSyntax(["GET", "POST", "PUT"]).get_suggestions("", 0)
        assert [suggestion.value for suggestion in suggestions] == ["POST", "GET", "PUT"]

    def test_no_match_raises(self):
        """Test suggestions are refused when no option matches."""
        with pytest.raises(NoMatchException):
            StringOptionsSyntax(["GET", "POST"]).get_suggestions("X", 0)


class TestStringOptionsSyntaxOrdering:
    """Tests for the longest-first option ordering."""

    def test_longest_first(self):
        """Test options are ordered by descending length."""
        assert StringOptionsSyntax(["a", "abc", "ab"]).options == ("abc", "ab", "a")

    def test_ties_keep_input_order(self):
        """Test options of equal length keep the order they were given in."""
        assert StringOptionsSyntax(["put", "get", "post"]).options == (
            "post",
            "put",
            "get",
        )
        assert StringOptionsSyntax(["get", "put", "post"]).options == (
            "post",
            "get",
            "put",
        )

    @pytest.mark.parametrize("value", ["", "a", "ab", "abc", "b"])
    def test_input_order_irrelevant_across_lengths(self, value):
        """Test options of different lengths behave the same in any order."""
        forward = StringOptionsSyntax(["a", "ab"])
        backward = StringOptionsSyntax(["ab", "a"])

        assert forward.match(value, 0) == backward.match(value, 0)
        if forward.match(value, 0) is not None:
            assert forward.get_suggestions(value, 0) == backward.get_suggestions(
                value, 0
            )

        assert forward == backward

    def test_accepts_any_iterable(self):
        """Test options may be given as any iterable of strings."""
        assert StringOptionsSyntax(option for option in ("x", "yy")).options == (
            "yy",
            "x",
        )


class TestStringOptionsSyntaxConstruction:
    """Tests for StringOptionsSyntax construction."""

    def test_empty_options(self):
        """Test at least one option is required."""
        with pytest.raises(InvalidSyntaxPartException):
            StringOptionsSyntax([])

    def test_plain_string(self):
        """Test a bare string is not split into characters."""
        with pytest.raises(InvalidSyntaxPartException):
            StringOptionsSyntax("abc")

    def test_empty_option(self):
        """Test an empty option string is rejected."""
        with pytest.raises(InvalidSyntaxPartException):
            StringOptionsSyntax(["a", ""])

    def test_repr(self):
        """Test the repr lists the ordered options."""
        assert repr(StringOptionsSyntax(["a", "ab"])) == "StringOptionsSyntax('ab', 'a')"
