"""
module syntaxparts.parts.stringoptionssyntax

Contains the definition of the StringOptionsSyntax class, a syntax part that
matches any one of a fixed set of literal strings
"""

from typing import Any, Iterable, List, Tuple

from ..abstract import SyntaxPart
from ..dataclasses import Suggestion, SyntaxMatch
from ..exceptions import InvalidSyntaxPartException, NoMatchException
from .fixedstringsyntax import FixedStringSyntax


class StringOptionsSyntax(SyntaxPart):
    """
    class StringOptionsSyntax

    A syntax part that matches any one of a fixed set of literal strings. Options
    are tried longest first (ties keep the order they were provided in) so that a
    longer full match is preferred over a shorter option that prefixes it.
    """

    __option_matchers: Tuple[FixedStringSyntax, ...]

    def __init__(self: "StringOptionsSyntax", options: Iterable[str]) -> None:
        if isinstance(options, str):
            raise InvalidSyntaxPartException(
                f"String options must be a collection of strings, got the string {options!r}"
            )

        option_list: List[str] = list(options)
        if len(option_list) == 0:
            raise InvalidSyntaxPartException("String options require at least one option")

        # sorted() is stable with reverse=True, so equal lengths keep input order
        self.__option_matchers = tuple(
            FixedStringSyntax(option)
            for option in sorted(option_list, key=len, reverse=True)
        )

    @property
    def option_matchers(self: "StringOptionsSyntax") -> Tuple[FixedStringSyntax, ...]:
        return self.__option_matchers

    @property
    def options(self: "StringOptionsSyntax") -> Tuple[str, ...]:
        return tuple(matcher.matcher for matcher in self.__option_matchers)

    def match(self: "StringOptionsSyntax", value: str, index: int) -> SyntaxMatch | None:
        matches: List[SyntaxMatch] = [
            option_match
            for matcher in self.__option_matchers
            if (option_match := matcher.match(value, index)) is not None
        ]

        for option_match in matches:
            if option_match.is_full:
                return option_match

        return matches[0] if len(matches) > 0 else None

    def get_suggestions(
        self: "StringOptionsSyntax", value: str, index: int
    ) -> List[Suggestion]:
        suggestions: List[Suggestion] = [
            suggestion
            for matcher in self.__option_matchers
            if matcher.match(value, index) is not None
            for suggestion in matcher.get_suggestions(value, index)
        ]

        if len(suggestions) == 0:
            raise NoMatchException(f"{self!r} does not match {value!r} at {index}")

        return suggestions

    def _key(self: "StringOptionsSyntax") -> Tuple[Any, ...]:
        return self.options
