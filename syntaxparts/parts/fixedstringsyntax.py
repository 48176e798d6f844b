"""
module syntaxparts.parts.fixedstringsyntax

Contains the definition of the FixedStringSyntax class, a syntax part that
matches one specific literal string
"""

from typing import Any, List, Tuple

from ..abstract import SyntaxPart
from ..dataclasses import Suggestion, SyntaxMatch
from ..exceptions import InvalidSyntaxPartException, NoMatchException
from ..logger import get_logger

logger = get_logger("parts")


class FixedStringSyntax(SyntaxPart):
    """
    class FixedStringSyntax

    A syntax part that matches one specific, non-empty literal string
    """

    __matcher: str

    def __init__(self: "FixedStringSyntax", matcher: str) -> None:
        if not isinstance(matcher, str) or len(matcher) == 0:
            raise InvalidSyntaxPartException(
                f"A fixed string syntax requires a non-empty string, got {matcher!r}"
            )

        self.__matcher = matcher

    @property
    def matcher(self: "FixedStringSyntax") -> str:
        return self.__matcher

    def match(self: "FixedStringSyntax", value: str, index: int) -> SyntaxMatch | None:
        self._check_index(value, index)

        # compare char by char over the common size
        compared: str = value[index : index + len(self.__matcher)]
        if not self.__matcher.startswith(compared):
            logger.trace("{!r} rejected {!r} at {}", self, value, index)
            return None

        # we ran out of a string without a mismatch, which one?
        if len(compared) == len(self.__matcher):
            return SyntaxMatch.full(len(compared))

        return SyntaxMatch.partial(len(compared))

    def get_suggestions(
        self: "FixedStringSyntax", value: str, index: int
    ) -> List[Suggestion]:
        if self.match(value, index) is None:
            raise NoMatchException(f"{self!r} does not match {value!r} at {index}")

        return [Suggestion(show_as=self.__matcher, value=self.__matcher)]

    def _key(self: "FixedStringSyntax") -> Tuple[Any, ...]:
        return (self.__matcher,)
