"""
module syntaxparts.parts.fixedlengthnumbersyntax

Contains the definition of the FixedLengthNumberSyntax class, a syntax part that
matches a number with exactly a fixed count of digits
"""

from typing import Any, List, Tuple

from ..abstract import SyntaxPart
from ..config import SyntaxConfig
from ..dataclasses import Suggestion, SyntaxMatch
from ..exceptions import InvalidSyntaxPartException, NoMatchException
from ..logger import get_logger
from .digits import get_number_at

logger = get_logger("parts")


class FixedLengthNumberSyntax(SyntaxPart):
    """
    class FixedLengthNumberSyntax

    A syntax part that matches exactly required_length digits. Shorter runs of
    digits are partial matches and are suggested padded on the right up to the
    required length, longer runs never match.
    """

    __config: SyntaxConfig
    __required_length: int

    def __init__(
        self: "FixedLengthNumberSyntax",
        required_length: int,
        config: SyntaxConfig | None = None,
    ) -> None:
        # bool is an int subclass but True is not a length
        if (
            not isinstance(required_length, int)
            or isinstance(required_length, bool)
            or required_length < 1
        ):
            raise InvalidSyntaxPartException(
                f"A fixed length number requires a positive length, got {required_length!r}"
            )

        self.__required_length = required_length
        self.__config = config if config is not None else SyntaxConfig.make_default()

    @property
    def config(self: "FixedLengthNumberSyntax") -> SyntaxConfig:
        return self.__config

    @property
    def required_length(self: "FixedLengthNumberSyntax") -> int:
        return self.__required_length

    def match(
        self: "FixedLengthNumberSyntax", value: str, index: int
    ) -> SyntaxMatch | None:
        self._check_index(value, index)

        matching_number: str | None = get_number_at(value, index)
        if matching_number is None:
            logger.trace("{!r} rejected {!r} at {}", self, value, index)
            return None

        consumed: int = len(matching_number)
        if consumed == self.__required_length:
            return SyntaxMatch.full(consumed)

        if consumed < self.__required_length:
            return SyntaxMatch.partial(consumed)

        # too many digits, not even a partial match
        logger.trace(
            "{!r} rejected {} digits in {!r} at {}", self, consumed, value, index
        )
        return None

    def get_suggestions(
        self: "FixedLengthNumberSyntax", value: str, index: int
    ) -> List[Suggestion]:
        if self.match(value, index) is None:
            raise NoMatchException(f"{self!r} does not match {value!r} at {index}")

        matching_number: str = get_number_at(value, index)
        if len(matching_number) == 0:
            return [
                Suggestion(
                    show_as=self.__config.render_fixed_length_placeholder(
                        self.__required_length
                    ),
                    value=None,
                )
            ]

        extended_number: str = matching_number.ljust(
            self.__required_length, self.__config.pad_character
        )
        return [Suggestion(show_as=extended_number, value=extended_number)]

    def _key(self: "FixedLengthNumberSyntax") -> Tuple[Any, ...]:
        return (self.__required_length, self.__config)
