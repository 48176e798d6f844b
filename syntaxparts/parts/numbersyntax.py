"""
module syntaxparts.parts.numbersyntax

Contains the definition of the NumberSyntax class, a syntax part that matches
a run of digits of any length
"""

from typing import Any, List, Tuple

from ..abstract import SyntaxPart
from ..config import SyntaxConfig
from ..dataclasses import Suggestion, SyntaxMatch
from ..exceptions import NoMatchException
from ..logger import get_logger
from .digits import get_number_at

logger = get_logger("parts")


class NumberSyntax(SyntaxPart):
    """
    class NumberSyntax

    A syntax part that matches a run of one or more digits of any length. Any
    number, once present, is a full match and any empty space at the end of the
    input is a potential number.
    """

    __config: SyntaxConfig

    def __init__(self: "NumberSyntax", config: SyntaxConfig | None = None) -> None:
        self.__config = config if config is not None else SyntaxConfig.make_default()

    @property
    def config(self: "NumberSyntax") -> SyntaxConfig:
        return self.__config

    def match(self: "NumberSyntax", value: str, index: int) -> SyntaxMatch | None:
        self._check_index(value, index)

        matching_number: str | None = get_number_at(value, index)
        if matching_number is None:
            logger.trace("{!r} rejected {!r} at {}", self, value, index)
            return None

        if len(matching_number) > 0:
            return SyntaxMatch.full(len(matching_number))

        return SyntaxMatch.partial(0)

    def get_suggestions(self: "NumberSyntax", value: str, index: int) -> List[Suggestion]:
        self._check_index(value, index)

        matching_number: str | None = get_number_at(value, index)
        if matching_number is None:
            raise NoMatchException(f"{self!r} does not match {value!r} at {index}")

        if len(matching_number) == 0:
            return [Suggestion(show_as=self.__config.number_placeholder, value=None)]

        return [Suggestion(show_as=matching_number, value=matching_number)]

    def _key(self: "NumberSyntax") -> Tuple[Any, ...]:
        return (self.__config,)
