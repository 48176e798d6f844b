"""
module syntaxparts.abstract.syntaxpart

Contains the definition of the SyntaxPart class, an abstract base class that is
implemented by every syntax part (fixed strings, numbers, string options, etc.)
"""

from abc import ABCMeta, abstractmethod
from typing import Any, List, Tuple

from ..dataclasses import Suggestion, SyntaxMatch
from ..exceptions import InvalidIndexException


class SyntaxPart(metaclass=ABCMeta):
    """
    class SyntaxPart

    Abstract base class that is implemented by every syntax part. A syntax part
    is one composable unit of a grammar that can classify the input at a given
    position and suggest completions for it. Syntax parts hold no per-call state
    and are immutable once constructed.
    """

    @abstractmethod
    def match(self: "SyntaxPart", value: str, index: int) -> SyntaxMatch | None:
        """
        Checks whether this syntax part matches, or could match if some text were
        appended to the string, starting at the provided index.

        Args:
            value (str): The full input string
            index (int): The position in value at which this part begins

        Returns:
            SyntaxMatch | None: A full match if the part is completely present, a
                partial match if the end of the string was reached without breaking
                any rules, or None if the part cannot match here under any extension
                of the input

        Raises:
            InvalidIndexException: If index lies outside of value
        """

    @abstractmethod
    def get_suggestions(self: "SyntaxPart", value: str, index: int) -> List[Suggestion]:
        """
        Given that this syntax part matched (fully or partially) at the provided
        index, returns a list of values that would make this part match fully.

        Args:
            value (str): The full input string
            index (int): The position in value at which this part begins

        Returns:
            List[Suggestion]: The candidate completions for this part

        Raises:
            InvalidIndexException: If index lies outside of value
            NoMatchException: If this part does not match value at index
        """

    @abstractmethod
    def _key(self: "SyntaxPart") -> Tuple[Any, ...]: ...

    @staticmethod
    def _check_index(value: str, index: int) -> None:
        if not 0 <= index <= len(value):
            raise InvalidIndexException(
                f"Index {index} is outside of the input string {value!r}"
            )

    def __eq__(self: "SyntaxPart", other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self: "SyntaxPart") -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self: "SyntaxPart") -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._key()))})"
