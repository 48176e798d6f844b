"""
module syntaxparts.dataclasses.syntaxmatch

Contains the definition of the SyntaxMatch dataclass, the result of a syntax part
successfully matching (or possibly matching) some input
"""

from dataclasses import dataclass

from ..enums import MatchType


@dataclass(frozen=True)
class SyntaxMatch:
    """
    class SyntaxMatch

    The result of a syntax part matching some input. A FULL match means the part
    is completely present and valid as-is. A PARTIAL match means the part could
    become valid if more content were appended, which is always the case at the
    exact end of the input string.
    """

    type: MatchType
    consumed: int

    @staticmethod
    def full(consumed: int) -> "SyntaxMatch":
        return SyntaxMatch(type=MatchType.FULL, consumed=consumed)

    @staticmethod
    def partial(consumed: int) -> "SyntaxMatch":
        return SyntaxMatch(type=MatchType.PARTIAL, consumed=consumed)

    @property
    def is_full(self: "SyntaxMatch") -> bool:
        return self.type == MatchType.FULL

    @property
    def is_partial(self: "SyntaxMatch") -> bool:
        return self.type == MatchType.PARTIAL
