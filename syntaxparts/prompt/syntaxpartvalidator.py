"""
module syntaxparts.prompt.syntaxpartvalidator

Contains the definition of the SyntaxPartValidator class, a prompt_toolkit
Validator that accepts a buffer only if a single syntax part matches all of it
"""

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from ..abstract import SyntaxPart
from ..dataclasses import SyntaxMatch


class SyntaxPartValidator(Validator):
    """
    class SyntaxPartValidator

    A prompt_toolkit Validator that accepts a buffer only if a single syntax part
    matches everything from index to the end of the text. Partial matches are
    rejected unless allow_partial is set.
    """

    __allow_partial: bool
    __index: int
    __part: SyntaxPart

    def __init__(
        self: "SyntaxPartValidator",
        part: SyntaxPart,
        index: int = 0,
        allow_partial: bool = False,
    ) -> None:
        self.__part = part
        self.__index = index
        self.__allow_partial = allow_partial

    def validate(self: "SyntaxPartValidator", document: Document) -> None:
        text: str = document.text
        if self.__index > len(text):
            raise ValidationError(len(text), message="Input is too short")

        part_match: SyntaxMatch | None = self.__part.match(text, self.__index)
        if part_match is None:
            raise ValidationError(self.__index, message="Input does not match")

        end: int = self.__index + part_match.consumed
        if part_match.is_partial and not self.__allow_partial:
            raise ValidationError(end, message="Input is incomplete")

        if end < len(text):
            raise ValidationError(end, message="Unexpected input after match")
