"""
module syntaxparts.prompt.syntaxpartcompleter

Contains the definition of the SyntaxPartCompleter class, a prompt_toolkit
Completer that offers the suggestions of a single syntax part
"""

from typing import Iterable, Tuple

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from ..abstract import SyntaxPart
from ..dataclasses import SyntaxMatch
from ..parts import StringOptionsSyntax


class SyntaxPartCompleter(Completer):
    """
    class SyntaxPartCompleter

    A prompt_toolkit Completer that offers the suggestions of a single syntax part
    for the text before the cursor. Completions are only offered while the part
    runs up to the cursor and each one replaces exactly what was consumed. Template
    suggestions have nothing to insert and are not offered.
    """

    __index: int
    __part: SyntaxPart

    def __init__(self: "SyntaxPartCompleter", part: SyntaxPart, index: int = 0) -> None:
        super().__init__()

        self.__part = part
        self.__index = index

    @property
    def part(self: "SyntaxPartCompleter") -> SyntaxPart:
        return self.__part

    def _candidate_parts(self: "SyntaxPartCompleter") -> Tuple[SyntaxPart, ...]:
        # each option consumes its own prefix of the text, so each is completed alone
        if isinstance(self.__part, StringOptionsSyntax):
            return self.__part.option_matchers

        return (self.__part,)

    def get_completions(
        self: "SyntaxPartCompleter", document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        text: str = document.text_before_cursor
        if self.__index > len(text):
            return

        for candidate_part in self._candidate_parts():
            part_match: SyntaxMatch | None = candidate_part.match(text, self.__index)
            if part_match is None or self.__index + part_match.consumed != len(text):
                continue

            for suggestion in candidate_part.get_suggestions(text, self.__index):
                if suggestion.is_template:
                    continue

                yield Completion(
                    suggestion.value,
                    start_position=-part_match.consumed,
                    display=suggestion.show_as,
                )
