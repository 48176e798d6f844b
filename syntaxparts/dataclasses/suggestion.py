"""
module syntaxparts.dataclasses.suggestion

Contains the definition of the Suggestion dataclass, a candidate completion
offered by a syntax part
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """
    class Suggestion

    A candidate completion offered by a syntax part. show_as is the text that
    is displayed to the user, value is the text that is inserted if the user
    accepts the suggestion. value is None if the suggestion is a template
    (e.g., '{number}') for which no concrete text can be provided.

    Suggestions for adjacent parts may be joined with the + operator, which
    concatenates show_as and value independently.
    """

    show_as: str
    value: str | None

    @property
    def is_template(self: "Suggestion") -> bool:
        """
        Returns whether or not this suggestion is a template with nothing
        that can be inserted

        Args:
            None

        Returns:
            bool: True if this suggestion has no insertable value

        Raises:
            Nothing
        """

        return self.value is None

    def __add__(self: "Suggestion", other: "Suggestion") -> "Suggestion":
        if not isinstance(other, Suggestion):
            return NotImplemented

        # a template anywhere in the chain leaves nothing concrete to insert
        return Suggestion(
            show_as=self.show_as + other.show_as,
            value=(
                None
                if self.value is None or other.value is None
                else self.value + other.value
            ),
        )
