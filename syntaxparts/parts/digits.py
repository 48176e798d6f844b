"""
module syntaxparts.parts.digits

Contains the digit run helpers shared by the numeric syntax parts
"""

from .. import constants


def is_number_char(char: str) -> bool:
    """
    Returns whether or not the provided character is one of the ten ASCII digits

    Args:
        char (str): The single character to classify

    Returns:
        bool: True if char is one of '0' through '9'

    Raises:
        Nothing
    """

    return constants.DIGIT_FIRST <= char <= constants.DIGIT_LAST


def get_number_at(value: str, index: int) -> str | None:
    """
    Matches a run of digits at the provided position

    Args:
        value (str): The full input string
        index (int): The position to start reading digits from

    Returns:
        str | None: The digits found (as a string) if there are any, an empty
            string if index is the end of value so a number could still be
            appended, or None if a non-digit is already present at index

    Raises:
        Nothing
    """

    end = index

    # keep reading digits until we hit the end of the string or a non-digit
    while end < len(value) and is_number_char(value[end]):
        end += 1

    if end != index:
        return value[index:end]

    if end == len(value):
        return ""

    return None
