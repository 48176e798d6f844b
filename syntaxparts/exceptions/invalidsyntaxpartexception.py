"""
module syntaxparts.exceptions.invalidsyntaxpartexception

Contains the definition of the InvalidSyntaxPartException class, an exception
that is thrown whenever a syntax part is constructed with arguments that would
leave its matching behavior undefined (e.g., an empty literal string)
"""

from ..syntaxpartsexception import SyntaxPartsException


class InvalidSyntaxPartException(SyntaxPartsException):
    """
    class InvalidSyntaxPartException

    An exception that is thrown whenever a syntax part is constructed with
    arguments that would leave its matching behavior undefined
    """
