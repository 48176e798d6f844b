"""
module syntaxparts.exceptions.invalidindexexception

Contains the definition of the InvalidIndexException class, an exception that
is thrown whenever a syntax part is asked to match at a position that lies
outside of the input string
"""

from ..syntaxpartsexception import SyntaxPartsException


class InvalidIndexException(SyntaxPartsException):
    """
    class InvalidIndexException

    An exception that is thrown whenever a syntax part is asked to match at
    a position that lies outside of the input string
    """
