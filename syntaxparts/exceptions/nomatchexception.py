"""
module syntaxparts.exceptions.nomatchexception

Contains the definition of the NoMatchException class, an exception that is
thrown whenever suggestions are requested from a syntax part that does not
match the input at the requested position
"""

from ..syntaxpartsexception import SyntaxPartsException


class NoMatchException(SyntaxPartsException):
    """
    class NoMatchException

    An exception that is thrown whenever suggestions are requested from a
    syntax part that does not match the input at the requested position
    """
