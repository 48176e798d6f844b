"""
module syntaxparts.exceptions.invalidconfigexception

Contains the definition of the InvalidConfigException class, an exception that
is thrown whenever a SyntaxConfig is constructed with a value that syntax parts
are unable to use
"""

from ..syntaxpartsexception import SyntaxPartsException


class InvalidConfigException(SyntaxPartsException):
    """
    class InvalidConfigException

    An exception that is thrown whenever a SyntaxConfig is constructed with a
    value that syntax parts are unable to use
    """
