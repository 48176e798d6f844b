"""
module syntaxparts.syntaxpartsexception

Contains the definition of the SyntaxPartsException class, the parent of all
exceptions directly thrown by syntaxparts
"""


class SyntaxPartsException(RuntimeError):
    """
    class SyntaxPartsException

    The parent class of all exceptions directly thrown by syntaxparts. Note that
    a syntax part failing to match is not an exception: match() returns None.
    """
