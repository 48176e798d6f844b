"""
module syntaxparts.abstract

Contains the definition of the SyntaxPart abstract base class that is
implemented by every individual syntax part
"""

from .syntaxpart import SyntaxPart
