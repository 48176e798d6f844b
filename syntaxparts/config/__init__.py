"""
module syntaxparts.config

Contains the definition of the SyntaxConfig class, the set of display and padding
settings used by syntax parts when building suggestions
"""

from .syntaxconfig import SyntaxConfig
