"""
module syntaxparts.__init__

Contains the public imports of the syntaxparts library: the SyntaxPart interface,
its implementations and the match/suggestion dataclasses they return. Also contains
definitions that indicate the current version of syntaxparts.
"""

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

from .abstract import SyntaxPart
from .config import SyntaxConfig
from .dataclasses import Suggestion, SyntaxMatch
from .enums import MatchType
from .parts import (
    FixedLengthNumberSyntax,
    FixedStringSyntax,
    NumberSyntax,
    StringOptionsSyntax,
)
from .syntaxpartsexception import SyntaxPartsException
