"""
module syntaxparts.dataclasses

Contains all dataclass definitions that make up the result vocabulary shared
by every syntax part, namely matches and suggestions
"""

from .suggestion import Suggestion
from .syntaxmatch import SyntaxMatch
