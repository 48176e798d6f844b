"""
module syntaxparts.enums

Contains the definitions of all enum classes shared by every syntax part
"""

from .matchtype import MatchType
