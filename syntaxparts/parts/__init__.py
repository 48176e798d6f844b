"""
module syntaxparts.parts

Contains the definitions of every available syntax part implementation
"""

from .fixedlengthnumbersyntax import FixedLengthNumberSyntax
from .fixedstringsyntax import FixedStringSyntax
from .numbersyntax import NumberSyntax
from .stringoptionssyntax import StringOptionsSyntax
