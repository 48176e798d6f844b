"""
module syntaxparts.prompt

Contains the prompt_toolkit integrations that let a single syntax part drive
completion and validation of a prompt_toolkit buffer
"""

from .syntaxpartcompleter import SyntaxPartCompleter
from .syntaxpartvalidator import SyntaxPartValidator
