"""
module syntaxparts.exceptions

Contains all definitions of exceptions thrown by syntax parts and the
syntaxparts configuration
"""

from .invalidconfigexception import InvalidConfigException
from .invalidindexexception import InvalidIndexException
from .invalidsyntaxpartexception import InvalidSyntaxPartException
from .nomatchexception import NoMatchException
