from syntaxparts import __version__

APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_FILE_NAME: str = "config.json"
CONFIG_VERSION: str = "0.1"

DIGIT_FIRST: str = "0"
DIGIT_LAST: str = "9"

FIXED_LENGTH_NUMBER_PLACEHOLDER: str = "{{{length}-digit number}}"
NUMBER_PLACEHOLDER: str = "{number}"
PAD_CHARACTER: str = "0"
