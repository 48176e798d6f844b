"""
module syntaxparts.config.syntaxconfig

Contains the definition of the SyntaxConfig class, a dataclass that represents the
display and padding settings used by syntax parts when building suggestions
"""

from dataclasses import dataclass
import json
import os
from typing import Type

from dataclasses_json import dataclass_json
import platformdirs

from .. import constants
from ..exceptions import InvalidConfigException
from ..logger import get_logger

logger = get_logger("config")


@dataclass_json
@dataclass(frozen=True)
class SyntaxConfig:
    """
    class SyntaxConfig

    Dataclass that represents the display and padding settings used by syntax
    parts when building suggestions
    """

    version: str
    number_placeholder: str
    fixed_length_number_placeholder: str
    pad_character: str

    def __post_init__(self: "SyntaxConfig") -> None:
        if len(self.pad_character) != 1 or not (
            constants.DIGIT_FIRST <= self.pad_character <= constants.DIGIT_LAST
        ):
            raise InvalidConfigException(
                f"Pad character must be a single digit, got {self.pad_character!r}"
            )

        try:
            rendered_placeholders = {
                self.fixed_length_number_placeholder.format(length=length)
                for length in (1, 2)
            }
        except (IndexError, KeyError, ValueError) as exc:
            raise InvalidConfigException(
                "Invalid fixed length number placeholder "
                f"{self.fixed_length_number_placeholder!r}: {exc}"
            ) from exc

        # the rendered label has to change with the length or it isn't being shown
        if len(rendered_placeholders) != 2:
            raise InvalidConfigException(
                "Fixed length number placeholder "
                f"{self.fixed_length_number_placeholder!r} must contain a {{length}} field"
            )

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path that the current user's configuration should be read from

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            constants.CONFIG_FILE_NAME,
        )

    @staticmethod
    def _ensure_directory(dir_path: str) -> None:
        if len(dir_path) > 0 and not os.path.isdir(dir_path):
            os.makedirs(dir_path)

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        SyntaxConfig._ensure_directory(os.path.dirname(file_path))

        # then, create the file if needed
        if not os.path.isfile(file_path):
            logger.debug(f"Writing default config to {file_path}")
            SyntaxConfig.make_default().to_file(file_path)

    @classmethod
    def from_file(cls: Type["SyntaxConfig"], path: str) -> "SyntaxConfig | None":
        """
        Constructs a SyntaxConfig instance from the provided JSON file, creating
        a file with the default configuration if none exists yet. Malformed JSON,
        missing keys, a top level that is not an object and unusable values are
        all logged and give None

        Args:
            path (str): The file to read JSON config data from

        Returns:
            SyntaxConfig | None: A SyntaxConfig instance containing the data from
                the provided file or None if the file could not be read

        Raises:
            OSError: If a default config file could not be created
        """

        # check if the config file exists and create it if not
        SyntaxConfig._ensure_file(path)

        # dataclasses_json raises KeyError for missing keys and AttributeError
        # when the top level is not an object
        try:
            with open(path, "r", encoding="utf-8") as config_file:
                return SyntaxConfig.from_dict(json.loads(config_file.read()))
        except (
            AttributeError,
            InvalidConfigException,
            KeyError,
            OSError,
            TypeError,
            ValueError,
        ) as exc:
            logger.warning(f"Unable to read config from target path '{path}': {exc}")
            return None

    @staticmethod
    def make_default() -> "SyntaxConfig":
        """
        Constructs a SyntaxConfig instance containing the default configuration

        Args:
            None

        Returns:
            SyntaxConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return SyntaxConfig(
            version=constants.CONFIG_VERSION,
            number_placeholder=constants.NUMBER_PLACEHOLDER,
            fixed_length_number_placeholder=constants.FIXED_LENGTH_NUMBER_PLACEHOLDER,
            pad_character=constants.PAD_CHARACTER,
        )

    def render_fixed_length_placeholder(self: "SyntaxConfig", length: int) -> str:
        return self.fixed_length_number_placeholder.format(length=length)

    def to_file(self: "SyntaxConfig", output_path: str) -> None:
        """
        Writes this SyntaxConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            OSError: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2), file=output_file)
