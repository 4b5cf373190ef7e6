"""
module termprompt.config.promptconfig

Contains the definition of the PromptConfig class, a dataclass that represents
the user's default prompt appearance and key bindings
"""

import copy
from dataclasses import dataclass, field
import logging
import os
from typing import Dict, List, Type

from dataclasses_json import dataclass_json, Undefined
import platformdirs

from .. import constants

logger = logging.getLogger(__name__)


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class PromptConfig:
    """
    class PromptConfig

    Dataclass that represents the user's default prompt appearance and key
    bindings. Per-call prompt options always take precedence over it
    """

    version: str
    pointer: str = constants.FIGURE_POINTER_SMALL
    prefix: str = constants.DEFAULT_PREFIX
    indent: str = ""
    cbreak: bool = False
    keys: Dict[str, List[str]] = field(
        default_factory=lambda: copy.deepcopy(constants.DEFAULT_KEYS)
    )
    style: Dict[str, str] = field(
        default_factory=lambda: dict(constants.DEFAULT_STYLE)
    )
    max_end_of_stream_reads: int = constants.MAX_END_OF_STREAM_READS

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
            platformdirs.user_config_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.CONFIG_VERSION,
            ),
            "config.json",
        )

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)

        # then, create the file if needed
        if not os.path.isfile(file_path):
            PromptConfig.make_default().to_file(file_path)

    @classmethod
    def from_file(cls: Type["PromptConfig"], path: str) -> "PromptConfig | None":
        """
        Constructs a PromptConfig instance from the provided JSON file. A file
        containing the default configuration is created if none exists yet

        Args:
            path (str): The file to read JSON config data from

        Returns:
            PromptConfig | None: A PromptConfig instance containing the data from
                the provided file or None if the file couldn't be read

        Raises:
            Nothing
        """

        # pylint: disable=broad-exception-caught
        try:
            PromptConfig._ensure_file(path)

            with open(path, "r", encoding="utf-8") as config_file:
                # pylint: disable=no-member
                return cls.from_json(config_file.read())  # type: ignore
        except Exception as exc:
            logger.warning("Unable to read config from target path '%s': %s", path, exc)
            return None

    @classmethod
    def load(cls: Type["PromptConfig"], path: str | None = None) -> "PromptConfig":
        config: PromptConfig | None = cls.from_file(
            path if path is not None else cls.default_path()
        )

        return config if config is not None else cls.make_default()

    @staticmethod
    def make_default() -> "PromptConfig":
        """
        Constructs a PromptConfig instance containing the default configuration

        Args:
            None

        Returns:
            PromptConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return PromptConfig(version=constants.CONFIG_VERSION)

    def to_file(self: "PromptConfig", output_path: str) -> None:
        """
        Writes this PromptConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2, ensure_ascii=False), file=output_file)
