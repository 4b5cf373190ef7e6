"""
module termprompt.prompt.injectionchannel

Contains the definition of the InjectionChannel class, a single slot holding a
pre-supplied answer that a prompt session consumes instead of reading from
the terminal
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

_empty = object()


class InjectionChannel:
    """
    class InjectionChannel

    A single slot holding a pre-supplied answer. Passing a channel that holds
    a value to a prompt session makes it run headless: the value is validated
    in place of typed input and the slot is released once the prompt
    resolves or fails. Used for unit tests and pre-selected answers
    """

    __value: Any

    def __init__(self: "InjectionChannel", value: Any = _empty) -> None:
        self.__value = value

    @property
    def has_value(self: "InjectionChannel") -> bool:
        return self.__value is not _empty

    def inject(self: "InjectionChannel", value: Any) -> None:
        """
        Stores a value in this channel, replacing any value that was stored
        before. None is a valid value to inject

        Args:
            value (Any): The raw value to answer the next prompt with

        Returns:
            Nothing

        Raises:
            Nothing
        """

        logger.debug("injected value %r", value)
        self.__value = value

    def release(self: "InjectionChannel") -> None:
        if self.has_value:
            logger.debug("released injected value %r", self.__value)

        self.__value = _empty

    @property
    def value(self: "InjectionChannel") -> Any:
        if not self.has_value:
            raise LookupError("No value has been injected")

        return self.__value
