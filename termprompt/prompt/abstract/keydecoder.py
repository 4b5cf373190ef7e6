"""
module termprompt.prompt.abstract.keydecoder

Contains the definition of the KeyDecoder class, an abstract base class that
is extended by all integrations that turn raw terminal bytes into key events
"""

from abc import ABCMeta, abstractmethod
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..dataclasses import KeyEvent


class KeyDecoder(metaclass=ABCMeta):
    """
    class KeyDecoder

    Abstract base class that is extended by all integrations that turn
    raw terminal bytes into key events (i.e., prompt_toolkit's vt100 parser)
    """

    @abstractmethod
    def decode(self: "KeyDecoder", data: bytes) -> List["KeyEvent"]:
        """
        Decodes a chunk of raw bytes read from the terminal into the key
        events it represents

        Args:
            data (bytes): The bytes that were read from the input source

        Returns:
            List[KeyEvent]: The decoded key events in the order they were
                typed. Empty if no bytes were provided

        Raises:
            Nothing
        """
