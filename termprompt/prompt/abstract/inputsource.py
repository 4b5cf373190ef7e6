"""
module termprompt.prompt.abstract.inputsource

Contains the definition of the InputSource class, an abstract base class
that is extended by everything a prompt session can read key presses from
"""

from abc import ABCMeta, abstractmethod
from typing import ContextManager


class InputSource(metaclass=ABCMeta):
    """
    class InputSource

    Abstract base class that is extended by everything a prompt session
    can read key presses from
    """

    @abstractmethod
    def isatty(self: "InputSource") -> bool:
        """
        Returns whether or not this input source is an interactive terminal.
        Raw mode is only toggled for interactive input sources

        Args:
            None

        Returns:
            bool: Whether or not the input source is a terminal

        Raises:
            Nothing
        """

    @abstractmethod
    def raw_mode(self: "InputSource", cbreak: bool = False) -> ContextManager[None]:
        """
        Returns a context manager that keeps the input source in raw mode
        for as long as it is entered

        Args:
            cbreak (bool): Whether or not signal generating control characters
                should still be handled by the operating system

        Returns:
            ContextManager[None]: A context manager that restores the previous
                terminal mode on exit

        Raises:
            Nothing
        """

    @abstractmethod
    async def read(self: "InputSource", size: int) -> bytes:
        """
        Waits until input is available and reads at most size bytes

        Args:
            size (int): The maximum number of bytes to read

        Returns:
            bytes: The bytes that were read. An empty bytes object signals
                that the end of the stream has been reached

        Raises:
            OSError: If reading from the underlying device failed
        """
