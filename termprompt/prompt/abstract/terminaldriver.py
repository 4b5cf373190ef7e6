"""
module termprompt.prompt.abstract.terminaldriver

Contains the definition of the TerminalDriver class, an abstract base class
that is extended by all terminal output integrations (i.e., prompt_toolkit)
"""

from abc import ABCMeta, abstractmethod

from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.styles import BaseStyle


class TerminalDriver(metaclass=ABCMeta):
    """
    class TerminalDriver

    Abstract base class that is extended by all terminal output
    integrations (i.e., prompt_toolkit)
    """

    @abstractmethod
    def columns(self: "TerminalDriver") -> int | None:
        """
        Returns the current width of the terminal

        Args:
            None

        Returns:
            int | None: The number of columns of the terminal or None if the
                output is not attached to an interactive terminal

        Raises:
            Nothing
        """

    @abstractmethod
    def cursor_hide(self: "TerminalDriver") -> None: ...

    @abstractmethod
    def cursor_left(self: "TerminalDriver") -> None:
        """
        Moves the cursor to the first column of the current line

        Args:
            None

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def cursor_show(self: "TerminalDriver") -> None: ...

    @abstractmethod
    def cursor_to(self: "TerminalDriver", column: int) -> None:
        """
        Moves the cursor to a zero-based column of the current line

        Args:
            column (int): The column to move the cursor to

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def cursor_up(self: "TerminalDriver", count: int) -> None: ...

    @abstractmethod
    def erase_down(self: "TerminalDriver") -> None:
        """
        Erases everything from the cursor position to the end of the screen

        Args:
            None

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def flush(self: "TerminalDriver") -> None: ...

    @abstractmethod
    def write(
        self: "TerminalDriver", fragments: StyleAndTextTuples, style: BaseStyle
    ) -> None:
        """
        Writes styled text to the terminal without a trailing newline

        Args:
            fragments (StyleAndTextTuples): The styled text to write
            style (BaseStyle): The style that class names in the fragments
                are resolved against

        Returns:
            None

        Raises:
            Exception: Client classes may raise exceptions
        """
