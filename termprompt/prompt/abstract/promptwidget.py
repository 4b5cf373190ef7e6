"""
module termprompt.prompt.abstract.promptwidget

Contains the definition of the PromptWidget class, an abstract base class
that is extended by every concrete prompt (text, confirm, select, ...) that
runs on top of a prompt session
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Awaitable, TYPE_CHECKING

from prompt_toolkit.formatted_text import AnyFormattedText

if TYPE_CHECKING:
    from ..dataclasses import KeyEvent
    from ..promptsession import PromptSession


class PromptWidget(metaclass=ABCMeta):
    """
    class PromptWidget

    Abstract base class that is extended by every concrete prompt. A widget
    only supplies its value handling (get_value, validate, transform and
    format); rendering, reading and submitting are driven by the session.
    """

    def body(self: "PromptWidget") -> AnyFormattedText | Awaitable[AnyFormattedText]:
        """
        Returns the content that is rendered between the message line and
        the footer of the prompt. Plain strings may contain ANSI escape codes

        Args:
            None

        Returns:
            AnyFormattedText | Awaitable[AnyFormattedText]: The body content
                or None if the widget has no body

        Raises:
            Nothing
        """

        return None

    @abstractmethod
    def format(self: "PromptWidget", value: Any) -> str:
        """
        Formats a resolved value for display in the default annotation and
        the success line

        Args:
            value (Any): The value to format

        Returns:
            str: The formatted value

        Raises:
            Nothing
        """

    @abstractmethod
    def get_value(self: "PromptWidget") -> Any:
        """
        Returns the raw value the user has entered so far

        Args:
            None

        Returns:
            Any: The raw input value

        Raises:
            Nothing
        """

    def handle_event(
        self: "PromptWidget", event: "KeyEvent", session: "PromptSession"
    ) -> Awaitable[None] | None:
        """
        Handles a key event that is neither an interrupt nor a submit key.
        The default implementation ignores the event

        Args:
            event (KeyEvent): The decoded key event
            session (PromptSession): The session the event was read by. Can
                be used to move the tracked cursor or to submit

        Returns:
            Awaitable[None] | None: Widgets may handle events asynchronously

        Raises:
            Nothing
        """

        return None

    @abstractmethod
    def transform(self: "PromptWidget", value: Any) -> Any:
        """
        Maps a validated raw value to the value returned from the prompt

        Args:
            value (Any): The raw input value

        Returns:
            Any: The output value. May be awaitable

        Raises:
            Exception: Widgets may raise exceptions
        """

    @abstractmethod
    def validate(self: "PromptWidget", value: Any) -> bool | str | Awaitable[bool | str]:
        """
        Validates a raw input value

        Args:
            value (Any): The raw input value

        Returns:
            bool | str | Awaitable[bool | str]: True on success, False for a
                generic error or an error message

        Raises:
            Exception: Widgets may raise exceptions
        """
