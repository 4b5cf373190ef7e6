"""
module termprompt.prompt.promptsession

Contains the definition of the PromptSession class, the render/read/validate
loop that every concrete prompt widget runs on. The session redraws the prompt
in place, reads key presses from the terminal (or consumes an injected value
when running headless) and resolves the answer through the validation pipeline
"""

import asyncio
import contextlib
import logging
import os
from typing import Any, List

from prompt_toolkit.formatted_text import (
    ANSI,
    AnyFormattedText,
    StyleAndTextTuples,
    to_formatted_text,
)

from .. import constants
from .abstract import KeyDecoder, PromptWidget
from .asyncutils import resolve
from .backends.prompt_toolkit import Vt100KeyDecoder
from .dataclasses import Cursor, KeyEvent, PromptSettings, PromptState
from .enums import SessionPhase
from .exceptions import EndOfInputError, InjectedValueError, InternalPromptError
from .injectionchannel import InjectionChannel
from .layout import count_lines
from .validationpipeline import ValidationPipeline

logger = logging.getLogger(__name__)


def _fragments(content: AnyFormattedText, style: str = "") -> StyleAndTextTuples:
    # plain strings may carry their own ANSI styling
    if isinstance(content, str):
        content = ANSI(content)

    return to_formatted_text(content, style=style)


class PromptSession:
    """
    class PromptSession

    Runs a single prompt widget: renders the message, body and footer in place,
    reads and dispatches key events and validates submitted values until an
    answer is resolved. Every call to prompt() starts from a fresh state
    """

    __decoder: KeyDecoder
    __injection: InjectionChannel
    __pipeline: ValidationPipeline
    __settings: PromptSettings
    __state: PromptState
    __widget: PromptWidget

    def __init__(
        self: "PromptSession",
        widget: PromptWidget,
        settings: PromptSettings,
        injection: InjectionChannel | None = None,
        decoder: KeyDecoder | None = None,
    ) -> None:
        self.__widget = widget
        self.__settings = settings
        self.__injection = injection if injection is not None else InjectionChannel()
        self.__decoder = decoder if decoder is not None else Vt100KeyDecoder()
        self.__state = PromptState()
        self.__pipeline = ValidationPipeline(widget, settings, self.__state)

    @property
    def cursor(self: "PromptSession") -> Cursor:
        return Cursor(self.__state.cursor.x, self.__state.cursor.y)

    @property
    def error_message(self: "PromptSession") -> str | None:
        return self.__state.error

    @property
    def phase(self: "PromptSession") -> SessionPhase:
        return self.__state.phase

    @property
    def settings(self: "PromptSession") -> PromptSettings:
        return self.__settings

    @property
    def value(self: "PromptSession") -> Any:
        return self.__state.value

    def set_cursor(self: "PromptSession", x: int, y: int = 0) -> None:
        """
        Sets the position the cursor is moved to after every render, relative
        to the first column of the first rendered line

        Args:
            x (int): The column of the cursor
            y (int): The row of the cursor

        Returns:
            Nothing

        Raises:
            Nothing
        """

        self.__state.cursor = Cursor(x, y)

    def set_error_message(self: "PromptSession", message: str) -> None:
        self.__state.error = message

    async def prompt(self: "PromptSession") -> Any:
        """
        Runs the prompt until an answer is resolved and returns it. The
        cursor is always made visible again once the prompt ends

        Args:
            None

        Returns:
            Any: The resolved (validated and transformed) answer

        Raises:
            InjectedValueError: If an injected value failed validation
            EndOfInputError: If the input source was exhausted before an
                answer was submitted
            InternalPromptError: If reading finished without a value
        """

        self.__state = PromptState()
        self.__pipeline = ValidationPipeline(
            self.__widget, self.__settings, self.__state
        )

        injected: bool = self.__injection.has_value

        try:
            return await self._execute()
        finally:
            # an injected value is consumed by this call however it ends
            if injected:
                self.__injection.release()
            self.__settings.terminal.cursor_show()

    async def _execute(self: "PromptSession") -> Any:
        while True:
            # an injected value gets exactly one attempt
            if self.__injection.has_value and self.__state.error is not None:
                error: str = self.__state.error
                logger.debug("injected value rejected: %s", error)
                self.__injection.release()
                self.__state.phase = SessionPhase.TERMINATED
                raise InjectedValueError(error)

            await self.render()
            self.__state.error = None

            if await self.read():
                break

        if not self.__state.has_value:
            self.__state.phase = SessionPhase.TERMINATED
            raise InternalPromptError("internal error: failed to read value")

        self.clear()
        success_message: StyleAndTextTuples | None = self.success(self.__state.value)
        if success_message:
            self.__settings.terminal.write(
                [*success_message, ("", "\n")], self.__settings.style
            )

        logger.debug("prompt resolved to %r", self.__state.value)
        self.__injection.release()
        self.__state.phase = SessionPhase.SUBMITTED
        self.__settings.terminal.cursor_show()

        return self.__state.value

    def clear(self: "PromptSession") -> None:
        self.__settings.terminal.cursor_left()
        self.__settings.terminal.erase_down()

    async def render(self: "PromptSession") -> None:
        """
        Redraws the prompt in place. Everything that was rendered before is
        erased first, then the cursor is moved back to the tracked position

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        self.__state.phase = SessionPhase.RENDERING
        terminal = self.__settings.terminal

        parts: List[StyleAndTextTuples | None] = await asyncio.gather(
            resolve(self.message()),
            self._body(),
            resolve(self.footer()),
        )

        content: StyleAndTextTuples = []
        for part in parts:
            if not part:
                continue
            if content:
                content.append(("", "\n"))
            content.extend(part)

        line_count: int = count_lines(content, terminal.columns())
        rows_up: int = line_count - self.__state.cursor.y - 1

        if not self.__state.first_run or self.__state.error is not None:
            self.clear()
        self.__state.first_run = False

        terminal.write(content, self.__settings.style)

        if rows_up > 0:
            terminal.cursor_up(rows_up)
        terminal.cursor_to(self.__state.cursor.x)

    async def _body(self: "PromptSession") -> StyleAndTextTuples | None:
        body: AnyFormattedText = await resolve(self.__widget.body())

        return _fragments(body) if body else None

    async def read(self: "PromptSession") -> bool:
        """
        Reads user input once. An injected value is validated directly.
        Otherwise one chunk of raw bytes is read from the input source,
        decoded into key events and each event is handled in order

        Args:
            None

        Returns:
            bool: Whether or not an answer was resolved

        Raises:
            EndOfInputError: If the input source kept reporting end-of-stream
        """

        if self.__injection.has_value:
            logger.debug("consuming injected value %r", self.__injection.value)
            await self.__pipeline.run(self.__injection.value)
        else:
            events: List[KeyEvent] = await self._read_key()

            if len(events) == 0:
                return False

            for event in events:
                await self.handle_event(event)

        return self.__state.has_value

    async def _read_key(self: "PromptSession") -> List[KeyEvent]:
        data: bytes = await self._read_chunk()

        if len(data) == 0:
            self.__state.end_of_stream_reads += 1
            if (
                self.__state.end_of_stream_reads
                > self.__settings.max_end_of_stream_reads
            ):
                self.__state.phase = SessionPhase.TERMINATED
                raise EndOfInputError(
                    "Input stream ended before an answer was submitted"
                )

            return []

        self.__state.end_of_stream_reads = 0
        return self.__decoder.decode(data)

    async def _read_chunk(self: "PromptSession") -> bytes:
        reader = self.__settings.reader
        self.__state.phase = SessionPhase.AWAITING_INPUT

        with (
            reader.raw_mode(cbreak=self.__settings.cbreak)
            if reader.isatty()
            else contextlib.nullcontext()
        ):
            data: bytes = await reader.read(constants.READ_BUFFER_SIZE)

        logger.debug("read %r", data)
        return data

    async def handle_event(self: "PromptSession", event: KeyEvent) -> None:
        """
        Handles a single key event. Ctrl+C ends the process, submit keys
        submit the current value and everything else is passed to the widget

        Args:
            event (KeyEvent): The event to handle

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if event.ctrl and event.name == "c":
            self.clear()
            self.__settings.terminal.cursor_show()
            self.__settings.terminal.flush()
            self.__state.phase = SessionPhase.TERMINATED

            os._exit(constants.EXIT_CODE_INTERRUPT)  # pylint: disable=protected-access

        if self.is_key("submit", event):
            await self.submit()
        else:
            await resolve(self.__widget.handle_event(event, self))

    def is_key(self: "PromptSession", action: str, event: KeyEvent) -> bool:
        key_names = self.__settings.keys.get(action)

        # escape-prefixed (meta) presses never trigger a binding
        if key_names is None or event.meta:
            return False

        return (
            (event.name is not None and event.name in key_names)
            or (event.sequence is not None and event.sequence in key_names)
        )

    async def submit(self: "PromptSession") -> None:
        await self.__pipeline.run(self.__widget.get_value())

    def message(self: "PromptSession") -> StyleAndTextTuples:
        return [
            *_fragments(self.__settings.indent),
            *_fragments(self.__settings.prefix),
            *_fragments(self.__settings.message, "class:message"),
            *self.defaults(),
        ]

    def defaults(self: "PromptSession") -> StyleAndTextTuples:
        if self.__settings.default is None or self.__settings.hide_default:
            return []

        return [
            (
                "class:default",
                f" ({self.__widget.format(self.__settings.default)})",
            )
        ]

    def success(self: "PromptSession", value: Any) -> StyleAndTextTuples | None:
        return [
            *self.message(),
            ("", " "),
            *_fragments(self.__settings.pointer),
            ("", " "),
            ("class:answer", self.__widget.format(value)),
        ]

    def footer(self: "PromptSession") -> StyleAndTextTuples | None:
        return self.error() or self.hint()

    def error(self: "PromptSession") -> StyleAndTextTuples | None:
        if not self.__state.error:
            return None

        return [
            *_fragments(self.__settings.indent),
            ("class:error.marker", f"{constants.FIGURE_CROSS} "),
            *_fragments(self.__state.error, "class:error"),
        ]

    def hint(self: "PromptSession") -> StyleAndTextTuples | None:
        if not self.__settings.hint:
            return None

        return [
            *_fragments(self.__settings.indent),
            ("class:hint.marker", f"{constants.FIGURE_POINTER} "),
            *_fragments(self.__settings.hint, "class:hint"),
        ]
