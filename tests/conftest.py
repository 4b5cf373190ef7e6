"""Shared fixtures for prompt engine tests.

Sessions are driven with a scripted input source and a VT100 terminal
driver writing into a StringIO, so no test touches the real terminal.
"""

from __future__ import annotations

import contextlib
import io
from typing import Any, Iterator, List

import pytest

from termprompt.prompt.abstract import InputSource, PromptWidget
from termprompt.prompt.backends.prompt_toolkit import Vt100TerminalDriver


class ScriptedInput(InputSource):
    """Input source replaying fixed byte chunks, then end-of-stream."""

    def __init__(self, chunks: List[bytes] | None = None, tty: bool = False) -> None:
        self.chunks = list(chunks or [])
        self.tty = tty
        self.raw = False
        self.raw_calls: List[bool] = []
        self.reads_in_raw: List[bool] = []
        self.read_count = 0

    def isatty(self) -> bool:
        return self.tty

    @contextlib.contextmanager
    def raw_mode(self, cbreak: bool = False) -> Iterator[None]:
        self.raw_calls.append(cbreak)
        self.raw = True
        try:
            yield
        finally:
            self.raw = False

    async def read(self, size: int) -> bytes:
        self.read_count += 1
        self.reads_in_raw.append(self.raw)
        if not self.chunks:
            return b""

        chunk = self.chunks.pop(0)
        if len(chunk) > size:
            self.chunks.insert(0, chunk[size:])
            chunk = chunk[:size]
        return chunk


class RecordingTerminal(Vt100TerminalDriver):
    """VT100 driver over a StringIO with a fixed width that records cursor moves."""

    def __init__(self, width: int | None = 80) -> None:
        self.stream = io.StringIO()
        self.width = width
        self.calls: List[tuple] = []
        super().__init__(self.stream)

    @property
    def text(self) -> str:
        return self.stream.getvalue()

    def columns(self) -> int | None:
        return self.width

    def cursor_up(self, count: int) -> None:
        self.calls.append(("cursor_up", count))
        super().cursor_up(count)

    def cursor_to(self, column: int) -> None:
        self.calls.append(("cursor_to", column))
        super().cursor_to(column)

    def cursor_show(self) -> None:
        self.calls.append(("cursor_show",))
        super().cursor_show()

    def erase_down(self) -> None:
        self.calls.append(("erase_down",))
        super().erase_down()


class LineWidget(PromptWidget):
    """Minimal single-line text widget: printable keys append, backspace deletes."""

    def __init__(self, body: Any = None) -> None:
        self.buffer = ""
        self.events: List[Any] = []
        self.validated: List[Any] = []
        self.transformed: List[Any] = []
        self._body = body

    def body(self) -> Any:
        return self._body

    def format(self, value: Any) -> str:
        return str(value)

    def get_value(self) -> Any:
        return self.buffer

    def handle_event(self, event, session) -> None:
        self.events.append(event)
        if event.name == "backspace":
            self.buffer = self.buffer[:-1]
        elif event.sequence and event.sequence.isprintable():
            self.buffer += event.sequence
        session.set_cursor(len(self.buffer))

    def transform(self, value: Any) -> Any:
        self.transformed.append(value)
        return value.strip()

    def validate(self, value: Any) -> bool | str:
        self.validated.append(value)
        return len(value) > 0


@pytest.fixture
def terminal() -> RecordingTerminal:
    return RecordingTerminal()


@pytest.fixture
def widget() -> LineWidget:
    return LineWidget()
