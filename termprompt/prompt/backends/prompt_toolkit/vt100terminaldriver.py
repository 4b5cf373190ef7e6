"""
module termprompt.prompt.backends.prompt_toolkit.vt100terminaldriver

Contains the definition of the Vt100TerminalDriver class, a terminal driver
that writes VT100 escape sequences through prompt_toolkit's Vt100_Output
"""

import os
import sys
from typing import TextIO

from prompt_toolkit.data_structures import Size
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.output.vt100 import Vt100_Output
from prompt_toolkit.renderer import print_formatted_text
from prompt_toolkit.styles import BaseStyle

from ...abstract import TerminalDriver


class Vt100TerminalDriver(TerminalDriver):
    """
    class Vt100TerminalDriver

    A terminal driver that writes to a text stream (usually stdout) using
    prompt_toolkit's Vt100_Output
    """

    __output: Vt100_Output
    __stdout: TextIO

    def __init__(self: "Vt100TerminalDriver", stdout: TextIO | None = None) -> None:
        self.__stdout = stdout if stdout is not None else sys.stdout
        self.__output = Vt100_Output(self.__stdout, self._get_size)

    def columns(self: "Vt100TerminalDriver") -> int | None:
        # the size can't be queried when the output isn't attached to a terminal
        try:
            return os.get_terminal_size(self.__stdout.fileno()).columns or None
        except (AttributeError, OSError, ValueError):
            return None

    def cursor_hide(self: "Vt100TerminalDriver") -> None:
        self.__output.hide_cursor()
        self.__output.flush()

    def cursor_left(self: "Vt100TerminalDriver") -> None:
        self.__output.write_raw("\x1b[G")

    def cursor_show(self: "Vt100TerminalDriver") -> None:
        self.__output.show_cursor()
        self.__output.flush()

    def cursor_to(self: "Vt100TerminalDriver", column: int) -> None:
        self.__output.write_raw(f"\x1b[{column + 1}G")
        self.__output.flush()

    def cursor_up(self: "Vt100TerminalDriver", count: int) -> None:
        self.__output.cursor_up(count)

    def erase_down(self: "Vt100TerminalDriver") -> None:
        self.__output.erase_down()
        self.__output.flush()

    def flush(self: "Vt100TerminalDriver") -> None:
        self.__output.flush()

    def _get_size(self: "Vt100TerminalDriver") -> Size:
        return Size(rows=24, columns=self.columns() or 80)

    def write(
        self: "Vt100TerminalDriver", fragments: StyleAndTextTuples, style: BaseStyle
    ) -> None:
        # NOTE: print_formatted_text() resets the attributes and flushes once done
        print_formatted_text(self.__output, fragments, style)
