from __future__ import annotations

import io

from prompt_toolkit.styles import Style

from termprompt.prompt.backends.prompt_toolkit import Vt100TerminalDriver


def test_cursor_movement_sequences():
    stream = io.StringIO()
    driver = Vt100TerminalDriver(stream)

    driver.cursor_left()
    driver.cursor_to(4)
    driver.cursor_up(2)
    driver.erase_down()

    assert stream.getvalue() == "\x1b[G\x1b[5G\x1b[2A\x1b[J"


def test_cursor_visibility():
    stream = io.StringIO()
    driver = Vt100TerminalDriver(stream)

    driver.cursor_hide()
    assert stream.getvalue().endswith("\x1b[?25l")

    driver.cursor_show()
    assert stream.getvalue().endswith("\x1b[?25h")


def test_write_renders_styled_fragments():
    stream = io.StringIO()
    driver = Vt100TerminalDriver(stream)

    driver.write(
        [("class:message", "Name"), ("", "\n"), ("", "next")],
        Style.from_dict({"message": "bold"}),
    )

    text = stream.getvalue()
    assert "Name" in text
    assert "\r\nnext" in text


def test_width_is_unknown_without_a_terminal():
    assert Vt100TerminalDriver(io.StringIO()).columns() is None
