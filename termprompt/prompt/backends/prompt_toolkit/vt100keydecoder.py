"""
module termprompt.prompt.backends.prompt_toolkit.vt100keydecoder

Contains the definition of the Vt100KeyDecoder class, a key decoder that uses
prompt_toolkit's Vt100Parser to turn raw terminal bytes into key events
"""

from codecs import getincrementaldecoder
from typing import Dict, List

from prompt_toolkit.input.vt100_parser import Vt100Parser
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ...abstract import KeyDecoder
from ...dataclasses.keyevent import KeyEvent

# control characters that have a conventional name of their own
_named_control_keys: Dict[str, str] = {
    Keys.ControlH.value: "backspace",
    Keys.ControlI.value: "tab",
    Keys.ControlJ.value: "enter",
    Keys.ControlM.value: "return",
    Keys.BackTab.value: "tab",
}


class Vt100KeyDecoder(KeyDecoder):
    """
    class Vt100KeyDecoder

    A key decoder that feeds raw terminal bytes through prompt_toolkit's
    Vt100Parser and converts the resulting key presses into key events.
    An escape key press directly followed by another key press is merged
    into a single event with the meta modifier set
    """

    __key_presses: List[KeyPress]
    __parser: Vt100Parser

    def __init__(self: "Vt100KeyDecoder") -> None:
        # multi-byte characters may be split across two reads
        self.__decoder = getincrementaldecoder("utf-8")(errors="surrogateescape")
        self.__key_presses = []
        self.__parser = Vt100Parser(self.__key_presses.append)

    def decode(self: "Vt100KeyDecoder", data: bytes) -> List[KeyEvent]:
        if len(data) == 0:
            return []

        self.__parser.feed_and_flush(self.__decoder.decode(data))
        key_presses: List[KeyPress] = list(self.__key_presses)
        self.__key_presses.clear()

        events: List[KeyEvent] = []
        index: int = 0
        while index < len(key_presses):
            key_press: KeyPress = key_presses[index]

            # merge escape prefixes (alt+key or escaped modifier sequences)
            if (
                key_press.key == Keys.Escape
                and index + 1 < len(key_presses)
                and key_presses[index + 1].key != Keys.Escape
            ):
                next_press: KeyPress = key_presses[index + 1]
                event = self._to_event(
                    next_press, sequence=key_press.data + next_press.data, meta=True
                )
                index += 2
            else:
                event = self._to_event(key_press, sequence=key_press.data)
                index += 1

            if event is not None:
                events.append(event)

        return events

    @staticmethod
    def _to_event(
        key_press: KeyPress, sequence: str, meta: bool = False
    ) -> KeyEvent | None:
        key: str = key_press.key.value if isinstance(key_press.key, Keys) else key_press.key

        # plain characters are passed through as they were typed
        if len(key) == 1:
            if key == " ":
                return KeyEvent(name="space", sequence=sequence, meta=meta)
            if key.isascii() and key.isalnum():
                return KeyEvent(
                    name=key.lower(), sequence=sequence, meta=meta, shift=key.isupper()
                )

            return KeyEvent(sequence=sequence, meta=meta)

        if key == Keys.BracketedPaste.value:
            return KeyEvent(sequence=key_press.data, meta=meta)

        # other pseudo keys (cursor position responses, mouse events, ...)
        if key.startswith("<"):
            return None

        if key in _named_control_keys:
            return KeyEvent(
                name=_named_control_keys[key],
                sequence=sequence,
                meta=meta,
                shift=key == Keys.BackTab.value,
            )

        ctrl: bool = False
        shift: bool = False
        while len(key) > 2 and key[1] == "-" and key[0] in ("c", "s"):
            if key[0] == "c":
                ctrl = True
            else:
                shift = True
            key = key[2:]

        return KeyEvent(name=key, sequence=sequence, ctrl=ctrl, meta=meta, shift=shift)
