"""
module termprompt.prompt.dataclasses.keyevent

Contains the definition of the KeyEvent dataclass, a single decoded key press
as produced by a key decoder
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """
    class KeyEvent

    A single logical key press. Named keys (letters, digits, "return",
    "up", ...) carry a symbolic name; every event carries the raw sequence
    it was decoded from when one is available.
    """

    name: str | None = None
    sequence: str | None = None
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
