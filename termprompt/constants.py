import os
from typing import Dict, List

from termprompt import __version__


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

EXIT_CODE_INTERRUPT: int = 130

INVALID_ANSWER_MESSAGE: str = "Invalid answer."

MAX_END_OF_STREAM_READS: int = 3

READ_BUFFER_SIZE: int = 8

DEFAULT_KEYS: Dict[str, List[str]] = {"submit": ["enter", "return"]}

# windows consoles often lack the glyphs below, so fall back to plain ones
if os.name == "nt":
    FIGURE_CROSS: str = "×"
    FIGURE_POINTER: str = ">"
    FIGURE_POINTER_SMALL: str = "»"
else:
    FIGURE_CROSS = "✘"
    FIGURE_POINTER = "❯"
    FIGURE_POINTER_SMALL = "›"

DEFAULT_PREFIX: str = "? "

DEFAULT_STYLE: Dict[str, str] = {
    "answer": "fg:ansigreen",
    "default": "fg:ansibrightblack",
    "error": "fg:ansired",
    "error.marker": "fg:ansired bold",
    "hint": "fg:ansibrightblue italic",
    "hint.marker": "fg:ansibrightblack",
    "message": "bold",
    "pointer": "fg:ansibrightblue",
    "prefix": "fg:ansiyellow",
}
