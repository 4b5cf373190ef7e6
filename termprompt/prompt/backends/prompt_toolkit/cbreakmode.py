"""
module termprompt.prompt.backends.prompt_toolkit.cbreakmode

Contains the definition of the cbreak_mode context manager, a variant of
prompt_toolkit's raw_mode that leaves signal generating control characters
(i.e., Ctrl+C) to the operating system
"""

import termios

from prompt_toolkit.input.vt100 import raw_mode


# pylint: disable=invalid-name
class cbreak_mode(raw_mode):
    """
    class cbreak_mode

    Like raw_mode, but keeps ISIG set so that Ctrl+C raises SIGINT
    instead of being delivered as a key press
    """

    @classmethod
    def _patch_lflag(cls, attrs: int) -> int:
        return attrs & ~(termios.ECHO | termios.ICANON | termios.IEXTEN)
