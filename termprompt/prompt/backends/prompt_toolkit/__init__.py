"""
module termprompt.prompt.backends.prompt_toolkit

Contains the prompt_toolkit based implementations of the terminal driver,
input source and key decoder used by prompt sessions
"""

from .cbreakmode import cbreak_mode
from .ttyinputsource import TtyInputSource
from .vt100keydecoder import Vt100KeyDecoder
from .vt100terminaldriver import Vt100TerminalDriver
