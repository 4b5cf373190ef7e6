"""
module termprompt.prompt.abstract

Contains the definitions of the abstract base classes that the prompt
engine is generic over: widgets, terminal drivers, input sources and
key decoders
"""

from .inputsource import InputSource
from .keydecoder import KeyDecoder
from .promptwidget import PromptWidget
from .terminaldriver import TerminalDriver
