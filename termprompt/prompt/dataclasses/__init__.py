"""
module termprompt.prompt.dataclasses

Contains all dataclass definitions related to running a prompt session,
including its settings, its mutable state and decoded key events
"""

from .cursor import Cursor
from .keyevent import KeyEvent
from .promptsettings import PromptSettings
from .promptstate import PromptState
