"""
module termprompt.__init__

Contains the imports of the classes that make up the public prompt engine
API. Also contains definitions that indicate the current version of termprompt.
"""

import logging

__version_info__: tuple[int, ...] = (0, 1, 0)
__version__: str = ".".join(map(str, __version_info__))

logging.getLogger(__name__).addHandler(logging.NullHandler())

# pylint: disable=wrong-import-position
from .config import PromptConfig
from .prompt import InjectionChannel, PromptSession, run_prompt
from .prompt.abstract import PromptWidget
from .prompt.dataclasses import KeyEvent, PromptSettings
from .termpromptexception import TermPromptException
