"""
module termprompt.prompt.exceptions

Contains all definitions of exceptions thrown by the prompt engine
"""

from .endofinputerror import EndOfInputError
from .injectedvalueerror import InjectedValueError
from .internalprompterror import InternalPromptError
from .promptexception import PromptException
