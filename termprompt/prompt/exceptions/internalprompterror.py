"""
module termprompt.prompt.exceptions.internalprompterror

Contains the definition of the InternalPromptError class, an exception that
is thrown when the prompt loop believes it has read a value but none is
stored. This indicates a widget that does not honor its contract.
"""

from .promptexception import PromptException


class InternalPromptError(PromptException):
    """
    class InternalPromptError

    An exception thrown when the prompt loop finishes reading without a
    resolved value
    """
