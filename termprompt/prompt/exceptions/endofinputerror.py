"""
module termprompt.prompt.exceptions.endofinputerror

Contains the definition of the EndOfInputError class, an exception that is
thrown when the input source keeps reporting end-of-stream while a prompt
is still waiting for an answer
"""

from .promptexception import PromptException


class EndOfInputError(PromptException):
    """
    class EndOfInputError

    An exception thrown when the input source of a prompt session is
    exhausted before an answer was submitted
    """
