"""
module termprompt.prompt.exceptions.promptexception

Contains the definition of the PromptException class which is the parent
class of all exceptions that can be thrown directly by a prompt session.
"""

from ...termpromptexception import TermPromptException


class PromptException(TermPromptException):
    """
    class PromptException

    Parent class of all exceptions that can be thrown directly by a
    prompt session.
    """
