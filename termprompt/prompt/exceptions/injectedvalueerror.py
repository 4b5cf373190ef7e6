"""
module termprompt.prompt.exceptions.injectedvalueerror

Contains the definition of the InjectedValueError class, an exception that
is thrown when an injected value fails validation. There is no way to type
a corrected answer when running headless, so this aborts the prompt.
"""

from .promptexception import PromptException


class InjectedValueError(PromptException):
    """
    class InjectedValueError

    An exception thrown when an injected value fails validation. The
    exception message is the validation error.
    """
