"""
module termprompt.termpromptexception

Contains the definition of the TermPromptException class, the parent of all
exceptions directly thrown by termprompt and its backend classes
"""


class TermPromptException(RuntimeError):
    """
    class TermPromptException

    The parent class of all exceptions directly thrown by termprompt
    """
