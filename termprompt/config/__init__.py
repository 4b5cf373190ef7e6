"""
module termprompt.config

Contains the definition of the PromptConfig class that holds the user's
default prompt appearance and key bindings
"""

from .promptconfig import PromptConfig
