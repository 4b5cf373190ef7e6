"""
module termprompt.prompt.enums

Contains the definitions of all enum classes that are shared by the
prompt engine and its backends
"""

from .sessionphase import SessionPhase
