"""
module termprompt.prompt.dataclasses.promptstate

Contains the definition of the PromptState dataclass, the mutable state that
a prompt session owns for the duration of a single prompt() call
"""

from dataclasses import dataclass, field
from typing import Any

from ..enums import SessionPhase
from .cursor import Cursor


@dataclass
class PromptState:
    """
    class PromptState

    Mutable state of a single prompt() call. After every validation attempt
    exactly one of value and error is set.
    """

    value: Any = None
    error: str | None = None
    first_run: bool = True
    cursor: Cursor = field(default_factory=Cursor)
    phase: SessionPhase = SessionPhase.RENDERING
    end_of_stream_reads: int = 0

    @property
    def has_value(self: "PromptState") -> bool:
        return self.value is not None
