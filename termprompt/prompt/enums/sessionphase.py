from enum import auto, Enum


class SessionPhase(Enum):
    RENDERING = auto()
    AWAITING_INPUT = auto()
    VALIDATING = auto()
    SUBMITTED = auto()
    TERMINATED = auto()
