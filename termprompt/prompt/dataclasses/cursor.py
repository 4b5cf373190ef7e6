from dataclasses import dataclass


@dataclass
class Cursor:
    x: int = 0
    y: int = 0
