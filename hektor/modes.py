"""
Input modes of the Hektor text editor.

The editor is always in exactly one mode; it starts in NORMAL.
"""
from enum import Enum, auto

class Mode(Enum):
    NORMAL = auto()
    INSERT = auto()
    COMMAND = auto()

    @property
    def label(self) -> str:
        """Text shown on the status line for this mode."""
        return self.name.capitalize()
