"""
Error types for the Hektor text editor.

Read errors at startup are fatal; everything else ends up on the status line.
"""


class HektorError(Exception):
    """Base class for editor errors."""


class FileNotFound(HektorError):
    """Raised when the file given on startup does not exist."""


class FileReadError(HektorError):
    """Raised when a file exists but cannot be read or decoded."""


class FileWriteError(HektorError):
    """Raised when a buffer cannot be written back to disk."""


class UnrecognizedCommand(HektorError):
    """Raised for a queued command token the editor does not know."""

    def __init__(self, token: str):
        super().__init__(f"unrecognized command: {token}")
        self.token = token
