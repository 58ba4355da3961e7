"""
Buffer module for Hektor text editor.

Defines the Buffer class that holds text lines and a cursor, and the small
single-line CommandLine used while typing ':' commands.
Every cursor move clamps itself against the buffer text and, when one is given,
against the Viewport the text is shown in. Nothing here talks to the terminal.
"""
from collections import namedtuple
from dataclasses import dataclass

from hektor.errors import FileNotFound, FileReadError, FileWriteError

# Text area the cursor may move in; height excludes the status row.
Viewport = namedtuple("Viewport", ["width", "height"])


@dataclass
class Cursor:
    """Cursor position plus the column the user last chose horizontally."""
    column: int = 0
    row: int = 0
    desired_column: int = 0


class Buffer:
    """Represents a text buffer (file content) with editing operations."""
    def __init__(self, name: str = "", lines=None):
        self.name = name  # Path to file, or "" for an unnamed buffer
        self.lines = list(lines) if lines is not None else [""]

        # there is always at least one line, even if lines=[]
        if not self.lines:
            self.lines = [""]

        self.cursor = Cursor()
        self.modified = False

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor.row]

    ##########################################
    # NAVIGATION
    ##########################################
    def move_up(self, viewport=None):
        if self.cursor.row > 0:
            self.cursor.row -= 1
            self.cursor.column = self.cursor.desired_column
            self.clamp(viewport)

    def move_down(self, viewport=None):
        self.cursor.row += 1
        self.cursor.column = self.cursor.desired_column
        self.clamp(viewport)

    def move_left(self, viewport=None):
        if self.cursor.column > 0:
            self.cursor.column -= 1
            self.cursor.desired_column = self.cursor.column
            self.clamp(viewport)

    def move_right(self, viewport=None):
        self.cursor.column += 1
        self.cursor.desired_column = self.cursor.column
        self.clamp(viewport)

    def move_to_line_start(self):
        self.cursor.column = 0

    def move_to_line_end(self):
        self.cursor.column = len(self.current_line)

    def clamp(self, viewport=None):
        """
        Pull the cursor back inside the text (and the viewport, if given).
        The row is fixed first so the column is measured against the line
        the cursor actually ends up on. desired_column is left alone.
        """
        cursor = self.cursor
        if viewport is not None:
            cursor.column = min(cursor.column, max(0, viewport.width))
            cursor.row = min(cursor.row, max(0, viewport.height - 1))

        cursor.row = max(0, min(cursor.row, len(self.lines) - 1))
        cursor.column = max(0, min(cursor.column, len(self.lines[cursor.row])))

    ##########################################
    # TEXT MUTATION
    ##########################################
    def insert_char(self, ch: str):
        """Insert ch at the cursor. The cursor itself does not move."""
        line = self.current_line
        col = self.cursor.column
        self.lines[self.cursor.row] = line[:col] + ch + line[col:]
        self.modified = True

    def delete_char(self):
        """Remove the character before the cursor; nothing happens at column 0."""
        line = self.current_line
        col = self.cursor.column
        if 0 < col <= len(line):
            self.lines[self.cursor.row] = line[:col - 1] + line[col:]
            self.modified = True

    def insert_line(self):
        """Insert a blank line below the cursor row without moving the cursor."""
        self.lines.insert(self.cursor.row + 1, "")
        self.modified = True

    ##########################################
    # FILES
    ##########################################
    def save_to_file(self) -> int:
        """
        Write all lines to self.name, each ending in a newline.
        A buffer holding a single empty line writes an empty file.
        Returns the number of lines written; raises FileWriteError otherwise.
        """
        if not self.name:
            raise FileWriteError("no file name")
        try:
            with open(self.name, 'w', encoding='utf-8') as f:
                if self.lines != [""]:
                    f.write("\n".join(self.lines) + "\n")
        except OSError as e:
            raise FileWriteError(f"error writing {self.name}: {e.strerror or e}") from e
        self.modified = False
        return len(self.lines)


class CommandLine:
    """The one-line input shown while typing a ':' command."""
    def __init__(self):
        self.text = ""
        self.column = 0

    def append(self, ch: str):
        self.text += ch
        self.column += 1

    def backspace(self):
        if self.text:
            self.text = self.text[:-1]
            self.column -= 1

    def clear(self):
        self.text = ""
        self.column = 0


def split_lines(content: str) -> list:
    """
    Split file content on line feeds only, dropping a trailing carriage return
    from each line.
    A final newline does not start another line.
    """
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_lines(name: str) -> list:
    """Read a file and split it into lines. An empty file gives one empty line."""
    try:
        with open(name, 'r', encoding='utf-8', newline='') as f:
            content = split_lines(f.read())
    except FileNotFoundError as e:
        raise FileNotFound(f"file not found: {name}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"error opening file {name}: {e}") from e
    return content if content else [""]
