"""
hektor/ui/screen.py

Draws the editor on a curses window: the text of the active buffer, a status
row at the bottom, and the ':' prompt while a command is being typed.
The screen only reads editor state.
"""
import curses

from wcwidth import wcwidth

from hektor import logger
from hektor.buffer import Viewport
from hektor.modes import Mode

NO_NAME = "[No Name]"
CURSOR_BAR = 1
CURSOR_BLOCK = 2


def char_width(ch: str) -> int:
    # control characters report -1; curses still gives them a cell
    return max(wcwidth(ch), 1) if ch else 0


def display_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip_to_width(text: str, width: int) -> str:
    """Cut text so that it occupies at most width terminal cells."""
    used = 0
    for i, ch in enumerate(text):
        used += char_width(ch)
        if used > width:
            return text[:i]
    return text


def text_viewport(stdscr) -> Viewport:
    """Viewport for the text area: the whole window minus the status row."""
    height, width = stdscr.getmaxyx()
    return Viewport(width, max(1, height - 1))


def status_text(editor, width: int) -> str:
    """Status message on the left, file name and cursor position on the right."""
    buf = editor.active_buffer
    name = buf.name or NO_NAME
    if buf.modified:
        name += " [+]"
    right = f"{name}  {buf.cursor.row + 1}:{buf.cursor.column + 1}"
    left = editor.status_message
    gap = width - display_width(left) - display_width(right) - 1
    if gap < 1:
        return clip_to_width(f"{left} {right}", width - 1)
    return f"{left}{' ' * gap}{right}"


def draw_text(editor, stdscr, viewport: Viewport):
    lines = editor.active_buffer.lines
    for y in range(min(viewport.height, len(lines))):
        logger.safe_addstr(stdscr, y, 0, clip_to_width(lines[y], viewport.width))


def draw_bottom_row(editor, stdscr, viewport: Viewport):
    y = viewport.height
    if editor.mode == Mode.COMMAND:
        text = clip_to_width(":" + editor.command_line.text, viewport.width - 1)
        logger.safe_addstr(stdscr, y, 0, text)
    else:
        logger.safe_addstr(stdscr, y, 0, status_text(editor, viewport.width), curses.A_REVERSE)


def place_cursor(editor, stdscr, viewport: Viewport):
    if editor.mode == Mode.COMMAND:
        y = viewport.height
        x = 1 + display_width(editor.command_line.text[:editor.command_line.column])
        shape = CURSOR_BAR
    else:
        buf = editor.active_buffer
        y = buf.cursor.row
        x = display_width(buf.current_line[:buf.cursor.column])
        shape = CURSOR_BAR if editor.mode == Mode.INSERT else CURSOR_BLOCK
    try:
        curses.curs_set(shape)
    except curses.error:
        pass
    try:
        stdscr.move(y, min(x, viewport.width - 1))
    except curses.error:
        logger.log(f"curses.error moving cursor to ({y},{x})")


def display(editor, stdscr):
    """Re-draw the entire screen."""
    viewport = editor.viewport or text_viewport(stdscr)
    stdscr.erase()
    draw_text(editor, stdscr, viewport)
    draw_bottom_row(editor, stdscr, viewport)
    place_cursor(editor, stdscr, viewport)
    stdscr.refresh()
