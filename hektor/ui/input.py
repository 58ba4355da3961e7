"""
Input handling for Hektor text editor.

Processes key events for each mode (normal, insert, command) and updates the
editor accordingly. A key is either a str (a typed character, as returned by
get_wch) or an int (a curses KEY_* code, or a character code below KEY_MIN).
Each mode has its own table keyed by int code; printable characters that are
not in a table go to the mode's fallback handler, if it has one.
"""
import curses

from hektor import commands
from hektor.modes import Mode

ESC = 27
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 8, 127)


def key_code(key):
    """The int a key is looked up by in the key tables, or None."""
    if isinstance(key, str):
        # characters from KEY_MIN up would collide with curses KEY_* codes
        code = ord(key)
        return code if code < curses.KEY_MIN else None
    return key


def key_char(key):
    """The character a key stands for, or None for function keys."""
    if isinstance(key, str):
        return key
    if 0 <= key < curses.KEY_MIN:
        return chr(key)
    return None


def is_printable(key) -> bool:
    ch = key_char(key)
    return ch is not None and ch.isprintable()


def _keys(table: dict) -> dict:
    """Expand tuple keys so several key codes can share one handler."""
    expanded = {}
    for keys, handler in table.items():
        if not isinstance(keys, tuple):
            keys = (keys,)
        for key in keys:
            expanded[key] = handler
    return expanded


#########################################
# NORMAL MODE
#########################################
def _normal_escape(editor, key):
    editor.set_mode(Mode.NORMAL)

def _enter_command(editor, key):
    editor.set_mode(Mode.COMMAND, refresh_status=False)

def _insert(editor, key):
    editor.set_mode(Mode.INSERT)

def _insert_at_start(editor, key):
    editor.set_mode(Mode.INSERT)
    editor.active_buffer.move_to_line_start()

def _append(editor, key):
    editor.set_mode(Mode.INSERT)
    editor.active_buffer.move_right(editor.viewport)

def _append_at_end(editor, key):
    editor.set_mode(Mode.INSERT)
    editor.active_buffer.move_to_line_end()

def _open_line_below(editor, key):
    _new_line(editor, key)
    editor.set_mode(Mode.INSERT)

def _up(editor, key):
    editor.active_buffer.move_up(editor.viewport)

def _down(editor, key):
    editor.active_buffer.move_down(editor.viewport)

def _left(editor, key):
    editor.active_buffer.move_left(editor.viewport)

def _right(editor, key):
    editor.active_buffer.move_right(editor.viewport)


NORMAL_KEYS = _keys({
    ESC: _normal_escape,
    ord(':'): _enter_command,
    ord('i'): _insert,
    ord('I'): _insert_at_start,
    ord('a'): _append,
    ord('A'): _append_at_end,
    ord('o'): _open_line_below,
    ord('k'): _up,
    ord('j'): _down,
    ord('h'): _left,
    ord('l'): _right,
})


#########################################
# INSERT MODE
#########################################
def _leave_to_normal(editor, key):
    editor.set_mode(Mode.NORMAL)

def _new_line(editor, key):
    buf = editor.active_buffer
    buf.insert_line()
    buf.move_down(editor.viewport)
    buf.move_to_line_start()

def _backspace(editor, key):
    # No joining with the previous line at column 0.
    buf = editor.active_buffer
    buf.delete_char()
    buf.move_left(editor.viewport)

def _type_char(editor, ch):
    buf = editor.active_buffer
    buf.insert_char(ch)
    buf.move_right(editor.viewport)


INSERT_KEYS = _keys({
    ESC: _leave_to_normal,
    ENTER_KEYS: _new_line,
    BACKSPACE_KEYS: _backspace,
})


#########################################
# COMMAND MODE
#########################################
def _cancel_command(editor, key):
    editor.command_line.clear()
    editor.set_mode(Mode.NORMAL)

def _submit_command(editor, key):
    commands.queue_command_line(editor, editor.command_line.text)
    editor.command_line.clear()
    editor.set_mode(Mode.NORMAL, refresh_status=False)

def _command_backspace(editor, key):
    editor.command_line.backspace()

def _command_char(editor, ch):
    editor.command_line.append(ch)


COMMAND_KEYS = _keys({
    ESC: _cancel_command,
    ENTER_KEYS: _submit_command,
    BACKSPACE_KEYS: _command_backspace,
})


# mode -> (key table, handler for printable keys not in the table)
DISPATCH = {
    Mode.NORMAL: (NORMAL_KEYS, None),
    Mode.INSERT: (INSERT_KEYS, _type_char),
    Mode.COMMAND: (COMMAND_KEYS, _command_char),
}


def handle_key(editor, key):
    """Handle a key press in whatever mode the editor is in."""
    table, fallback = DISPATCH[editor.mode]
    code = key_code(key)
    handler = table.get(code)
    if handler is not None:
        handler(editor, code)
    elif fallback is not None and is_printable(key):
        fallback(editor, key_char(key))
