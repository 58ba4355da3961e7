"""
Command queue for Hektor text editor.

A line typed in command (':') mode is split into whitespace-separated tokens
which are queued on the editor. The queue is drained after every key press,
front to back, and a bad token does not stop the ones behind it.
"""
from hektor import logger
from hektor.errors import FileWriteError, UnrecognizedCommand


def queue_command_line(editor, text: str):
    """Split a command line into tokens and append them to the queue."""
    editor.command_queue.extend(text.split())


def write_buffer(editor):
    buf = editor.active_buffer
    try:
        count = buf.save_to_file()
    except FileWriteError as e:
        editor.report(str(e))
        return
    editor.report(f'"{buf.name}" written ({count} lines)')


def quit_editor(editor):
    logger.log("q: quit")
    editor.quit()


COMMANDS = {
    "q": quit_editor,
    "w": write_buffer,
}


def execute_command(editor, token: str):
    """Run a single command token; raises UnrecognizedCommand for unknown ones."""
    try:
        action = COMMANDS[token]
    except KeyError:
        raise UnrecognizedCommand(token) from None
    action(editor)


def run_command_queue(editor):
    """Execute queued commands in order until the queue is empty."""
    while editor.command_queue:
        token = editor.command_queue.pop(0)
        try:
            execute_command(editor, token)
        except UnrecognizedCommand as e:
            editor.report(str(e))
