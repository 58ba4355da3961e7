"""
Editor context for the Hektor text editor.
"""
from hektor import buffer, commands, logger
from hektor.modes import Mode
from hektor.ui import input as ui_input


class Editor:
    """
    Holds the state of the editor: the open buffers, the ':' command line,
    the queue of commands waiting to run, the current mode and status text.
    A single instance is created at startup and handed to the input and
    screen functions.
    """
    def __init__(self, lines=None, name: str = ""):
        # Buffer management
        self.buffers = [buffer.Buffer(name, lines)]
        self.active_buffer_index = 0

        # Command-line buffer and pending commands
        self.command_line = buffer.CommandLine()
        self.command_queue = []

        self.mode = Mode.NORMAL
        self.status_message = self.mode.label

        # Text area size, filled in by the screen before each key is read
        self.viewport = None

        # Running flag
        self.should_quit = False

    @classmethod
    def from_file(cls, name: str):
        """Create an editor for an existing file; read errors propagate."""
        editor = cls(buffer.load_lines(name), name)
        logger.log(f"opened {name} ({len(editor.active_buffer.lines)} lines)")
        return editor

    @property
    def active_buffer(self) -> buffer.Buffer:
        return self.buffers[self.active_buffer_index]

    def add_buffer(self, buf: buffer.Buffer):
        """Add a new buffer and make it current."""
        self.buffers.append(buf)
        self.active_buffer_index = len(self.buffers) - 1

    def switch_to_buffer(self, index: int):
        """Switch current buffer to the buffer at the given index."""
        if 0 <= index < len(self.buffers):
            self.active_buffer_index = index

    def set_mode(self, mode: Mode, refresh_status: bool = True):
        self.mode = mode
        if refresh_status:
            self.status_message = mode.label

    def report(self, msg: str):
        """Show msg on the status line and record it in the log."""
        self.status_message = msg
        logger.log(msg)

    def handle_key(self, key):
        """Process one key press, then run whatever commands it queued."""
        ui_input.handle_key(self, key)
        commands.run_command_queue(self)

    def quit(self):
        logger.log("Editor exited.")
        self.should_quit = True
