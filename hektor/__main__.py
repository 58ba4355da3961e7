"""
Main entry point and run loop for the Hektor text editor.
"""
import argparse
import curses
import sys

from hektor import logger
from hektor.editor import Editor
from hektor.errors import FileNotFound, FileReadError
from hektor.ui import screen

ESC_DELAY_MS = 25


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="hektor",
        description="A(nother) minimalistic text editor.",
    )
    parser.add_argument("file", nargs="?", metavar="FILE",
                        help="the name of the file you want to edit")
    parser.add_argument("--log", metavar="PATH", default=logger.LOG_FILE_PATH,
                        help="file to append debug messages to (default: %(default)s)")
    return parser.parse_args(argv)


def create_editor(file_name=None) -> Editor:
    if file_name is None:
        return Editor()
    return Editor.from_file(file_name)


def main(stdscr, editor: Editor):
    """Run the editor until a quit command has been processed."""
    if hasattr(curses, "set_escdelay"):
        curses.set_escdelay(ESC_DELAY_MS)
    stdscr.keypad(True)

    editor.viewport = screen.text_viewport(stdscr)
    while not editor.should_quit:
        screen.display(editor, stdscr)
        try:
            key = stdscr.get_wch()
        except curses.error:
            # interrupted read, nothing typed
            continue
        if key == curses.KEY_RESIZE:
            editor.viewport = screen.text_viewport(stdscr)
            editor.active_buffer.clamp(editor.viewport)
            continue
        editor.handle_key(key)


def run(argv=None):
    """
    Parse the command line, load the file and hand the editor to curses.wrapper,
    which restores the terminal however the loop ends.
    """
    args = parse_args(argv)
    logger.set_log_file(args.log)
    try:
        editor = create_editor(args.file)
    except (FileNotFound, FileReadError) as e:
        logger.log(str(e))
        print(f"hektor: {e}", file=sys.stderr)
        return 1
    curses.wrapper(main, editor)
    return 0


if __name__ == "__main__":
    sys.exit(run())
