import curses

import pytest

from hektor import logger
from hektor.editor import Editor


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    path = tmp_path / "hektor.log"
    monkeypatch.setattr(logger, "LOG_FILE_PATH", str(path))
    return path


@pytest.fixture
def press():
    """Feed a sequence of keys (ints or strings of characters) to an editor."""
    def _press(editor: Editor, *keys):
        for key in keys:
            if isinstance(key, str):
                for ch in key:
                    editor.handle_key(ord(ch))
            else:
                editor.handle_key(key)
        return editor
    return _press


class FakeScreen:
    """Stands in for a curses window; records what gets drawn and read."""
    def __init__(self, height=5, width=20, keys=(), resizes=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.resizes = list(resizes)
        self.rows = {}
        self.cursor = None
        self.refreshed = False
        self.events = []

    def getmaxyx(self):
        return self.height, self.width

    def keypad(self, flag):
        pass

    def erase(self):
        self.rows = {}

    def addstr(self, y, x, text, attr=0):
        self.rows[y] = text

    def move(self, y, x):
        self.cursor = (y, x)

    def refresh(self):
        self.refreshed = True
        self.events.append("refresh")

    def get_wch(self):
        if not self.keys:
            raise AssertionError("ran out of keys")
        key = self.keys.pop(0)
        self.events.append(("read", key))
        if isinstance(key, Exception):
            raise key
        if key == curses.KEY_RESIZE and self.resizes:
            self.height, self.width = self.resizes.pop(0)
        return key


@pytest.fixture
def fake_screen():
    return FakeScreen
