from hektor import commands
from hektor.editor import Editor


def test_queue_command_line_splits_on_whitespace():
    editor = Editor()
    commands.queue_command_line(editor, " w\tq  ")
    commands.queue_command_line(editor, "")
    assert editor.command_queue == ["w", "q"]


def test_q_sets_should_quit():
    editor = Editor()
    editor.command_queue.append("q")
    commands.run_command_queue(editor)
    assert editor.should_quit
    assert editor.command_queue == []


def test_w_writes_active_buffer(tmp_path):
    path = tmp_path / "notes.txt"
    editor = Editor(["first", "second"], str(path))
    editor.command_queue.append("w")
    commands.run_command_queue(editor)
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"
    assert editor.status_message == f'"{path}" written (2 lines)'
    assert not editor.should_quit


def test_w_after_opening_leaves_untouched_file_alone(tmp_path):
    path = tmp_path / "main.c"
    path.write_bytes(b"int a;\x0cint b;\nlast\n")
    editor = Editor.from_file(str(path))
    editor.command_queue.append("w")
    commands.run_command_queue(editor)
    assert path.read_bytes() == b"int a;\x0cint b;\nlast\n"


def test_w_on_unnamed_buffer_reports_error():
    editor = Editor(["text"])
    editor.command_queue.append("w")
    commands.run_command_queue(editor)
    assert editor.status_message == "no file name"
    assert editor.active_buffer.lines == ["text"]


def test_unrecognized_command_does_not_stop_the_queue(log_file):
    editor = Editor()
    editor.command_queue.extend(["nope", "q"])
    commands.run_command_queue(editor)
    assert editor.should_quit
    assert editor.status_message == "unrecognized command: nope"
    assert "unrecognized command: nope" in log_file.read_text(encoding="utf-8")


def test_commands_run_in_order(tmp_path, monkeypatch):
    ran = []
    monkeypatch.setitem(commands.COMMANDS, "w", lambda editor: ran.append("w"))
    monkeypatch.setitem(commands.COMMANDS, "q", lambda editor: ran.append("q"))
    editor = Editor()
    editor.command_queue.extend(["q", "w", "q"])
    commands.run_command_queue(editor)
    assert ran == ["q", "w", "q"]


def test_write_then_quit_from_command_line(tmp_path, press):
    path = tmp_path / "out.txt"
    editor = Editor([""], str(path))
    press(editor, "i", "hello", 27, ":", "w q", 10)
    assert path.read_text(encoding="utf-8") == "hello\n"
    assert editor.should_quit
    assert not editor.active_buffer.modified
