"""Save flow tests"""

import os

import pytest

from splitpad import saveflow
from splitpad.events import KeyEvent, MouseAction, MouseEvent
from splitpad.saveflow import CANCELLED, COMMITTED, PROMPTING, FilenameInput, SaveFlow


@pytest.fixture
def flow():
    return SaveFlow.start(1, "snapshot text")


class TestFilenameInput:
    """Single-line filename input"""

    def test_typing_and_editing(self, type_text):
        inp = FilenameInput()
        inp.focus()
        type_text(inp, "otu.txt")
        inp.update(KeyEvent("home"))
        inp.update(KeyEvent("right"))
        inp.update(KeyEvent("delete"))
        inp.update(KeyEvent("right"))
        type_text(inp, "t")
        assert inp.value == "out.txt"

    def test_backspace(self, type_text):
        inp = FilenameInput()
        inp.focus()
        type_text(inp, "abc")
        inp.update(KeyEvent("backspace"))
        assert inp.value == "ab"
        assert inp.position == 2

    def test_char_limit(self, type_text):
        inp = FilenameInput(char_limit=3)
        inp.focus()
        type_text(inp, "abcdef")
        assert inp.value == "abc"

    def test_blurred_input_ignores_keys(self, type_text):
        inp = FilenameInput()
        type_text(inp, "abc")
        assert inp.value == ""

    def test_view_shows_placeholder_when_empty(self):
        assert FilenameInput().view() == "> Filename"

    def test_visible_window_follows_cursor(self, type_text):
        inp = FilenameInput(width=5)
        inp.focus()
        type_text(inp, "abcdefgh")
        text, col = inp.visible()
        assert text == "defgh"
        assert col == 5


class TestSaveFlow:
    """Prompt state machine"""

    def test_start_snapshots_text_and_index(self, flow):
        assert flow.target_index == 1
        assert flow.text == "snapshot text"
        assert flow.filename.value == ""
        assert flow.filename.focused

    def test_keys_edit_filename(self, flow):
        assert flow.handle(KeyEvent("a")) == PROMPTING
        assert flow.filename.value == "a"

    def test_enter_commits(self, flow):
        assert flow.handle(KeyEvent("enter")) == COMMITTED

    @pytest.mark.parametrize("key", ["esc", "ctrl+c"])
    def test_cancel_keys(self, flow, key):
        assert flow.handle(KeyEvent(key)) == CANCELLED

    def test_mouse_is_ignored(self, flow):
        assert flow.handle(MouseEvent(3, 3, MouseAction.LEFT)) == PROMPTING
        assert flow.filename.value == ""

    def test_view(self, flow):
        lines = flow.view()
        assert lines[0] == "Enter Filename?"
        assert lines[-1] == "(esc to quit)"


class TestWriteFile:
    """Writing the snapshot"""

    def test_writes_exact_bytes(self, tmp_path):
        target = tmp_path / "out.txt"
        saveflow.write_file(str(target), "hello\nwörld")
        assert target.read_bytes() == "hello\nwörld".encode("utf-8")

    def test_no_trailing_newline_added(self, tmp_path):
        target = tmp_path / "out.txt"
        saveflow.write_file(str(target), "hello")
        assert target.read_bytes() == b"hello"

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("a much longer previous content")
        saveflow.write_file(str(target), "new")
        assert target.read_bytes() == b"new"

    def test_empty_text_creates_empty_file(self, tmp_path):
        target = tmp_path / "empty.txt"
        saveflow.write_file(str(target), "")
        assert target.exists()
        assert target.read_bytes() == b""

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            saveflow.write_file(str(tmp_path / "nope" / "out.txt"), "x")

    def test_empty_filename_raises(self):
        with pytest.raises(OSError):
            saveflow.write_file("", "x")

    @pytest.mark.skipif(os.name != "posix", reason="file modes are POSIX only")
    def test_mode_is_read_write_for_everyone_without_umask(self, tmp_path):
        old = os.umask(0)
        try:
            target = tmp_path / "out.txt"
            saveflow.write_file(str(target), "x")
        finally:
            os.umask(old)
        assert target.stat().st_mode & 0o777 == 0o666

    @pytest.mark.skipif(os.name != "posix", reason="file modes are POSIX only")
    def test_saved_file_is_not_executable(self, tmp_path):
        """under the usual umask 022 the file comes out 0644"""
        old = os.umask(0o022)
        try:
            target = tmp_path / "out.txt"
            saveflow.write_file(str(target), "hello")
        finally:
            os.umask(old)
        assert target.stat().st_mode & 0o777 == 0o644
