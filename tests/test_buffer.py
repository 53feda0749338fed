"""Buffer (pane text widget) tests"""

import pytest

from splitpad.buffer import Buffer
from splitpad.events import KeyEvent, MouseAction, MouseEvent


@pytest.fixture
def buf():
    """Focused buffer with three lines, cursor at the start"""
    b = Buffer(["first line", "second", "third line here"])
    b.focus()
    return b


class TestContent:
    """Content get/set"""

    def test_new_buffer_has_one_empty_line(self):
        b = Buffer()
        assert b.lines == [""]
        assert b.line_count() == 1
        assert b.value() == ""
        assert b.is_empty()

    def test_empty_list_becomes_one_line(self):
        assert Buffer([]).lines == [""]

    def test_value_joins_lines(self, buf):
        assert buf.value() == "first line\nsecond\nthird line here"

    def test_set_value_moves_cursor_to_end(self):
        b = Buffer()
        b.set_value("a\nbc")
        assert b.lines == ["a", "bc"]
        assert (b.cursor_line, b.cursor_col) == (1, 2)

    def test_blurred_buffer_ignores_keys(self, type_text):
        b = Buffer()
        type_text(b, "hello")
        assert b.value() == ""

    def test_typing_and_enter(self, type_text):
        b = Buffer()
        b.focus()
        type_text(b, "ab")
        b.update(KeyEvent("enter"))
        type_text(b, "cd")
        assert b.value() == "ab\ncd"

    def test_non_key_events_ignored(self, buf):
        buf.update(MouseEvent(1, 1, MouseAction.LEFT))
        assert buf.value() == "first line\nsecond\nthird line here"

    def test_control_keys_are_not_inserted(self, buf):
        buf.update(KeyEvent("ctrl+n"))
        buf.update(KeyEvent("tab"))
        assert buf.value() == "first line\nsecond\nthird line here"


class TestEditing:
    """Deleting across line boundaries"""

    def test_backspace_merges_with_previous_line(self, buf):
        buf.cursor_down()
        buf.update(KeyEvent("backspace"))
        assert buf.lines == ["first linesecond", "third line here"]
        assert (buf.cursor_line, buf.cursor_col) == (0, len("first line"))

    def test_backspace_at_start_of_buffer_is_noop(self, buf):
        buf.update(KeyEvent("backspace"))
        assert buf.line_count() == 3

    def test_delete_merges_with_next_line(self, buf):
        buf.update(KeyEvent("end"))
        buf.update(KeyEvent("delete"))
        assert buf.lines[0] == "first linesecond"

    def test_delete_removes_char_under_cursor(self, buf):
        buf.update(KeyEvent("delete"))
        assert buf.lines[0] == "irst line"


class TestCursor:
    """Cursor movement"""

    def test_cursor_down_clamps_column(self, buf):
        buf.set_cursor(10)
        buf.cursor_down()
        assert (buf.line(), buf.cursor_col) == (1, len("second"))

    def test_cursor_up_at_top_is_noop(self, buf):
        buf.cursor_up()
        assert buf.line() == 0

    def test_cursor_down_at_bottom_is_noop(self, buf):
        buf.cursor_down()
        buf.cursor_down()
        buf.cursor_down()
        assert buf.line() == 2

    def test_set_cursor_clamps_to_line(self, buf):
        buf.set_cursor(99)
        assert buf.cursor_col == len("first line")
        buf.set_cursor(-5)
        assert buf.cursor_col == 0

    def test_left_wraps_to_previous_line(self, buf):
        buf.cursor_down()
        buf.update(KeyEvent("left"))
        assert (buf.line(), buf.cursor_col) == (0, len("first line"))

    def test_right_wraps_to_next_line(self, buf):
        buf.update(KeyEvent("end"))
        buf.update(KeyEvent("right"))
        assert (buf.line(), buf.cursor_col) == (1, 0)

    def test_up_down_keys(self, buf):
        buf.update(KeyEvent("down"))
        buf.update(KeyEvent("down"))
        buf.update(KeyEvent("up"))
        assert buf.line() == 1
