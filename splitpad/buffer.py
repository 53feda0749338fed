"""
Buffer module for the splitpad editor.

Defines the Buffer class that backs every pane: the text content as a list of lines,
a cursor position, and the focus flag that decides whether key events are applied.
Vertical movement is relative (one line at a time); callers that need to reach a
given row step towards it.
"""
from splitpad.events import KeyEvent

class Buffer:
    """Represents an editable text buffer with its own cursor."""
    def __init__(self, lines=None, placeholder: str = "Type something"):
        self.lines = lines if lines is not None else [""]

        # There is always at least one line, even if lines=[]
        if not self.lines:
            self.lines = [""]

        self.placeholder = placeholder
        self.focused = False
        # Cursor position within this buffer (line and column)
        self.cursor_line = 0
        self.cursor_col = 0

    # -- focus ---------------------------------------------------------------

    def focus(self):
        self.focused = True

    def blur(self):
        self.focused = False

    # -- queries -------------------------------------------------------------

    def line(self) -> int:
        """Return the row the cursor is on."""
        return self.cursor_line

    def line_count(self) -> int:
        return len(self.lines)

    def value(self) -> str:
        """Return the full content, lines joined by newline."""
        return "\n".join(self.lines)

    def is_empty(self) -> bool:
        return self.lines == [""]

    # -- content -------------------------------------------------------------

    def set_value(self, text: str):
        """Replace the content and move the cursor to its end."""
        self.lines = text.split("\n")
        self.cursor_line = len(self.lines) - 1
        self.cursor_col = len(self.lines[-1])

    def insert_text(self, text: str):
        """Insert text at the cursor; newlines split the current line."""
        for ch in text:
            if ch == "\n":
                self.split_line()
            else:
                line = self.lines[self.cursor_line]
                self.lines[self.cursor_line] = line[:self.cursor_col] + ch + line[self.cursor_col:]
                self.cursor_col += 1

    def split_line(self):
        """Split the current line at the cursor position, moving the remainder to a new line below."""
        line = self.lines[self.cursor_line]
        before = line[:self.cursor_col]
        after = line[self.cursor_col:]
        self.lines[self.cursor_line] = before
        self.lines.insert(self.cursor_line + 1, after)
        self.cursor_line += 1
        self.cursor_col = 0

    def delete_backward(self):
        """Delete the character before the cursor, merging with the previous line at column 0."""
        if self.cursor_col > 0:
            line = self.lines[self.cursor_line]
            self.lines[self.cursor_line] = line[:self.cursor_col - 1] + line[self.cursor_col:]
            self.cursor_col -= 1
        elif self.cursor_line > 0:
            prev_line = self.lines[self.cursor_line - 1]
            curr_line = self.lines.pop(self.cursor_line)
            self.cursor_line -= 1
            self.cursor_col = len(prev_line)
            self.lines[self.cursor_line] = prev_line + curr_line

    def delete_forward(self):
        """Delete the character under the cursor, merging with the next line at end of line."""
        line = self.lines[self.cursor_line]
        if self.cursor_col < len(line):
            self.lines[self.cursor_line] = line[:self.cursor_col] + line[self.cursor_col + 1:]
        elif self.cursor_line < len(self.lines) - 1:
            next_line = self.lines.pop(self.cursor_line + 1)
            self.lines[self.cursor_line] = line + next_line

    # -- cursor movement -----------------------------------------------------

    def _clamp_col(self):
        self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_line]))

    def cursor_up(self):
        """Move the cursor one line up, if possible."""
        if self.cursor_line > 0:
            self.cursor_line -= 1
            self._clamp_col()

    def cursor_down(self):
        """Move the cursor one line down, if possible."""
        if self.cursor_line < len(self.lines) - 1:
            self.cursor_line += 1
            self._clamp_col()

    def set_cursor(self, col: int):
        """Move the cursor to column `col` of the current line, clamped to the line."""
        self.cursor_col = max(0, min(col, len(self.lines[self.cursor_line])))

    def cursor_left(self):
        if self.cursor_col > 0:
            self.cursor_col -= 1
        elif self.cursor_line > 0:
            self.cursor_line -= 1
            self.cursor_col = len(self.lines[self.cursor_line])

    def cursor_right(self):
        if self.cursor_col < len(self.lines[self.cursor_line]):
            self.cursor_col += 1
        elif self.cursor_line < len(self.lines) - 1:
            self.cursor_line += 1
            self.cursor_col = 0

    # -- events --------------------------------------------------------------

    def update(self, event):
        """Apply an input event. Blurred buffers ignore everything."""
        if not self.focused or not isinstance(event, KeyEvent):
            return
        key = event.key
        if event.is_char:
            self.insert_text(key)
        elif key == "enter":
            self.split_line()
        elif key == "backspace":
            self.delete_backward()
        elif key == "delete":
            self.delete_forward()
        elif key == "left":
            self.cursor_left()
        elif key == "right":
            self.cursor_right()
        elif key == "up":
            self.cursor_up()
        elif key == "down":
            self.cursor_down()
        elif key == "home":
            self.cursor_col = 0
        elif key == "end":
            self.cursor_col = len(self.lines[self.cursor_line])
