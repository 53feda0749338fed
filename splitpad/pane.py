"""
Pane module for the splitpad editor.

A Pane wraps one Buffer together with the size it was given by the layout and its
vertical scroll offset, and knows how to turn itself into rows of text for the screen.
Each row is exactly `width` display cells wide (measured with wcwidth):

    ╭──────────╮   row 0: top border
    │ 1 hello  │   rows 1..height-2: border, 3-cell line-number gutter, text
    ╰──────────╯   last row: bottom border

Blurred panes draw the same frame with blanks, so text never shifts on focus change.
"""
from wcwidth import wcwidth, wcswidth

from splitpad.buffer import Buffer

# Cells taken by the left border plus the line-number gutter
BORDER = 1
GUTTER = 3

FOCUSED_BORDER = ("╭", "─", "╮", "│", "╰", "╯")
BLURRED_BORDER = (" ",) * 6


def fit(text: str, width: int) -> str:
    """Clip `text` to `width` display cells and pad it with spaces to exactly that width."""
    out = []
    used = 0
    for ch in text:
        w = wcwidth(ch)
        if w < 0:
            w = 0
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out) + " " * (width - used)


def line_number(n: int) -> str:
    """Gutter text for line n: the last two digits, right-aligned, then a space."""
    return f"{str(n)[-(GUTTER - 1):]:>{GUTTER - 1}} "


class Pane:
    """One side-by-side editing region."""
    def __init__(self, buffer: Buffer = None):
        self.buffer = buffer if buffer is not None else Buffer()
        self.width = 0
        self.height = 0
        # Top buffer line shown in the pane
        self.scroll = 0

    @property
    def focused(self) -> bool:
        return self.buffer.focused

    def focus(self):
        self.buffer.focus()

    def blur(self):
        self.buffer.blur()

    def set_size(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.ensure_cursor_visible()

    def text_height(self) -> int:
        """Number of buffer lines that fit between the borders."""
        return max(0, self.height - 2)

    def text_width(self) -> int:
        return max(0, self.width - 2 * BORDER - GUTTER)

    def ensure_cursor_visible(self):
        """Adjust the scroll offset so that the cursor line is inside the pane."""
        visible = max(1, self.text_height())
        cursor = self.buffer.cursor_line
        if cursor < self.scroll:
            self.scroll = cursor
        if cursor >= self.scroll + visible:
            self.scroll = cursor - visible + 1
        max_scroll = max(0, self.buffer.line_count() - visible)
        self.scroll = max(0, min(self.scroll, max_scroll))

    def cursor_offset(self):
        """Return the cursor position (x, y) relative to the pane's top-left corner."""
        line = self.buffer.lines[self.buffer.cursor_line]
        x = BORDER + GUTTER + max(0, wcswidth(line[:self.buffer.cursor_col]))
        y = 1 + self.buffer.cursor_line - self.scroll
        return x, y

    def cursor_row(self):
        """Row of the cursor line inside the pane, or None when it is scrolled away."""
        row = 1 + self.buffer.cursor_line - self.scroll
        if 1 <= row <= self.text_height():
            return row
        return None

    def view(self) -> list:
        """Render the pane as `height` rows of `width` cells."""
        if self.width < 2 or self.height < 2:
            return []
        tl, h, tr, v, bl, br = FOCUSED_BORDER if self.focused else BLURRED_BORDER
        inner = self.width - 2
        rows = [tl + h * inner + tr]
        lines = self.buffer.lines
        for r in range(self.text_height()):
            idx = self.scroll + r
            if idx >= len(lines):
                body = ""
            else:
                gutter = line_number(idx + 1)
                if idx == 0 and self.buffer.is_empty():
                    text = self.buffer.placeholder
                else:
                    text = lines[idx]
                body = gutter + text
            rows.append(v + fit(body, inner) + v)
        rows.append(bl + h * inner + br)
        return rows
