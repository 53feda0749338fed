"""
Mouse handling for the splitpad editor.

Translates a screen coordinate plus the zones of the current frame into a pane index,
and from there into a cursor position inside that pane's buffer.
"""
from splitpad.events import MouseAction
from splitpad.pane import BORDER, GUTTER

# Offsets from a zone's corner to the first text cell: top border row, and
# left border plus line-number gutter.
ROW_OFFSET = 1
COL_OFFSET = BORDER + GUTTER

def hit_test(zones, x: int, y: int):
    """Return the index of the first zone containing (x, y), or None."""
    for i, zone in enumerate(zones):
        if zone.contains(x, y):
            return i
    return None

def map_to_cursor(buffer, zone, x: int, y: int):
    """
    Move the buffer's cursor to the text cell under screen point (x, y).

    The buffer only moves vertically one line at a time, so the cursor steps towards
    the target row. The column is handed to the buffer unclamped; set_cursor clamps it.
    """
    rx, ry = zone.pos(x, y)
    row = ry - ROW_OFFSET
    row = min(max(0, row), buffer.line_count() - 1)

    while buffer.line() < row:
        buffer.cursor_down()
    while row < buffer.line():
        buffer.cursor_up()

    buffer.set_cursor(rx - COL_OFFSET)

def handle_click(session, event) -> bool:
    """
    Left click: inside the focused pane, move its cursor; inside another pane, only
    move focus there. Returns True when the click landed on a pane.
    """
    idx = hit_test(session.zones, event.x, event.y)
    if idx is None or idx >= len(session.layout.panes):
        return False
    layout = session.layout
    if idx == layout.focus:
        map_to_cursor(layout.focused_pane.buffer, session.zones.get(idx), event.x, event.y)
    else:
        layout.set_focus(idx)
    return True

def handle_wheel(session, event):
    """Scroll the focused pane one line; the pointer position does not matter."""
    buf = session.layout.focused_pane.buffer
    if event.action == MouseAction.WHEEL_UP:
        buf.cursor_up()
    elif event.action == MouseAction.WHEEL_DOWN:
        buf.cursor_down()
