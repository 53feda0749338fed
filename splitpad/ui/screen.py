"""
splitpad/ui/screen.py

Implements all UI drawing for the splitpad editor: the side-by-side panes, the help
bar underneath them, and the centred save prompt. A render pass rebuilds the zone
registry for mouse hit-testing and otherwise only reads session state.
"""
import curses

from wcwidth import wcswidth

from splitpad import themes
from splitpad.logger import safe_addstr
from splitpad.pane import BORDER, GUTTER

def setup(stdscr, theme_data: dict):
    """Put the terminal into the mode the editor needs and load the colours."""
    # raw() so that ctrl+s and ctrl+c reach the editor as keys
    curses.raw()
    stdscr.keypad(True)
    curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
    curses.mouseinterval(0)
    curses.start_color()
    try:
        curses.use_default_colors()
    except curses.error:
        pass
    themes.apply_theme(theme_data)

###############################################################################
# PANES
###############################################################################

def draw_pane(stdscr, pane, x0: int):
    """Paint one pane's rows at column x0, styling border, gutter, text and cursor line."""
    rows = pane.view()
    if not rows:
        return
    border = curses.color_pair(themes.PAIR_BORDER)
    numbers = curses.color_pair(themes.PAIR_LINE_NUMBER)
    cursor_row = pane.cursor_row() if pane.focused else None

    safe_addstr(stdscr, 0, x0, rows[0], border)
    for y, row in enumerate(rows[1:-1], start=1):
        # Split the row back into its parts: border, gutter, text, border.
        left, body, right = row[0], row[1:-1], row[-1]
        gutter, text = body[:GUTTER], body[GUTTER:]
        line_index = pane.scroll + y - 1
        if line_index == 0 and pane.buffer.is_empty():
            pair = (themes.PAIR_FOCUSED_PLACEHOLDER if pane.focused
                    else themes.PAIR_PLACEHOLDER)
            text_attr = curses.color_pair(pair)
        elif y == cursor_row:
            text_attr = curses.color_pair(themes.PAIR_CURSOR_LINE)
        else:
            text_attr = curses.A_NORMAL
        safe_addstr(stdscr, y, x0, left, border)
        safe_addstr(stdscr, y, x0 + BORDER, gutter,
                    text_attr if y == cursor_row else numbers)
        safe_addstr(stdscr, y, x0 + BORDER + len(gutter), text, text_attr)
        safe_addstr(stdscr, y, x0 + pane.width - 1, right, border)
    safe_addstr(stdscr, len(rows) - 1, x0, rows[-1], border)

def draw_help(session, stdscr, width: int, height: int):
    """Help bar two rows under the panes, status message below it."""
    y = session.layout.pane_height() + 1
    attr = curses.color_pair(themes.PAIR_HELP)
    help_text = session.keymap.short_help()
    if y < height:
        safe_addstr(stdscr, y, 0, help_text[:max(0, width - 1)], attr)
    if session.status_message and y + 2 < height:
        safe_addstr(stdscr, y + 2, 0, session.status_message[:max(0, width - 1)], attr)

###############################################################################
# SAVE PROMPT
###############################################################################

def draw_prompt(session, stdscr, width: int, height: int):
    """Draw the save prompt in the middle of the screen and put the cursor in it."""
    flow = session.save_flow
    lines = flow.view()
    box_width = max(wcswidth(line) for line in lines)
    start_y = max(0, (height - len(lines)) // 2)
    start_x = max(0, (width - box_width) // 2)
    attr = curses.color_pair(themes.PAIR_PROMPT)
    for i, line in enumerate(lines):
        safe_addstr(stdscr, start_y + i, start_x, line, attr if i == 0 else curses.A_NORMAL)
    text, col = flow.filename.visible()
    try:
        stdscr.move(start_y + 2, start_x + 2 + max(0, wcswidth(text[:col])))
    except curses.error:
        pass

###############################################################################
# FRAME
###############################################################################

def display(session, stdscr):
    """
    Re-draw the entire screen from the session. Registers one zone per pane, in pane
    order, so that mouse clicks can be mapped back to panes until the next frame.
    """
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    if session.mode == "save":
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        draw_prompt(session, stdscr, width, height)
        stdscr.refresh()
        return

    rects = session.layout.pane_rects()
    session.zones.rebuild(rects)
    for pane, rect in zip(session.layout.panes, rects):
        draw_pane(stdscr, pane, rect.x)
    draw_help(session, stdscr, width, height)

    pane = session.layout.focused_pane
    rect = rects[session.layout.focus]
    cx, cy = pane.cursor_offset()
    try:
        if 0 < cy <= pane.text_height() and cx < pane.width - BORDER:
            curses.curs_set(1)
            stdscr.move(rect.y + cy, rect.x + cx)
        else:
            curses.curs_set(0)
    except curses.error:
        pass
    stdscr.refresh()
