"""
Input handling for the splitpad editor.

Reads raw input from curses and turns it into splitpad.events objects. Keys get
names like "tab", "shift+tab", "ctrl+s" or the typed character itself; mouse reports
become left clicks or wheel steps; KEY_RESIZE becomes a ResizeEvent.
"""
import curses

from splitpad import logger
from splitpad.events import KeyEvent, MouseAction, MouseEvent, ResizeEvent

CONTROL_NAMES = {
    "\t":   "tab",
    "\n":   "enter",
    "\r":   "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
}

SPECIAL_KEYS = {
    curses.KEY_BTAB:      "shift+tab",
    curses.KEY_ENTER:     "enter",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC:        "delete",
    curses.KEY_UP:        "up",
    curses.KEY_DOWN:      "down",
    curses.KEY_LEFT:      "left",
    curses.KEY_RIGHT:     "right",
    curses.KEY_HOME:      "home",
    curses.KEY_END:       "end",
    curses.KEY_PPAGE:     "pgup",
    curses.KEY_NPAGE:     "pgdown",
}

def key_event(ch) -> KeyEvent:
    """Name a get_wch() result: a str for characters, an int for function keys."""
    if isinstance(ch, int):
        return KeyEvent(SPECIAL_KEYS.get(ch, f"key{ch}"))
    if ch in CONTROL_NAMES:
        return KeyEvent(CONTROL_NAMES[ch])
    code = ord(ch)
    if 1 <= code <= 26:
        return KeyEvent("ctrl+" + chr(code + 96))
    return KeyEvent(ch)

def mouse_event(x: int, y: int, bstate: int) -> MouseEvent:
    """Classify a curses mouse report."""
    left = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED
    wheel_down = getattr(curses, "BUTTON5_PRESSED", 0)
    if bstate & left:
        action = MouseAction.LEFT
    elif bstate & curses.BUTTON4_PRESSED:
        action = MouseAction.WHEEL_UP
    elif wheel_down and bstate & wheel_down:
        action = MouseAction.WHEEL_DOWN
    else:
        action = MouseAction.OTHER
    return MouseEvent(x, y, action)

def read_event(stdscr):
    """
    Block until the next input and return it as an event.
    Returns None for input that carries nothing (e.g. a mouse report curses could not decode).
    """
    ch = stdscr.get_wch()
    if ch == curses.KEY_RESIZE:
        height, width = stdscr.getmaxyx()
        return ResizeEvent(width, height)
    if ch == curses.KEY_MOUSE:
        try:
            _, mx, my, _, bstate = curses.getmouse()
        except curses.error:
            logger.log("curses.error in getmouse")
            return None
        return mouse_event(mx, my, bstate)
    return key_event(ch)
