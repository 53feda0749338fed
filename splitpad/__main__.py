"""
Main entry point for the splitpad editor.
"""
import curses
import os
import sys

from splitpad import config, logger, themes
from splitpad.session import Session
from splitpad.ui import input as ui_input
from splitpad.ui import screen

def main(stdscr):
    settings = config.load_config()
    logger.set_log_file(settings.log_file)
    theme = themes.resolve_theme(settings.theme, themes.available_themes(config.THEMES_DIR))
    screen.setup(stdscr, theme)

    height, width = stdscr.getmaxyx()
    session = Session(width, height)
    logger.log(f"Editor started ({width}x{height}, theme {settings.theme}).")

    # Main loop
    while not session.exit_flag:
        screen.display(session, stdscr)
        event = ui_input.read_event(stdscr)
        if event is not None:
            session.dispatch(event)

def run():
    """
    Start the curses wrapper with main(). Exits with status 1 if curses cannot be
    started or the editor fails while running.
    """
    # Keep esc responsive; curses waits a full second for escape sequences by default.
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(main)
    except Exception as e:
        logger.log(f"fatal: {e!r}")
        print("Error while running program:", e)
        sys.exit(1)

if __name__ == "__main__":
    run()
