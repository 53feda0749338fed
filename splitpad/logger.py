"""
Logger module for the splitpad editor.

Provides a simple file-based logger for debugging and error tracking, and safe wrappers
for curses screen output functions that catch and log curses errors.
"""
import curses
import datetime

# Default log file path, replaced by the `log_file` config key
LOG_FILE_PATH = "splitpad.log"

def set_log_file(path: str) -> None:
    """Redirect subsequent log messages to `path`."""
    global LOG_FILE_PATH
    LOG_FILE_PATH = path

def log(message: str) -> None:
    """Append a timestamped message to the log file."""
    try:
        with open(LOG_FILE_PATH, 'a', encoding='utf-8') as f:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        # An unwritable log file must not take the editor down.
        pass

def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """
    Safely add a string to the curses window at the given position.
    Logs any curses.error exceptions that occur (e.g., writing off-screen).
    """
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        log(f"curses.error in addstr at ({y},{x}): '{text}'")
