"""
Save flow for the splitpad editor.

A short-lived modal prompt: it snapshots the focused pane's text when it starts,
collects a filename, and reports whether the user confirmed or cancelled. The
session performs the write through write_file() on confirmation.
"""
import os

from splitpad.events import KeyEvent
from splitpad.keymap import CANCEL_KEYS, CONFIRM_KEYS

PROMPTING = "prompting"
COMMITTED = "committed"
CANCELLED = "cancelled"

# Mode handed to os.open; the process umask still applies.
FILE_MODE = 0o666

class FilenameInput:
    """Single-line text input used by the save prompt."""
    def __init__(self, placeholder: str = "Filename", char_limit: int = 156, width: int = 20):
        self.value = ""
        self.position = 0
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.focused = False

    def focus(self):
        self.focused = True

    def blur(self):
        self.focused = False

    def update(self, event):
        if not self.focused or not isinstance(event, KeyEvent):
            return
        key = event.key
        if event.is_char:
            if len(self.value) < self.char_limit:
                self.value = self.value[:self.position] + key + self.value[self.position:]
                self.position += 1
        elif key == "backspace":
            if self.position > 0:
                self.value = self.value[:self.position - 1] + self.value[self.position:]
                self.position -= 1
        elif key == "delete":
            self.value = self.value[:self.position] + self.value[self.position + 1:]
        elif key == "left":
            self.position = max(0, self.position - 1)
        elif key == "right":
            self.position = min(len(self.value), self.position + 1)
        elif key in ("home", "ctrl+a"):
            self.position = 0
        elif key in ("end", "ctrl+e"):
            self.position = len(self.value)

    def visible(self) -> tuple:
        """Return (text, cursor column) for the `width`-cell window around the cursor."""
        start = max(0, self.position - self.width)
        return self.value[start:start + self.width], self.position - start

    def view(self) -> str:
        if not self.value:
            return "> " + self.placeholder
        return "> " + self.visible()[0]

class SaveFlow:
    """State of an active save prompt."""
    def __init__(self, target_index: int, text: str):
        self.target_index = target_index
        self.text = text
        self.filename = FilenameInput()
        self.filename.focus()

    @classmethod
    def start(cls, index: int, text: str) -> "SaveFlow":
        return cls(index, text)

    def handle(self, event) -> str:
        """Feed one event to the prompt and return PROMPTING, COMMITTED or CANCELLED."""
        if not isinstance(event, KeyEvent):
            return PROMPTING
        if event.key in CANCEL_KEYS:
            return CANCELLED
        if event.key in CONFIRM_KEYS:
            return COMMITTED
        self.filename.update(event)
        return PROMPTING

    def view(self) -> list:
        return [
            "Enter Filename?",
            "",
            self.filename.view(),
            "",
            "(esc to quit)",
        ]

def write_file(filename: str, text: str):
    """Create or truncate `filename` and write `text` to it exactly. Raises OSError."""
    data = text.encode("utf-8")
    fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    try:
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            view = view[written:]
    finally:
        os.close(fd)
