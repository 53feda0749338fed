"""
Input events for the splitpad editor.

The curses layer (splitpad.ui.input) turns raw key codes and mouse reports into
these small value objects, so the session and its panes never touch curses directly.
"""
from dataclasses import dataclass
from enum import Enum


class MouseAction(Enum):
    LEFT = "left"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A key press, named the way the keymap names it ("tab", "ctrl+s", "a", ...)."""
    key: str

    @property
    def is_char(self) -> bool:
        """True for a single printable character."""
        return len(self.key) == 1 and self.key.isprintable()


@dataclass(frozen=True)
class MouseEvent:
    x: int
    y: int
    action: MouseAction


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int
