"""
Focus and layout management for the splitpad editor.

The Layout owns the ordered pane list and the focus index. Every mutating operation
keeps 1 <= len(panes) <= MAX_PANES and 0 <= focus < len(panes).
"""
from splitpad import logger
from splitpad.pane import Pane
from splitpad.zones import Zone

INITIAL_PANES = 1
MIN_PANES = 1
MAX_PANES = 6
# Rows below the panes reserved for the help bar and status line
HELP_HEIGHT = 5

class Layout:
    def __init__(self, width: int = 0, height: int = 0, count: int = INITIAL_PANES):
        self.width = width
        self.height = height
        self.panes = [Pane() for _ in range(max(MIN_PANES, min(count, MAX_PANES)))]
        self.focus = 0
        self.panes[self.focus].focus()
        self.size_panes()

    @property
    def focused_pane(self) -> Pane:
        return self.panes[self.focus]

    def can_add(self) -> bool:
        return len(self.panes) < MAX_PANES

    def can_remove(self) -> bool:
        return len(self.panes) > MIN_PANES

    def focus_next(self):
        """Move focus one pane to the right, wrapping around."""
        self.set_focus((self.focus + 1) % len(self.panes))

    def focus_previous(self):
        """Move focus one pane to the left, wrapping around."""
        self.set_focus((self.focus - 1) % len(self.panes))

    def set_focus(self, index: int):
        self.panes[self.focus].blur()
        self.focus = index
        self.panes[self.focus].focus()

    def add_pane(self) -> bool:
        """Append an empty, unfocused pane. Returns False when the layout is full."""
        if not self.can_add():
            return False
        self.panes.append(Pane())
        logger.log(f"pane added ({len(self.panes)} open)")
        return True

    def remove_pane(self, zones=None) -> bool:
        """
        Remove the focused pane and its zone, then focus the pane that slid into
        its place (or the first one when the last pane was removed).
        Returns False when only one pane is left.
        """
        if not self.can_remove():
            return False
        idx = self.focus
        del self.panes[idx]
        if zones is not None:
            zones.remove(idx)
        self.focus = self.focus % len(self.panes)
        self.panes[self.focus].focus()
        logger.log(f"pane {idx + 1} removed ({len(self.panes)} open)")
        return True

    def blur_all(self):
        for pane in self.panes:
            pane.blur()

    def resize(self, width: int, height: int):
        """Store new terminal dimensions."""
        self.width = max(0, width)
        self.height = max(0, height)

    def pane_width(self) -> int:
        # Integer division: leftover columns on the right stay unused.
        return self.width // len(self.panes)

    def pane_height(self) -> int:
        return max(0, self.height - HELP_HEIGHT)

    def size_panes(self):
        w = self.pane_width()
        h = self.pane_height()
        for pane in self.panes:
            pane.set_size(w, h)

    def pane_rects(self) -> list:
        """Zones of the panes as they are laid out side by side from column 0."""
        w = self.pane_width()
        h = self.pane_height()
        return [Zone(i * w, 0, w, h) for i in range(len(self.panes))]
