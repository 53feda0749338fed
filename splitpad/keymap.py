"""
Key bindings for the splitpad editor.

Each Binding carries the key names it reacts to, the short help shown in the help bar,
and an enabled flag. A disabled binding matches nothing, so its key behaves like any
other key and is passed on to the panes.
"""
from dataclasses import dataclass, field

from splitpad.events import KeyEvent

HELP_SEPARATOR = " • "

@dataclass
class Binding:
    keys     : tuple
    help_key : str  = ""
    help_desc: str  = ""
    enabled  : bool = True

    def matches(self, event) -> bool:
        return self.enabled and isinstance(event, KeyEvent) and event.key in self.keys

    def set_enabled(self, enabled: bool):
        self.enabled = enabled

@dataclass
class Keymap:
    next  : Binding = field(default_factory=lambda: Binding(("tab",), "tab", "next"))
    prev  : Binding = field(default_factory=lambda: Binding(("shift+tab",), "shift+tab", "prev"))
    add   : Binding = field(default_factory=lambda: Binding(("ctrl+n",), "ctrl+n", "add an editor"))
    remove: Binding = field(default_factory=lambda: Binding(("ctrl+w",), "ctrl+w", "remove an editor"))
    save  : Binding = field(default_factory=lambda: Binding(("ctrl+s",), "ctrl+s", "save file"))
    quit  : Binding = field(default_factory=lambda: Binding(("esc", "ctrl+c"), "esc", "quit"))

    def bindings(self) -> list:
        """Bindings in the order the help bar lists them."""
        return [self.next, self.prev, self.add, self.remove, self.save, self.quit]

    def update_enabled(self, layout):
        """Enable add/remove only when they would change the pane count."""
        self.add.set_enabled(layout.can_add())
        self.remove.set_enabled(layout.can_remove())

    def short_help(self) -> str:
        return HELP_SEPARATOR.join(
            f"{b.help_key} {b.help_desc}" for b in self.bindings() if b.enabled
        )

# Keys understood by the save prompt
CONFIRM_KEYS = ("enter",)
CANCEL_KEYS  = ("esc", "ctrl+c")
