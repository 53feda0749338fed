"""
Screen zones for mouse hit-testing.

A zone is the rectangle one pane occupies in the frame that is currently on screen.
The registry is rebuilt on every render pass and is indexed by position: entry i
belongs to the pane at index i of the layout.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Zone:
    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return (self.x <= x < self.x + self.width
                and self.y <= y < self.y + self.height)

    def pos(self, x: int, y: int):
        """Return (x, y) relative to the zone's top-left corner."""
        return x - self.x, y - self.y


class ZoneRegistry:
    """Position-indexed zones for the current frame."""
    def __init__(self):
        self._zones: list[Zone] = []

    def rebuild(self, zones):
        """Replace all zones with those of a freshly rendered frame."""
        self._zones = list(zones)

    def remove(self, index: int):
        """Drop the zone at `index` so later zones stay aligned with their panes."""
        if 0 <= index < len(self._zones):
            del self._zones[index]

    def get(self, index: int):
        if 0 <= index < len(self._zones):
            return self._zones[index]
        return None

    def __iter__(self):
        return iter(self._zones)

    def __len__(self):
        return len(self._zones)
