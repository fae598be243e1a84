"""Choosing the monitor a window mostly sits on."""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Area:
    """An axis-aligned rectangle in screen coordinates."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class Monitor:
    """A monitor's position on the desktop and its video mode."""

    name: str
    x: int
    y: int
    width: int
    height: int
    refresh_rate: int = 60

    @property
    def area(self) -> Area:
        return Area(self.x, self.y, self.width, self.height)


def overlap_area(a: Area, b: Area) -> int:
    """Area of the intersection of two rectangles, 0 when they do not meet."""
    overlap_w = max(0, min(a.x + a.width, b.x + b.width) - max(a.x, b.x))
    overlap_h = max(0, min(a.y + a.height, b.y + b.height) - max(a.y, b.y))
    return overlap_w * overlap_h


def get_current_monitor(window: Area, monitors: Iterable[Monitor]) -> Optional[Monitor]:
    """The monitor that overlaps ``window`` most; the first wins a tie, None if none overlaps."""
    best: Optional[Monitor] = None
    best_overlap = 0
    for monitor in monitors:
        overlap = overlap_area(window, monitor.area)
        if overlap > best_overlap:
            best_overlap = overlap
            best = monitor
    return best