"""A container that draws a border around a single child."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

TOP_LEFT = "\u250c"
TOP_RIGHT = "\u2510"
BOTTOM_LEFT = "\u2514"
BOTTOM_RIGHT = "\u2518"
HORIZONTAL = "\u2500"
VERTICAL = "\u2502"


@dataclass(frozen=True)
class Rect:
    """A rectangle allocated to a child, relative to its parent."""

    x: int
    y: int
    width: int
    height: int


def is_visible(widget: Any) -> bool:
    """Return the widget's ``visible`` attribute, treating a missing one as True."""
    return bool(getattr(widget, "visible", True))


class Frame:
    """Draws a frame around its child; a frame is 2 larger than its contents each way.

    The child needs ``width_request()``, ``height_request(width)`` and may have a
    ``visible`` attribute.
    """

    def __init__(self, child: Any = None) -> None:
        self.child = child

    def _shown_child(self) -> Any:
        return self.child if self.child is not None and is_visible(self.child) else None

    def width_request(self) -> int:
        child = self._shown_child()
        return child.width_request() + 2 if child is not None else 2

    def height_request(self, width: int) -> int:
        if width < 2:
            return 0
        child = self._shown_child()
        return child.height_request(width - 2) + 2 if child is not None else 2

    def layout(self, width: int, height: int) -> Rect | None:
        """Return the area given to the child, or None if there is no child."""
        if self.child is None:
            return None
        if is_visible(self.child):
            return Rect(1, 1, width - 2, height - 2)
        return Rect(0, 0, 0, 0)

    def render(self, width: int, height: int) -> list[str]:
        """Return the rows of the border, with a blank interior."""
        if width <= 0 or height <= 0:
            return []
        grid = [[" "] * width for _ in range(height)]
        for row in (grid[0], grid[-1]):
            row[:] = [HORIZONTAL] * width
        for row in grid:
            row[0] = VERTICAL
            row[-1] = VERTICAL
        grid[0][0] = TOP_LEFT
        grid[0][-1] = TOP_RIGHT
        grid[-1][0] = BOTTOM_LEFT
        grid[-1][-1] = BOTTOM_RIGHT
        return ["".join(row) for row in grid]