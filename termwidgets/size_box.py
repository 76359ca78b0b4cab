"""A container that guarantees its child at least a minimum size."""

from __future__ import annotations

from typing import Any

from termwidgets.frame import Rect, is_visible


class SizeBox:
    """Requests the larger of a minimum size and its child's own request."""

    def __init__(self, min_width: int, min_height: int, child: Any = None) -> None:
        self.min_width = min_width
        self.min_height = min_height
        self.child = child

    def width_request(self) -> int:
        if self.child is None:
            return self.min_width
        return max(self.child.width_request(), self.min_width)

    def height_request(self, width: int) -> int:
        if self.child is None:
            return self.min_height
        return max(self.child.height_request(width), self.min_height)

    def layout(self, width: int, height: int) -> Rect | None:
        """Return the area given to the child, or None if there is no child."""
        if self.child is None:
            return None
        if is_visible(self.child):
            return Rect(0, 0, width, height)
        return Rect(0, 0, 0, 0)