"""A one-cell-thick scrollbar showing a position within a range."""

from __future__ import annotations

import enum
from typing import Callable

THUMB = "#"
TRACK = "\u2592"


class Direction(enum.Enum):
    """The axis along which a scrollbar runs."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Scrollbar:
    """A scrollbar whose thumb marks ``value`` out of ``maximum``."""

    thickness = 1

    def __init__(self, direction: Direction, value: int = 0, maximum: int = 0) -> None:
        self.direction = direction
        self.value = value
        self.maximum = maximum
        self.width = 0
        self.height = 0
        self._listeners: list[Callable[[bool], None]] = []

    def resize(self, width: int, height: int) -> None:
        """Set the area the scrollbar occupies."""
        self.width = width
        self.height = height

    @property
    def _length(self) -> int:
        return self.width if self.direction is Direction.HORIZONTAL else self.height

    def slider(self) -> int:
        """Return the thumb's offset along the bar, or -1 if it is not shown."""
        if self.maximum == 0:
            return -1
        return _trunc_div((self._length - 1) * self.value, self.maximum)

    def set_slider(self, value: int, maximum: int) -> None:
        """Move the thumb to ``value`` out of ``maximum``."""
        self.value = value
        self.maximum = maximum

    def width_request(self) -> int:
        """Return the requested width: the bar's thickness."""
        return self.thickness

    def height_request(self, width: int) -> int:
        """Return the requested height: the bar's thickness, whatever the width."""
        return self.thickness

    def render(self) -> list[str]:
        """Return the rows of the bar: one row when horizontal, one per cell when vertical."""
        thumb = self.slider()
        cells = [THUMB if pos == thumb else TRACK for pos in range(self._length)]
        if self.direction is Direction.HORIZONTAL:
            return ["".join(cells)]
        return cells

    def connect(self, callback: Callable[[bool], None]) -> None:
        """Register a callback receiving True for "page up" and False for "page down"."""
        self._listeners.append(callback)

    def click(self, x: int, y: int) -> None:
        """Handle a mouse click at the given position within the bar."""
        thumb = self.slider()
        if thumb == -1:
            return
        where = x if self.direction is Direction.HORIZONTAL else y
        page_up = not where > thumb
        for callback in list(self._listeners):
            callback(page_up)