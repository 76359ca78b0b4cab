"""A container of overlapping widgets kept in a stacking order."""

from __future__ import annotations

from typing import Any

from termwidgets.frame import is_visible


def _wants_focus(widget: Any) -> bool:
    method = getattr(widget, "focus_me", None)
    return bool(method()) if callable(method) else False


class Stacked:
    """Holds overlapping children; the first child is the topmost.

    Its size request is fixed at construction and unrelated to its children.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.req_width = width
        self.req_height = height
        self._children: list[Any] = []

    @property
    def children(self) -> tuple[Any, ...]:
        """The children from top to bottom."""
        return tuple(self._children)

    def _index(self, widget: Any) -> int | None:
        return next((i for i, w in enumerate(self._children) if w is widget), None)

    def add_widget(self, widget: Any) -> None:
        """Add a child at the bottom of the stack."""
        self._children.append(widget)

    def remove_widget(self, widget: Any) -> None:
        """Remove a child; a widget not in the stack is ignored."""
        index = self._index(widget)
        if index is not None:
            del self._children[index]

    def raise_widget(self, widget: Any) -> None:
        """Move a child to the top of the stack."""
        index = self._index(widget)
        if index is not None:
            self._children.insert(0, self._children.pop(index))

    def lower_widget(self, widget: Any) -> None:
        """Move a child to the bottom of the stack."""
        index = self._index(widget)
        if index is not None:
            self._children.append(self._children.pop(index))

    def focus(self) -> Any:
        """Return the top child if it is visible and wants focus, else None."""
        if not self._children:
            return None
        top = self._children[0]
        return top if is_visible(top) and _wants_focus(top) else None

    def paint_order(self) -> list[Any]:
        """Return the visible children from bottom to top, the order they are drawn."""
        return [w for w in reversed(self._children) if is_visible(w)]

    def width_request(self) -> int:
        return self.req_width

    def height_request(self, width: int) -> int:
        return self.req_height