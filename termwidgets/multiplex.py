"""A container that shows exactly one of its children at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from wcwidth import wcswidth, wcwidth

from termwidgets.frame import Rect, is_visible

DEFAULT_TITLE = "Untitled"


@dataclass(eq=False)
class _Child:
    widget: Any
    title: str


class Multiplex:
    """Displays one visible child; an optional tab bar lists the visible children.

    Children need ``width_request()``, ``height_request(width)`` and a ``visible``
    attribute (a missing one counts as visible). The container requests enough
    space for its largest visible child.
    """

    def __init__(self, show_tabs: bool = False) -> None:
        self.show_tabs = show_tabs
        self._children: list[_Child] = []
        self._visible: _Child | None = None
        self.cycled: list[Callable[[], None]] = []

    # -- helpers -----------------------------------------------------------

    def _index(self, entry: _Child) -> int:
        return next(i for i, child in enumerate(self._children) if child is entry)

    def _change(self, new: _Child | None) -> None:
        old = self._visible
        self._visible = new
        if new is not old:
            for callback in list(self.cycled):
                callback()

    def _after_current(self) -> list[_Child]:
        if self._visible is None:
            return list(self._children)
        i = self._index(self._visible)
        return self._children[i + 1:] + self._children[:i]

    def _before_current(self) -> list[_Child]:
        if self._visible is None:
            return list(reversed(self._children))
        i = self._index(self._visible)
        return list(reversed(self._children[:i])) + list(reversed(self._children[i + 1:]))

    @staticmethod
    def _first_visible(candidates: Iterable[_Child], default: _Child | None) -> _Child | None:
        return next((c for c in candidates if is_visible(c.widget)), default)

    def _bring_forward(self, widget: Any) -> None:
        if not self._children:
            raise ValueError("the multiplexer has no children")
        new = next(
            (c for c in self._after_current() if c.widget is widget), self._visible
        )
        self._change(new)

    def _move_off(self, widget: Any) -> None:
        if not self._children:
            raise ValueError("the multiplexer has no children")
        if self._visible is None or self._visible.widget is not widget:
            return
        self._change(self._first_visible(self._before_current(), None))

    def _visible_children(self) -> list[_Child]:
        return [c for c in self._children if is_visible(c.widget)]

    # -- public interface --------------------------------------------------

    def add_widget(self, widget: Any, title: str = DEFAULT_TITLE) -> None:
        """Append a child; a visible child becomes the one displayed."""
        self._children.append(_Child(widget, title))
        if is_visible(widget):
            self._bring_forward(widget)

    def add_widget_after(self, widget: Any, after: Any, title: str = DEFAULT_TITLE) -> None:
        """Insert a child just after ``after``, or append it if ``after`` is absent."""
        for i, child in enumerate(self._children):
            if child.widget is after:
                self._children.insert(i + 1, _Child(widget, title))
                if is_visible(widget):
                    self._bring_forward(widget)
                return
        self.add_widget(widget)

    def remove_widget(self, widget: Any) -> None:
        """Remove a child, displaying another visible child if it was displayed."""
        self._move_off(widget)
        self._children = [c for c in self._children if c.widget is not widget]

    def show_widget(self, widget: Any) -> None:
        """Mark a child visible and display it."""
        if not self._children:
            raise ValueError("the multiplexer has no children")
        widget.visible = True
        self._bring_forward(widget)

    def hide_widget(self, widget: Any) -> None:
        """Mark a child hidden; if it was displayed, display the previous visible child."""
        if not self._children:
            raise ValueError("the multiplexer has no children")
        widget.visible = False
        self._move_off(widget)

    def cycle_forward(self) -> None:
        """Display the next visible child, wrapping around."""
        if self._children:
            self._change(self._first_visible(self._after_current(), self._visible))

    def cycle_backward(self) -> None:
        """Display the previous visible child, wrapping around."""
        if self._children:
            self._change(self._first_visible(self._before_current(), self._visible))

    def visible_widget(self) -> Any:
        """Return the displayed child, or None."""
        return self._visible.widget if self._visible is not None else None

    def num_children(self) -> int:
        return len(self._children)

    def num_visible(self) -> int:
        return len(self._visible_children())

    def tabs_visible(self) -> bool:
        """Return True if tabs are enabled and more than one child is visible."""
        return self.show_tabs and self.num_visible() > 1

    def width_request(self) -> int:
        return max((c.widget.width_request() for c in self._visible_children()), default=0)

    def height_request(self, width: int) -> int:
        tallest = max(
            (c.widget.height_request(width) for c in self._visible_children()), default=0
        )
        return tallest + 1 if self.tabs_visible() else tallest

    def layout(self, width: int, height: int) -> Rect | None:
        """Return the area given to the displayed child, or None if there is none."""
        if self._visible is None:
            return None
        if self.tabs_visible():
            return Rect(0, 1, width, height - 1)
        return Rect(0, 0, width, height)

    def _tab_spans(self, width: int) -> list[tuple[_Child, int, int]]:
        visible = self._visible_children()
        remaining = width
        count = len(visible)
        startx = 0
        spans: list[tuple[_Child, int, int]] = []
        for child in visible:
            thisw = remaining // count
            count -= 1
            remaining -= thisw
            spans.append((child, startx, thisw))
            startx += thisw
        return spans

    def render_tabs(self, width: int) -> str:
        """Return the tab bar row, or an empty string when tabs are not shown."""
        if not self.tabs_visible():
            return ""
        out: list[str] = []
        for child, _, thisw in self._tab_spans(width):
            title = child.title
            titlew = wcswidth(title)
            padding = (thisw - titlew) // 2 if titlew <= thisw else 0
            out.append(" " * padding)
            thisw -= padding
            for ch in title:
                if thisw <= 0:
                    break
                out.append(ch)
                thisw -= wcwidth(ch)
            if thisw > 0:
                out.append(" " * thisw)
        return "".join(out)

    def click_tab(self, x: int, width: int) -> Any:
        """Display the child whose tab covers column ``x``; return it, or None."""
        if not self.tabs_visible():
            return None
        for child, startx, thisw in self._tab_spans(width):
            if startx <= x < startx + thisw:
                self._visible = child
                return child.widget
        return None