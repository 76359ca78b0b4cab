"""A drop-down menu of selectable entries with separators and hotkeys."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable

from wcwidth import wcswidth, wcwidth

TOP_LEFT = "\u250c"
TOP_RIGHT = "\u2510"
BOTTOM_LEFT = "\u2514"
BOTTOM_RIGHT = "\u2518"
HORIZONTAL = "\u2500"
VERTICAL = "\u2502"
LEFT_TEE = "\u251c"
RIGHT_TEE = "\u2524"
UP_ARROW = "\u2191"
DOWN_ARROW = "\u2193"

DEFAULT_BINDINGS: dict[str, frozenset[str]] = {
    "Up": frozenset({"Up"}),
    "Down": frozenset({"Down"}),
    "Begin": frozenset({"Home"}),
    "End": frozenset({"End"}),
    "Confirm": frozenset({"\n", "\r"}),
}


class MenuItem:
    """One entry of a menu.

    A ``^`` in the title marks the following character as the item's hotkey.
    The binding is shown right-aligned in the entry.
    """

    def __init__(self, title: str, binding: str = "", description: str = "") -> None:
        self.title = title
        self.binding = binding
        self.description = description
        self.hotkey: str | None = None
        caret = title.find("^")
        if caret != -1 and caret + 1 < len(title):
            self.hotkey = title[caret + 1]
        self.selected: list[Callable[[], None]] = []
        self.enabled: list[Callable[[], bool]] = []

    def is_enabled(self) -> bool:
        """Return True if the item can be chosen.

        Without enabled checks an item is enabled when something listens for
        its selection; otherwise it is enabled when any check says so.
        """
        if not self.enabled:
            return bool(self.selected)
        results = [check() for check in self.enabled]
        return any(results)

    def _fire(self) -> None:
        for callback in list(self.selected):
            callback()


class ItemType(enum.Enum):
    """The kind of entry described by a :class:`MenuInfo`."""

    ITEM = "item"
    SEPARATOR = "separator"
    END = "end"


@dataclass
class MenuInfo:
    """A static description of a menu entry, used by :func:`build_menu`."""

    item_type: ItemType
    name: str | None = None
    binding: str | None = None
    description: str | None = None
    slot: Callable[[], None] | None = None
    enabled: Callable[[], bool] | None = None


class Menu:
    """A vertical menu with a border, scrolling when taller than its area.

    Keys are strings: ``"Up"``, ``"Down"``, ``"Home"``, ``"End"`` and Enter
    move and choose; a single character activates the item with that hotkey.
    """

    def __init__(self, min_width: int = 2) -> None:
        self.items: list[MenuItem | None] = []
        self.cursorloc = 0
        self.startloc = 0
        self.min_width = min_width
        self.width = 0
        self.height = 0
        self.visible = False
        self.bindings: dict[str, frozenset[str]] = dict(DEFAULT_BINDINGS)
        self.item_highlighted: list[Callable[[MenuItem | None], None]] = []
        self.menus_goaway: list[Callable[[], None]] = []

    # -- helpers -----------------------------------------------------------

    def _matches(self, key: str, command: str) -> bool:
        return key in self.bindings.get(command, frozenset())

    def _highlight(self, item: MenuItem | None) -> None:
        for callback in list(self.item_highlighted):
            callback(item)

    def _go_away(self) -> None:
        for callback in list(self.menus_goaway):
            callback()

    def _highlight_current(self) -> None:
        if 0 <= self.cursorloc < len(self.items):
            self._highlight(self.items[self.cursorloc])
        else:
            self._highlight(None)

    def _update_startloc(self) -> None:
        h = self.height
        count = len(self.items)
        if h <= 2:
            return
        if h - 2 >= count:
            self.startloc = 0
            return
        if self.startloc + (h - 2) > count:
            self.startloc = count - (h - 2)

    def _set_cursor(self, pos: int) -> None:
        if self.cursorloc != pos:
            self.cursorloc = pos
            self._update_startloc()
            self._highlight_current()

    def _selectable(self, pos: int) -> bool:
        if not 0 <= pos < len(self.items):
            return False
        item = self.items[pos]
        return item is not None and item.is_enabled()

    def _next_selectable(self, pos: int) -> int:
        count = len(self.items)
        if not 0 <= pos < count:
            pos = 0
        while pos < count and not self._selectable(pos):
            pos += 1
        return pos

    def _prev_selectable(self, pos: int) -> int:
        count = len(self.items)
        if not 0 <= pos < count:
            pos = count - 1
        while 0 <= pos < count and not self._selectable(pos):
            pos -= 1
        if not 0 <= pos < count:
            pos = count
        return pos

    def _sanitize_cursor(self, forward: bool) -> None:
        if forward:
            self.cursorloc = self._next_selectable(self._next_selectable(self.cursorloc))
        else:
            self.cursorloc = self._prev_selectable(self._prev_selectable(self.cursorloc))
        self._update_startloc()
        self._highlight_current()

    def _activate(self, pos: int) -> None:
        self._go_away()
        self._highlight(None)
        if self._selectable(pos):
            item = self.items[pos]
            assert item is not None
            item._fire()

    # -- public interface --------------------------------------------------

    def append_item(self, item: MenuItem | None) -> None:
        """Append an item; ``None`` appends a separator."""
        self.items.append(item)

    def remove_item(self, item: MenuItem | None) -> None:
        """Remove an item (or the first separator, for ``None``)."""
        index = next((i for i, it in enumerate(self.items) if it is item), None)
        if index is None:
            raise ValueError("item is not in this menu")
        del self.items[index]
        count = len(self.items)
        if count == 0:
            self._set_cursor(0)
        elif index == self.cursorloc:
            self._set_cursor(self._prev_selectable(self._next_selectable(count - 1)))
        self.startloc = min(self.startloc, max(count - 1, 0))

    def resize(self, width: int, height: int) -> None:
        """Set the area the menu occupies."""
        self.width = width
        self.height = height
        self._update_startloc()

    def show(self) -> None:
        """Make the menu visible, highlighting its first selectable item."""
        self.visible = True
        self.cursorloc = self._next_selectable(0)
        self.startloc = 0
        self._update_startloc()
        self._highlight_current()

    def hide(self) -> None:
        """Hide the menu and clear its selection."""
        self.visible = False
        self._set_cursor(len(self.items))

    def width_request(self) -> int:
        requested = self.min_width
        for item in self.items:
            if item is None:
                continue
            title_width = sum(wcwidth(ch) for ch in item.title if ch != "^")
            shortcut_width = wcswidth(item.binding) + 1 if item.binding else 0
            requested = max(title_width + 2 + shortcut_width, requested)
        return requested

    def height_request(self, width: int) -> int:
        return len(self.items) + 2

    def move_selection_up(self) -> None:
        """Move the selection up, as if Up had been pressed."""
        if self.cursorloc > 0:
            newloc = self._prev_selectable(self.cursorloc - 1)
            if 0 <= newloc < len(self.items):
                if newloc < self.startloc:
                    self.startloc -= 1
                if newloc >= self.startloc:
                    self._set_cursor(newloc)
            elif self.startloc > 0:
                self.startloc -= 1
            self._update_startloc()
        elif self.startloc > 0:
            self.startloc -= 1

    def move_selection_down(self) -> None:
        """Move the selection down, as if Down had been pressed."""
        count = len(self.items)
        if count == 0:
            return
        h = self.height
        if self.cursorloc < count - 1:
            newloc = self._next_selectable(self.cursorloc + 1)
            if 0 <= newloc < count:
                if newloc >= self.startloc + h - 2:
                    self.startloc += 1
                if newloc < self.startloc + h - 2:
                    self._set_cursor(newloc)
            elif self.startloc + h < count:
                self.startloc += 1
        elif self.startloc + h - 2 < count:
            self.startloc += 1

    def move_selection_top(self) -> None:
        """Move the selection to the first selectable item."""
        self.startloc = 0
        self._set_cursor(self._next_selectable(self.startloc))

    def move_selection_bottom(self) -> None:
        """Move the selection to the last selectable item."""
        self.startloc = max(len(self.items) - 1, 0)
        self._set_cursor(self._prev_selectable(self.startloc))

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True if it was consumed."""
        self._sanitize_cursor(True)
        if self._matches(key, "Up"):
            self.move_selection_up()
        elif self._matches(key, "Down"):
            self.move_selection_down()
        elif self._matches(key, "Begin"):
            self.move_selection_top()
        elif self._matches(key, "End"):
            self.move_selection_bottom()
        elif self._matches(key, "Confirm"):
            self._activate(self.cursorloc)
        else:
            if len(key) != 1:
                return False
            for item in self.items:
                if (
                    item is not None
                    and item.is_enabled()
                    and item.hotkey is not None
                    and key.upper() == item.hotkey.upper()
                ):
                    self._go_away()
                    self._highlight(None)
                    item._fire()
                    return True
            return False
        return True

    def click(self, y: int, released: bool) -> None:
        """Handle a mouse button on row ``y``: a release chooses, a press selects."""
        num = y - 1
        if not self._selectable(num):
            return
        if released:
            self._activate(num)
        else:
            self._set_cursor(num)

    def _entry_text(self, item: MenuItem, enabled: bool) -> str:
        title = item.title
        righttext = item.binding
        rightwidth = wcswidth(righttext) if righttext else 0
        limit = self.width - 1
        out: list[str] = []
        titleloc = 0
        rightloc = 0
        curw = 1
        while curw < limit:
            while titleloc < len(title) and title[titleloc] == "^":
                titleloc += 1
            if titleloc == len(title):
                out.append(" ")
                titleloc += 1
                curw += 1
            elif titleloc > len(title):
                if curw < limit - rightwidth or rightloc >= len(righttext):
                    out.append(" ")
                    curw += 1
                else:
                    ch = righttext[rightloc]
                    out.append(ch)
                    curw += max(wcwidth(ch), 1)
                    rightloc += 1
            else:
                ch = title[titleloc]
                out.append(ch)
                curw += max(wcwidth(ch), 1)
                titleloc += 1
        return "".join(out)

    def render(self) -> list[str]:
        """Return the rows of the menu: border, entries and scroll arrows."""
        width, height = self.width, self.height
        if width <= 0 or height <= 0:
            return []
        inner = max(width - 2, 0)
        rows = [" " * width for _ in range(height)]

        up_arrows = self.startloc != 0
        rows[0] = (
            TOP_LEFT
            + "".join(
                UP_ARROW if up_arrows and i % 3 == 0 else HORIZONTAL
                for i in range(1, width - 1)
            )
            + TOP_RIGHT
        )

        self._sanitize_cursor(True)

        for i in range(self.startloc, len(self.items)):
            y = i - self.startloc + 1
            if y >= height:
                break
            item = self.items[i]
            if item is None:
                rows[y] = LEFT_TEE + HORIZONTAL * inner + RIGHT_TEE
            else:
                rows[y] = VERTICAL + self._entry_text(item, item.is_enabled()) + VERTICAL

        for y in range(len(self.items) + 1, height - 1):
            rows[y] = VERTICAL + " " * inner + VERTICAL

        down_arrows = self.startloc + height - 2 < len(self.items)
        rows[-1] = (
            BOTTOM_LEFT
            + "".join(
                DOWN_ARROW if down_arrows and i % 3 == 0 else HORIZONTAL
                for i in range(1, width - 1)
            )
            + BOTTOM_RIGHT
        )
        return rows

    def cursor_visible(self) -> bool:
        """Return True if an item is selected."""
        self._sanitize_cursor(True)
        return 0 <= self.cursorloc < len(self.items)

    def cursor_location(self) -> tuple[int, int]:
        """Return the (x, y) position of the selected entry."""
        self._sanitize_cursor(True)
        return (0, 1 + self.cursorloc - self.startloc)


def build_menu(infos: Iterable[MenuInfo], min_width: int = 2) -> Menu:
    """Build a menu from descriptions, stopping at the first END entry."""
    menu = Menu(min_width)
    for info in infos:
        if info.item_type is ItemType.END:
            break
        if info.item_type is ItemType.ITEM:
            if info.name is None:
                raise ValueError("a menu item needs a name")
            item = MenuItem(info.name, info.binding or "", info.description or "")
            if info.slot is not None:
                item.selected.append(info.slot)
            if info.enabled is not None:
                item.enabled.append(info.enabled)
            menu.append_item(item)
        elif info.item_type is ItemType.SEPARATOR:
            if info.name is not None:
                raise ValueError("a separator has no name")
            menu.append_item(None)
        else:
            raise ValueError(f"unknown item type: {info.item_type!r}")
    return menu