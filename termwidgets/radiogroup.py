"""A group of toggle buttons of which exactly one is checked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(eq=False)
class RadioButton:
    """A toggle button that a radio group can check or uncheck."""

    label: str = ""
    checked: bool = False


@dataclass
class _Entry:
    button: RadioButton
    id: int


class RadioGroup:
    """Keeps one button of a set checked; the first button added starts checked."""

    def __init__(self) -> None:
        self._items: list[_Entry] = []
        self._selected: int | None = None
        self._listeners: list[Callable[[int], None]] = []

    def connect(self, callback: Callable[[int], None]) -> None:
        """Register a callback receiving the id of each newly chosen button."""
        self._listeners.append(callback)

    def _index_of(self, button: RadioButton) -> int | None:
        return next(
            (i for i, entry in enumerate(self._items) if entry.button is button), None
        )

    def _press_index(self, index: int) -> None:
        if self._selected is not None:
            self._items[self._selected].button.checked = False
        self._selected = index
        entry = self._items[index]
        entry.button.checked = True
        for callback in list(self._listeners):
            callback(entry.id)

    def add_button(self, button: RadioButton, id: int) -> None:
        """Add a button; it becomes selected if it is checked or nothing is selected."""
        if id < 0:
            raise ValueError(f"button id must not be negative: {id}")
        if self._index_of(button) is not None:
            raise ValueError("button is already in this group")
        self._items.append(_Entry(button, id))
        if self._selected is None or button.checked:
            self._press_index(len(self._items) - 1)

    def remove_button(self, button: RadioButton) -> None:
        """Remove a button, moving the selection to a neighbour if it was selected."""
        index = self._index_of(button)
        if index is None:
            return
        if self._selected == index:
            if index > 0:
                self._press_index(index - 1)
            elif index + 1 < len(self._items):
                self._press_index(index + 1)
            else:
                self._selected = None
        last = len(self._items) - 1
        if index != last:
            self._items[index] = self._items[last]
            if self._selected == last:
                self._selected = index
        self._items.pop()

    def press(self, button: RadioButton) -> None:
        """Select the given button, as if the user had pressed it."""
        index = self._index_of(button)
        if index is None:
            raise ValueError("button is not in this group")
        self._press_index(index)

    def select(self, id: int) -> None:
        """Select the button registered with the given id."""
        for index, entry in enumerate(self._items):
            if entry.id == id:
                self._press_index(index)
                return
        raise KeyError(id)

    def selection_valid(self) -> bool:
        """Return True if a button is selected."""
        return self._selected is not None

    def selected(self) -> int:
        """Return the id of the selected button."""
        if self._selected is None:
            raise LookupError("no button is selected")
        return self._items[self._selected].id