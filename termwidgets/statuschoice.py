"""A one-line prompt that lets the user pick one of several characters."""

from __future__ import annotations

from typing import Callable

from wcwidth import wcswidth

CONFIRM_KEYS = frozenset({"\n", "\r"})
CANCEL_KEYS = frozenset({"\x1b"})


class StatusChoice:
    """Prompts for one character of ``choices``; the first choice is the default.

    Keys are strings: a single character is an ordinary key, Enter confirms the
    default, Escape cancels, and any longer string is a function key.
    """

    rows = 1

    def __init__(
        self,
        prompt: str,
        choices: str,
        on_chosen: Callable[[int], None] | None = None,
    ) -> None:
        if not choices:
            raise ValueError("choices must not be empty")
        self.prompt = prompt
        self.choices = choices
        self.on_chosen = on_chosen
        self.closed = False
        self.beeps = 0

    def _choose(self, index: int) -> None:
        if self.on_chosen is not None:
            self.on_chosen(index)
        self.closed = True

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True if it was consumed."""
        if self.closed:
            return False
        if key in CONFIRM_KEYS:
            self._choose(0)
        elif key in CANCEL_KEYS:
            self.closed = True
        elif len(key) != 1:
            self.beeps += 1
        else:
            index = self.choices.find(key)
            if index == -1:
                self.beeps += 1
            else:
                self._choose(index)
        return True

    def render(self) -> str:
        """Return the line shown: the prompt, the default in brackets, then the rest."""
        return f"{self.prompt} [{self.choices[0]}]{self.choices[1:]}"

    def width_request(self) -> int:
        """Return the width of the prompt, the choices and the decoration."""
        return wcswidth(self.prompt) + wcswidth(self.choices) + 5

    def height_request(self, width: int) -> int:
        """Return the number of rows used, which does not depend on the width."""
        return self.rows

    def cursor_location(self) -> tuple[int, int]:
        """Return the (x, y) position of the cursor."""
        return (self.width_request() - 1, 0)