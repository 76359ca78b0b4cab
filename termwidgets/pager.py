"""A scrollable, searchable text viewer with 8-column tab stops."""

from __future__ import annotations

import locale
import os
from typing import Callable

from wcwidth import wcswidth, wcwidth

TAB_WIDTH = 8

DEFAULT_BINDINGS: dict[str, frozenset[str]] = {
    "Up": frozenset({"Up"}),
    "Down": frozenset({"Down"}),
    "Left": frozenset({"Left"}),
    "Right": frozenset({"Right"}),
    "PrevPage": frozenset({"PageUp"}),
    "NextPage": frozenset({"PageDown"}),
    "Begin": frozenset({"Home"}),
    "End": frozenset({"End"}),
}


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _decode(data: bytes, encoding: str | None) -> str:
    codec = encoding or locale.getpreferredencoding(False)
    return data.decode(codec, errors="replace")


def _split_lines(text: str) -> tuple[list[str], int]:
    """Split text into display lines, expanding tabs and dropping unprintables."""
    lines: list[str] = []
    text_width = 0
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    if not text:
        pieces = []
    for piece in pieces:
        out: list[str] = []
        width = 0
        for ch in piece:
            if ch == "\t":
                amount = TAB_WIDTH - width % TAB_WIDTH
                width += amount
                out.append(" " * amount)
            elif ch.isprintable():
                width += _char_width(ch)
                out.append(ch)
        text_width = max(text_width, width)
        lines.append("".join(out))
    return lines, text_width


class Pager:
    """Displays text as-is, letting the user scroll in every direction and search.

    Keys are strings naming the key pressed (``"Up"``, ``"PageDown"``, ``"Home"``...).
    """

    def __init__(self, text: str | bytes = "", encoding: str | None = None) -> None:
        self.lines: list[str] = []
        self.first_line = 0
        self.first_column = 0
        self.text_width = 0
        self.last_search = ""
        self.width = 0
        self.height = 0
        self.beeps = 0
        self.bindings: dict[str, frozenset[str]] = dict(DEFAULT_BINDINGS)
        self.line_changed: list[Callable[[int, int], None]] = []
        self.column_changed: list[Callable[[int, int], None]] = []
        self.set_text(text, encoding)

    @property
    def num_lines(self) -> int:
        return len(self.lines)

    @property
    def num_columns(self) -> int:
        return self.text_width

    def _line_signal(self) -> None:
        limit = max(len(self.lines) - self.height, 0)
        for callback in list(self.line_changed):
            callback(self.first_line, limit)

    def _column_signal(self) -> None:
        limit = max(self.text_width - self.width, 0)
        for callback in list(self.column_changed):
            callback(self.first_column, limit)

    def set_text(self, text: str | bytes, encoding: str | None = None) -> None:
        """Replace the displayed text; bytes are decoded with ``encoding``."""
        if isinstance(text, (bytes, bytearray, memoryview)):
            text = _decode(bytes(text), encoding)
        self.lines, self.text_width = _split_lines(text)
        self.first_line = 0
        self.first_column = 0
        self._line_signal()

    def resize(self, width: int, height: int) -> None:
        """Set the area the pager occupies."""
        self.width = width
        self.height = height
        self._line_signal()
        self._column_signal()

    def scroll_up(self, nlines: int) -> None:
        self.first_line = max(self.first_line - nlines, 0)
        self._line_signal()

    def scroll_down(self, nlines: int) -> None:
        limit = max(len(self.lines) - self.height, 0)
        self.first_line = min(self.first_line + nlines, limit)
        self._line_signal()

    def scroll_left(self, ncols: int) -> None:
        self.first_column = max(self.first_column - ncols, 0)
        self._column_signal()

    def scroll_right(self, ncols: int) -> None:
        limit = max(self.text_width - self.width, 0)
        self.first_column = min(self.first_column + ncols, limit)
        self._column_signal()

    def scroll_top(self) -> None:
        self.first_line = 0
        self._line_signal()

    def scroll_bottom(self) -> None:
        self.first_line = max(len(self.lines) - self.height, 0)
        self._line_signal()

    def scroll_page(self, up: bool) -> None:
        """Scroll a page up if ``up`` is true, otherwise a page down."""
        if up:
            self.scroll_up(self.height)
        else:
            self.scroll_down(self.height)

    def _search(self, s: str, forward: bool) -> bool:
        if s:
            self.last_search = s
        elif not self.last_search:
            self.beeps += 1
            return False
        needle = self.last_search
        i = self.first_line + 1 if forward else self.first_line - 1
        while 0 < i < len(self.lines):
            line = self.lines[i]
            loc = line.find(needle) if forward else line.rfind(needle)
            if loc != -1:
                needle_width = wcswidth(needle)
                foundcol = sum(_char_width(ch) for ch in line[:loc])
                self.first_line = i
                self._line_signal()
                if foundcol < self.first_column:
                    self.first_column = foundcol
                    self._column_signal()
                elif foundcol + needle_width >= self.first_column + self.width:
                    if needle_width > self.width:
                        self.first_column = foundcol
                    else:
                        self.first_column = foundcol + needle_width - self.width
                    self._column_signal()
                return True
            i += 1 if forward else -1
        self.beeps += 1
        return False

    def search_for(self, s: str) -> bool:
        """Move to the next line containing ``s`` (or the last search if empty)."""
        return self._search(s, True)

    def search_back_for(self, s: str) -> bool:
        """Move to the previous line containing ``s`` (or the last search if empty)."""
        return self._search(s, False)

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True if it was consumed."""
        actions: list[tuple[str, Callable[[], None]]] = [
            ("Up", lambda: self.scroll_up(1)),
            ("Down", lambda: self.scroll_down(1)),
            ("Left", lambda: self.scroll_left(1)),
            ("Right", lambda: self.scroll_right(1)),
            ("PrevPage", lambda: self.scroll_up(self.height)),
            ("NextPage", lambda: self.scroll_down(self.height)),
            ("Begin", self.scroll_top),
            ("End", self.scroll_bottom),
        ]
        for command, action in actions:
            if key in self.bindings.get(command, frozenset()):
                action()
                return True
        return False

    def wheel(self, up: bool) -> None:
        """Scroll a few lines in response to the mouse wheel."""
        amount = max(1, min(self.height - 1, 3))
        if up:
            self.scroll_up(amount)
        else:
            self.scroll_down(amount)

    def render(self) -> list[str]:
        """Return the visible rows of text."""
        rows: list[str] = []
        left = self.first_column
        right = self.first_column + self.width
        for line in self.lines[self.first_line:self.first_line + max(self.height, 0)]:
            out: list[str] = []
            x = 0
            placed = left
            for ch in line:
                if x >= right:
                    break
                if x >= left:
                    if x > placed:
                        out.append(" " * (x - placed))
                    out.append(ch)
                    placed = x + _char_width(ch)
                x += _char_width(ch)
            rows.append("".join(out))
        return rows

    def width_request(self) -> int:
        return self.text_width

    def height_request(self, width: int) -> int:
        return len(self.lines)


class FilePager(Pager):
    """A pager showing the contents of a file, or a message if it cannot be read."""

    def __init__(
        self, filename: str | bytes | os.PathLike | None = None, encoding: str | None = None
    ) -> None:
        super().__init__("")
        if filename is not None:
            self.load_file(filename, encoding)

    def load_file(
        self, filename: str | bytes | os.PathLike, encoding: str | None = None
    ) -> None:
        """Load a file into the pager; failures are shown as the pager's text."""
        if isinstance(filename, str):
            try:
                os.fsencode(filename)
            except UnicodeEncodeError:
                self.set_text(
                    "Unable to load filename: the string "
                    f"{filename!r} has no multibyte representation."
                )
                return
        shown = os.fsdecode(filename)
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            self.set_text(f"open: {shown}: {exc.strerror}")
            return
        self.set_text(data, encoding)