"""A single-line (optionally wrapping) text entry with a prompt and history."""

from __future__ import annotations

from typing import Callable, Iterable

from wcwidth import wcswidth, wcwidth

DEFAULT_BINDINGS: dict[str, frozenset[str]] = {
    "DelBack": frozenset({"Backspace", "\x7f", "\b"}),
    "DelForward": frozenset({"Delete", "\x04"}),
    "Confirm": frozenset({"\n", "\r"}),
    "Left": frozenset({"Left"}),
    "Right": frozenset({"Right"}),
    "Begin": frozenset({"Home", "\x01"}),
    "End": frozenset({"End", "\x05"}),
    "DelEOL": frozenset({"\x0b"}),
    "DelBOL": frozenset({"\x15"}),
    "HistoryPrev": frozenset({"Up"}),
    "HistoryNext": frozenset({"Down"}),
}


def add_to_history(history: list[str], s: str) -> None:
    """Append ``s`` to ``history`` unless it repeats the last entry."""
    if not history or history[-1] != s:
        history.append(s)


def _width_of(chars: Iterable[str]) -> int:
    return sum(wcwidth(ch) for ch in chars)


class EditLine:
    """A line editor showing ``prompt`` followed by editable ``text``.

    Keys are strings: a single character is inserted unless it is bound to a
    command in ``bindings``; longer strings name function keys.
    """

    def __init__(
        self,
        prompt: str = "",
        text: str = "",
        history: list[str] | None = None,
        max_length: int | None = None,
    ) -> None:
        self.prompt = prompt
        self.text = text
        self.history = history
        self.desired_size = max_length
        self.curloc = 0 if max_length is not None else len(text)
        self.startloc = 0
        self.history_loc = 0
        self.using_history = False
        self.pre_history_text = ""
        self.allow_wrap = False
        self.clear_on_first_edit = False
        self.width = 0
        self.height = 0
        self.beeps = 0
        self.bindings: dict[str, frozenset[str]] = dict(DEFAULT_BINDINGS)
        self.entered: list[Callable[[str], None]] = []
        self.text_changed: list[Callable[[str], None]] = []

    # -- helpers -----------------------------------------------------------

    @property
    def _display(self) -> str:
        return self.prompt + self.text

    def _matches(self, key: str, command: str) -> bool:
        return key in self.bindings.get(command, frozenset())

    def _notify_changed(self) -> None:
        for callback in list(self.text_changed):
            callback(self.text)

    def _line_of_character(self, n: int, width: int) -> int:
        if not self.allow_wrap:
            return 0
        line = 0
        line_width = 0
        for ch in self._display[:n]:
            ch_width = wcwidth(ch)
            if line_width + ch_width > width:
                line += 1
                line_width = ch_width
            else:
                line_width += ch_width
                if line_width == width:
                    line += 1
                    line_width = 0
        return line

    def _character_of_line(self, n: int, width: int) -> int:
        if not self.allow_wrap:
            return self.startloc
        display = self._display
        line = 0
        line_width = 0
        i = 0
        while line < n and i < len(display):
            ch_width = wcwidth(display[i])
            if line_width + ch_width > width:
                line += 1
                line_width = ch_width
            else:
                line_width += ch_width
                if line_width == width:
                    line += 1
                    line_width = 0
            i += 1
        return i

    def _normalize_cursor(self) -> None:
        if self.width <= 0 or self.height <= 0:
            return
        display = self._display
        plen = len(self.prompt)
        if not self.allow_wrap:
            w = self.width
            pos = self.curloc + plen
            if pos > self.startloc:
                cursorx = _width_of(display[self.startloc:pos])
            else:
                cursorx = -_width_of(display[pos:self.startloc])

            if wcswidth(self.prompt) + wcswidth(self.text) + 1 < w:
                self.startloc = 0
            elif w > 2:
                if cursorx >= w - 2:
                    decamt = w - 2
                elif cursorx < 2:
                    decamt = 2
                else:
                    return
                chars = 0
                while decamt > 0 and chars < pos:
                    chars += 1
                    decamt -= wcwidth(display[pos - chars])
                if decamt < 0 and chars > 1:
                    chars -= 1
                self.startloc = pos - chars
            else:
                if cursorx >= w:
                    self.startloc = max(0, pos - w + 1)
                if cursorx < 0:
                    self.startloc = pos
        else:
            width = self.width
            height = self.height
            startline = self._line_of_character(self.startloc, width)
            currline = self._line_of_character(self.curloc, width)
            lastline = self._line_of_character(len(display), width)

            newstartline = startline
            if currline < startline:
                newstartline = currline
            elif currline - startline >= height:
                newstartline = currline - (height - 1)

            if newstartline > 0 and newstartline + height > lastline + 1:
                newstartline = lastline + 1 - height if lastline + 1 >= height else 0

            if newstartline != startline:
                self.startloc = self._character_of_line(newstartline, width)

    # -- public interface --------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Set the area the widget occupies and keep the cursor in view."""
        self.width = width
        self.height = height
        self._normalize_cursor()

    def handle_key(self, key: str) -> bool:
        """Handle a key press; return True if it was consumed."""
        clear_on_this_edit = self.clear_on_first_edit
        self.clear_on_first_edit = False

        if self._matches(key, "DelBack"):
            if self.curloc > 0:
                self.curloc -= 1
                self.text = self.text[:self.curloc] + self.text[self.curloc + 1:]
                self._normalize_cursor()
                self._notify_changed()
            else:
                self.beeps += 1
            return True
        if self._matches(key, "DelForward"):
            if self.curloc < len(self.text):
                self.text = self.text[:self.curloc] + self.text[self.curloc + 1:]
                self._normalize_cursor()
                self._notify_changed()
            else:
                self.beeps += 1
            return True
        if self._matches(key, "Confirm"):
            for callback in list(self.entered):
                callback(self.text)
            return True
        if self._matches(key, "Left"):
            if self.curloc > 0:
                self.curloc -= 1
                self._normalize_cursor()
            else:
                self.beeps += 1
            return True
        if self._matches(key, "Right"):
            if self.curloc < len(self.text):
                self.curloc += 1
                self._normalize_cursor()
            else:
                self.beeps += 1
            return True
        if self._matches(key, "Begin"):
            self.curloc = 0
            self.startloc = 0
            self._normalize_cursor()
            return True
        if self._matches(key, "End"):
            self.curloc = len(self.text)
            self._normalize_cursor()
            return True
        if self._matches(key, "DelEOL"):
            self.text = self.text[:self.curloc]
            self._normalize_cursor()
            self._notify_changed()
            return True
        if self._matches(key, "DelBOL"):
            self.text = self.text[self.curloc:]
            self.curloc = 0
            self._normalize_cursor()
            self._notify_changed()
            return True
        if self.history is not None and self._matches(key, "HistoryPrev"):
            if not self.history:
                return True
            if not self.using_history:
                self.using_history = True
                self.history_loc = len(self.history) - 1
                self.pre_history_text = self.text
            elif self.history_loc > 0:
                self.history_loc -= 1
            else:
                return True
            self._show_text(self.history[self.history_loc])
            return True
        if self.history is not None and self._matches(key, "HistoryNext"):
            if not self.history or not self.using_history:
                return True
            if self.history_loc >= len(self.history) - 1:
                self.using_history = False
                self.history_loc = 0
                restored = self.pre_history_text
                self.pre_history_text = ""
                self._show_text(restored)
                return True
            self.history_loc += 1
            self._show_text(self.history[self.history_loc])
            return True
        if len(key) != 1:
            return False
        if key == "\t":
            return False

        if clear_on_this_edit:
            self.text = ""
            self.curloc = 0
            self.startloc = 0
        self.text = self.text[:self.curloc] + key + self.text[self.curloc:]
        self.curloc += 1
        self._normalize_cursor()
        self._notify_changed()
        return True

    def _show_text(self, text: str) -> None:
        self.text = text
        self.curloc = len(text)
        self.startloc = 0
        self._normalize_cursor()
        self._notify_changed()

    def cursor_location(self) -> tuple[int, int]:
        """Return the (x, y) position of the cursor within the widget."""
        if self.width <= 0:
            return (0, 0)
        width = self.width
        whereami = self.curloc + len(self.prompt)
        curline = self._line_of_character(whereami, width)
        startline = self._line_of_character(self.startloc, width)
        curlinestart = self._character_of_line(curline, width)
        x = _width_of(self._display[curlinestart:whereami])
        return (x, curline - startline)

    def render(self) -> list[str]:
        """Return the visible rows of prompt and text."""
        if self.height <= 0:
            return []
        display = self._display
        width = self.width
        height = self.height if self.allow_wrap else 1
        rows: list[str] = []
        linestart = self.startloc
        while len(rows) < height and linestart < len(display):
            used = 0
            chars = 0
            while used < width and linestart + chars < len(display):
                used += wcwidth(display[linestart + chars])
                chars += 1
            if used > width and chars > 1:
                chars -= 1
            rows.append(display[linestart:linestart + chars])
            linestart += chars
        return rows

    def click(self, x: int, y: int) -> None:
        """Move the cursor to the character under a mouse click."""
        if not self.allow_wrap and y > 0:
            return
        display = self._display
        mouseloc = self._character_of_line(y, self.width)
        self.clear_on_first_edit = False
        while mouseloc < len(display) and x > 0:
            curwidth = wcwidth(display[mouseloc])
            if curwidth > x:
                break
            mouseloc += 1
            x -= curwidth
        plen = len(self.prompt)
        if mouseloc < plen:
            return
        self.curloc = min(mouseloc - plen, len(self.text))

    def set_text(self, text: str | bytes) -> None:
        """Replace the text; bytes are decoded as UTF-8 and ignored if invalid."""
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError:
                return
        self.text = text
        self.curloc = min(self.curloc, len(text))
        self._notify_changed()

    def add_to_history(self, s: str) -> None:
        """Append ``s`` to this line's history, if it has one."""
        if self.history is not None:
            add_to_history(self.history, s)

    def reset_history(self) -> None:
        """Stop browsing the history."""
        self.pre_history_text = ""
        self.using_history = False
        self.history_loc = 0

    def width_request(self) -> int:
        if self.desired_size is None:
            return wcswidth(self.prompt) + wcswidth(self.text)
        return self.desired_size

    def height_request(self, width: int) -> int:
        if not self.allow_wrap:
            return 1
        return self._line_of_character(len(self._display), width) + 1