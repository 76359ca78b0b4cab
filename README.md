# termwidgets

Widget logic for text-mode user interfaces. Each widget keeps its own state:
text, cursor, scroll position, selection and layout. Its `render` method
returns plain strings, and a front end can paint those strings with any
terminal library.

Widths are measured in terminal columns with `wcwidth`, so wide characters
such as CJK text take up two columns.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Names | What it does |
| --- | --- | --- |
| `termwidgets.scrollbar` | `Scrollbar`, `Direction` | Horizontal or vertical slider. `click` tells callbacks registered with `connect` whether it was a page up (`True`) or a page down (`False`). |
| `termwidgets.radiogroup` | `RadioGroup`, `RadioButton` | Keeps exactly one button of a group checked. The first button added is selected, and a button added already checked takes over the selection. |
| `termwidgets.statuschoice` | `StatusChoice` | One-line prompt answered by a single keystroke. Enter picks the first choice and Escape cancels. |
| `termwidgets.frame` | `Frame`, `Rect` | Border around one child. It requests two cells more than the child in each direction. |
| `termwidgets.size_box` | `SizeBox` | Makes a child request at least a minimum width and height. |
| `termwidgets.editline` | `EditLine`, `add_to_history` | Line editor with a prompt, history browsing, clear-on-first-edit and optional wrapping. |
| `termwidgets.pager` | `Pager`, `FilePager` | Scrollable text viewer with 8-column tab stops and forward and backward search. |
| `termwidgets.menu` | `Menu`, `MenuItem`, `MenuInfo`, `ItemType`, `build_menu` | Bordered drop-down menu with separators, `^` hotkeys, disabled items and scroll arrows. |
| `termwidgets.multiplex` | `Multiplex` | Shows one child at a time, with an optional tab bar. |
| `termwidgets.stacked` | `Stacked` | Holds overlapping children in a stacking order, topmost first. |

Containers (`Frame`, `SizeBox`, `Multiplex`, `Stacked`) accept any object as
a child. The child needs `width_request()` and `height_request(width)`. It may
also have a `visible` attribute; if it has none, it counts as visible. The
`layout` methods return the `Rect` given to the child.

## Keys and callbacks

Keys are passed as strings:

- A single character is an ordinary key.
- Longer strings such as `"Up"`, `"Left"`, `"Home"` or `"PageDown"` name function keys.

`EditLine`, `Pager` and `Menu` each have a `bindings` dictionary that maps a
command name (`"Confirm"`, `"DelBack"`, `"NextPage"`, ...) to the set of keys
that trigger it. You can change this dictionary per instance.

Signals are plain lists of callables that you append to. Examples are
`EditLine.entered`, `EditLine.text_changed`, `Pager.line_changed`,
`Menu.item_highlighted`, `MenuItem.selected` and `Multiplex.cycled`. A key or
click that has nowhere to go increments a `beeps` counter; this applies to
`EditLine`, `Pager` and `StatusChoice`.

## Examples

An edit line with a history:

```python
from termwidgets.editline import EditLine, add_to_history

history = []
line = EditLine("Name: ", "", history, None)
line.resize(40, 1)
for ch in "alice":
    line.handle_key(ch)
add_to_history(history, line.text)
print(line.render())            # ['Name: alice']
line.handle_key("\x15")         # DelBOL clears the line
line.handle_key("Up")           # HistoryPrev brings back "alice"
```

A pager:

```python
from termwidgets.pager import Pager

pager = Pager("first line\nsecond\tline\nthird line\n", None)
pager.resize(20, 2)
pager.search_for("line")        # moves to the next line containing "line"
print(pager.first_line, pager.render())
```

A search starts on the line after the current top line and moves toward the
end of the text. A backward search moves toward the start of the text and
stops before line 0.

A menu built from a static description:

```python
from termwidgets.menu import ItemType, MenuInfo, build_menu

menu = build_menu(
    [
        MenuInfo(ItemType.ITEM, "^Open", "", "Open a file", lambda: print("open")),
        MenuInfo(ItemType.SEPARATOR),
        MenuInfo(ItemType.ITEM, "^Quit", "", "Leave", lambda: print("quit")),
    ],
    10,
)
width = menu.width_request()
menu.resize(width, menu.height_request(width))
menu.show()
print("\n".join(menu.render()))
menu.handle_key("q")            # hotkey: prints "quit"
```

A multiplexer with tabs:

```python
from termwidgets.multiplex import Multiplex
from termwidgets.pager import Pager

mux = Multiplex(True)
mux.add_widget(Pager("one", None), "One")
mux.add_widget(Pager("two", None), "Two")
print(mux.render_tabs(20))
mux.cycle_forward()
```

## What it does not do

- The package does not open a terminal, read the keyboard or mouse, or run an event loop. Your code calls `handle_key`, `click` and `resize` and paints what `render` returns.
- It has no text styles or colours. `render` returns characters only.
- It has no keybinding configuration file; `bindings` dictionaries are set in code.
- Focus handling between containers is minimal. `Stacked.focus` returns the top child only if it is visible and its `focus_me()` returns true.