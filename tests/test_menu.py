import pytest

from termwidgets.menu import (
    ItemType,
    Menu,
    MenuInfo,
    MenuItem,
    build_menu,
)


def _noop():
    pass


def _item(title, calls=None, binding=""):
    item = MenuItem(title, binding, "")
    if calls is not None:
        item.selected.append(lambda: calls.append(title))
    return item


def _menu_with(*titles, calls=None):
    menu = Menu()
    for title in titles:
        menu.append_item(None if title is None else _item(title, calls if calls is not None else []))
    return menu


def test_hotkey_follows_caret():
    assert MenuItem("^Open", "", "").hotkey == "O"
    assert MenuItem("Sa^ve", "", "").hotkey == "v"
    assert MenuItem("Plain", "", "").hotkey is None
    assert MenuItem("Trailing^", "", "").hotkey is None


def test_is_enabled_depends_on_listeners_and_checks():
    item = MenuItem("x", "", "")
    assert item.is_enabled() is False
    item.selected.append(_noop)
    assert item.is_enabled() is True
    item.enabled.append(lambda: False)
    assert item.is_enabled() is False
    item.enabled.append(lambda: True)
    assert item.is_enabled() is True


def test_build_menu_stops_at_end():
    infos = [
        MenuInfo(ItemType.ITEM, "^One", None, None, _noop),
        MenuInfo(ItemType.SEPARATOR),
        MenuInfo(ItemType.ITEM, "^Two", "F2", "second", _noop),
        MenuInfo(ItemType.END),
        MenuInfo(ItemType.ITEM, "Ignored", None, None, _noop),
    ]
    menu = build_menu(infos, 10)
    assert len(menu.items) == 3
    assert menu.items[1] is None
    assert menu.items[2].title == "^Two"
    assert menu.items[2].binding == "F2"
    assert menu.items[2].description == "second"
    assert menu.min_width == 10


def test_build_menu_rejects_bad_entries():
    with pytest.raises(ValueError):
        build_menu([MenuInfo(ItemType.ITEM)])
    with pytest.raises(ValueError):
        build_menu([MenuInfo(ItemType.SEPARATOR, "named")])


def test_width_request_ignores_caret_and_respects_minimum():
    with_caret = _menu_with("^Open")
    without_caret = _menu_with("Open")
    assert with_caret.width_request() == without_caret.width_request()
    wide = Menu(50)
    wide.append_item(_item("Open", []))
    assert wide.width_request() == 50


def test_binding_widens_request():
    plain = _menu_with("Open")
    bound = Menu()
    bound.append_item(_item("Open", [], binding="F3"))
    assert bound.width_request() > plain.width_request()


def test_height_request_counts_items_and_border():
    menu = _menu_with("a", None, "b")
    assert menu.height_request(10) == len(menu.items) + 2


def test_show_highlights_first_enabled_item():
    menu = Menu()
    disabled = MenuItem("off", "", "")
    enabled = _item("on", [])
    menu.append_item(None)
    menu.append_item(disabled)
    menu.append_item(enabled)
    seen = []
    menu.item_highlighted.append(seen.append)
    menu.resize(10, 5)
    menu.show()
    assert seen[-1] is enabled
    assert menu.cursor_visible() is True


def test_down_skips_separators_and_confirm_selects():
    calls = []
    gone = []
    menu = _menu_with("a", None, "b", calls=calls)
    menu.menus_goaway.append(lambda: gone.append(True))
    highlighted = []
    menu.item_highlighted.append(highlighted.append)
    menu.resize(10, 5)
    menu.show()
    assert menu.handle_key("Down") is True
    assert menu.handle_key("\n") is True
    assert calls == ["b"]
    assert gone == [True]
    assert highlighted[-1] is None


def test_up_from_top_stays():
    calls = []
    menu = _menu_with("a", "b", calls=calls)
    menu.resize(10, 4)
    menu.show()
    menu.handle_key("Up")
    menu.handle_key("\r")
    assert calls == ["a"]


def test_hotkey_is_case_insensitive():
    calls = []
    menu = _menu_with("^Open", "^Quit", calls=calls)
    menu.resize(10, 4)
    menu.show()
    assert menu.handle_key("q") is True
    assert calls == ["^Quit"]


def test_unknown_key_is_not_consumed():
    calls = []
    menu = _menu_with("^Open", calls=calls)
    menu.resize(10, 3)
    menu.show()
    assert menu.handle_key("z") is False
    assert menu.handle_key("F9") is False
    assert calls == []


def test_hide_clears_selection():
    menu = _menu_with("a", "b")
    seen = []
    menu.item_highlighted.append(seen.append)
    menu.resize(10, 4)
    menu.show()
    menu.hide()
    assert seen[-1] is None
    assert menu.cursorloc == len(menu.items)


def test_remove_missing_item_raises():
    menu = _menu_with("a")
    with pytest.raises(ValueError):
        menu.remove_item(MenuItem("other", "", ""))


def test_remove_item_keeps_menu_consistent():
    calls = []
    menu = _menu_with("a", "b", calls=calls)
    menu.resize(10, 4)
    menu.show()
    first = menu.items[0]
    menu.remove_item(first)
    assert first not in menu.items
    assert menu.cursor_visible() is True
    menu.handle_key("\n")
    assert calls == ["b"]
    menu.remove_item(menu.items[0])
    assert menu.items == []
    assert menu.cursor_visible() is False


def test_render_draws_border_and_entries():
    menu = _menu_with("alpha", None, "beta")
    menu.resize(12, 6)
    menu.show()
    rows = menu.render()
    assert len(rows) == 6
    assert rows[0][0] == "\u250c" and rows[0][-1] == "\u2510"
    assert rows[-1][0] == "\u2514" and rows[-1][-1] == "\u2518"
    assert rows[2][0] == "\u251c" and rows[2][-1] == "\u2524"
    assert "alpha" in rows[1]
    assert "beta" in rows[3]
    assert all(len(row) == 12 for row in rows)


def test_render_shows_binding_on_the_right():
    menu = Menu()
    menu.append_item(_item("^Save", [], binding="F2"))
    menu.resize(12, 3)
    menu.show()
    row = menu.render()[1]
    assert row.endswith("F2\u2502")
    assert "Save" in row and "^" not in row


def test_scrolling_keeps_cursor_in_view():
    titles = [f"item{i}" for i in range(10)]
    menu = _menu_with(*titles)
    menu.resize(20, 5)
    menu.show()
    for _ in range(5):
        menu.handle_key("Down")
    _, y = menu.cursor_location()
    assert 1 <= y <= 3
    rows = menu.render()
    assert "\u2191" in rows[0]
    assert "\u2193" in rows[-1]
    assert any("item5" in row for row in rows)


def test_end_and_home_move_to_extremes():
    calls = []
    titles = [f"item{i}" for i in range(10)]
    menu = _menu_with(*titles, calls=calls)
    menu.resize(20, 5)
    menu.show()
    menu.handle_key("End")
    _, y = menu.cursor_location()
    assert 1 <= y <= 3
    assert "\u2193" not in menu.render()[-1]
    menu.handle_key("\n")
    assert calls == ["item9"]
    menu.show()
    menu.handle_key("End")
    menu.handle_key("Home")
    assert menu.cursor_location() == (0, 1)
    menu.handle_key("\n")
    assert calls == ["item9", "item0"]


def test_click_press_selects_and_release_activates():
    calls = []
    menu = _menu_with("a", "b", "c", calls=calls)
    menu.resize(10, 5)
    menu.show()
    menu.click(3, released=False)
    assert calls == []
    menu.handle_key("\n")
    assert calls == ["c"]
    menu.click(2, released=True)
    assert calls == ["c", "b"]


def test_click_on_border_does_nothing():
    calls = []
    menu = _menu_with("a", calls=calls)
    menu.resize(10, 3)
    menu.show()
    menu.click(0, released=True)
    menu.click(5, released=True)
    assert calls == []