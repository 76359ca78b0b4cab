import pytest

from termwidgets.pager import FilePager, Pager


def numbered(n):
    return "\n".join(f"line {i}" for i in range(n))


def test_tab_expands_to_eight_column_stop():
    pager = Pager("a\tb")
    assert pager.lines == ["a" + " " * 7 + "b"]
    assert pager.width_request() == 9


def test_unprintable_characters_are_dropped():
    pager = Pager("a\x07b\x00c")
    assert pager.lines == ["abc"]


def test_trailing_newline_does_not_add_line():
    assert Pager("x\ny\n").lines == ["x", "y"]
    assert Pager("x\n\ny").lines == ["x", "", "y"]
    assert Pager("").lines == []


def test_bytes_are_decoded_with_encoding():
    pager = Pager("caf\u00e9".encode("latin-1"), "latin-1")
    assert pager.lines == ["caf\u00e9"]


def test_height_request_is_line_count():
    pager = Pager(numbered(5))
    assert pager.height_request(80) == 5
    assert pager.num_lines == 5


def test_scroll_down_clamps_to_last_page():
    pager = Pager(numbered(10))
    pager.resize(20, 3)
    pager.scroll_down(100)
    assert pager.first_line == 10 - 3
    pager.scroll_up(100)
    assert pager.first_line == 0


def test_scroll_bottom_and_top():
    pager = Pager(numbered(10))
    pager.resize(20, 4)
    pager.scroll_bottom()
    assert pager.render()[-1] == "line 9"
    pager.scroll_top()
    assert pager.render()[0] == "line 0"


def test_scroll_page_moves_by_height():
    pager = Pager(numbered(20))
    pager.resize(20, 5)
    pager.scroll_page(False)
    assert pager.first_line == 5
    pager.scroll_page(True)
    assert pager.first_line == 0


def test_horizontal_scroll_clamps():
    pager = Pager("x" * 30)
    pager.resize(10, 1)
    pager.scroll_right(100)
    assert pager.first_column == 30 - 10
    pager.scroll_left(100)
    assert pager.first_column == 0


def test_render_respects_columns():
    pager = Pager("abcdefghij")
    pager.resize(4, 1)
    pager.scroll_right(2)
    assert pager.render() == ["cdef"]


def test_line_signal_reports_position_and_limit():
    pager = Pager(numbered(10))
    calls = []
    pager.line_changed.append(lambda first, limit: calls.append((first, limit)))
    pager.resize(20, 4)
    pager.scroll_down(2)
    assert calls[-1] == (2, 10 - 4)


def test_search_forward_moves_to_match():
    pager = Pager("zero\none\ntwo foo\nthree")
    pager.resize(20, 2)
    assert pager.search_for("foo") is True
    assert pager.first_line == 2
    assert pager.last_search == "foo"


def test_search_not_found_beeps():
    pager = Pager("zero\none\ntwo foo\nthree")
    pager.resize(20, 2)
    pager.search_for("foo")
    assert pager.search_for("") is False
    assert pager.beeps == 1
    assert pager.first_line == 2


def test_search_back_finds_earlier_line():
    pager = Pager("zero\nbar one\ntwo\nthree bar")
    pager.resize(20, 1)
    pager.scroll_bottom()
    assert pager.search_back_for("bar") is True
    assert pager.first_line == 1


def test_empty_search_without_history_beeps():
    pager = Pager(numbered(3))
    assert pager.search_for("") is False
    assert pager.beeps == 1


def test_search_scrolls_match_into_view():
    pager = Pager("start\n" + "x" * 30 + "foo")
    pager.resize(10, 1)
    pager.search_for("foo")
    assert pager.render()[0].endswith("foo")


def test_handle_key_bindings():
    pager = Pager(numbered(10))
    pager.resize(20, 3)
    assert pager.handle_key("Down") is True
    assert pager.first_line == 1
    assert pager.handle_key("End") is True
    assert pager.first_line == 10 - 3
    assert pager.handle_key("Home") is True
    assert pager.first_line == 0
    assert pager.handle_key("q") is False


def test_wheel_scrolls_at_most_three():
    pager = Pager(numbered(20))
    pager.resize(20, 10)
    pager.wheel(False)
    assert pager.first_line == 3
    pager.wheel(True)
    assert pager.first_line == 0


def test_file_pager_loads_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    pager = FilePager(str(path), "utf-8")
    assert pager.lines == ["alpha", "beta"]


def test_file_pager_missing_file_shows_error(tmp_path):
    path = tmp_path / "missing.txt"
    pager = FilePager(str(path))
    assert len(pager.lines) == 1
    assert pager.lines[0].startswith("open: " + str(path) + ": ")


@pytest.mark.parametrize("height", [1, 2, 5])
def test_render_never_exceeds_height(height):
    pager = Pager(numbered(8))
    pager.resize(20, height)
    assert len(pager.render()) == min(height, 8)