from codr.buffer import Buffer, Rect
from codr.theme import Theme
from codr.widgets.input import InputWidget


def _typed(text):
    widget = InputWidget()
    for ch in text:
        widget.insert(ch)
    return widget


def test_insert_appends_and_moves_cursor():
    widget = _typed("abc")
    assert widget.text == "abc"
    assert widget.cursor_position == len("abc")


def test_insert_in_middle():
    widget = _typed("ac")
    widget.move_left()
    widget.insert("b")
    assert widget.text == "abc"
    assert widget.cursor_position == 2


def test_backspace_removes_before_cursor():
    widget = _typed("abc")
    widget.backspace()
    assert widget.text == "ab"
    widget.move_to_start()
    widget.backspace()
    assert widget.text == "ab"
    assert widget.cursor_position == 0


def test_delete_removes_under_cursor():
    widget = _typed("abc")
    widget.move_to_start()
    widget.delete()
    assert widget.text == "bc"
    widget.move_to_end()
    widget.delete()
    assert widget.text == "bc"


def test_cursor_movement_is_clamped():
    widget = _typed("ab")
    widget.move_right()
    assert widget.cursor_position == 2
    widget.move_to_start()
    widget.move_left()
    assert widget.cursor_position == 0
    widget.move_to_end()
    assert widget.cursor_position == 2


def test_set_input_places_cursor_at_end():
    widget = InputWidget()
    widget.set_input("hello")
    assert widget.cursor_position == len("hello")


def test_submit_returns_text_and_clears():
    widget = _typed("hello")
    assert widget.submit() == "hello"
    assert widget.text == ""
    assert widget.cursor_position == 0
    assert widget.history == ["hello"]


def test_blank_submit_is_ignored():
    widget = _typed("   ")
    assert widget.submit() is None
    assert widget.history == []
    assert widget.text == "   "


def test_clear_resets_history_navigation():
    widget = _typed("x")
    widget.submit()
    widget.history_up()
    widget.clear()
    assert widget.history_index is None
    assert widget.text == ""


def test_history_navigation():
    widget = InputWidget()
    for entry in ("first", "second"):
        widget.set_input(entry)
        widget.submit()

    widget.history_up()
    assert widget.text == "first"
    widget.history_up()
    assert widget.text == "second"
    widget.history_up()
    assert widget.text == "second"
    widget.history_down()
    assert widget.text == "first"
    widget.history_down()
    assert widget.text == ""
    assert widget.history_index is None


def test_history_up_with_empty_history_does_nothing():
    widget = _typed("draft")
    widget.history_up()
    assert widget.text == "draft"
    assert widget.history_index is None


def test_typing_leaves_history_navigation():
    widget = _typed("a")
    widget.submit()
    widget.history_up()
    widget.insert("b")
    assert widget.history_index is None
    assert widget.text == "ab"


def _render(widget, width=20):
    area = Rect(0, 0, width, 2)
    buf = Buffer(area)
    widget.render(area, buf)
    return buf


def test_render_separator_prompt_and_cursor():
    theme = Theme.dark()
    widget = _typed("hi")
    buf = _render(widget)
    assert buf.row_text(0) == "─" * 20
    assert buf.row_text(1).startswith(" ❯ hi▏")
    assert buf.cell(5, 1).style.bg_color == theme.primary


def test_render_placeholder_when_unfocused_and_empty():
    widget = InputWidget(focused=False)
    buf = _render(widget, width=30)
    assert "Enter a message..." in buf.row_text(1)
    assert "▏" not in buf.row_text(1)


def test_focused_empty_input_shows_cursor_not_placeholder():
    buf = _render(InputWidget())
    assert "Enter a message..." not in buf.row_text(1)
    assert buf.cell(3, 1).symbol == "▏"


def test_long_input_is_truncated_with_ellipsis():
    widget = InputWidget()
    widget.set_input("abcdefghij")
    buf = _render(widget, width=10)
    row = buf.row_text(1)
    assert "…" in row
    assert "j" not in row
    assert "▏" not in row
    assert len(row) == 10