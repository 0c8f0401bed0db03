import time

import pytest

from codr.buffer import Buffer, Rect
from codr.theme import Theme
from codr.widgets.status import MessageLevel, StatusWidget, ToastMessage


def _stale(text, level):
    return ToastMessage(text, level, timestamp=time.monotonic() - 60)


@pytest.mark.parametrize(
    "level, seconds",
    [
        (MessageLevel.INFO, 3),
        (MessageLevel.SUCCESS, 2),
        (MessageLevel.WARNING, 4),
        (MessageLevel.ERROR, 5),
    ],
)
def test_auto_dismiss_per_level(level, seconds):
    assert ToastMessage("x", level).auto_dismiss == seconds


def test_fresh_toast_is_kept():
    assert ToastMessage("x", MessageLevel.INFO).should_dismiss() is False


def test_old_toast_is_dismissed():
    assert _stale("x", MessageLevel.ERROR).should_dismiss() is True


def test_toast_colour_by_level():
    theme = Theme.dracula()
    assert ToastMessage("x", MessageLevel.INFO).color(theme) == theme.info
    assert ToastMessage("x", MessageLevel.SUCCESS).color(theme) == theme.success
    assert ToastMessage("x", MessageLevel.WARNING).color(theme) == theme.warning
    assert ToastMessage("x", MessageLevel.ERROR).color(theme) == theme.error


def _render(widget, height=5, width=30):
    area = Rect(0, 0, width, height)
    buf = Buffer(area)
    widget.render(area, buf)
    return buf


def test_nothing_to_show_leaves_buffer_blank():
    buf = _render(StatusWidget(Theme.dark(), []))
    assert all(buf.row_text(y).strip() == "" for y in range(5))


def test_newest_toast_drawn_first():
    toasts = [ToastMessage("a", MessageLevel.INFO), ToastMessage("b", MessageLevel.ERROR)]
    buf = _render(StatusWidget(Theme.dark(), toasts))
    assert buf.row_text(3).startswith("  ✗ b")
    assert buf.row_text(4).startswith("  → a")


def test_toast_text_uses_level_colour():
    theme = Theme.dark()
    buf = _render(StatusWidget(theme, [ToastMessage("hello", MessageLevel.WARNING)]))
    assert buf.cell(4, 4).style.fg_color == theme.warning


def test_at_most_three_toasts():
    toasts = [ToastMessage(name, MessageLevel.INFO) for name in "abcd"]
    buf = _render(StatusWidget(Theme.dark(), toasts))
    drawn = [buf.row_text(y).strip() for y in range(5)]
    assert [row for row in drawn if row] == ["→ d", "→ c", "→ b"]


def test_expired_toasts_not_drawn():
    toasts = [_stale("old", MessageLevel.INFO), ToastMessage("new", MessageLevel.INFO)]
    buf = _render(StatusWidget(Theme.dark(), toasts))
    text = "".join(buf.row_text(y) for y in range(5))
    assert "old" not in text
    assert "new" in text


def test_progress_line_with_spinner():
    widget = StatusWidget(Theme.dark(), [], progress="loading", clock=lambda: 0.0)
    buf = _render(widget)
    assert buf.row_text(4).startswith("  ⠋ loading")


def test_spinner_without_progress_text():
    widget = StatusWidget(Theme.dark(), [], show_spinner=True, clock=lambda: 0.1)
    buf = _render(widget)
    assert buf.row_text(4).startswith("  ⠙ working...")


def test_spinner_frame_past_glyphs_is_blank():
    widget = StatusWidget(Theme.dark(), [], show_spinner=True, clock=lambda: 1.5)
    buf = _render(widget)
    assert buf.cell(2, 4).symbol == " "
    assert "working..." in buf.row_text(4)


def test_toasts_sit_above_progress():
    toasts = [ToastMessage("note", MessageLevel.SUCCESS)]
    widget = StatusWidget(Theme.dark(), toasts, progress="busy", clock=lambda: 0.0)
    buf = _render(widget)
    assert buf.row_text(3).startswith("  ✓ note")
    assert "busy" in buf.row_text(4)