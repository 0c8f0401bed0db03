import pytest

from codr.style import Color, Modifier, Style


def _merge(base, other):
    """Apply ``other`` on top of ``base`` using the style's merge method."""
    merge = getattr(base, "patch")
    return merge(other)


def test_fg_sets_foreground_only():
    style = Style().fg(Color.RED)
    assert style.fg_color == Color.RED
    assert style.bg_color is None


def test_bg_sets_background_only():
    style = Style().bg(Color.BLUE)
    assert style.bg_color == Color.BLUE
    assert style.fg_color is None


def test_builders_do_not_mutate_original():
    base = Style()
    base.fg(Color.RED).add_modifier(Modifier.BOLD)
    assert base == Style()


def test_add_modifier_accumulates():
    style = Style().add_modifier(Modifier.BOLD).add_modifier(Modifier.ITALIC)
    assert Modifier.BOLD in style.add_modifiers
    assert Modifier.ITALIC in style.add_modifiers
    assert Modifier.DIM not in style.add_modifiers


def test_merge_overrides_set_colours_and_keeps_others():
    base = Style().fg(Color.RED).bg(Color.BLUE)
    merged = _merge(base, Style().fg(Color.GREEN))
    assert merged.fg_color == Color.GREEN
    assert merged.bg_color == Color.BLUE


def test_merge_combines_modifiers():
    base = Style().add_modifier(Modifier.BOLD)
    merged = _merge(base, Style().add_modifier(Modifier.UNDERLINED))
    assert merged.add_modifiers == Modifier.BOLD | Modifier.UNDERLINED


def test_merge_with_empty_style_is_identity():
    style = Style().fg(Color.CYAN).add_modifier(Modifier.ITALIC)
    assert _merge(style, Style()) == style


def test_from_rgb_keeps_components():
    color = Color.from_rgb(10, 20, 30)
    assert color.rgb == (10, 20, 30)
    assert color.name == "rgb"


def test_from_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgb(256, 0, 0)


def test_unknown_colour_name_rejected():
    with pytest.raises(ValueError):
        Color("ultraviolet")


def test_named_colour_rejects_components():
    with pytest.raises(ValueError):
        Color("red", (1, 2, 3))