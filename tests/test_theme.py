import dataclasses

from codr.style import Color, Modifier
from codr.theme import Theme


def test_dark_primary_is_green_accent():
    assert Theme.dark().primary == Color.from_rgb(35, 209, 139)


def test_dark_background_resets():
    assert Theme.dark().background == Color.RESET


def test_dracula_background():
    assert Theme.dracula().background == Color.from_rgb(40, 42, 54)


def test_presets_are_distinct():
    themes = [
        Theme.dark(),
        Theme.dracula(),
        Theme.catppuccin_mocha(),
        Theme.tokyo_night(),
    ]
    assert len(set(themes)) == len(themes)


def test_every_field_is_a_colour():
    themes = [
        Theme.dark(),
        Theme.dracula(),
        Theme.catppuccin_mocha(),
        Theme.tokyo_night(),
    ]
    field_count = len(dataclasses.fields(Theme))
    for theme in themes:
        values = [getattr(theme, f.name) for f in dataclasses.fields(theme)]
        assert all(isinstance(v, Color) for v in values)
        assert len(values) == field_count


def test_user_style_is_bold_user_colour():
    theme = Theme.dark()
    style = theme.style_for_message_type("user")
    assert style.fg_color == theme.user_message
    assert Modifier.BOLD in style.add_modifiers


def test_system_style_is_dim():
    theme = Theme.dracula()
    style = theme.style_for_message_type("system")
    assert style.fg_color == theme.system_message
    assert Modifier.DIM in style.add_modifiers


def test_unknown_role_uses_dimmed():
    theme = Theme.tokyo_night()
    assert theme.style_for_message_type("tool").fg_color == theme.dimmed


def test_thinking_style_matches_thinking_role():
    theme = Theme.catppuccin_mocha()
    assert theme.thinking_style() == theme.style_for_message_type("thinking")


def test_status_styles():
    theme = Theme.dark()
    error = theme.style_for_status(True)
    ok = theme.style_for_status(False)
    assert error.fg_color == theme.error
    assert Modifier.BOLD in error.add_modifiers
    assert ok.fg_color == theme.success
    assert Modifier.BOLD not in ok.add_modifiers


def test_button_style_bold_only_when_hovered():
    theme = Theme.dark()
    assert Modifier.BOLD in theme.button_style(True).add_modifiers
    assert Modifier.BOLD not in theme.button_style(False).add_modifiers
    assert theme.button_style(False).bg_color == theme.primary


def test_cursor_style_inverts_primary():
    theme = Theme.dracula()
    style = theme.cursor_style()
    assert style.fg_color == theme.background
    assert style.bg_color == theme.primary


def test_selection_and_highlight_backgrounds():
    theme = Theme.tokyo_night()
    assert theme.selection_style().bg_color == theme.secondary
    assert theme.highlight_style().bg_color == theme.tertiary


def test_dim_and_output_styles_dimmed():
    theme = Theme.dark()
    assert Modifier.DIM in theme.dim_style().add_modifiers
    assert theme.output_style().fg_color == theme.output_message
    assert Modifier.DIM in theme.code_border_style().add_modifiers


def test_input_and_border_styles():
    theme = Theme.catppuccin_mocha()
    assert theme.input_style().bg_color == theme.border
    assert theme.border_style().fg_color == theme.border
    assert theme.banner_style().fg_color == theme.primary
    assert theme.action_style().fg_color == theme.action_message