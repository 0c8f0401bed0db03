"""Colour palettes and the styles derived from them."""

from __future__ import annotations

from dataclasses import dataclass

from codr.style import Color, Modifier, Style

_rgb = Color.from_rgb


@dataclass(frozen=True)
class Theme:
    """A complete colour palette for the interface."""

    background: Color
    foreground: Color
    dimmed: Color

    code_keyword: Color
    code_string: Color
    code_comment: Color
    code_function: Color
    code_number: Color
    code_variable: Color
    code_type: Color
    code_attribute: Color

    primary: Color
    secondary: Color
    tertiary: Color
    border: Color

    success: Color
    warning: Color
    error: Color
    info: Color

    user_message: Color
    assistant_message: Color
    system_message: Color
    thinking_message: Color
    action_message: Color
    output_message: Color

    @classmethod
    def dark(cls) -> Theme:
        """The default dark palette."""
        return cls(
            background=Color.RESET,
            foreground=_rgb(226, 226, 226),
            dimmed=_rgb(118, 118, 118),
            code_keyword=_rgb(216, 134, 237),
            code_string=_rgb(86, 182, 194),
            code_comment=_rgb(92, 99, 112),
            code_function=_rgb(121, 192, 255),
            code_number=_rgb(248, 134, 134),
            code_variable=_rgb(226, 226, 226),
            code_type=_rgb(255, 121, 198),
            code_attribute=_rgb(248, 134, 134),
            primary=_rgb(35, 209, 139),
            secondary=_rgb(58, 136, 255),
            tertiary=_rgb(255, 121, 198),
            border=_rgb(51, 51, 51),
            success=_rgb(35, 209, 139),
            warning=_rgb(255, 159, 10),
            error=_rgb(255, 85, 85),
            info=_rgb(88, 166, 255),
            user_message=_rgb(226, 226, 226),
            assistant_message=_rgb(226, 226, 226),
            system_message=_rgb(92, 99, 112),
            thinking_message=_rgb(92, 99, 112),
            action_message=_rgb(118, 118, 118),
            output_message=_rgb(161, 161, 170),
        )

    @classmethod
    def dracula(cls) -> Theme:
        """The Dracula palette."""
        return cls(
            background=_rgb(40, 42, 54),
            foreground=_rgb(248, 248, 242),
            dimmed=_rgb(113, 119, 130),
            code_keyword=_rgb(255, 121, 198),
            code_string=_rgb(241, 250, 140),
            code_comment=_rgb(98, 114, 164),
            code_function=_rgb(139, 233, 253),
            code_number=_rgb(189, 147, 249),
            code_variable=_rgb(255, 184, 108),
            code_type=_rgb(80, 250, 123),
            code_attribute=_rgb(241, 250, 140),
            primary=_rgb(189, 147, 249),
            secondary=_rgb(139, 233, 253),
            tertiary=_rgb(80, 250, 123),
            border=_rgb(68, 71, 90),
            success=_rgb(80, 250, 123),
            warning=_rgb(255, 184, 108),
            error=_rgb(255, 85, 85),
            info=_rgb(139, 233, 253),
            user_message=_rgb(255, 184, 108),
            assistant_message=_rgb(189, 147, 249),
            system_message=_rgb(80, 250, 123),
            thinking_message=_rgb(98, 114, 164),
            action_message=_rgb(255, 121, 198),
            output_message=_rgb(248, 248, 242),
        )

    @classmethod
    def catppuccin_mocha(cls) -> Theme:
        """The Catppuccin Mocha palette."""
        return cls(
            background=_rgb(30, 30, 46),
            foreground=_rgb(205, 214, 244),
            dimmed=_rgb(153, 165, 200),
            code_keyword=_rgb(203, 166, 247),
            code_string=_rgb(166, 227, 161),
            code_comment=_rgb(108, 112, 134),
            code_function=_rgb(137, 180, 250),
            code_number=_rgb(249, 226, 175),
            code_variable=_rgb(238, 212, 159),
            code_type=_rgb(250, 179, 135),
            code_attribute=_rgb(245, 224, 220),
            primary=_rgb(203, 166, 247),
            secondary=_rgb(137, 180, 250),
            tertiary=_rgb(166, 227, 161),
            border=_rgb(108, 112, 134),
            success=_rgb(166, 227, 161),
            warning=_rgb(239, 159, 118),
            error=_rgb(243, 139, 168),
            info=_rgb(137, 180, 250),
            user_message=_rgb(239, 159, 118),
            assistant_message=_rgb(203, 166, 247),
            system_message=_rgb(166, 227, 161),
            thinking_message=_rgb(108, 112, 134),
            action_message=_rgb(250, 179, 135),
            output_message=_rgb(205, 214, 244),
        )

    @classmethod
    def tokyo_night(cls) -> Theme:
        """The Tokyo Night palette."""
        return cls(
            background=_rgb(26, 27, 38),
            foreground=_rgb(169, 177, 214),
            dimmed=_rgb(92, 99, 112),
            code_keyword=_rgb(122, 162, 247),
            code_string=_rgb(158, 206, 106),
            code_comment=_rgb(92, 99, 112),
            code_function=_rgb(187, 154, 247),
            code_number=_rgb(224, 175, 104),
            code_variable=_rgb(239, 148, 133),
            code_type=_rgb(250, 179, 135),
            code_attribute=_rgb(245, 224, 220),
            primary=_rgb(122, 162, 247),
            secondary=_rgb(192, 202, 245),
            tertiary=_rgb(158, 206, 106),
            border=_rgb(92, 99, 112),
            success=_rgb(158, 206, 106),
            warning=_rgb(224, 175, 104),
            error=_rgb(247, 118, 142),
            info=_rgb(122, 162, 247),
            user_message=_rgb(224, 175, 104),
            assistant_message=_rgb(122, 162, 247),
            system_message=_rgb(158, 206, 106),
            thinking_message=_rgb(92, 99, 112),
            action_message=_rgb(187, 154, 247),
            output_message=_rgb(169, 177, 214),
        )

    def style_for_message_type(self, role: str) -> Style:
        """Style for a message with the given role."""
        if role == "user":
            return Style().fg(self.user_message).add_modifier(Modifier.BOLD)
        if role == "assistant":
            return Style().fg(self.assistant_message)
        if role == "system":
            return Style().fg(self.system_message).add_modifier(Modifier.DIM)
        if role == "thinking":
            return Style().fg(self.thinking_message).add_modifier(Modifier.ITALIC)
        return Style().fg(self.dimmed)

    def style_for_status(self, is_error: bool) -> Style:
        """Style for a success or error indicator."""
        if is_error:
            return Style().fg(self.error).add_modifier(Modifier.BOLD)
        return Style().fg(self.success)

    def border_style(self) -> Style:
        return Style().fg(self.border)

    def button_style(self, is_hovered: bool) -> Style:
        style = Style().fg(self.background).bg(self.primary)
        if is_hovered:
            style = style.add_modifier(Modifier.BOLD)
        return style

    def input_style(self) -> Style:
        return Style().fg(self.foreground).bg(self.border)

    def cursor_style(self) -> Style:
        return Style().fg(self.background).bg(self.primary).add_modifier(Modifier.BOLD)

    def banner_style(self) -> Style:
        return Style().fg(self.primary).add_modifier(Modifier.BOLD)

    def dim_style(self) -> Style:
        return Style().fg(self.dimmed).add_modifier(Modifier.DIM)

    def action_style(self) -> Style:
        return Style().fg(self.action_message)

    def output_style(self) -> Style:
        return Style().fg(self.output_message).add_modifier(Modifier.DIM)

    def thinking_style(self) -> Style:
        return Style().fg(self.thinking_message).add_modifier(Modifier.ITALIC)

    def code_border_style(self) -> Style:
        return Style().fg(self.border).add_modifier(Modifier.DIM)

    def selection_style(self) -> Style:
        return Style().bg(self.secondary).fg(self.background).add_modifier(Modifier.BOLD)

    def highlight_style(self) -> Style:
        return Style().bg(self.tertiary).fg(self.background).add_modifier(Modifier.BOLD)