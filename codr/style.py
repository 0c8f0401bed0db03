"""Colours, text modifiers and composable styles for terminal cells."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import ClassVar

_NAMED_COLORS = frozenset(
    {
        "reset",
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "gray",
        "dark_gray",
        "light_red",
        "light_green",
        "light_yellow",
        "light_blue",
        "light_magenta",
        "light_cyan",
        "white",
    }
)


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named palette entry or a 24-bit RGB value."""

    name: str
    rgb: tuple[int, int, int] | None = None

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_MAGENTA: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    def __post_init__(self) -> None:
        if self.name == "rgb":
            if self.rgb is None or len(self.rgb) != 3:
                raise ValueError("an RGB colour needs three components")
            if any(not 0 <= component <= 255 for component in self.rgb):
                raise ValueError(f"RGB components must lie in 0..255: {self.rgb}")
        elif self.name not in _NAMED_COLORS:
            raise ValueError(f"unknown colour name: {self.name!r}")
        elif self.rgb is not None:
            raise ValueError("a named colour takes no RGB components")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Build a 24-bit colour."""
        return cls("rgb", (r, g, b))


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("dark_gray")
Color.LIGHT_RED = Color("light_red")
Color.LIGHT_GREEN = Color("light_green")
Color.LIGHT_YELLOW = Color("light_yellow")
Color.LIGHT_BLUE = Color("light_blue")
Color.LIGHT_MAGENTA = Color("light_magenta")
Color.LIGHT_CYAN = Color("light_cyan")
Color.WHITE = Color("white")


class Modifier(enum.Flag):
    """Text attributes that can be switched on for a cell."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """An immutable style; unset colours inherit when patched onto another style."""

    fg_color: Color | None = None
    bg_color: Color | None = None
    add_modifiers: Modifier = Modifier.NONE
    sub_modifiers: Modifier = Modifier.NONE

    def fg(self, color: Color) -> Style:
        """Return a copy with the given foreground colour."""
        return replace(self, fg_color=color)

    def bg(self, color: Color) -> Style:
        """Return a copy with the given background colour."""
        return replace(self, bg_color=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        """Return a copy with the modifier switched on."""
        return replace(
            self,
            add_modifiers=self.add_modifiers | modifier,
            sub_modifiers=self.sub_modifiers & ~modifier,
        )

    def patch(self, other: Style) -> Style:
        """Layer ``other`` on top of this style."""
        return Style(
            fg_color=other.fg_color if other.fg_color is not None else self.fg_color,
            bg_color=other.bg_color if other.bg_color is not None else self.bg_color,
            add_modifiers=(self.add_modifiers & ~other.sub_modifiers) | other.add_modifiers,
            sub_modifiers=(self.sub_modifiers & ~other.add_modifiers) | other.sub_modifiers,
        )