"""A rectangular grid of styled cells that widgets draw into."""

from __future__ import annotations

import sys
import unicodedata
from dataclasses import dataclass

from wcwidth import wcwidth

from codr.style import Style
from codr.text import Line, Span


@dataclass(frozen=True)
class Rect:
    """A rectangle in terminal coordinates."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError(f"rectangle values must not be negative: {self}")

    def bottom(self) -> int:
        """The first row below the rectangle."""
        return self.y + self.height

    def right(self) -> int:
        """The first column to the right of the rectangle."""
        return self.x + self.width


@dataclass
class Cell:
    """One terminal cell; wide characters leave an empty symbol in the cells they cover."""

    symbol: str = " "
    style: Style = Style()


class Buffer:
    """Cells covering an area of the screen."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._rows = [[Cell() for _ in range(area.width)] for _ in range(area.height)]

    def cell(self, x: int, y: int) -> Cell | None:
        """The cell at a position, or None outside the buffer."""
        area = self.area
        if area.x <= x < area.right() and area.y <= y < area.bottom():
            return self._rows[y - area.y][x - area.x]
        return None

    def set_string(self, x: int, y: int, text: str, style: Style) -> tuple[int, int]:
        """Write text from a position, clipped to the buffer; return the end position."""
        return self._write(x, y, text, sys.maxsize, style)

    def set_span(self, x: int, y: int, span: Span, max_width: int) -> tuple[int, int]:
        """Write a span using at most ``max_width`` columns."""
        return self._write(x, y, span.content, max_width, span.style)

    def set_line(self, x: int, y: int, line: Line, max_width: int) -> tuple[int, int]:
        """Write a line's spans, each patched onto the line style."""
        remaining = max_width
        for span in line.spans:
            if remaining <= 0:
                break
            new_x, _ = self._write(x, y, span.content, remaining, line.style.patch(span.style))
            remaining -= new_x - x
            x = new_x
        return x, y

    def row_text(self, y: int) -> str:
        """The symbols of one row joined into a string."""
        if not self.area.y <= y < self.area.bottom():
            raise IndexError(f"row {y} is outside the buffer")
        return "".join(cell.symbol for cell in self._rows[y - self.area.y])

    def _write(self, x: int, y: int, text: str, max_width: int, style: Style) -> tuple[int, int]:
        if not self.area.y <= y < self.area.bottom():
            return x, y
        remaining = max(0, min(max_width, self.area.right() - x))
        previous: Cell | None = None
        for ch in text:
            if unicodedata.category(ch) == "Cc":
                continue
            width = wcwidth(ch)
            if width <= 0:
                if previous is not None:
                    previous.symbol += ch
                continue
            if width > remaining:
                break
            target = self.cell(x, y)
            if target is not None:
                target.symbol = ch
                target.style = target.style.patch(style)
            for offset in range(1, width):
                covered = self.cell(x + offset, y)
                if covered is not None:
                    covered.symbol = ""
                    covered.style = covered.style.patch(style)
            previous = target
            x += width
            remaining -= width
        return x, y