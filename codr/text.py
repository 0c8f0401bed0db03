"""Styled text: spans, lines and multi-line text."""

from __future__ import annotations

from dataclasses import dataclass, field

from wcwidth import wcwidth

from codr.style import Style


def _display_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    content: str
    style: Style = Style()

    def width(self) -> int:
        """Number of terminal columns the content occupies."""
        return _display_width(self.content)


@dataclass
class Line:
    """A sequence of spans on a single row, with a base style."""

    spans: list[Span] = field(default_factory=list)
    style: Style = Style()

    def width(self) -> int:
        """Number of terminal columns the line occupies."""
        return sum(span.width() for span in self.spans)


@dataclass
class Text:
    """Several lines of styled text."""

    lines: list[Line] = field(default_factory=list)