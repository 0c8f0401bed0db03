"""Single-line input with cursor editing and command history."""

from __future__ import annotations

from dataclasses import dataclass, field

from codr.buffer import Buffer, Rect
from codr.style import Modifier, Style
from codr.text import Span
from codr.theme import Theme

_CURSOR = "▏"
_PROMPT = "❯"


@dataclass
class InputWidget:
    """Editable input line; the cursor position counts characters."""

    text: str = ""
    cursor_position: int = 0
    history: list[str] = field(default_factory=list)
    history_index: int | None = None
    placeholder: str = "Enter a message..."
    focused: bool = True
    theme: Theme = field(default_factory=Theme.dark)

    def set_input(self, text: str) -> None:
        """Replace the text and put the cursor at its end."""
        self.text = text
        self.cursor_position = len(text)

    def clear(self) -> None:
        """Empty the input and leave history navigation."""
        self.text = ""
        self.cursor_position = 0
        self.history_index = None

    def submit(self) -> str | None:
        """Return the text, recording it in history, or None if it is blank."""
        if not self.text.strip():
            return None
        submitted = self.text
        self.history.append(submitted)
        self.clear()
        return submitted

    def insert(self, ch: str) -> None:
        """Insert a character at the cursor."""
        pos = self.cursor_position
        self.text = self.text[:pos] + ch + self.text[pos:]
        self.cursor_position += 1
        self.history_index = None

    def backspace(self) -> None:
        """Delete the character before the cursor."""
        if self.cursor_position > 0:
            pos = self.cursor_position
            self.text = self.text[: pos - 1] + self.text[pos:]
            self.cursor_position -= 1
            self.history_index = None

    def delete(self) -> None:
        """Delete the character under the cursor."""
        pos = self.cursor_position
        if pos < len(self.text):
            self.text = self.text[:pos] + self.text[pos + 1 :]
            self.history_index = None

    def move_left(self) -> None:
        self.cursor_position = max(self.cursor_position - 1, 0)

    def move_right(self) -> None:
        self.cursor_position = min(self.cursor_position + 1, len(self.text))

    def move_to_start(self) -> None:
        self.cursor_position = 0

    def move_to_end(self) -> None:
        self.cursor_position = len(self.text)

    def history_up(self) -> None:
        """Step one entry further through the history."""
        if not self.history:
            return
        max_index = len(self.history) - 1
        index = 0 if self.history_index is None else self.history_index + 1
        self.history_index = min(index, max_index)
        self.set_input(self.history[self.history_index])

    def history_down(self) -> None:
        """Step one entry back, returning to an empty line past the first."""
        if self.history_index is None:
            return
        if self.history_index == 0:
            self.clear()
        else:
            self.history_index -= 1
            self.set_input(self.history[self.history_index])

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the separator, prompt, text and cursor."""
        theme = self.theme
        buf.set_string(area.x, area.y, "─" * area.width, Style().fg(theme.border))

        x = area.x + 1
        y = area.y + 1
        buf.set_string(x, y, _PROMPT, Style().fg(theme.primary).add_modifier(Modifier.BOLD))

        input_x = x + 2
        max_width = max(area.width - 4, 0)

        if not self.text and not self.focused:
            placeholder_style = Style().fg(theme.dimmed).add_modifier(Modifier.DIM)
            buf.set_string(input_x, y, self.placeholder, placeholder_style)
            return

        if len(self.text) > max_width:
            display = self.text[: max(max_width - 1, 0)] + "…"
        else:
            display = self.text
        buf.set_string(input_x, y, display, Style().fg(theme.foreground))

        if self.focused:
            cursor_x = input_x + min(self.cursor_position, Span(display).width())
            if cursor_x < area.right() - 1:
                cell = buf.cell(cursor_x, y)
                if cell is not None:
                    cell.symbol = _CURSOR
                    cell.style = cell.style.patch(
                        Style().fg(theme.background).bg(theme.primary)
                    )