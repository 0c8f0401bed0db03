"""Scrollable conversation view: chat messages, tool output and pending approvals."""

from __future__ import annotations

import textwrap
from collections.abc import Sequence
from dataclasses import dataclass, field

from wcwidth import wcwidth

from codr.buffer import Buffer, Rect
from codr.markdown import render_markdown
from codr.style import Color, Modifier, Style
from codr.text import Span
from codr.theme import Theme

_PADDING = 2
COLLAPSED_LINES = 4
EXPANDED_LINES = 15

_SPACING = {
    "user": (1, False),
    "assistant": (1, False),
    "action": (0, False),
    "output": (0, True),
    "thinking": (0, False),
}

_CATEGORY_COLORS = {
    "FileOps": (Color.from_rgb(88, 166, 255), Color.from_rgb(20, 25, 35)),
    "Search": (Color.from_rgb(189, 147, 249), Color.from_rgb(25, 20, 35)),
    "System": (Color.from_rgb(255, 100, 100), Color.from_rgb(35, 20, 20)),
}
_DEFAULT_OUTPUT_BG = Color.from_rgb(25, 25, 30)
_OUTPUT_FG = Color.from_rgb(180, 180, 180)
_ACTION_BOX_BG = Color.from_rgb(40, 35, 30)

_SCROLL_HINT = "↑ more"
_APPROVE = "[a] Approve"
_REJECT = "[r] Reject"


def _lines(text: str) -> list[str]:
    """Split into lines the way a line iterator does: no trailing empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _spacing(role: str) -> tuple[int, bool]:
    return _SPACING.get(role, (0, False))


def _wrap(text: str, max_width: int) -> str:
    """Word-wrap on ASCII spaces without breaking long words."""
    if not text:
        return ""
    return textwrap.fill(
        text,
        width=max(max_width, 1),
        break_long_words=False,
        break_on_hyphens=False,
    )


def _truncate(line: str, max_width: int) -> str:
    """Cut a line to ``max_width`` columns, ending it with an ellipsis when shortened."""
    if Span(line).width() <= max_width:
        return line
    limit = max(max_width - 1, 0)
    result: list[str] = []
    used = 0
    for ch in line:
        char_width = wcwidth(ch)
        if char_width < 0:
            char_width = 1
        if used + char_width > limit:
            result.append("…")
            break
        result.append(ch)
        used += char_width
    return "".join(result)


@dataclass(frozen=True)
class ChatMessage:
    """One entry of the conversation."""

    role: str
    content: str
    tool_category: str | None = None


@dataclass(frozen=True)
class PendingAction:
    """An action waiting for the user to approve or reject it."""

    action_type: str
    content: str


@dataclass
class ConversationWidget:
    """Message history anchored at the bottom; scrolling hides the newest messages."""

    messages: Sequence[ChatMessage]
    theme: Theme
    scroll_offset: int = 0
    pending_action: PendingAction | None = None
    collapsed_outputs: set[int] = field(default_factory=set)

    def is_collapsed(self, index: int) -> bool:
        """Whether the output message at ``index`` is collapsed."""
        return index in self.collapsed_outputs

    def toggle_collapse(self, index: int) -> None:
        """Collapse or expand the output message at ``index``."""
        self.collapsed_outputs ^= {index}

    def scroll_up(self, n: int) -> None:
        """Hide ``n`` more of the newest messages."""
        self.scroll_offset += n

    def scroll_down(self, n: int, max_offset: int) -> None:
        """Show ``n`` more of the newest messages."""
        self.scroll_offset = max(self.scroll_offset - n, 0)

    def scroll_to_bottom(self) -> None:
        self.scroll_offset = 0

    def max_scroll_offset(self) -> int:
        """The most messages that scrolling may hide."""
        return max(len(self.messages) - 1, 0)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the visible messages, any pending action and the scroll hint."""
        x = area.x + _PADDING
        limit = area.bottom() - 2
        visible = list(self.messages[: max(len(self.messages) - self.scroll_offset, 0)])

        total_height = 0
        for message in visible:
            spacing, add_bottom = _spacing(message.role)
            total_height += spacing + len(_lines(message.content)) + (1 if add_bottom else 0)

        viewport_height = area.height - 2
        y = limit - total_height if total_height < viewport_height else area.y

        for index, message in enumerate(visible):
            if y > limit:
                break
            spacing, add_bottom = _spacing(message.role)
            if message.role == "thinking":
                y += 1
            y += spacing
            y = self._render_message(index, message, x, y, area, buf, add_bottom)
            if add_bottom:
                y += 1

        if self.pending_action is not None and y + 5 <= area.bottom():
            self._render_pending_action(self.pending_action, x, y, area, buf)

        if self.scroll_offset > 0:
            hint_x = max(area.right() - len(_SCROLL_HINT.encode("utf-8")), 0)
            buf.set_string(hint_x, area.y, _SCROLL_HINT, Style().fg(self.theme.dimmed))

    def _render_message(
        self,
        index: int,
        message: ChatMessage,
        x: int,
        y: int,
        area: Rect,
        buf: Buffer,
        add_bottom: bool,
    ) -> int:
        theme = self.theme
        max_width = max(area.width - 2 * _PADDING, 0)
        limit = area.bottom() - 2
        role = message.role

        if role == "user":
            buf.set_string(x, y, "❯ ", Style().fg(theme.primary).add_modifier(Modifier.BOLD))
            y = self._render_wrapped(
                message.content, x + 2, y, limit, buf, Style().fg(theme.foreground), max_width
            )
        elif role == "assistant":
            y = self._render_assistant(message.content, x, y, area, buf, max_width)
        elif role == "action":
            buf.set_string(x, y, "↳ ", Style().fg(theme.dimmed))
            style = Style().fg(theme.dimmed).add_modifier(Modifier.ITALIC)
            y = self._render_wrapped(message.content, x + 2, y, limit, buf, style, max_width)
        elif role == "output":
            y = self._render_output(index, message, x, y, buf, max_width)
        elif role == "thinking":
            style = (
                Style()
                .fg(theme.thinking_message)
                .add_modifier(Modifier.ITALIC)
                .add_modifier(Modifier.DIM)
            )
            y = self._render_wrapped(message.content, x, y, limit, buf, style, max_width)
        else:
            y = self._render_wrapped(
                message.content, x, y, limit, buf, Style().fg(theme.dimmed), max_width
            )

        if add_bottom and y < limit:
            y += 1
        return y

    @staticmethod
    def _render_wrapped(
        content: str,
        x: int,
        y: int,
        limit: int,
        buf: Buffer,
        style: Style,
        max_width: int,
    ) -> int:
        for line in _lines(content):
            if y >= limit:
                break
            for wrapped in _lines(_wrap(line, max_width)):
                if y >= limit:
                    break
                buf.set_string(x, y, wrapped, style)
                y += 1
        return y

    @staticmethod
    def _render_assistant(
        content: str, x: int, y: int, area: Rect, buf: Buffer, max_width: int
    ) -> int:
        limit = area.bottom() - 2
        start_y = y
        for i, line in enumerate(render_markdown(content, max_width).lines):
            if y >= limit:
                break
            if i == 0 and not line.spans:
                continue
            x_offset = 0
            for span in line.spans:
                span_width = span.width()
                if x + x_offset + span_width >= area.right() - 2:
                    break
                buf.set_span(x + x_offset, y, span, max_width)
                x_offset += span_width
            y += 1
        if y == start_y and content:
            y += 1
        return y

    def _render_output(
        self, index: int, message: ChatMessage, x: int, y: int, buf: Buffer, max_width: int
    ) -> int:
        border_color, bg_color = _CATEGORY_COLORS.get(
            message.tool_category or "", (self.theme.border, _DEFAULT_OUTPUT_BG)
        )
        border_style = Style().fg(border_color)
        content_style = Style().fg(_OUTPUT_FG).bg(bg_color)

        collapsed = self.is_collapsed(index)
        lines = _lines(message.content)
        total = len(lines)
        shown = COLLAPSED_LINES if collapsed else min(EXPANDED_LINES, total)

        for i, line in enumerate(lines[:shown]):
            buf.set_string(x, y, "│" if i == 0 else " ", border_style)
            buf.set_string(x + 1, y, _truncate(line, max(max_width - 2, 0)), content_style)
            y += 1

        if total > COLLAPSED_LINES:
            if collapsed:
                hint = f"  ... {total} lines total (click to expand)"
            elif total > EXPANDED_LINES:
                hint = "  ... (click to collapse)"
            else:
                hint = ""
            if hint:
                buf.set_string(x, y, hint, Style().fg(border_color).add_modifier(Modifier.DIM))
                y += 1

        return y + 1

    def _render_pending_action(
        self, action: PendingAction, x: int, y: int, area: Rect, buf: Buffer
    ) -> int:
        theme = self.theme
        max_width = max(area.width - 2 * _PADDING, 0)
        box_style = Style().fg(theme.warning).bg(_ACTION_BOX_BG)
        rule = "─" * max(max_width - 2, 0)

        buf.set_string(x, y, f"┌{rule}┐", box_style)
        buf.set_string(x + 1, y + 1, f" {action.action_type} requires approval ", box_style)
        buf.set_string(
            x + 2,
            y + 2,
            _truncate(action.content, max(max_width - 4, 0)),
            Style().fg(theme.foreground),
        )
        buf.set_string(
            x + 1, y + 3, _APPROVE, Style().fg(theme.success).add_modifier(Modifier.BOLD)
        )
        buf.set_string(
            x + len(_APPROVE) + 3,
            y + 3,
            _REJECT,
            Style().fg(theme.error).add_modifier(Modifier.BOLD),
        )
        buf.set_string(x, y + 4, f"└{rule}┘", box_style)
        return y + 5