"""Banner across the top of the screen: name, model, status and usage."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from codr.buffer import Buffer, Rect
from codr.style import Modifier, Style
from codr.text import Line, Span
from codr.theme import Theme

_WORKING_MESSAGES = (
    "discombambulating...",
    "contemplating...",
    "working...",
    "processing...",
)
_STATUS_DOT = "●"
_CONNECTED = "●"
_DISCONNECTED = "○"


class AgentStatus(enum.Enum):
    """What the agent is currently doing."""

    IDLE = enum.auto()
    RUNNING = enum.auto()
    STREAMING = enum.auto()
    ERROR = enum.auto()


@dataclass
class BannerWidget:
    """Two-line banner with a separator beneath it."""

    theme: Theme
    model_name: str
    role: str
    tokens: int = 0
    cost: float = 0.0
    cwd: str | None = None
    agent_status: AgentStatus = AgentStatus.IDLE
    connected: bool = True
    clock: Callable[[], float] = field(default=time.time, repr=False)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the banner into ``area`` of ``buf``."""
        theme = self.theme
        buf.set_string(area.x, area.bottom() - 1, "─" * area.width, Style().fg(theme.border))
        buf.set_line(area.x, area.y, Line(self._title_spans()), area.width)
        details = self._detail_spans(area.width)
        if details:
            buf.set_line(area.x, area.y + 1, Line(details), area.width)

    def _title_spans(self) -> list[Span]:
        theme = self.theme
        status_color = {
            AgentStatus.IDLE: theme.dimmed,
            AgentStatus.RUNNING: theme.primary,
            AgentStatus.STREAMING: theme.secondary,
            AgentStatus.ERROR: theme.error,
        }[self.agent_status]
        role_style = {
            "SAFE": Style().fg(theme.success),
            "YOLO": Style().fg(theme.error),
            "PLAN": Style().fg(theme.secondary),
        }.get(self.role, theme.dim_style())
        return [
            Span("codr", Style().fg(theme.primary).add_modifier(Modifier.BOLD)),
            Span(" "),
            Span(self.model_name, theme.dim_style()),
            Span(" "),
            Span(_STATUS_DOT, Style().fg(status_color)),
            Span(" "),
            Span(_CONNECTED if self.connected else _DISCONNECTED, Style().fg(theme.dimmed)),
            Span(" "),
            Span("[", theme.dim_style()),
            Span(self.role, role_style),
            Span("]", theme.dim_style()),
        ]

    def _detail_spans(self, width: int) -> list[Span]:
        theme = self.theme
        spans: list[Span] = []

        if self.agent_status in (AgentStatus.RUNNING, AgentStatus.STREAMING):
            frame = int(self.clock()) // 3 % len(_WORKING_MESSAGES)
            spans.append(
                Span(
                    _WORKING_MESSAGES[frame],
                    Style().fg(theme.secondary).add_modifier(Modifier.ITALIC),
                )
            )
            spans.append(Span("  "))

        if self.cwd is not None:
            max_len = width // 2
            if len(self.cwd) > max_len:
                keep = max(max_len - 1, 0)
                shown = "…" + (self.cwd[-keep:] if keep else "")
            else:
                shown = self.cwd
            spans.append(Span(shown, theme.dim_style()))
            spans.append(Span("  "))

        if self.tokens > 0:
            spans.append(Span(f"{self.tokens} tokens", theme.dim_style()))
            spans.append(Span("  "))

        if self.cost > 0.0:
            spans.append(Span(f"${self.cost:.4f}", theme.dim_style()))

        return spans