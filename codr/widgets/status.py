"""Toast notifications and progress indicator."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from codr.buffer import Buffer, Rect
from codr.style import Color, Style
from codr.theme import Theme


class MessageLevel(enum.Enum):
    """Severity of a toast."""

    INFO = enum.auto()
    SUCCESS = enum.auto()
    WARNING = enum.auto()
    ERROR = enum.auto()


_DISMISS_AFTER = {
    MessageLevel.INFO: 3.0,
    MessageLevel.SUCCESS: 2.0,
    MessageLevel.WARNING: 4.0,
    MessageLevel.ERROR: 5.0,
}

_ICONS = {
    MessageLevel.INFO: "→ ",
    MessageLevel.SUCCESS: "✓ ",
    MessageLevel.WARNING: "⚠ ",
    MessageLevel.ERROR: "✗ ",
}

_MAX_TOASTS = 3

_SPINNER = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
# The frame counter runs over the encoded length of the glyph string, so the
# frames past the last glyph leave the spinner cell blank.
_SPINNER_CYCLE = len(_SPINNER.encode("utf-8"))


@dataclass
class ToastMessage:
    """A temporary notification that disappears after a level-dependent time."""

    text: str
    level: MessageLevel
    timestamp: float = field(default_factory=time.monotonic)

    @property
    def auto_dismiss(self) -> float:
        """Seconds after which the toast is dismissed."""
        return _DISMISS_AFTER[self.level]

    def should_dismiss(self) -> bool:
        """Whether the toast has been shown long enough."""
        return time.monotonic() - self.timestamp >= self.auto_dismiss

    def color(self, theme: Theme) -> Color:
        """The theme colour for this toast's level."""
        return {
            MessageLevel.INFO: theme.info,
            MessageLevel.SUCCESS: theme.success,
            MessageLevel.WARNING: theme.warning,
            MessageLevel.ERROR: theme.error,
        }[self.level]


@dataclass
class StatusWidget:
    """Overlay showing the newest toasts and an optional progress line."""

    theme: Theme
    toasts: Sequence[ToastMessage]
    progress: str | None = None
    show_spinner: bool = False
    clock: Callable[[], float] = field(default=time.time, repr=False)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw toasts and progress at the bottom of ``area``."""
        active = [toast for toast in self.toasts if not toast.should_dismiss()]
        has_progress = self.progress is not None or self.show_spinner
        if not active and not has_progress:
            return

        shown = list(reversed(active))[:_MAX_TOASTS]
        y = area.bottom() - (len(shown) + (1 if has_progress else 0))

        for toast in shown:
            if y >= area.bottom():
                break
            style = Style().fg(toast.color(self.theme))
            buf.set_string(area.x + 2, y, _ICONS[toast.level], style)
            buf.set_string(area.x + 4, y, toast.text, style)
            y += 1

        if not has_progress:
            return
        progress_y = area.bottom() - 1
        style = Style().fg(self.theme.dimmed)
        self._render_spinner(area.x + 2, progress_y, buf, style)
        label = self.progress if self.progress is not None else "working..."
        buf.set_string(area.x + 4, progress_y, label, style)

    def _render_spinner(self, x: int, y: int, buf: Buffer, style: Style) -> None:
        frame = int(self.clock() * 1000) // 100 % _SPINNER_CYCLE
        if frame < len(_SPINNER):
            buf.set_string(x, y, _SPINNER[frame], style)