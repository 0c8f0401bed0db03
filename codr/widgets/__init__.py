"""Widgets that draw the banner, conversation, input line and status toasts."""

__all__ = ["banner", "conversation", "input", "status"]