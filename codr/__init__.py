"""Terminal UI widgets, themes, events and markdown rendering for a coding assistant."""

__version__ = "0.1.0"