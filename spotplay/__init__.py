"""Application state, data model and player event hooks for a terminal music player client."""

__version__ = "0.1.0"

__all__ = ["data", "model", "player", "streaming", "ui_page", "ui_popup", "ui_state", "utils"]