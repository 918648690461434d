"""Space agent: drive macOS spaces and windows through Hammerspoon."""

__version__ = "0.1.0"
