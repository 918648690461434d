"""Command execution layer for space agent intents."""

from .base import Command
from .executor import CommandExecutor
from .create_space import CreateSpaceCommand
from .focus_window import FocusWindowCommand
from .goto_space import GotoSpaceCommand, SelectSpaceCommand
from .list_spaces import ListSpacesCommand
from .list_windows import ListWindowsCommand, SelectWindowCommand
from .remove_space import RemoveCurrentSpaceCommand, RemoveSpaceCommand
from .run_lua import RunLuaCommand

__all__ = [
    "Command",
    "CommandExecutor",
    "CreateSpaceCommand",
    "FocusWindowCommand",
    "GotoSpaceCommand",
    "SelectSpaceCommand",
    "ListSpacesCommand",
    "ListWindowsCommand",
    "SelectWindowCommand",
    "RemoveCurrentSpaceCommand",
    "RemoveSpaceCommand",
    "RunLuaCommand",
]
