"""Remote operations catalog: Lua payloads plus parsing of their replies."""

from .debug import read_clipboard, run_lua
from .spaces import create_space, goto_space, list_spaces, remove_current_space, remove_space
from .windows import fetch_window_snapshot, focus_window, list_all_windows, list_windows_for_space

__all__ = [
    'list_spaces',
    'create_space',
    'remove_space',
    'remove_current_space',
    'goto_space',
    'list_windows_for_space',
    'list_all_windows',
    'focus_window',
    'fetch_window_snapshot',
    'run_lua',
    'read_clipboard',
]
