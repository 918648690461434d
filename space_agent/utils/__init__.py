"""Utility modules for the space agent."""

from .applescript import AppleScriptExecutor, escape_applescript_string, lua_integer, lua_string

__all__ = ["AppleScriptExecutor", "escape_applescript_string", "lua_integer", "lua_string"]
