"""AppleScript execution utilities."""

import asyncio
import re
from typing import Optional, Tuple, Union

from ..exceptions import InvalidIdentifierError

_INTEGER_ID = re.compile(r"^\d+$")


def escape_applescript_string(text: str) -> str:
    """
    Escape special characters for AppleScript string literals.

    Args:
        text: String to escape

    Returns:
        Escaped string safe for use in AppleScript
    """
    # Escape backslashes first (must be first)
    text = text.replace("\\", "\\\\")
    # Escape double quotes
    text = text.replace('"', '\\"')
    # Escape newlines
    text = text.replace("\n", "\\n")
    # Escape carriage returns
    text = text.replace("\r", "\\r")
    # Escape tabs
    text = text.replace("\t", "\\t")
    return text


def lua_string(text: str) -> str:
    """Quote text as a double-quoted Lua string literal."""
    # Lua understands the same escapes as AppleScript for this character set
    return f'"{escape_applescript_string(text)}"'


def lua_integer(value: Union[str, int]) -> str:
    """
    Render a host space/window id as a Lua integer literal.

    Raises:
        InvalidIdentifierError: If the id is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(f"Invalid host id: {value!r}")
    text = str(value).strip()
    if not _INTEGER_ID.match(text):
        raise InvalidIdentifierError(f"Invalid host id: {value!r}")
    return text


class AppleScriptExecutor:
    """Centralized AppleScript execution with standardized error handling."""

    def __init__(self, osascript: str = "osascript"):
        """
        Initialize the AppleScript executor.

        Args:
            osascript: Path or name of the osascript binary
        """
        self.osascript = osascript

    async def execute(self, script: str) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Execute an AppleScript command in a child osascript process.

        Args:
            script: AppleScript code to execute

        Returns:
            Tuple of (success, stdout, stderr)
            - success: True if return code is 0, False otherwise
            - stdout: Standard output (None if empty)
            - stderr: Standard error (None if empty)
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                self.osascript, "-e", script,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except FileNotFoundError:
            return False, None, f"{self.osascript} not found in PATH"
        except OSError as e:
            return False, None, str(e)

        raw_stdout, raw_stderr = await proc.communicate()
        stdout = raw_stdout.decode("utf-8", errors="replace") if raw_stdout else ""
        # osascript terminates its result with a single newline
        if stdout.endswith("\n"):
            stdout = stdout[:-1]
        stderr = raw_stderr.decode("utf-8", errors="replace").strip() if raw_stderr else ""

        return proc.returncode == 0, stdout or None, stderr or None

    async def execute_safe(self, script: str) -> Tuple[bool, Optional[str]]:
        """
        Execute an AppleScript command safely, returning only success and output.

        Args:
            script: AppleScript code to execute

        Returns:
            Tuple of (success, output)
        """
        success, stdout, _ = await self.execute(script)
        return success, stdout
