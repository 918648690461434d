"""Bridge that runs Lua payloads inside Hammerspoon through AppleScript.

The outer AppleScript has no error channel of its own: a failure inside
``execute lua code`` is caught by the script and returned as an ordinary
string prefixed with the error sentinel. ``HammerspoonBridge.execute`` turns
those replies back into ``HostExecutionError``.
"""

from typing import Optional

from .config import ERROR_SENTINEL, HOST_APP
from .exceptions import AppleScriptError, HostExecutionError
from .utils import AppleScriptExecutor, escape_applescript_string


def is_host_error(response: str, sentinel: str = ERROR_SENTINEL) -> bool:
    """Return True if a host reply carries the error sentinel (prefix match only)."""
    return response.startswith(sentinel)


class HammerspoonBridge:
    """Runs Lua code in the automation host, one osascript round trip per call."""

    def __init__(
        self,
        app_name: str = HOST_APP,
        executor: Optional[AppleScriptExecutor] = None,
        sentinel: str = ERROR_SENTINEL
    ):
        self.app_name = app_name
        self.executor = executor or AppleScriptExecutor()
        self.sentinel = sentinel

    def build_script(self, code: str) -> str:
        """
        Wrap a Lua payload in the outer AppleScript invocation.

        Args:
            code: Lua source to run in the host

        Returns:
            AppleScript source for osascript
        """
        escaped_code = escape_applescript_string(code)
        escaped_app = escape_applescript_string(self.app_name)
        escaped_sentinel = escape_applescript_string(self.sentinel)
        return f'''
        tell application "{escaped_app}"
            try
                return (execute lua code "{escaped_code}")
            on error errMsg
                return "{escaped_sentinel} " & errMsg
            end try
        end tell
        '''

    async def execute(self, code: str) -> str:
        """
        Execute Lua code in the host and return its textual result.

        Args:
            code: Lua source to run in the host

        Returns:
            The host's reply, verbatim ("" when the payload returned nothing)

        Raises:
            AppleScriptError: If osascript could not reach the host
            HostExecutionError: If the host reported a failure
        """
        success, stdout, stderr = await self.executor.execute(self.build_script(code))
        if not success:
            raise AppleScriptError(f"Failed to reach {self.app_name}: {stderr or 'unknown error'}")

        response = stdout or ""
        if is_host_error(response, self.sentinel):
            raise HostExecutionError(response[len(self.sentinel):].strip())
        return response


# Module-level bridge shared by the remote operations
_bridge = HammerspoonBridge()


def get_bridge() -> HammerspoonBridge:
    """Return the shared bridge instance."""
    return _bridge


async def call_hammerspoon(code: str) -> str:
    """Execute Lua code through the shared bridge."""
    return await _bridge.execute(code)
