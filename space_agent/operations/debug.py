"""Ad-hoc Lua execution for debugging host scripts."""

from typing import Optional

from ..bridge import HammerspoonBridge, get_bridge


async def run_lua(code: str, bridge: Optional[HammerspoonBridge] = None) -> str:
    """Run an arbitrary Lua payload and return the host's reply verbatim."""
    return await (bridge or get_bridge()).execute(code)


async def read_clipboard(bridge: Optional[HammerspoonBridge] = None) -> Optional[str]:
    """
    Read the clipboard as text via AppleScript.

    Returns:
        Clipboard text, or None if it is empty or not text
    """
    executor = (bridge or get_bridge()).executor
    success, stdout = await executor.execute_safe("return (the clipboard as text)")
    if not success:
        return None
    return stdout
