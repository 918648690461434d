"""Command to run an ad-hoc Lua payload in the host (debugging aid)."""

from typing import Dict, Any
from .base import Command
from ..api_server import send_results, send_error
from ..exceptions import SpaceAgentError


class RunLuaCommand(Command):
    """Command to execute Lua from the intent, or from the clipboard when none is given."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "run_lua"

    def produces_results(self) -> bool:
        return True

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the run lua command."""
        operations = self.store.operations
        code = intent.get("code")
        if code is not None and not isinstance(code, str):
            print("Error: Lua code must be a string\n")
            send_error("Lua code must be a string")
            return False
        if not code:
            code = await operations.read_clipboard()
        if not code or not code.strip():
            print("Error: Clipboard is empty or not text\n")
            send_error("Clipboard is empty or not text")
            return False

        try:
            result = await operations.run_lua(code)
        except SpaceAgentError as e:
            self.store.notifier("Lua execution failed", str(e))
            return False

        send_results("Lua result", [result] if result else ["(no result)"])
        print(f"Lua result: {result or '(no result)'}\n")
        return True
