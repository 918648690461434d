"""Command to focus a window."""

from typing import Dict, Any
from .base import Command, require_id


class FocusWindowCommand(Command):
    """Command to focus a window by id."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "focus_window"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the focus window command."""
        window_id = require_id(intent, "window_id")
        if not window_id:
            return False

        success = await self.store.focus_window(window_id)
        if success:
            print(f"✓ Focused window {window_id}\n")
        return success
