"""Commands to switch to and select spaces."""

from typing import Dict, Any
from .base import Command, require_id


class GotoSpaceCommand(Command):
    """Command to switch to a space."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "goto_space"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the go to space command."""
        space_id = require_id(intent, "space_id")
        if not space_id:
            return False

        success = await self.store.go_to_space(space_id)
        if success:
            print(f"✓ Switched to space {space_id}\n")
        return success


class SelectSpaceCommand(Command):
    """Command to move the UI selection onto a space (lazily loads its windows)."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "select_space"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the select space command."""
        # An empty id clears the selection
        space_id = str(intent.get("space_id") or "").strip() or None
        self.store.select_space(space_id)
        return True
