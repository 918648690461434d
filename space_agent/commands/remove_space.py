"""Commands to remove spaces."""

from typing import Dict, Any
from .base import Command, require_id
from ..api_server import send_error


class RemoveSpaceCommand(Command):
    """Command to remove a space by id."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "remove_space"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the remove space command."""
        space_id = require_id(intent, "space_id")
        if not space_id:
            return False

        space = next((space for space in self.store.spaces if space.id == space_id), None)
        if space is not None and space.is_current:
            # The space on screen can only go through remove_current_space
            message = f"Space {space_id} is current; use remove_current_space instead"
            print(f"Error: {message}\n")
            send_error(message)
            return False

        success = await self.store.remove_space(space_id)
        if success:
            print(f"✓ Removed space {space_id}\n")
        return success


class RemoveCurrentSpaceCommand(Command):
    """Command to leave the current space and remove it."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "remove_current_space"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the remove current space command."""
        success = await self.store.remove_current_space()
        if success:
            print("✓ Space removed successfully\n")
        return success
