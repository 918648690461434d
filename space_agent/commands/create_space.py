"""Command to create a space."""

from typing import Dict, Any
from .base import Command


class CreateSpaceCommand(Command):
    """Command to add a space to the main screen and switch to it."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "create_space"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the create space command."""
        print("Creating a new space...")
        success = await self.store.create_space()
        if success:
            current = next((space for space in self.store.spaces if space.is_current), None)
            name = current.name if current else "new space"
            print(f"✓ Created and switched to '{name}'\n")
        return success
