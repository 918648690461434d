"""Command to list spaces."""

from typing import Dict, Any
from .base import Command
from ..api_server import send_results
from ..models import Space


def format_space(space: Space) -> str:
    """Format a space as one display line."""
    marker = "★" if space.is_current else " "
    name = space.name or f"Space {space.id}"
    return f"{marker} {name} - {space.screen_name} (id {space.id})"


class ListSpacesCommand(Command):
    """Command to refresh and list every space."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "list_spaces"

    def produces_results(self) -> bool:
        return True

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the list spaces command."""
        if not await self.store.fetch_spaces():
            return False

        items = [format_space(space) for space in self.store.spaces]
        if not items:
            items = ["No spaces found."]
        send_results("Spaces", items)

        print("\nSpaces:")
        for item in items:
            print(f"  {item}")
        print()
        return True
