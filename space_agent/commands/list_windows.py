"""Commands to list and select windows."""

from typing import Dict, Any, List
from .base import Command
from ..api_server import send_results
from ..models import Window

MAX_TITLE_LENGTH = 70


def format_window(window: Window) -> str:
    """Format a window as one display line."""
    title = window.title
    if len(title) > MAX_TITLE_LENGTH:
        title = f"{title[:MAX_TITLE_LENGTH]}..."
    flags = []
    if window.is_fullscreen:
        flags.append("fullscreen")
    if window.is_minimized:
        flags.append("minimized")
    suffix = f" [{', '.join(flags)}]" if flags else ""
    return f"{title} - {window.application}{suffix} (id {window.id})"


class ListWindowsCommand(Command):
    """Command to list the windows of one space, or of every space."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "list_windows"

    def produces_results(self) -> bool:
        return True

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the list windows command."""
        space_id = str(intent.get("space_id") or "").strip()

        windows: List[Window]
        if space_id:
            if not await self.store.fetch_space_windows(space_id):
                return False
            windows = self.store.space_windows.get(space_id, [])
            title = f"Windows on space {space_id}"
        else:
            if not await self.store.fetch_all_windows():
                return False
            windows = self.store.all_windows
            title = "All windows"

        query = str(intent.get("query") or "").strip().lower()
        if query:
            windows = [
                window for window in windows
                if query in window.title.lower() or query in window.application.lower()
            ]

        items = [format_window(window) for window in windows] or ["No windows found."]
        send_results(title, items)

        print(f"\n{title}:")
        for i, item in enumerate(items, 1):
            print(f"  {i}. {item}")
        print()
        return True


class SelectWindowCommand(Command):
    """Command to move the UI selection onto a window."""

    def can_handle(self, intent_type: str) -> bool:
        """Check if this command can handle the intent type."""
        return intent_type == "select_window"

    async def execute(self, intent: Dict[str, Any]) -> bool:
        """Execute the select window command."""
        window_id = str(intent.get("window_id") or "").strip() or None
        self.store.select_window(window_id)
        return True
