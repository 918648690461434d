"""Base command class for space agent commands."""

from abc import ABC, abstractmethod
from typing import Dict, Any

from ..api_server import send_error
from ..store import SpaceStore


class Command(ABC):
    """Abstract base class for space agent commands."""

    def __init__(self, store: SpaceStore):
        """
        Initialize the command.

        Args:
            store: Store the command reads and mutates
        """
        self.store = store

    @abstractmethod
    async def execute(self, intent: Dict[str, Any]) -> bool:
        """
        Execute the command based on the intent.

        Args:
            intent: Intent dictionary with command-specific fields

        Returns:
            True if execution succeeded, False otherwise
        """
        pass

    @abstractmethod
    def can_handle(self, intent_type: str) -> bool:
        """
        Check if this command can handle the given intent type.

        Args:
            intent_type: The intent type string

        Returns:
            True if this command can handle the intent type
        """
        pass

    def produces_results(self) -> bool:
        """
        Return True if this command produces displayable results.

        Query commands (list_*) return True.
        Action commands (goto, remove, focus, etc.) return False (default).
        """
        return False  # Default: action commands don't produce results


def require_id(intent: Dict[str, Any], key: str) -> str:
    """Return a non-empty id from the intent, or "" after reporting an error."""
    value = str(intent.get(key) or "").strip()
    if not value:
        message = f"No {key.replace('_', ' ')} specified in intent"
        print(f"Error: {message}\n")
        send_error(message)
    return value
