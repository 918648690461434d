"""Command executor to route intents to appropriate command classes."""

from typing import Any, Dict, List
from .base import Command
from .create_space import CreateSpaceCommand
from .focus_window import FocusWindowCommand
from .goto_space import GotoSpaceCommand, SelectSpaceCommand
from .list_spaces import ListSpacesCommand
from .list_windows import ListWindowsCommand, SelectWindowCommand
from .remove_space import RemoveCurrentSpaceCommand, RemoveSpaceCommand
from .run_lua import RunLuaCommand
from ..api_server import send_results, send_error
from ..store import SpaceStore


class CommandExecutor:
    """Executes commands based on intents."""

    def __init__(self, store: SpaceStore):
        """
        Initialize the command executor with available commands.

        Args:
            store: Store shared by every command
        """
        self.store = store
        self.commands: List[Command] = [
            ListSpacesCommand(store),
            CreateSpaceCommand(store),
            RemoveSpaceCommand(store),
            RemoveCurrentSpaceCommand(store),
            GotoSpaceCommand(store),
            SelectSpaceCommand(store),
            ListWindowsCommand(store),
            SelectWindowCommand(store),
            FocusWindowCommand(store),
            RunLuaCommand(store),
        ]

    async def execute(self, intent: Any) -> bool:
        """
        Execute command(s) based on the intent(s).

        Args:
            intent: Can be:
                - A single intent dictionary with a 'type'
                - A list of intent dictionaries
                - A dictionary with a 'commands' array

        Returns:
            True if all executions succeeded, False if any failed
        """
        commands_list = self._normalize_to_commands_list(intent)

        if not commands_list:
            print("Error: No commands to execute\n")
            send_error("No commands to execute")
            return False

        # Execute each command sequentially; later intents may depend on earlier ones
        all_succeeded = True
        for i, cmd_intent in enumerate(commands_list, 1):
            if len(commands_list) > 1:
                print(f"Executing command {i} of {len(commands_list)}...")

            intent_type = cmd_intent.get("type", "list_spaces")

            command = next((c for c in self.commands if c.can_handle(intent_type)), None)
            if command is None:
                print(f"Unknown intent type: {intent_type}\n")
                send_error(f"Unknown intent type: {intent_type}")
                all_succeeded = False
                continue

            success = await command.execute(cmd_intent)
            if not success:
                all_succeeded = False
            elif not command.produces_results():
                # Empty result signals "done, close client"
                send_results("", [])

        return all_succeeded

    def _normalize_to_commands_list(self, intent: Any) -> List[Dict[str, Any]]:
        """
        Normalize various intent formats to a list of command intents.

        Args:
            intent: A dict with 'commands' array, a list of intents, or a single intent dict

        Returns:
            List of intent dictionaries
        """
        if isinstance(intent, list):
            return [item for item in intent if isinstance(item, dict)]
        if isinstance(intent, dict):
            if "commands" in intent:
                commands = intent.get("commands", [])
                if isinstance(commands, list):
                    return [item for item in commands if isinstance(item, dict)]
                return [commands] if isinstance(commands, dict) else []
            if "type" in intent:
                return [intent]
        return []
