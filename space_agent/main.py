"""Main entry point for the space agent."""

import asyncio
import sys
from typing import Any, Dict, List, Optional

from .api_server import publish_state, start_api_server
from .command_queue import drain_commands
from .commands import CommandExecutor
from .config import API_PORT, HOST_APP, LAUNCHER_APP, QUEUE_POLL_INTERVAL
from .store import SpaceStore, initialize_space_store

# Intent types whose optional positional argument is a space id / window id
_SPACE_INTENTS = {"remove_space", "goto_space", "select_space", "list_windows"}
_WINDOW_INTENTS = {"focus_window", "select_window"}


def print_help():
    """Print welcome message and help text."""
    print("=" * 60)
    print("Space Agent")
    print("=" * 60)
    print(f"\nDriving macOS spaces through {HOST_APP}.")
    print(f"Local API: http://127.0.0.1:{API_PORT} (/state, /submit, /get-results)")
    print("\nIntents (POST /submit or command line):")
    print("  - list_spaces")
    print("  - create_space")
    print("  - remove_space <space_id> / remove_current_space")
    print("  - goto_space <space_id> / select_space <space_id>")
    print(f"  - list_windows [space_id]  (all windows except {LAUNCHER_APP} when omitted)")
    print("  - focus_window <window_id> / select_window <window_id>")
    print("  - run_lua [code]  (clipboard when omitted)")
    print("=" * 60)
    print()


def intent_from_args(args: List[str]) -> Optional[Dict[str, Any]]:
    """
    Build an intent from command line arguments.

    Args:
        args: ["<intent_type>", optional argument...]

    Returns:
        Intent dictionary, or None if no intent type was given
    """
    if not args:
        return None

    intent_type = args[0].replace("-", "_")
    intent: Dict[str, Any] = {"type": intent_type}
    rest = args[1:]
    if not rest:
        return intent

    if intent_type in _SPACE_INTENTS:
        intent["space_id"] = rest[0]
    elif intent_type in _WINDOW_INTENTS:
        intent["window_id"] = rest[0]
    elif intent_type == "run_lua":
        intent["code"] = " ".join(rest)
    return intent


async def run_once(intent: Dict[str, Any], store: Optional[SpaceStore] = None) -> bool:
    """Execute a single intent and wait for any fetch it started."""
    store = store or initialize_space_store()
    executor = CommandExecutor(store)
    success = await executor.execute(intent)
    await store.wait_for_background_tasks()
    return success


async def serve(store: Optional[SpaceStore] = None) -> None:
    """Serve intents from the local API until interrupted."""
    store = store or initialize_space_store()
    executor = CommandExecutor(store)

    store.subscribe(lambda: publish_state(store.snapshot()))
    publish_state(store.snapshot())

    start_api_server(port=API_PORT)
    print(f"Local API server started on http://127.0.0.1:{API_PORT}\n")

    await store.fetch_spaces()

    while True:
        try:
            for intent in drain_commands():
                await executor.execute(intent)
        except Exception as e:
            print(f"Warning: Failed to process queued commands: {e}")
        await asyncio.sleep(QUEUE_POLL_INTERVAL)


def main(argv: Optional[List[str]] = None):
    """Run one intent from the command line, or serve the local API."""
    args = sys.argv[1:] if argv is None else argv

    intent = intent_from_args(args)
    if intent is not None:
        success = asyncio.run(run_once(intent))
        sys.exit(0 if success else 1)

    print_help()
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")


if __name__ == "__main__":
    main()
