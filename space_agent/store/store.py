"""Synchronization store for spaces, windows, application icons and snapshots.

The store owns every piece of cached host state. All mutation happens on the
event loop thread through the methods below; each method updates the keys it
touches without awaiting in between, so readers never observe a half-applied
change.

Per-key fetches (windows of a space, snapshot of a window) follow
``absent -> loading -> populated | absent``: a fetch only starts from
``absent``, a failure puts the key back to ``absent`` and is reported to the
user, and nothing is retried automatically.
"""

import asyncio
import dataclasses
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Set

from .. import operations as default_operations
from ..config import FETCH_SNAPSHOT_ON_SELECT, LOADING_CLEAR_DELAY, WINDOW_FETCH_DELAY
from ..exceptions import SpaceAgentError
from ..icons import find_application_paths
from ..models import Space, Window
from ..notifications import show_failure

ABSENT = "absent"
LOADING = "loading"
POPULATED = "populated"

# Module-level singleton instance
_instance: Optional['SpaceStore'] = None


def get_space_store() -> Optional['SpaceStore']:
    """
    Get the global space store instance.

    Returns:
        SpaceStore instance if initialized, None otherwise
    """
    return _instance


def initialize_space_store(**kwargs: Any) -> 'SpaceStore':
    """
    Initialize the global space store instance.

    Idempotent: later calls return the existing instance and ignore their
    arguments.

    Args:
        **kwargs: Passed to SpaceStore on first initialization

    Returns:
        SpaceStore instance
    """
    global _instance

    if _instance is None:
        _instance = SpaceStore(**kwargs)
    return _instance


def reset_space_store() -> None:
    """Reset the global space store instance (for testing)."""
    global _instance
    _instance = None


class SpaceStore:
    """Cached view of the host's spaces and windows."""

    def __init__(
        self,
        operations: Any = None,
        icon_resolver: Optional[Callable[[List[str]], Dict[str, str]]] = None,
        notifier: Optional[Callable[[str, str], None]] = None,
        fetch_snapshot_on_select: bool = FETCH_SNAPSHOT_ON_SELECT,
        loading_clear_delay: float = LOADING_CLEAR_DELAY,
        window_fetch_delay: float = WINDOW_FETCH_DELAY
    ):
        """
        Initialize the store.

        Args:
            operations: Remote operations provider (defaults to space_agent.operations)
            icon_resolver: Maps application names to icon paths
            notifier: Called with (title, message) when an action fails
            fetch_snapshot_on_select: Fetch a window's snapshot when it gets selected
            loading_clear_delay: Trailing delay before the refreshing indicator clears
            window_fetch_delay: Delay before a per-space window fetch hits the host
        """
        self.operations = operations or default_operations
        self.icon_resolver = icon_resolver or find_application_paths
        self.notifier = notifier or show_failure
        self.fetch_snapshot_on_select = fetch_snapshot_on_select
        self.loading_clear_delay = loading_clear_delay
        self.window_fetch_delay = window_fetch_delay

        self.spaces: List[Space] = []
        # Global refreshing indicator, covers top-level fetches only
        self.is_loading = False

        # Keyed by space id
        self.space_windows: Dict[str, List[Window]] = {}
        self.loading_windows: Dict[str, bool] = {}

        # Independent of space_windows; the two views may disagree
        self.all_windows: List[Window] = []
        self.is_loading_all_windows = False

        # Keyed by application name, never invalidated
        self.app_icons: Dict[str, str] = {}

        # Keyed by window id; None means the window had nothing to capture
        self.window_snapshots: Dict[str, Optional[str]] = {}
        self.loading_snapshots: Dict[str, bool] = {}

        self.selected_space_id: Optional[str] = None
        self.selected_window_id: Optional[str] = None

        self._pending_refreshes = 0
        self._clear_loading_handle: Optional[asyncio.TimerHandle] = None
        self._tasks: Set[asyncio.Task] = set()
        self._window_fetches: Dict[str, asyncio.Future] = {}
        self._listeners: List[Callable[[], None]] = []

    # Change notification
    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """
        Register a listener called after every state change.

        Returns:
            Function that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _report(self, title: str, error: Exception) -> None:
        self.notifier(title, str(error))

    # Key states
    def space_windows_state(self, space_id: str) -> str:
        """Return the cache state of a space's window list."""
        if self.loading_windows.get(space_id):
            return LOADING
        if space_id in self.space_windows:
            return POPULATED
        return ABSENT

    def snapshot_state(self, window_id: str) -> str:
        """Return the cache state of a window's snapshot."""
        if self.loading_snapshots.get(window_id):
            return LOADING
        if window_id in self.window_snapshots:
            return POPULATED
        return ABSENT

    # Refreshing indicator
    def _begin_refresh(self) -> None:
        self._pending_refreshes += 1
        if self._clear_loading_handle is not None:
            self._clear_loading_handle.cancel()
            self._clear_loading_handle = None
        self.is_loading = True

    def _end_refresh(self) -> None:
        self._pending_refreshes -= 1
        if self._pending_refreshes > 0:
            return
        if self.loading_clear_delay <= 0:
            self._clear_loading()
            return
        loop = asyncio.get_running_loop()
        self._clear_loading_handle = loop.call_later(self.loading_clear_delay, self._clear_loading)

    def _clear_loading(self) -> None:
        self._clear_loading_handle = None
        if self._pending_refreshes == 0 and self.is_loading:
            self.is_loading = False
            self._changed()

    # Background tasks
    def _spawn(self, coro: Awaitable[bool]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_for_background_tasks(self) -> None:
        """Wait until every fetch started by a selection has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # Top-level fetches
    async def fetch_spaces(self) -> bool:
        """Refresh the space list."""
        self._begin_refresh()
        self._changed()
        try:
            spaces = await self.operations.list_spaces()
        except SpaceAgentError as e:
            self._report("Failed to fetch spaces", e)
            return False
        finally:
            self._end_refresh()

        self.spaces = spaces
        self._changed()
        return True

    async def fetch_all_windows(self) -> bool:
        """Refresh the global window list (skipped while a refresh is in flight)."""
        if self.is_loading_all_windows:
            return True

        self.is_loading_all_windows = True
        self._begin_refresh()
        self._changed()
        try:
            windows = await self.operations.list_all_windows()
        except SpaceAgentError as e:
            self._report("Failed to fetch windows", e)
            return False
        finally:
            self.is_loading_all_windows = False
            self._end_refresh()

        self.all_windows = windows
        self._changed()
        await self.fetch_application_icons(window.application for window in windows)
        return True

    # Per-key fetches
    async def fetch_space_windows(self, space_id: str) -> bool:
        """
        Fetch the windows of one space unless they are cached.

        A request for a space whose fetch is already in flight waits for that
        fetch instead of starting another one.

        Returns:
            False if the fetch failed or its space was removed meanwhile
        """
        state = self.space_windows_state(space_id)
        if state == LOADING and space_id in self._window_fetches:
            return await asyncio.shield(self._window_fetches[space_id])
        if state != ABSENT:
            return True

        settled = asyncio.get_running_loop().create_future()
        self._window_fetches[space_id] = settled
        success = False
        try:
            success = await self._load_space_windows(space_id)
            return success
        finally:
            if self._window_fetches.get(space_id) is settled:
                del self._window_fetches[space_id]
            settled.set_result(success)

    async def _load_space_windows(self, space_id: str) -> bool:
        self.loading_windows[space_id] = True
        self._changed()
        windows: Optional[List[Window]] = None
        try:
            if self.window_fetch_delay > 0:
                await asyncio.sleep(self.window_fetch_delay)
            windows = await self.operations.list_windows_for_space(space_id)
        except SpaceAgentError as e:
            self._report("Failed to fetch windows", e)
            return False
        finally:
            # A missing flag means the space was removed while the fetch was in flight
            still_wanted = self.loading_windows.pop(space_id, None) is not None
            if still_wanted and windows is not None:
                self.space_windows[space_id] = windows
            self._changed()

        if not still_wanted:
            return False
        await self.fetch_application_icons(window.application for window in windows)
        return True

    async def fetch_window_snapshot(self, window_id: str) -> bool:
        """Fetch a window's snapshot unless it is cached or loading."""
        if self.snapshot_state(window_id) != ABSENT:
            return True

        self.loading_snapshots[window_id] = True
        self._changed()
        captured = False
        try:
            snapshot = await self.operations.fetch_window_snapshot(window_id)
            captured = True
        except SpaceAgentError as e:
            self._report("Failed to capture window", e)
            return False
        finally:
            self.loading_snapshots.pop(window_id, None)
            if captured:
                self.window_snapshots[window_id] = snapshot
            self._changed()
        return True

    async def fetch_application_icons(self, app_names: Iterable[str]) -> bool:
        """Resolve icon paths for application names not cached yet."""
        missing = sorted({name for name in app_names if name and name not in self.app_icons})
        if not missing:
            return True

        try:
            found = await asyncio.to_thread(self.icon_resolver, missing)
        except OSError as e:
            print(f"Warning: Failed to look up application icons: {e}")
            return False

        if found:
            self.app_icons.update(found)
            self._changed()
        return True

    # Mutations
    def _mark_current(self, space_id: str) -> None:
        target = next((space for space in self.spaces if space.id == space_id), None)
        if target is None:
            return
        self.spaces = [
            dataclasses.replace(space, is_current=space.id == space_id)
            if space.screen_id == target.screen_id else space
            for space in self.spaces
        ]

    def _purge_space(self, space_id: str) -> None:
        self.spaces = [space for space in self.spaces if space.id != space_id]
        self.space_windows.pop(space_id, None)
        self.loading_windows.pop(space_id, None)
        if self.selected_space_id == space_id:
            self.selected_space_id = None

    async def create_space(self) -> bool:
        """Create a space, switch to it and refresh the space list."""
        try:
            new_space_id = await self.operations.create_space()
        except SpaceAgentError as e:
            self._report("Failed to create space", e)
            return False

        if not await self.fetch_spaces():
            return False

        self._mark_current(new_space_id)
        self._changed()
        return True

    async def remove_space(self, space_id: str) -> bool:
        """Remove a space and drop everything cached for it."""
        try:
            await self.operations.remove_space(space_id)
        except SpaceAgentError as e:
            self._report("Failed to remove space", e)
            return False

        self._purge_space(space_id)
        self._changed()
        return True

    async def remove_current_space(self) -> bool:
        """Move to the preceding space and remove the one that was current."""
        try:
            removed_id, previous_id = await self.operations.remove_current_space()
        except SpaceAgentError as e:
            self._report("Failed to remove current space", e)
            return False

        self._purge_space(removed_id)
        self._mark_current(previous_id)
        self._changed()
        return True

    async def go_to_space(self, space_id: str) -> bool:
        """Switch to a space and mark it current on its screen."""
        try:
            await self.operations.goto_space(space_id)
        except SpaceAgentError as e:
            self._report("Failed to go to space", e)
            return False

        self._mark_current(space_id)
        self._changed()
        return True

    async def focus_window(self, window_id: str) -> bool:
        """Focus a window."""
        try:
            await self.operations.focus_window(window_id)
        except SpaceAgentError as e:
            self._report("Failed to focus window", e)
            return False
        return True

    # Selection
    def select_space(self, space_id: Optional[str]) -> Optional[asyncio.Task]:
        """
        Select a space and start fetching its windows if they are absent.

        Returns:
            The fetch task, or None if nothing had to be fetched
        """
        self.selected_space_id = space_id
        self._changed()
        if space_id and self.space_windows_state(space_id) == ABSENT:
            return self._spawn(self.fetch_space_windows(space_id))
        return None

    def select_window(self, window_id: Optional[str]) -> Optional[asyncio.Task]:
        """
        Select a window; fetch its snapshot if enabled and absent.

        Returns:
            The fetch task, or None if nothing had to be fetched
        """
        self.selected_window_id = window_id
        self._changed()
        if window_id and self.fetch_snapshot_on_select and self.snapshot_state(window_id) == ABSENT:
            return self._spawn(self.fetch_window_snapshot(window_id))
        return None

    def snapshot(self) -> Dict[str, Any]:
        """Return the whole state as JSON-ready data."""
        return {
            "spaces": [space.to_record() for space in self.spaces],
            "isLoading": self.is_loading,
            "spaceWindows": {
                space_id: [window.to_record() for window in windows]
                for space_id, windows in self.space_windows.items()
            },
            "loadingWindows": dict(self.loading_windows),
            "allWindows": [window.to_record() for window in self.all_windows],
            "isLoadingAllWindows": self.is_loading_all_windows,
            "appIcons": dict(self.app_icons),
            "windowSnapshots": dict(self.window_snapshots),
            "loadingSnapshots": dict(self.loading_snapshots),
            "selectedSpaceId": self.selected_space_id,
            "selectedWindowId": self.selected_window_id,
        }
