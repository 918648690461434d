"""Shared fixtures for space agent tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from space_agent.command_queue import drain_commands
from space_agent.models import Space, Window
from space_agent.store import SpaceStore, reset_space_store


class FakeOperations:
    """Stand-in for space_agent.operations with one AsyncMock per operation."""

    def __init__(self):
        self.list_spaces = AsyncMock(return_value=[])
        self.create_space = AsyncMock(return_value="")
        self.remove_space = AsyncMock(return_value=None)
        self.remove_current_space = AsyncMock(return_value=("", ""))
        self.goto_space = AsyncMock(return_value=None)
        self.list_windows_for_space = AsyncMock(return_value=[])
        self.list_all_windows = AsyncMock(return_value=[])
        self.focus_window = AsyncMock(return_value=None)
        self.fetch_window_snapshot = AsyncMock(return_value=None)
        self.run_lua = AsyncMock(return_value="")
        self.read_clipboard = AsyncMock(return_value=None)


class FakeBridge:
    """Bridge double that replays queued replies and records every payload."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def execute(self, code: str) -> str:
        self.calls.append(code)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_space(space_id, screen_id="screen-1", is_current=False, name=None):
    return Space(
        id=space_id,
        name=name or f"Desktop {space_id}",
        screen_id=screen_id,
        screen_name="Built-in Retina Display",
        is_current=is_current,
    )


def make_window(window_id, application="Safari", title=None, is_minimized=False):
    return Window(
        id=window_id,
        title=title or f"Window {window_id}",
        application=application,
        is_minimized=is_minimized,
    )


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset the store singleton and the shared intent queue around each test."""
    reset_space_store()
    drain_commands()
    yield
    reset_space_store()
    drain_commands()


@pytest.fixture
def operations():
    return FakeOperations()


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def icon_resolver():
    return MagicMock(return_value={})


@pytest.fixture
def store(operations, notifier, icon_resolver):
    return SpaceStore(
        operations=operations,
        icon_resolver=icon_resolver,
        notifier=notifier,
        loading_clear_delay=0,
        window_fetch_delay=0,
    )
