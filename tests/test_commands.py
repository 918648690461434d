"""Tests for intent routing and the command classes."""

import asyncio

import pytest

from space_agent import api_server
from space_agent.commands import CommandExecutor
from space_agent.exceptions import HostExecutionError
from tests.conftest import make_space, make_window


@pytest.fixture
def executor(store):
    return CommandExecutor(store)


@pytest.fixture(autouse=True)
def clear_results():
    api_server._results_data = None
    api_server._results_consumed = False
    yield
    api_server._results_data = None


class TestRouting:
    @pytest.mark.asyncio
    async def test_unknown_intent_fails(self, executor):
        assert await executor.execute({"type": "make_coffee"}) is False

    @pytest.mark.asyncio
    async def test_empty_intent_fails(self, executor):
        assert await executor.execute({}) is False
        assert await executor.execute("list_spaces") is False

    @pytest.mark.asyncio
    async def test_commands_array_runs_in_order(self, executor, operations):
        operations.list_spaces.return_value = [make_space("1", is_current=True), make_space("2")]
        intents = {"commands": [{"type": "list_spaces"}, {"type": "goto_space", "space_id": "2"}]}

        assert await executor.execute(intents) is True
        operations.list_spaces.assert_awaited_once()
        operations.goto_space.assert_awaited_once_with("2")

    @pytest.mark.asyncio
    async def test_action_success_signals_done(self, executor):
        assert await executor.execute({"type": "focus_window", "window_id": "10"}) is True
        assert api_server._results_data == {"title": "", "items": []}


class TestSpaceCommands:
    @pytest.mark.asyncio
    async def test_list_spaces_sends_results(self, executor, operations):
        operations.list_spaces.return_value = [make_space("1", is_current=True), make_space("2")]

        assert await executor.execute({"type": "list_spaces"}) is True
        results = api_server._results_data
        assert results["title"] == "Spaces"
        assert results["items"][0].startswith("★ Desktop 1")
        assert "(id 2)" in results["items"][1]

    @pytest.mark.asyncio
    async def test_missing_space_id(self, executor, operations):
        assert await executor.execute({"type": "goto_space"}) is False
        operations.goto_space.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove_space_refuses_current_space(self, executor, store, operations):
        store.spaces = [make_space("A"), make_space("B", is_current=True)]

        assert await executor.execute({"type": "remove_space", "space_id": "B"}) is False
        operations.remove_space.assert_not_awaited()
        assert [space.id for space in store.spaces] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_remove_current_space(self, executor, store, operations):
        store.spaces = [make_space("A"), make_space("B", is_current=True)]
        operations.remove_current_space.return_value = ("B", "A")

        assert await executor.execute({"type": "remove_current_space"}) is True
        assert [(space.id, space.is_current) for space in store.spaces] == [("A", True)]

    @pytest.mark.asyncio
    async def test_remove_other_space(self, executor, store, operations):
        store.spaces = [make_space("A", is_current=True), make_space("B")]

        assert await executor.execute({"type": "remove_space", "space_id": "B"}) is True
        operations.remove_space.assert_awaited_once_with("B")

    @pytest.mark.asyncio
    async def test_failed_action_keeps_error_result(self, executor, operations, notifier):
        operations.remove_current_space.side_effect = HostExecutionError("No previous space found")
        api_server.send_error("Failed to remove current space: No previous space found")

        assert await executor.execute({"type": "remove_current_space"}) is False
        assert "error" in api_server._results_data

    @pytest.mark.asyncio
    async def test_select_space_loads_windows(self, executor, store, operations):
        operations.list_windows_for_space.return_value = [make_window("10")]

        assert await executor.execute({"type": "select_space", "space_id": "3"}) is True
        await store.wait_for_background_tasks()
        assert store.selected_space_id == "3"
        assert [window.id for window in store.space_windows["3"]] == ["10"]


class TestWindowCommands:
    @pytest.mark.asyncio
    async def test_list_windows_for_space(self, executor, operations):
        operations.list_windows_for_space.return_value = [make_window("10", title="x" * 80)]

        assert await executor.execute({"type": "list_windows", "space_id": "3"}) is True
        results = api_server._results_data
        assert results["title"] == "Windows on space 3"
        assert results["items"][0].startswith("x" * 70 + "...")

    @pytest.mark.asyncio
    async def test_list_all_windows_with_query(self, executor, operations):
        operations.list_all_windows.return_value = [
            make_window("10", application="Mail", title="Inbox"),
            make_window("11", application="Safari", title="Docs"),
        ]

        assert await executor.execute({"type": "list_windows", "query": "safari"}) is True
        results = api_server._results_data
        assert results["title"] == "All windows"
        assert len(results["items"]) == 1
        assert "Docs" in results["items"][0]

    @pytest.mark.asyncio
    async def test_list_windows_waits_for_selection_fetch(self, executor, store, operations):
        gate = asyncio.Event()

        async def side_effect(*args, **kwargs):
            await gate.wait()
            return [make_window("10")]

        operations.list_windows_for_space.side_effect = side_effect
        store.select_space("3")
        await asyncio.sleep(0)

        listing = asyncio.ensure_future(executor.execute({"type": "list_windows", "space_id": "3"}))
        await asyncio.sleep(0)
        gate.set()

        assert await listing is True
        results = api_server._results_data
        assert results["title"] == "Windows on space 3"
        assert results["items"] == ["Window 10 - Safari (id 10)"]
        assert operations.list_windows_for_space.await_count == 1

    @pytest.mark.asyncio
    async def test_select_window(self, executor, store):
        assert await executor.execute({"type": "select_window", "window_id": "10"}) is True
        assert store.selected_window_id == "10"


class TestRunLuaCommand:
    @pytest.mark.asyncio
    async def test_runs_code_from_intent(self, executor, operations):
        operations.run_lua.return_value = "3"

        assert await executor.execute({"type": "run_lua", "code": "return 1 + 2"}) is True
        operations.run_lua.assert_awaited_once_with("return 1 + 2")
        operations.read_clipboard.assert_not_awaited()
        assert api_server._results_data["items"] == ["3"]

    @pytest.mark.asyncio
    async def test_falls_back_to_clipboard(self, executor, operations):
        operations.read_clipboard.return_value = "hs.alert.show('hi')"

        assert await executor.execute({"type": "run_lua"}) is True
        operations.run_lua.assert_awaited_once_with("hs.alert.show('hi')")

    @pytest.mark.asyncio
    async def test_empty_clipboard(self, executor, operations):
        operations.read_clipboard.return_value = None

        assert await executor.execute({"type": "run_lua"}) is False
        operations.run_lua.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_host_error_is_reported(self, executor, operations, notifier):
        operations.run_lua.side_effect = HostExecutionError("attempt to call a nil value")

        assert await executor.execute({"type": "run_lua", "code": "nope()"}) is False
        notifier.assert_called_once_with("Lua execution failed", "attempt to call a nil value")

    @pytest.mark.asyncio
    async def test_non_string_code_is_rejected(self, executor, operations):
        assert await executor.execute({"type": "run_lua", "code": 1}) is False
        operations.run_lua.assert_not_awaited()
        assert api_server._results_data == {"error": "Lua code must be a string"}


class TestErrorResults:
    @pytest.mark.asyncio
    async def test_missing_id_sends_error(self, executor):
        assert await executor.execute({"type": "focus_window"}) is False
        assert api_server._results_data == {"error": "No window id specified in intent"}

    @pytest.mark.asyncio
    async def test_unknown_intent_sends_error(self, executor):
        assert await executor.execute({"type": "make_coffee"}) is False
        assert api_server._results_data == {"error": "Unknown intent type: make_coffee"}

    @pytest.mark.asyncio
    async def test_refused_removal_sends_error(self, executor, store):
        store.spaces = [make_space("A", is_current=True)]

        assert await executor.execute({"type": "remove_space", "space_id": "A"}) is False
        assert "remove_current_space" in api_server._results_data["error"]
