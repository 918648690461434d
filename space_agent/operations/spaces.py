"""Space operations executed in Hammerspoon."""

import asyncio
from typing import List, Optional, Tuple

from ..bridge import HammerspoonBridge, get_bridge
from ..config import SETTLE_DELAY
from ..exceptions import ResponseParseError
from ..models import Space
from ..utils import lua_integer
from .parsing import parse_json, parse_records


async def list_spaces(bridge: Optional[HammerspoonBridge] = None) -> List[Space]:
    """
    List every space of every screen, in Mission Control order per screen.

    The active space of each screen is marked current.

    Returns:
        List of Space objects

    Raises:
        ResponseParseError: If the host reply is malformed
    """
    code = '''
    local spaces = {}
    local spaceNames = hs.spaces.missionControlSpaceNames() or {}
    local activeSpaces = hs.spaces.activeSpaces() or {}

    local screenNames = {}
    for _, screen in ipairs(hs.screen.allScreens()) do
        screenNames[screen:getUUID()] = screen:name()
    end

    for screenUUID, screenSpaces in pairs(hs.spaces.allSpaces() or {}) do
        local names = spaceNames[screenUUID] or {}
        for _, spaceId in ipairs(screenSpaces) do
            table.insert(spaces, {
                id = tostring(spaceId),
                name = names[spaceId] or "",
                screenId = screenUUID,
                screenName = screenNames[screenUUID] or "Unknown Screen",
                isCurrent = spaceId == activeSpaces[screenUUID]
            })
        end
    end

    return hs.json.encode(spaces)
    '''
    response = await (bridge or get_bridge()).execute(code)
    return [Space.from_record(record) for record in parse_records(response)]


async def goto_space(space_id: str, bridge: Optional[HammerspoonBridge] = None) -> None:
    """Switch the screen owning a space to that space."""
    code = f'''
    local ok, err = hs.spaces.gotoSpace({lua_integer(space_id)})
    if not ok then
        error("Failed to go to space: " .. tostring(err), 0)
    end
    return "ok"
    '''
    await (bridge or get_bridge()).execute(code)


async def create_space(bridge: Optional[HammerspoonBridge] = None) -> str:
    """
    Add a space to the main screen and switch to it.

    The host does not return the id of the space it created, so the id is
    taken from the last entry of the screen's space list after the add. This
    holds only while macOS appends new spaces at the end of a screen.

    Returns:
        Id of the new space
    """
    bridge = bridge or get_bridge()
    code = '''
    local screen = hs.screen.mainScreen()
    local ok, err = hs.spaces.addSpaceToScreen(screen, false)
    if not ok then
        error("Failed to add space: " .. tostring(err), 0)
    end

    local screenSpaces = hs.spaces.spacesForScreen(screen)
    if not screenSpaces or #screenSpaces == 0 then
        error("No spaces found on the main screen", 0)
    end

    return tostring(screenSpaces[#screenSpaces])
    '''
    new_space_id = (await bridge.execute(code)).strip()
    if not new_space_id:
        raise ResponseParseError("Host did not report the id of the new space")

    await goto_space(new_space_id, bridge=bridge)
    return new_space_id


async def remove_space(space_id: str, bridge: Optional[HammerspoonBridge] = None) -> None:
    """Remove a space by id."""
    code = f'''
    local ok, err = hs.spaces.removeSpace({lua_integer(space_id)})
    if not ok then
        error("Failed to remove space: " .. tostring(err), 0)
    end
    return "ok"
    '''
    await (bridge or get_bridge()).execute(code)


async def remove_current_space(
    bridge: Optional[HammerspoonBridge] = None,
    settle_delay: float = SETTLE_DELAY
) -> Tuple[str, str]:
    """
    Remove the active space of the main screen.

    Removing the space the user is looking at directly is not allowed by
    macOS, so the screen first moves to the preceding space, waits for the
    switch to settle and then removes the original space.

    Returns:
        Tuple of (removed_space_id, previous_space_id)

    Raises:
        HostExecutionError: If there is no preceding space on the screen
    """
    bridge = bridge or get_bridge()
    code = '''
    local screen = hs.screen.mainScreen()
    local currentSpaceId = hs.spaces.activeSpaceOnScreen(screen)
    local screenSpaces = hs.spaces.spacesForScreen(screen) or {}

    local previousSpaceId = nil
    for i, spaceId in ipairs(screenSpaces) do
        if spaceId == currentSpaceId and i > 1 then
            previousSpaceId = screenSpaces[i - 1]
            break
        end
    end

    if not previousSpaceId then
        error("No previous space found, cannot remove current space.", 0)
    end

    local ok, err = hs.spaces.gotoSpace(previousSpaceId)
    if not ok then
        error("Failed to go to space: " .. tostring(err), 0)
    end

    return hs.json.encode({ removed = tostring(currentSpaceId), previous = tostring(previousSpaceId) })
    '''
    data = parse_json(await bridge.execute(code))
    if not isinstance(data, dict) or not data.get("removed") or not data.get("previous"):
        raise ResponseParseError(f"Unexpected reply while leaving the current space: {data!r}")

    removed_id, previous_id = str(data["removed"]), str(data["previous"])

    await asyncio.sleep(settle_delay)
    await remove_space(removed_id, bridge=bridge)
    return removed_id, previous_id
