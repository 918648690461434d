"""Window operations executed in Hammerspoon."""

from typing import List, Optional

from ..bridge import HammerspoonBridge, get_bridge
from ..config import INLINE_SNAPSHOTS, LAUNCHER_APP, SNAPSHOT_MAX_WIDTH
from ..models import Window
from ..utils import lua_integer
from .parsing import parse_records

# Lua helpers prepended to window payloads.
# snapshotOf returns nil for minimized windows and windows without a surface.
_WINDOW_HELPERS = '''
    local function snapshotOf(window)
        if window:isMinimized() then
            return nil
        end
        local image = window:snapshot()
        if not image then
            return nil
        end
        local size = image:size()
        if size and size.w > {max_width} then
            image = image:setSize({{ w = {max_width}, h = math.floor(size.h * {max_width} / size.w) }})
        end
        return image:encodeAsURLString(false, "PNG")
    end

    local function recordOf(window, includeSnapshot)
        local app = window:application()
        local record = {{
            id = tostring(window:id()),
            title = window:title() or "Untitled",
            application = app and app:name() or "Unknown",
            isMinimized = window:isMinimized(),
            isFullscreen = window:isFullscreen()
        }}
        if includeSnapshot then
            record.snapshot = snapshotOf(window)
        end
        return record
    end
'''


def _helpers() -> str:
    return _WINDOW_HELPERS.format(max_width=SNAPSHOT_MAX_WIDTH)


def _lua_bool(value: bool) -> str:
    return "true" if value else "false"


async def list_windows_for_space(
    space_id: str,
    include_snapshots: bool = INLINE_SNAPSHOTS,
    bridge: Optional[HammerspoonBridge] = None
) -> List[Window]:
    """
    List the windows that live on one space.

    Args:
        space_id: Host id of the space
        include_snapshots: Capture a snapshot of every non-minimized window

    Returns:
        List of Window objects
    """
    code = _helpers() + f'''
    local windowIds, err = hs.spaces.windowsForSpace({lua_integer(space_id)})
    if not windowIds then
        error("Failed to list windows: " .. tostring(err), 0)
    end

    local windows = {{}}
    for _, windowId in ipairs(windowIds) do
        local window = hs.window.get(windowId)
        if window then
            table.insert(windows, recordOf(window, {_lua_bool(include_snapshots)}))
        end
    end

    return hs.json.encode(windows)
    '''
    response = await (bridge or get_bridge()).execute(code)
    return [Window.from_record(record) for record in parse_records(response)]


async def list_all_windows(
    include_snapshots: bool = INLINE_SNAPSHOTS,
    exclude_application: Optional[str] = LAUNCHER_APP,
    bridge: Optional[HammerspoonBridge] = None
) -> List[Window]:
    """
    List the windows of every space.

    Windows owned by ``exclude_application`` (the launcher itself) are left out.

    Returns:
        List of Window objects
    """
    code = _helpers() + f'''
    local windows = {{}}
    for _, window in ipairs(hs.window.allWindows()) do
        table.insert(windows, recordOf(window, {_lua_bool(include_snapshots)}))
    end

    return hs.json.encode(windows)
    '''
    response = await (bridge or get_bridge()).execute(code)
    windows = [Window.from_record(record) for record in parse_records(response)]
    if exclude_application:
        windows = [window for window in windows if window.application != exclude_application]
    return windows


async def focus_window(window_id: str, bridge: Optional[HammerspoonBridge] = None) -> None:
    """Focus a window, restoring it first if it is minimized."""
    window_literal = lua_integer(window_id)
    code = f'''
    local window = hs.window.get({window_literal})
    if not window then
        error("Window not found: {window_literal}", 0)
    end
    if window:isMinimized() then
        window:unminimize()
    end
    window:focus()
    return "ok"
    '''
    await (bridge or get_bridge()).execute(code)


async def fetch_window_snapshot(window_id: str, bridge: Optional[HammerspoonBridge] = None) -> Optional[str]:
    """
    Capture a window as a PNG data URI.

    Returns:
        Data URI, or None if the window is gone, minimized or has no surface
    """
    code = _helpers() + f'''
    local window = hs.window.get({lua_integer(window_id)})
    if not window then
        return ""
    end
    return snapshotOf(window) or ""
    '''
    response = await (bridge or get_bridge()).execute(code)
    return response or None
