"""Application icon lookup from the standard macOS application folders."""

import os
from typing import Dict, Iterable, List, Optional

DEFAULT_APPLICATION_DIRS = [
    "/Applications",
    "/Applications/Utilities",
    "/System/Applications",
    "/System/Applications/Utilities",
    "/System/Library/CoreServices",  # Finder.app and other system apps
    os.path.expanduser("~/Applications"),
]


def find_application_paths(
    app_names: Iterable[str],
    search_dirs: Optional[List[str]] = None
) -> Dict[str, str]:
    """
    Resolve application display names to their .app bundle paths.

    The bundle path is what the launcher renders as a file icon.

    Args:
        app_names: Application names as reported by the window list
        search_dirs: Directories to scan (defaults to the standard locations)

    Returns:
        Mapping of application name to bundle path; names that were not
        found are left out
    """
    wanted = set(app_names)
    found: Dict[str, str] = {}
    if not wanted:
        return found

    for base in search_dirs or DEFAULT_APPLICATION_DIRS:
        if not os.path.isdir(base):
            continue
        try:
            entries = sorted(os.listdir(base))
        except OSError as e:
            print(f"Warning: Cannot scan {base}: {e}")
            continue
        for item in entries:
            if not item.endswith(".app"):
                continue
            # Remove .app extension
            app_name = item[:-4]
            if app_name in wanted and app_name not in found:
                found[app_name] = os.path.join(base, item)
        if len(found) == len(wanted):
            break

    return found
