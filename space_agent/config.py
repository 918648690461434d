"""Configuration for the space agent."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Configuration class for the space agent."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Automation host that runs the Lua payloads
        self.host_app = os.getenv("SPACE_AGENT_HOST_APP", "Hammerspoon")

        # Prefix the outer AppleScript puts in front of a caught host error.
        # Any reply starting with this text is an error, never data.
        self.error_sentinel = os.getenv("SPACE_AGENT_ERROR_SENTINEL", "HAMMERSPOON_ERROR:")

        # Launcher application whose own windows are hidden from the global window list
        self.launcher_app = os.getenv("SPACE_AGENT_LAUNCHER_APP", "Raycast")

        # Delay between navigating away from the current space and removing it (seconds)
        self.settle_delay = float(os.getenv("SPACE_AGENT_SETTLE_DELAY", "0.1"))

        # Trailing delay before the global refreshing indicator clears (seconds)
        self.loading_clear_delay = float(os.getenv("SPACE_AGENT_LOADING_CLEAR_DELAY", "0.2"))

        # Delay before a per-space window fetch hits the host (seconds)
        self.window_fetch_delay = float(os.getenv("SPACE_AGENT_WINDOW_FETCH_DELAY", "0.1"))

        # Snapshot configuration
        # Selecting a window only fetches its snapshot when this is enabled
        self.fetch_snapshot_on_select = _env_flag("SPACE_AGENT_FETCH_SNAPSHOT_ON_SELECT", "false")
        # Capture snapshots inline while listing windows (one capture per non-minimized window)
        self.inline_snapshots = _env_flag("SPACE_AGENT_INLINE_SNAPSHOTS", "false")
        self.snapshot_max_width = int(os.getenv("SPACE_AGENT_SNAPSHOT_MAX_WIDTH", "400"))

        # Local API (for the launcher UI)
        self.api_port = int(os.getenv("SPACE_AGENT_API_PORT", "8771"))
        self.queue_poll_interval = float(os.getenv("SPACE_AGENT_QUEUE_POLL_INTERVAL", "0.1"))

        # Validate configuration
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not self.host_app.strip():
            raise ValueError("Host application name must not be empty")

        if not self.error_sentinel:
            raise ValueError("Error sentinel must not be empty")

        for name in ("settle_delay", "loading_clear_delay", "window_fetch_delay", "queue_poll_interval"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

        if self.snapshot_max_width <= 0:
            raise ValueError(f"Snapshot max width must be positive, got {self.snapshot_max_width}")

        if not 0 < self.api_port < 65536:
            raise ValueError(f"Invalid API port {self.api_port}")


# Create a global config instance
_config = Config()

# Expose configuration values as module-level variables
HOST_APP = _config.host_app
ERROR_SENTINEL = _config.error_sentinel
LAUNCHER_APP = _config.launcher_app
SETTLE_DELAY = _config.settle_delay
LOADING_CLEAR_DELAY = _config.loading_clear_delay
WINDOW_FETCH_DELAY = _config.window_fetch_delay
FETCH_SNAPSHOT_ON_SELECT = _config.fetch_snapshot_on_select
INLINE_SNAPSHOTS = _config.inline_snapshots
SNAPSHOT_MAX_WIDTH = _config.snapshot_max_width
API_PORT = _config.api_port
QUEUE_POLL_INTERVAL = _config.queue_poll_interval

__all__ = [
    "Config",
    "HOST_APP",
    "ERROR_SENTINEL",
    "LAUNCHER_APP",
    "SETTLE_DELAY",
    "LOADING_CLEAR_DELAY",
    "WINDOW_FETCH_DELAY",
    "FETCH_SNAPSHOT_ON_SELECT",
    "INLINE_SNAPSHOTS",
    "SNAPSHOT_MAX_WIDTH",
    "API_PORT",
    "QUEUE_POLL_INTERVAL",
]
