"""Custom exception classes for the space agent."""


class SpaceAgentError(Exception):
    """Base exception for space agent errors."""
    pass


class AppleScriptError(SpaceAgentError):
    """Exception raised when osascript itself fails (host not running, permission denied)."""
    pass


class HostExecutionError(SpaceAgentError):
    """Exception raised when Hammerspoon reports a failure through the error sentinel."""

    def __init__(self, message: str = ""):
        super().__init__(message or "Hammerspoon reported an unspecified error")
        self.message = message


class ResponseParseError(SpaceAgentError):
    """Exception raised when a host response does not have the expected shape."""
    pass


class InvalidIdentifierError(SpaceAgentError):
    """Exception raised when a space or window id is not a host integer id."""
    pass
