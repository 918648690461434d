"""Data models for spaces and windows."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .exceptions import ResponseParseError


def _require(record: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in record:
        raise ResponseParseError(f"{kind} record is missing field '{key}': {record!r}")
    return record[key]


@dataclass
class Space:
    """A virtual desktop on one screen."""
    id: str
    name: str
    screen_id: str
    screen_name: str
    is_current: bool = False

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Space":
        """Build a Space from a host record (camelCase field names)."""
        return cls(
            id=str(_require(record, "id", "Space")),
            name=str(record.get("name") or ""),
            screen_id=str(_require(record, "screenId", "Space")),
            screen_name=str(record.get("screenName") or "Unknown Screen"),
            is_current=bool(record.get("isCurrent", False)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "screenId": self.screen_id,
            "screenName": self.screen_name,
            "isCurrent": self.is_current,
        }


@dataclass
class Window:
    """An application window, as seen by one query."""
    id: str
    title: str
    application: str
    is_minimized: bool = False
    is_fullscreen: bool = False
    snapshot: Optional[str] = None  # PNG data URI

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Window":
        """Build a Window from a host record (camelCase field names)."""
        return cls(
            id=str(_require(record, "id", "Window")),
            title=str(record.get("title") or "Untitled"),
            application=str(record.get("application") or "Unknown"),
            is_minimized=bool(record.get("isMinimized", False)),
            is_fullscreen=bool(record.get("isFullscreen", False)),
            snapshot=record.get("snapshot") or None,
        )

    def to_record(self) -> Dict[str, Any]:
        record = {
            "id": self.id,
            "title": self.title,
            "application": self.application,
            "isMinimized": self.is_minimized,
            "isFullscreen": self.is_fullscreen,
        }
        if self.snapshot:
            record["snapshot"] = self.snapshot
        return record
