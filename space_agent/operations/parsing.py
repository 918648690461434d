"""Parsing of structured-text (JSON) replies produced by hs.json.encode."""

import json
from typing import Any, Dict, List

from ..exceptions import ResponseParseError


def parse_json(response: str) -> Any:
    """
    Decode a JSON reply from the host.

    Raises:
        ResponseParseError: If the reply is not valid JSON or nests too deeply
    """
    try:
        return json.loads(response)
    except (ValueError, TypeError, RecursionError) as e:
        preview = response[:80] if isinstance(response, str) else repr(response)
        raise ResponseParseError(f"Malformed host response ({e}): {preview!r}") from e


def parse_records(response: str) -> List[Dict[str, Any]]:
    """
    Decode a list of key-value records.

    hs.json.encode renders an empty Lua table as ``{}``, which is read as an
    empty list here.

    Raises:
        ResponseParseError: If the reply is not a list of objects
    """
    data = parse_json(response)
    if data == {}:
        return []
    if not isinstance(data, list):
        raise ResponseParseError(f"Expected a list of records, got {type(data).__name__}")
    for item in data:
        if not isinstance(item, dict):
            raise ResponseParseError(f"Expected record objects, got {type(item).__name__}")
    return data
