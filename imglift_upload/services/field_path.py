"""Field Path - Optional nested lookup into decoded JSON values."""

import re
from typing import Dict, List, Optional, Union

JsonValue = Union[None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]]

_BRACKET_RE = re.compile(r"\[(\d+)\]")


def parse_field_path(path: str) -> List[str]:
    """Split `data.items[0].url` or `data.items.0.url` into segments."""
    normalized = _BRACKET_RE.sub(r".\1", path.strip())
    return [segment for segment in normalized.split(".") if segment]


def get_field(value: JsonValue, path: str) -> Optional[JsonValue]:
    """Return the value at `path`, or None when any segment is missing."""
    return _lookup(value, parse_field_path(path))


def _lookup(value: JsonValue, segments: List[str]) -> Optional[JsonValue]:
    if not segments:
        return value

    head, rest = segments[0], segments[1:]

    if isinstance(value, dict):
        if head not in value:
            return None
        return _lookup(value[head], rest)

    if isinstance(value, list):
        if not head.isdigit():
            return None
        index = int(head)
        if index >= len(value):
            return None
        return _lookup(value[index], rest)

    # Scalars have no children
    return None
