"""
Shared behaviour for the response data models.
"""

from dataclasses import fields
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet

INDENT = '    '


def to_camel_case(name: str) -> str:
    """Convert a snake_case attribute name to the API's camelCase key."""
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def require_int(data: Dict[str, Any], key: str) -> int:
    """Read a required integer field; floats, bools and strings are rejected."""
    value = data[key]
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{key} must be an integer, got {type(value).__name__}")
    return value


def _dump(value: Any) -> Any:
    if isinstance(value, ApiModel):
        return value.to_api_response()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


def _pretty(value: Any, depth: int = 0) -> str:
    pad = INDENT * (depth + 1)
    close_pad = INDENT * depth
    if isinstance(value, ApiModel):
        lines = [f"{type(value).__name__}("]
        for f in fields(value):
            if f.name in value.redacted_fields:
                shown = "'***'"
            else:
                shown = _pretty(getattr(value, f.name), depth + 1)
            lines.append(f"{pad}{f.name}={shown},")
        lines.append(f"{close_pad})")
        return '\n'.join(lines)
    if isinstance(value, (list, tuple)) and value:
        opener, closer = ('[', ']') if isinstance(value, list) else ('(', ')')
        items = [f"{pad}{_pretty(item, depth + 1)}," for item in value]
        return '\n'.join([opener, *items, f"{close_pad}{closer}"])
    if isinstance(value, dict) and value:
        items = [f"{pad}{key!r}: {_pretty(item, depth + 1)}," for key, item in value.items()]
        return '\n'.join(['{', *items, f"{close_pad}}}"])
    return repr(value)


class ApiModel:
    """
    Mixin for frozen dataclasses mirroring SpaceTraders JSON objects.

    Subclasses implement ``from_api_response``; serialization back to the
    API's camelCase shape and pretty printing are derived from the fields.
    Attributes whose JSON key is not the plain camelCase form of the
    attribute name are listed in ``api_names``. Attributes listed in
    ``redacted_fields`` are masked when printed.
    """

    api_names: ClassVar[Dict[str, str]] = {}
    redacted_fields: ClassVar[FrozenSet[str]] = frozenset()

    def to_api_response(self) -> Dict[str, Any]:
        """Serialize back to the API's JSON shape, omitting unset optionals."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            key = self.api_names.get(f.name, to_camel_case(f.name))
            result[key] = _dump(value)
        return result

    def __str__(self) -> str:
        return _pretty(self)
