"""JSON output shape for nodes, connections and value types."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from ..models import Base64, SuiAddress
from .resolver import FieldResults


def _camel(name: str) -> str:
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part.title() for part in rest)


def to_json_value(value: Any) -> Any:
    """Convert a resolved value into JSON-compatible data.

    Addresses render as ``0x``-prefixed hex, payloads as standard base64,
    enums as their tag, and dataclass fields in camelCase.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (SuiAddress, Base64)):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, FieldResults):
        return {
            "data": {_camel(k): to_json_value(v) for k, v in value.data.items()},
            "errors": [to_json_value(e) for e in value.errors],
        }
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            _camel(f.name): to_json_value(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    raise TypeError(f"Cannot serialize {type(value).__name__}")
