"""Service modules"""
from .resolver import (
    FieldError,
    FieldResults,
    resolve_field,
    resolve_fields,
    resolve_nodes,
)
from .serialize import to_json_value

__all__ = [
    "FieldError",
    "FieldResults",
    "resolve_field",
    "resolve_fields",
    "resolve_nodes",
    "to_json_value",
]
