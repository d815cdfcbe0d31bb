"""Concurrent, partial-result evaluation of field selections on nodes."""
from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import GraphError, InvalidArgument
from ..interfaces.data_provider import DataProvider

logger = logging.getLogger(__name__)

# Requested fields mapped to their arguments (``None`` for no arguments).
Selections = Mapping[str, Mapping[str, Any] | None]


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass(frozen=True)
class FieldResults:
    """Resolved values of one node; failed fields are ``None`` in ``data``."""

    data: dict[str, Any]
    errors: tuple[FieldError, ...] = ()


async def resolve_field(
    node: Any,
    field: str,
    provider: DataProvider,
    args: Mapping[str, Any] | None = None,
) -> Any:
    """Resolve a single field of ``node``.

    A ``resolve_<field>`` method wins over an attribute of the same name.
    Methods declaring a ``provider`` parameter receive the request's provider.
    """
    args = dict(args or {})
    if field.startswith("_"):
        raise InvalidArgument(f"Unknown field '{field}' on {type(node).__name__}")

    target = getattr(node, f"resolve_{field}", None)
    if target is None:
        if not hasattr(node, field):
            raise InvalidArgument(f"Unknown field '{field}' on {type(node).__name__}")
        target = getattr(node, field)
        if not callable(target):
            if args:
                raise InvalidArgument(f"Field '{field}' takes no arguments")
            return target

    signature = inspect.signature(target)
    if "provider" in signature.parameters:
        args["provider"] = provider
    try:
        signature.bind(**args)
    except TypeError as e:
        raise InvalidArgument(f"Bad arguments for field '{field}': {e}") from e

    result = target(**args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def resolve_fields(
    node: Any, selections: Selections, provider: DataProvider
) -> FieldResults:
    """Resolve every selected field of ``node`` concurrently.

    A failing field yields ``None`` plus a ``FieldError``; its siblings are
    unaffected. Cancellation is never converted into a field error.
    """
    names = list(selections)
    results = await asyncio.gather(
        *(resolve_field(node, name, provider, selections[name]) for name in names),
        return_exceptions=True,
    )

    data: dict[str, Any] = {}
    errors: list[FieldError] = []
    for name, result in zip(names, results):
        if isinstance(result, GraphError):
            logger.warning("Field '%s' failed: %s", name, result)
            errors.append(FieldError(name, result.code, str(result)))
            data[name] = None
        elif isinstance(result, Exception):
            logger.error("Field '%s' raised unexpectedly", name, exc_info=result)
            errors.append(FieldError(name, GraphError.code, str(result)))
            data[name] = None
        elif isinstance(result, BaseException):
            raise result
        else:
            data[name] = result

    return FieldResults(data=data, errors=tuple(errors))


async def resolve_nodes(
    nodes: Sequence[Any], selections: Selections, provider: DataProvider
) -> list[FieldResults]:
    """Resolve the same selections over sibling nodes concurrently."""
    return list(
        await asyncio.gather(
            *(resolve_fields(node, selections, provider) for node in nodes)
        )
    )
