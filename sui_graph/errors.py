"""Error taxonomy surfaced to query callers as field errors."""
from __future__ import annotations


class GraphError(Exception):
    """Base class for every error a field resolver may raise."""

    code = "INTERNAL_ERROR"


class NotFound(GraphError):
    """Requested id, digest or key has no corresponding entity."""

    code = "NOT_FOUND"


class ProviderError(GraphError):
    """The data provider failed (I/O, backend unavailable, bad backend data)."""

    code = "PROVIDER_ERROR"


class RpcError(ProviderError):
    """A JSON-RPC node answered with an error object."""

    def __init__(self, message: str, rpc_code: int | None = None) -> None:
        super().__init__(message)
        self.rpc_code = rpc_code


class InvalidArgument(GraphError, ValueError):
    """Contradictory pagination arguments or an unsupported filter combination."""

    code = "INVALID_ARGUMENT"


class Unsupported(GraphError):
    """Operation is part of the schema but not backed by any data."""

    code = "UNSUPPORTED"
