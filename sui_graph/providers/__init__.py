"""Data provider implementations."""
from .memory import InMemoryDataProvider
from .rpc import RpcDataProvider

__all__ = ["InMemoryDataProvider", "RpcDataProvider"]
