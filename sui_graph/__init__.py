"""Object and owner resolution layer for Sui ledger objects."""
from .connection import Connection, Edge, PageArgs, PageInfo
from .errors import GraphError, InvalidArgument, NotFound, ProviderError, Unsupported
from .models import Balance, Base64, ObjectFilter, ObjectKey, ObjectKind, SuiAddress
from .nodes import Object, Owner, OwnerCapability

__all__ = [
    "Balance",
    "Base64",
    "Connection",
    "Edge",
    "GraphError",
    "InvalidArgument",
    "NotFound",
    "Object",
    "ObjectFilter",
    "ObjectKey",
    "ObjectKind",
    "Owner",
    "OwnerCapability",
    "PageArgs",
    "PageInfo",
    "ProviderError",
    "SuiAddress",
    "Unsupported",
]
