"""Graph node types."""
from .object import Object
from .owner import Owner, OwnerCapability

__all__ = ["Object", "Owner", "OwnerCapability"]
