"""Protocol interfaces for the object resolution layer."""
from .data_provider import DataProvider

__all__ = ["DataProvider"]
