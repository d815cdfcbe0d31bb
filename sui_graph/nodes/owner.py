"""Owner capability shared by every address-identified node type."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..connection import Connection, PageArgs
from ..errors import Unsupported
from ..interfaces.data_provider import DataProvider
from ..models import Balance, ObjectFilter, SuiAddress

if TYPE_CHECKING:
    from .object import Object

logger = logging.getLogger(__name__)


class OwnerCapability:
    """Mixin for any node identified by an address that can own objects.

    Subclasses provide an ``address`` attribute. The provider handle is passed
    explicitly to every operation that needs a round trip.
    """

    address: SuiAddress

    def location(self) -> SuiAddress:
        return self.address

    async def object_connection(
        self,
        provider: DataProvider,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        filter: ObjectFilter | None = None,
    ) -> Connection[Object]:
        """Page through objects owned by this address, refined by ``filter``."""
        PageArgs(first=first, after=after, last=last, before=before)
        logger.debug("Fetching objects owned by %s", self.address)
        return await provider.fetch_owned_objs(
            self.address, first, after, last, before, filter
        )

    async def balance(
        self, provider: DataProvider, type_: str | None = None
    ) -> Balance:
        """Aggregate balance of ``type_`` (the provider's default coin when omitted)."""
        return await provider.fetch_balance(self.address, type_)

    # The operations below exist in the schema but have no backing query yet.

    async def balance_connection(
        self,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> Connection[Balance]:
        PageArgs(first=first, after=after, last=last, before=before)
        raise Unsupported("balanceConnection is not supported")

    async def coin_connection(
        self,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        type_: str | None = None,
    ) -> Connection[Object]:
        PageArgs(first=first, after=after, last=last, before=before)
        raise Unsupported("coinConnection is not supported")

    async def stake_connection(
        self,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> Connection[Object]:
        PageArgs(first=first, after=after, last=last, before=before)
        raise Unsupported("stakeConnection is not supported")

    async def default_name_service_name(self) -> str | None:
        raise Unsupported("defaultNameServiceName is not supported")

    async def name_service_connection(
        self,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> Connection[str]:
        PageArgs(first=first, after=after, last=last, before=before)
        raise Unsupported("nameServiceConnection is not supported")


@dataclass(frozen=True)
class Owner(OwnerCapability):
    """Address-only owner node."""

    address: SuiAddress
