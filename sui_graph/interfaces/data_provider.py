"""Data provider protocol — storage/query backend abstraction."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..connection import Connection
from ..models import Balance, ObjectFilter, SuiAddress, TransactionBlock

if TYPE_CHECKING:
    from ..nodes.object import Object


class DataProvider(Protocol):
    """Abstract interface for every lookup the resolution layer performs.

    Implementations raise ``ProviderError`` on backend failure and
    ``InvalidArgument`` for contradictory pagination or filter arguments.
    When ``object_ids``/``object_keys`` are present they narrow the candidate
    set before the other filter predicates are applied.
    """

    async def fetch_tx(self, digest: str) -> TransactionBlock | None: ...

    async def fetch_owned_objs(
        self,
        owner: SuiAddress,
        first: int | None,
        after: str | None,
        last: int | None,
        before: str | None,
        filter: ObjectFilter | None,
    ) -> Connection[Object]: ...

    async def fetch_balance(
        self, owner: SuiAddress, coin_type: str | None
    ) -> Balance: ...

    async def fetch_obj(
        self, address: SuiAddress, version: int | None = None
    ) -> Object | None: ...
