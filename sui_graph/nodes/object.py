"""Object node: a versioned unit of on-chain state that can also own objects."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import ProviderError
from ..interfaces.data_provider import DataProvider
from ..models import Base64, ObjectKind, SuiAddress, TransactionBlock
from .owner import Owner, OwnerCapability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Object(OwnerCapability):
    """Request-scoped projection of an object at one version.

    ``version``, ``digest``, ``storage_rebate``, ``bcs`` and ``kind`` are plain
    fields; ``owner`` and ``previous_transaction_block`` resolve through
    ``resolve_*`` methods.
    """

    address: SuiAddress
    version: int
    digest: str
    storage_rebate: int | None = None
    owner: SuiAddress | None = None
    bcs: Base64 | None = None
    previous_transaction: str | None = None
    kind: ObjectKind | None = None

    @property
    def exclusive_owner(self) -> SuiAddress | None:
        """Owner holding mutation authority; shared and immutable objects have none."""
        if self.kind in (ObjectKind.OWNED, ObjectKind.CHILD):
            return self.owner
        return None

    async def resolve_owner(self) -> Owner | None:
        if self.owner is None:
            return None
        return Owner(address=self.owner)

    async def resolve_previous_transaction_block(
        self, provider: DataProvider
    ) -> TransactionBlock | None:
        """Transaction that produced this version; ``None`` for genesis objects."""
        if self.previous_transaction is None:
            return None

        tx = await provider.fetch_tx(self.previous_transaction)
        if tx is None:
            logger.warning(
                "Previous transaction %s of %s could not be resolved",
                self.previous_transaction,
                self.address,
            )
            raise ProviderError(
                f"Transaction {self.previous_transaction} could not be resolved"
            )
        return tx
