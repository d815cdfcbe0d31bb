"""Data provider backed by a Sui full node's JSON-RPC API."""
from __future__ import annotations

import logging
from typing import Any

from ..chains.sui import parser
from ..chains.sui.client import SuiClient
from ..config import PaginationConfig
from ..connection import Connection, Edge, PageArgs, PageInfo
from ..errors import InvalidArgument, ProviderError, Unsupported
from ..models import Balance, ObjectFilter, SuiAddress, TransactionBlock
from ..nodes.object import Object

logger = logging.getLogger(__name__)


def build_rpc_filter(query_filter: ObjectFilter | None) -> dict[str, Any] | None:
    """Translate an ``ObjectFilter`` into a ``suix_getOwnedObjects`` filter.

    ``owner`` is not translated; the owner is the query's subject.
    """
    if query_filter is None:
        return None
    if query_filter.object_keys is not None:
        raise Unsupported("object_keys filter is not supported by the RPC provider")
    if query_filter.module is not None and query_filter.package is None:
        raise InvalidArgument("module filter requires a package")

    clauses: list[dict[str, Any]] = []
    if query_filter.object_ids is not None:
        clauses.append({"ObjectIds": [str(i) for i in query_filter.object_ids]})
    if query_filter.module is not None:
        clauses.append(
            {
                "MoveModule": {
                    "package": str(query_filter.package),
                    "module": query_filter.module,
                }
            }
        )
    elif query_filter.package is not None:
        clauses.append({"Package": str(query_filter.package)})
    if query_filter.ty is not None:
        clauses.append({"StructType": query_filter.ty})

    if not clauses:
        return None
    if len(clauses) == 1:
        return clauses[0]
    return {"MatchAll": clauses}


class RpcDataProvider:
    """Resolves objects, transactions and balances through ``SuiClient``.

    Only forward pagination is available: the node's cursor for a page is the
    id of the last object returned, which is used as every edge's cursor. A
    page whose entries were all skipped carries the node's ``nextCursor`` as
    its end cursor.
    """

    def __init__(self, client: SuiClient, pagination: PaginationConfig) -> None:
        self._client = client
        self._pagination = pagination

    async def fetch_tx(self, digest: str) -> TransactionBlock | None:
        logger.debug("Fetching transaction %s", digest)
        response = await self._client.get_transaction_block(digest)
        if not response:
            return None
        return parser.parse_transaction_block(response)

    async def fetch_owned_objs(
        self,
        owner: SuiAddress,
        first: int | None,
        after: str | None,
        last: int | None,
        before: str | None,
        filter: ObjectFilter | None,
    ) -> Connection[Object]:
        page = PageArgs(first=first, after=after, last=last, before=before)
        if page.is_backward:
            raise Unsupported("RPC provider only supports forward pagination")
        limit = page.limit(
            self._pagination.default_page_size, self._pagination.max_page_size
        )
        rpc_filter = build_rpc_filter(filter)

        if filter is not None and filter.owner is not None and filter.owner != owner:
            return Connection.from_edges([], False, after is not None)
        if limit == 0:
            return Connection.from_edges([], False, after is not None)

        logger.debug("Fetching up to %d objects owned by %s", limit, owner)
        result = await self._client.get_owned_objects_page(
            str(owner), rpc_filter, after, limit
        )

        entries = result.get("data") if isinstance(result, dict) else None
        if not isinstance(entries, list):
            raise ProviderError(f"Malformed owned objects page: {result!r}")

        edges: list[Edge[Object]] = []
        for entry in entries:
            if not isinstance(entry, dict) or not entry.get("data"):
                logger.warning("Skipping owned object entry without data: %s", entry)
                continue
            obj = parser.parse_object(entry["data"])
            edges.append(Edge(cursor=str(obj.address), node=obj))

        has_next_page = bool(result.get("hasNextPage", False))
        has_previous_page = after is not None
        if not edges and result.get("nextCursor"):
            # Every entry was skipped; resume from the node's own cursor.
            return Connection(
                page_info=PageInfo(
                    has_next_page=has_next_page,
                    has_previous_page=has_previous_page,
                    end_cursor=result["nextCursor"],
                )
            )
        return Connection.from_edges(edges, has_next_page, has_previous_page)

    async def fetch_balance(self, owner: SuiAddress, coin_type: str | None) -> Balance:
        logger.debug("Fetching %s balance of %s", coin_type or "default", owner)
        response = await self._client.get_balance(str(owner), coin_type)
        return parser.parse_balance(response)

    async def fetch_obj(
        self, address: SuiAddress, version: int | None = None
    ) -> Object | None:
        if version is None:
            response = await self._client.get_object(str(address))
            return parser.parse_object_response(response)
        response = await self._client.try_get_past_object(str(address), version)
        return parser.parse_past_object_response(response)
