"""In-process data provider over a fixed store of objects, transactions and balances."""
from __future__ import annotations

import base64
import binascii
import json
import logging
import re
from bisect import bisect_left, bisect_right
from dataclasses import dataclass

from ..config import PaginationConfig
from ..connection import Connection, Edge, PageArgs
from ..errors import InvalidArgument, ProviderError
from ..models import Balance, ObjectFilter, SuiAddress, TransactionBlock
from ..nodes.object import Object

logger = logging.getLogger(__name__)

DEFAULT_COIN_TYPE = "0x2::sui::SUI"

_SortKey = tuple[bytes, int]

_TYPE_ADDRESS_RE = re.compile(r"(?<![0-9A-Za-z_])0[xX][0-9a-fA-F]+(?=::)")


@dataclass(frozen=True)
class StoredObject:
    """An object version together with its Move type tag, if known."""

    obj: Object
    type_: str | None = None

    @property
    def sort_key(self) -> _SortKey:
        return (self.obj.address.value, self.obj.version)


def _encode_cursor(key: _SortKey) -> str:
    raw = json.dumps([key[0].hex(), key[1]]).encode()
    return base64.urlsafe_b64encode(raw).decode("ascii")


def _decode_cursor(cursor: str) -> _SortKey:
    try:
        address_hex, version = json.loads(base64.urlsafe_b64decode(cursor.encode()))
        return (bytes.fromhex(address_hex), int(version))
    except (binascii.Error, ValueError, TypeError) as e:
        raise InvalidArgument(f"Invalid cursor: {cursor!r}") from e


def canonical_type(type_: str) -> str:
    """Rewrite every address in a type tag, parameters included, to its full form.

    ``0x2::coin::Coin<0x2::sui::SUI>`` and the 64-digit spelling of the same
    tag canonicalise to the same string.
    """
    compact = "".join(type_.split())
    return _TYPE_ADDRESS_RE.sub(
        lambda m: str(SuiAddress.from_str(m.group())), compact
    )


def _split_type(type_: str) -> tuple[SuiAddress, str, str]:
    """Split ``0x2::coin::Coin<...>`` into package, module and struct name."""
    base = type_.split("<", 1)[0]
    parts = base.split("::")
    if len(parts) != 3 or not all(parts):
        raise InvalidArgument(f"Invalid Move type tag: {type_!r}")
    package, module, name = parts
    return SuiAddress.from_str(package), module, name


def _type_matches(type_: str | None, query_filter: ObjectFilter) -> bool:
    if query_filter.package is None and query_filter.ty is None:
        return True
    if type_ is None:
        return False

    package, module, _ = _split_type(type_)
    if query_filter.package is not None and package != query_filter.package:
        return False
    if query_filter.module is not None and module != query_filter.module:
        return False
    if query_filter.ty is not None:
        wanted = canonical_type(query_filter.ty)
        # A filter without type parameters matches every instantiation.
        if "<" in wanted:
            return type_ == wanted
        return type_.split("<", 1)[0] == wanted
    return True


class InMemoryDataProvider:
    """Reference implementation of the data provider contract.

    Objects are ordered by ``(address bytes, version)`` and cursors encode
    that key. Owned-object listings consider the latest version of each
    object unless ``object_keys`` names historical versions explicitly.
    Explicit id or key sets are resolved first, then owner, package, module
    and type predicates refine them.
    """

    def __init__(self, pagination: PaginationConfig | None = None) -> None:
        self._pagination = pagination or PaginationConfig()
        self._objects: dict[_SortKey, StoredObject] = {}
        self._latest: dict[bytes, StoredObject] = {}
        self._transactions: dict[str, TransactionBlock] = {}
        self._balances: dict[tuple[SuiAddress, str], Balance] = {}
        self._coin_types: set[str] = {canonical_type(DEFAULT_COIN_TYPE)}

    # -- store population ---------------------------------------------------

    def add_object(self, obj: Object, type_: str | None = None) -> None:
        if type_ is not None:
            type_ = canonical_type(type_)
            _split_type(type_)
        stored = StoredObject(obj, type_)
        existing = self._objects.get(stored.sort_key)
        if existing is not None and existing.obj.digest != obj.digest:
            raise InvalidArgument(
                f"{obj.address} version {obj.version} already stored "
                f"with digest {existing.obj.digest}"
            )
        self._objects[stored.sort_key] = stored

        current = self._latest.get(obj.address.value)
        if current is None or current.obj.version < obj.version:
            self._latest[obj.address.value] = stored

    def add_transaction(self, tx: TransactionBlock) -> None:
        self._transactions[tx.digest] = tx

    def add_balance(self, owner: SuiAddress, balance: Balance) -> None:
        key = canonical_type(balance.coin_type)
        self._coin_types.add(key)
        self._balances[(owner, key)] = balance

    # -- provider contract --------------------------------------------------

    async def fetch_tx(self, digest: str) -> TransactionBlock | None:
        return self._transactions.get(digest)

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
        limit = page.limit(
            self._pagination.default_page_size, self._pagination.max_page_size
        )
        query_filter = filter or ObjectFilter()

        matches = sorted(
            (
                stored
                for stored in self._candidates(query_filter)
                if self._matches(stored, owner, query_filter)
            ),
            key=lambda s: s.sort_key,
        )
        keys = [stored.sort_key for stored in matches]

        if page.is_backward:
            end = bisect_left(keys, _decode_cursor(before)) if before else len(keys)
            start = max(0, end - limit)
        else:
            start = bisect_right(keys, _decode_cursor(after)) if after else 0
            end = min(len(keys), start + limit)

        logger.debug(
            "Owner %s: %d matching objects, returning [%d:%d]",
            owner,
            len(matches),
            start,
            end,
        )
        edges = [
            Edge(cursor=_encode_cursor(stored.sort_key), node=stored.obj)
            for stored in matches[start:end]
        ]
        return Connection.from_edges(
            edges, has_next_page=end < len(matches), has_previous_page=start > 0
        )

    async def fetch_balance(self, owner: SuiAddress, coin_type: str | None) -> Balance:
        coin_type = coin_type or DEFAULT_COIN_TYPE
        key = canonical_type(coin_type)
        if key not in self._coin_types:
            raise ProviderError(f"Cannot compute balance for unknown type {coin_type}")
        balance = self._balances.get((owner, key))
        if balance is None:
            return Balance(coin_type=coin_type, coin_object_count=0, total_balance=0)
        return balance

    async def fetch_obj(
        self, address: SuiAddress, version: int | None = None
    ) -> Object | None:
        if version is None:
            stored = self._latest.get(address.value)
        else:
            stored = self._objects.get((address.value, version))
        return stored.obj if stored is not None else None

    # -- filtering ----------------------------------------------------------

    def _candidates(self, query_filter: ObjectFilter) -> list[StoredObject]:
        if query_filter.object_ids is not None and query_filter.object_keys is not None:
            raise InvalidArgument("object_ids and object_keys cannot be combined")
        if query_filter.module is not None and query_filter.package is None:
            raise InvalidArgument("module filter requires a package")

        if query_filter.object_keys is not None:
            found = (
                self._objects.get((key.object_id.value, key.version))
                for key in query_filter.object_keys
            )
            return list({s.sort_key: s for s in found if s is not None}.values())
        if query_filter.object_ids is not None:
            found = (self._latest.get(i.value) for i in query_filter.object_ids)
            return list({s.sort_key: s for s in found if s is not None}.values())
        return list(self._latest.values())

    @staticmethod
    def _matches(
        stored: StoredObject, owner: SuiAddress, query_filter: ObjectFilter
    ) -> bool:
        if stored.obj.owner != owner:
            return False
        if query_filter.owner is not None and stored.obj.owner != query_filter.owner:
            return False
        return _type_matches(stored.type_, query_filter)
