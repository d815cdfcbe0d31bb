"""Pure parsing of Sui JSON-RPC payloads into graph models."""
from __future__ import annotations

import logging
from typing import Any

from ...errors import ProviderError
from ...models import Balance, Base64, ObjectKind, SuiAddress, TransactionBlock
from ...nodes.object import Object

logger = logging.getLogger(__name__)

# Error codes the node uses for objects that are missing rather than broken.
_MISSING_OBJECT_CODES = {"notExists", "deleted", "dynamicFieldNotFound"}
_MISSING_PAST_STATUSES = {
    "ObjectNotExists",
    "ObjectDeleted",
    "VersionNotFound",
    "VersionTooHigh",
}


def _optional_int(value: Any) -> int | None:
    return int(value) if value is not None else None


def _require_mapping(response: Any, what: str) -> None:
    if not isinstance(response, dict):
        raise ProviderError(f"Malformed {what} response: {response!r}")


def parse_owner(raw: Any) -> tuple[SuiAddress | None, ObjectKind | None]:
    """Map an RPC owner value to ``(owner address, kind)``."""
    if raw == "Immutable":
        return None, ObjectKind.IMMUTABLE
    if isinstance(raw, dict):
        if "AddressOwner" in raw:
            return SuiAddress.from_str(raw["AddressOwner"]), ObjectKind.OWNED
        if "ObjectOwner" in raw:
            return SuiAddress.from_str(raw["ObjectOwner"]), ObjectKind.CHILD
        if "Shared" in raw:
            return None, ObjectKind.SHARED
    logger.debug("Unrecognized owner value: %s", raw)
    return None, None


def parse_object(data: dict[str, Any]) -> Object:
    """Build an ``Object`` from the ``data`` member of an object response."""
    _require_mapping(data, "object")
    try:
        owner, kind = parse_owner(data.get("owner"))
        bcs_bytes = (data.get("bcs") or {}).get("bcsBytes")
        return Object(
            address=SuiAddress.from_str(data["objectId"]),
            version=int(data["version"]),
            digest=data["digest"],
            storage_rebate=_optional_int(data.get("storageRebate")),
            owner=owner,
            bcs=Base64.from_str(bcs_bytes) if bcs_bytes else None,
            previous_transaction=data.get("previousTransaction"),
            kind=kind,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ProviderError(f"Malformed object data: {e}") from e


def parse_object_response(response: dict[str, Any]) -> Object | None:
    """Parse ``sui_getObject`` output; missing objects yield ``None``."""
    _require_mapping(response, "object")
    if response.get("data"):
        return parse_object(response["data"])

    error = response.get("error") or {}
    if error.get("code") in _MISSING_OBJECT_CODES:
        return None
    raise ProviderError(f"Object lookup failed: {error or response}")


def parse_past_object_response(response: dict[str, Any]) -> Object | None:
    """Parse ``sui_tryGetPastObject`` output; unknown versions yield ``None``."""
    _require_mapping(response, "past object")
    status = response.get("status")
    if status == "VersionFound":
        return parse_object(response["details"])
    if status in _MISSING_PAST_STATUSES:
        return None
    raise ProviderError(f"Unexpected past object status: {status}")


def parse_transaction_block(response: dict[str, Any]) -> TransactionBlock:
    _require_mapping(response, "transaction")
    try:
        sender = response.get("transaction", {}).get("data", {}).get("sender")
        return TransactionBlock(
            digest=response["digest"],
            sender=SuiAddress.from_str(sender) if sender else None,
            checkpoint=_optional_int(response.get("checkpoint")),
            timestamp_ms=_optional_int(response.get("timestampMs")),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ProviderError(f"Malformed transaction data: {e}") from e


def parse_balance(response: dict[str, Any]) -> Balance:
    _require_mapping(response, "balance")
    try:
        return Balance(
            coin_type=response["coinType"],
            coin_object_count=int(response.get("coinObjectCount", 0)),
            total_balance=int(response["totalBalance"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError(f"Malformed balance data: {e}") from e
