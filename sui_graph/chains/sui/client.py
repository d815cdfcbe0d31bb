"""SUI RPC client with fallback support."""
import asyncio
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ...config import ProviderConfig
from ...errors import ProviderError, RpcError

logger = logging.getLogger(__name__)

OBJECT_OPTIONS = {
    "showType": True,
    "showOwner": True,
    "showPreviousTransaction": True,
    "showStorageRebate": True,
    "showBcs": True,
}


class SuiClient:
    """SUI blockchain RPC client with automatic endpoint fallback.

    Transport failures move on to the next endpoint; an error answer from a
    node is raised straight away as ``RpcError``.
    """

    def __init__(self, config: ProviderConfig) -> None:
        self.endpoints = list(config.rpc_endpoints)
        self.timeout = config.rpc_timeout
        self.current_rpc_index = 0

    async def rpc_call(self, method: str, params: list[Any]) -> Any:
        """Make RPC call with fallback to alternative endpoints."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        last_error: Exception | None = None
        for attempt in range(len(self.endpoints)):
            rpc_index = (self.current_rpc_index + attempt) % len(self.endpoints)
            rpc_url = self.endpoints[rpc_index]

            try:
                connector = aiohttp.TCPConnector(ssl=ssl_context)
                async with aiohttp.ClientSession(connector=connector) as session:
                    async with session.post(
                        rpc_url,
                        json=payload,
                        timeout=aiohttp.ClientTimeout(total=self.timeout),
                    ) as response:
                        response.raise_for_status()
                        result = await response.json()
            except (
                aiohttp.ClientError,
                asyncio.TimeoutError,
                OSError,
                ValueError,
            ) as e:
                last_error = e
                logger.warning("RPC endpoint %s failed: %s", rpc_url, e)
                if attempt < len(self.endpoints) - 1:
                    logger.info("Trying next endpoint...")
                continue

            if not isinstance(result, dict) or (
                "result" not in result and "error" not in result
            ):
                last_error = ProviderError(
                    f"Malformed JSON-RPC response from {rpc_url}: {result!r}"
                )
                logger.warning("RPC endpoint %s failed: %s", rpc_url, last_error)
                continue

            if rpc_index != self.current_rpc_index:
                logger.info("Switched to RPC endpoint: %s", rpc_url)
                self.current_rpc_index = rpc_index

            if "error" in result:
                error = result["error"]
                if not isinstance(error, dict):
                    error = {"message": error}
                raise RpcError(
                    f"RPC Error in {method}: {error.get('message', error)}",
                    rpc_code=error.get("code"),
                )
            logger.debug("%s answered by %s", method, rpc_url)
            return result.get("result")

        raise ProviderError(
            f"All RPC endpoints failed. Last error: {last_error}"
        ) from last_error

    async def get_object(self, object_id: str) -> dict[str, Any]:
        """Get the latest version of an object."""
        return await self.rpc_call("sui_getObject", [object_id, OBJECT_OPTIONS])

    async def try_get_past_object(self, object_id: str, version: int) -> dict[str, Any]:
        """Get a specific historical version of an object."""
        return await self.rpc_call(
            "sui_tryGetPastObject", [object_id, version, OBJECT_OPTIONS]
        )

    async def get_owned_objects_page(
        self,
        owner: str,
        query_filter: dict[str, Any] | None,
        cursor: str | None,
        limit: int,
    ) -> dict[str, Any]:
        """Get a single page of objects owned by ``owner``."""
        return await self.rpc_call(
            "suix_getOwnedObjects",
            [
                owner,
                {"filter": query_filter, "options": OBJECT_OPTIONS},
                cursor,
                limit,
            ],
        )

    async def get_transaction_block(self, digest: str) -> dict[str, Any]:
        return await self.rpc_call(
            "sui_getTransactionBlock", [digest, {"showInput": True}]
        )

    async def get_balance(self, owner: str, coin_type: str | None) -> dict[str, Any]:
        return await self.rpc_call("suix_getBalance", [owner, coin_type])
