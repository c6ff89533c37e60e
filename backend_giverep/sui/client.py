"""
Sui fullnode JSON-RPC client: coin queries used by the coin input engine.

Responsibilities:
- POST JSON-RPC requests (suix_getCoins, suix_getCoinMetadata, suix_getBalance)
  over one shared httpx.AsyncClient.
- Parse results into the models in sui.models.
- Surface RPC-level errors as SuiRpcError; transport errors (httpx.HTTPError)
  propagate unchanged. No retry: callers decide whether to try again.
"""

from __future__ import annotations

import itertools
from typing import Any, Protocol

import httpx

from backend_giverep.core.exceptions import SuiRpcError
from backend_giverep.giverep_logging import get_logger
from backend_giverep.sui.models import CoinMetadata, CoinPage

logger = get_logger(__name__)

# JSON-RPC request id counter
_request_ids = itertools.count(1)


def _build_rpc_body(method: str, params: list[Any]) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": next(_request_ids),
        "method": method,
        "params": params,
    }


class CoinSource(Protocol):
    """What the coin input engine needs from a ledger client."""

    async def get_coins(
        self,
        owner: str,
        coin_type: str,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> CoinPage: ...

    async def get_coin_metadata(self, coin_type: str) -> CoinMetadata | None: ...


class SuiRpcClient:
    """
    Async client for a Sui fullnode.

    Use as an async context manager so the underlying connection pool is
    closed; an externally owned httpx.AsyncClient may be passed instead
    (it is then left open on exit).
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        timeout_sec: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        if timeout_sec <= 0:
            raise ValueError("timeout_sec must be positive")
        self._rpc_url = rpc_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_sec))

    async def __aenter__(self) -> "SuiRpcClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def call(self, method: str, params: list[Any]) -> Any:
        """Perform one JSON-RPC call; raise on transport or RPC error."""
        body = _build_rpc_body(method, params)
        resp = await self._client.post(self._rpc_url, json=body)
        resp.raise_for_status()
        data = resp.json()
        if "error" in data:
            err = data["error"]
            if not isinstance(err, dict):
                err = {"message": str(err)}
            logger.warning(
                "sui_rpc_error",
                method=method,
                code=err.get("code"),
                error=err.get("message"),
            )
            raise SuiRpcError(str(err.get("message", err)), err.get("code"))
        if "result" not in data:
            raise SuiRpcError(f"{method} returned no result")
        return data["result"]

    async def get_coins(
        self,
        owner: str,
        coin_type: str,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> CoinPage:
        """One page of coins of `coin_type` owned by `owner`; cursor None starts from the beginning."""
        result = await self.call("suix_getCoins", [owner, coin_type, cursor, limit])
        if not isinstance(result, dict):
            raise SuiRpcError("suix_getCoins returned a malformed page")
        return CoinPage.from_rpc_result(result)

    async def get_coin_metadata(self, coin_type: str) -> CoinMetadata | None:
        """Coin metadata, or None when the coin type has no metadata object."""
        result = await self.call("suix_getCoinMetadata", [coin_type])
        if result is None:
            return None
        return CoinMetadata.from_rpc_result(result)

    async def get_balance(self, owner: str, coin_type: str) -> int:
        """Total balance of `coin_type` across all of the owner's coins."""
        result = await self.call("suix_getBalance", [owner, coin_type])
        return int(result.get("totalBalance", "0"))
