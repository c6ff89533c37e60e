"""
Data models for Sui JSON-RPC responses.

Coin objects as returned by suix_getCoins, one page of them, and coin
metadata from suix_getCoinMetadata. All models are frozen: a coin that is
merged or split on chain is replaced by new objects, never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Coin:
    """
    One coin object owned by an address.

    balance is parsed to int; the RPC sends u64 values as decimal strings.
    """

    coin_object_id: str
    coin_type: str
    version: str
    digest: str
    balance: int
    previous_transaction: str | None = None

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "Coin":
        """Build from a single suix_getCoins `data` item."""
        return cls(
            coin_object_id=item["coinObjectId"],
            coin_type=item["coinType"],
            version=str(item["version"]),
            digest=item["digest"],
            balance=int(item["balance"]),
            previous_transaction=item.get("previousTransaction"),
        )


@dataclass(frozen=True)
class CoinPage:
    data: list[Coin]
    next_cursor: str | None
    has_next_page: bool

    @classmethod
    def from_rpc_result(cls, result: dict[str, Any]) -> "CoinPage":
        items = result.get("data") or []
        return cls(
            data=[Coin.from_rpc_item(item) for item in items],
            next_cursor=result.get("nextCursor"),
            has_next_page=bool(result.get("hasNextPage")),
        )


@dataclass(frozen=True)
class CoinMetadata:
    decimals: int
    symbol: str
    name: str
    description: str = ""
    icon_url: str | None = None
    id: str | None = None

    @classmethod
    def from_rpc_result(cls, result: dict[str, Any]) -> "CoinMetadata":
        return cls(
            decimals=int(result["decimals"]),
            symbol=result.get("symbol") or "",
            name=result.get("name") or "",
            description=result.get("description") or "",
            icon_url=result.get("iconUrl"),
            id=result.get("id"),
        )
