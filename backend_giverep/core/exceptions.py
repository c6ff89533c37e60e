"""
Application-level exceptions.

Domain errors raised while staging coin inputs for a Sui transaction.
Callers (API handlers, CLI tools) catch GiveRepError to report a failed
payment without inspecting the concrete type.
"""

from __future__ import annotations


class GiveRepError(Exception):
    """Base class for all GiveRep backend errors."""


class CoinNotFoundError(GiveRepError):
    """The owner holds no coin objects of the requested type."""

    def __init__(self, coin_type: str) -> None:
        super().__init__(f"No coin found for type {coin_type} in wallet")
        self.coin_type = coin_type


class InsufficientBalanceError(GiveRepError):
    """Total balance across all coins of the type is below the requested amount."""

    def __init__(self, coin_type: str, required: int, available: int) -> None:
        super().__init__(
            f"Insufficient balance for {coin_type}: required {required}, available {available}"
        )
        self.coin_type = coin_type
        self.required = required
        self.available = available


class CoinMetadataNotFoundError(GiveRepError):
    def __init__(self, coin_type: str) -> None:
        super().__init__(f"Coin metadata not found for type {coin_type}")
        self.coin_type = coin_type


class SuiRpcError(GiveRepError):
    """JSON-RPC level failure reported by the Sui fullnode."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(f"Sui RPC error: {message} (code={code})")
        self.rpc_message = message
        self.code = code
