"""
Core utilities: shared exceptions and cross-cutting concerns.
"""

from backend_giverep.core.exceptions import (
    CoinMetadataNotFoundError,
    CoinNotFoundError,
    GiveRepError,
    InsufficientBalanceError,
    SuiRpcError,
)

__all__ = [
    "CoinMetadataNotFoundError",
    "CoinNotFoundError",
    "GiveRepError",
    "InsufficientBalanceError",
    "SuiRpcError",
]
