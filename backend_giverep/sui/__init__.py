"""
Sui ledger package.

JSON-RPC client for coin queries, the transaction stage, and the coin input
engine that stages exact-amount coins for payment transactions.
"""

from backend_giverep.sui.client import CoinSource, SuiRpcClient
from backend_giverep.sui.coins import (
    SUI_COIN_TYPE,
    SUI_COIN_TYPE_LONG,
    from_base_units,
    get_coin_decimals,
    get_coin_input,
    is_sui_coin_type,
    iter_coins,
    to_base_units,
)
from backend_giverep.sui.models import Coin, CoinMetadata, CoinPage
from backend_giverep.sui.transaction import Argument, Transaction

__all__ = [
    "Argument",
    "Coin",
    "CoinMetadata",
    "CoinPage",
    "CoinSource",
    "SUI_COIN_TYPE",
    "SUI_COIN_TYPE_LONG",
    "SuiRpcClient",
    "Transaction",
    "from_base_units",
    "get_coin_decimals",
    "get_coin_input",
    "is_sui_coin_type",
    "iter_coins",
    "to_base_units",
]
