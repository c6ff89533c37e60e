"""
Coin input engine: turn "pay N of coin type T from owner" into a staged coin.

Native SUI is split straight off the gas coin. Any other coin type is
collected page by page from the ledger, every coin is merged into the first
one observed, and the requested amount is split off that coin. The returned
Argument is a coin of exactly `amount`, spendable later in the same
transaction.

Calls are not serialised: two calls for the same owner, coin type and stage
without committing in between both see (and stage) the same coins. Callers
must commit or serialise.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import AsyncIterator

from backend_giverep.core.exceptions import (
    CoinMetadataNotFoundError,
    CoinNotFoundError,
    InsufficientBalanceError,
)
from backend_giverep.giverep_logging import bind_owner
from backend_giverep.sui.client import CoinSource
from backend_giverep.sui.models import Coin
from backend_giverep.sui.transaction import U64_MAX, Argument, Transaction, check_u64

SUI_COIN_TYPE = "0x2::sui::SUI"
SUI_COIN_TYPE_LONG = (
    "0x0000000000000000000000000000000000000000000000000000000000000002::sui::SUI"
)


def is_sui_coin_type(coin_type: str) -> bool:
    """True for either spelling of the native gas coin type."""
    return coin_type in (SUI_COIN_TYPE, SUI_COIN_TYPE_LONG)


async def iter_coins(
    source: CoinSource,
    owner: str,
    coin_type: str,
    *,
    limit: int | None = None,
) -> AsyncIterator[Coin]:
    """
    Yield every coin of `coin_type` owned by `owner`, one page at a time.

    Pages are fetched strictly in sequence and only when the previous one is
    exhausted. Each call starts again from the first page.
    """
    cursor: str | None = None
    while True:
        page = await source.get_coins(owner, coin_type, cursor=cursor, limit=limit)
        for coin in page.data:
            yield coin
        if not page.has_next_page:
            break
        cursor = page.next_cursor


async def get_coin_input(
    source: CoinSource,
    owner: str,
    coin_type: str,
    amount: int,
    tx: Transaction,
    *,
    limit: int | None = None,
) -> Argument:
    """
    Stage a coin worth exactly `amount` base units of `coin_type` in `tx`.

    Args:
        source: ledger client providing paginated get_coins.
        owner: address whose coins are spent; not validated here.
        coin_type: full Move type tag of the coin.
        amount: base units (u64). Zero is accepted and yields a zero coin.
        tx: stage to append MergeCoins / SplitCoins to.
        limit: optional page size passed to get_coins.

    Returns:
        The SplitCoins result holding exactly `amount`.

    Raises:
        ValueError: amount is not a u64.
        CoinNotFoundError: owner has no coins of the type.
        InsufficientBalanceError: all coins together hold less than amount.
        Errors from `source` propagate unchanged. On any error nothing has
        been appended to `tx`.
    """
    check_u64(amount, "amount")
    log = bind_owner(__name__, owner).bind(coin_type=coin_type, amount=amount)

    if is_sui_coin_type(coin_type):
        [coin] = tx.split_coins(tx.gas, [amount])
        log.info("coin_input_gas_split")
        return coin

    # Drain every page even once the running total covers amount.
    # A coin seen twice (pages shifting under the cursor) is counted once.
    coins: list[Coin] = []
    seen: set[str] = set()
    total = 0
    async for coin in iter_coins(source, owner, coin_type, limit=limit):
        if coin.coin_object_id in seen:
            log.debug("coin_input_duplicate_coin", coin_object_id=coin.coin_object_id)
            continue
        seen.add(coin.coin_object_id)
        coins.append(coin)
        total += coin.balance
    log.debug("coin_input_coins_collected", coin_count=len(coins), total_balance=total)

    if not coins:
        log.warning("coin_input_no_coins")
        raise CoinNotFoundError(coin_type)
    if total < amount:
        log.warning("coin_input_insufficient_balance", total_balance=total)
        raise InsufficientBalanceError(coin_type, amount, total)

    primary, *others = [tx.object_ref(coin) for coin in coins]
    if others:
        tx.merge_coins(primary, others)
        log.info("coin_input_merged", merged_count=len(others))
    [result] = tx.split_coins(primary, [amount])
    log.info("coin_input_split", coin_count=len(coins), total_balance=total)
    return result


async def get_coin_decimals(source: CoinSource, coin_type: str) -> int:
    """Decimals from on-chain coin metadata; CoinMetadataNotFoundError if there is none."""
    metadata = await source.get_coin_metadata(coin_type)
    if metadata is None:
        raise CoinMetadataNotFoundError(coin_type)
    return metadata.decimals


def to_base_units(amount: str | int | Decimal, decimals: int) -> int:
    """
    Convert a display amount ("1.5") to base units (1_500_000_000 for 9 decimals).

    Digits past `decimals` are truncated. Raises ValueError for negative or
    non-numeric amounts, and for amounts above u64 in base units.
    """
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid amount {amount!r}")
    if value < 0:
        raise ValueError("amount must be non-negative")
    try:
        with localcontext() as ctx:
            # u64 amounts with up to ~60 decimals stay exact
            ctx.prec = 80
            scaled = value.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_DOWN)
    except InvalidOperation as e:
        raise ValueError(f"Amount {amount!r} is too large") from e
    raw = int(scaled)
    if raw > U64_MAX:
        raise ValueError(f"Amount {amount!r} exceeds u64 in base units")
    return raw


def from_base_units(raw: int, decimals: int) -> Decimal:
    """Inverse of to_base_units for display."""
    return Decimal(raw).scaleb(-decimals)
