#!/usr/bin/env python3
"""
Stage a payment coin for an owner and print the resulting transaction plan.

Queries the configured Sui fullnode (SUI_RPC_URL / SUI_NETWORK), converts the
display amount to base units using the coin's on-chain decimals, runs the
coin input engine and prints the staged commands as JSON. Nothing is signed
or sent.

Usage:
  python -m backend_giverep.tools.coin_input_plan --owner 0x... \
      --coin-type 0x...::usdc::USDC --amount 12.5
  python -m backend_giverep.tools.coin_input_plan --owner 0x... \
      --coin-type 0x2::sui::SUI --amount 1000000 --raw
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import httpx

from backend_giverep.config import Settings, get_settings
from backend_giverep.core.exceptions import GiveRepError
from backend_giverep.giverep_logging import configure_structlog, get_logger
from backend_giverep.sui.client import CoinSource, SuiRpcClient
from backend_giverep.sui.coins import get_coin_decimals, get_coin_input, to_base_units
from backend_giverep.sui.transaction import Transaction

logger = get_logger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Stage an exact-amount coin input and print the transaction plan."
    )
    parser.add_argument("--owner", required=True, help="Sui address paying the amount")
    parser.add_argument("--coin-type", required=True, help="Coin type tag, e.g. 0x2::sui::SUI")
    parser.add_argument("--amount", required=True, help="Amount in display units (or base units with --raw)")
    parser.add_argument("--raw", action="store_true", help="Treat --amount as base units; skip metadata lookup")
    parser.add_argument("--rpc-url", default=None, help="Override SUI_RPC_URL")
    return parser.parse_args(argv)


async def build_plan(
    source: CoinSource,
    owner: str,
    coin_type: str,
    amount: str,
    *,
    raw: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Resolve base units, stage the coin input and return the transaction plan."""
    if raw:
        base_units = int(amount)
    else:
        decimals = await get_coin_decimals(source, coin_type)
        base_units = to_base_units(amount, decimals)
    tx = Transaction(sender=owner)
    coin = await get_coin_input(source, owner, coin_type, base_units, tx, limit=limit)
    plan = tx.to_dict()
    plan["coin"] = coin.to_dict()
    plan["amount"] = base_units
    return plan


async def _run(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    rpc_url = args.rpc_url or settings.sui_rpc_url
    async with SuiRpcClient(rpc_url, timeout_sec=settings.rpc_timeout_sec) as client:
        return await build_plan(
            client,
            args.owner,
            args.coin_type,
            args.amount,
            raw=args.raw,
            limit=settings.coins_page_limit,
        )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = get_settings()
        configure_structlog(getattr(logging, settings.log_level, logging.INFO), settings.log_format)
        plan = asyncio.run(_run(args, settings))
    except (GiveRepError, ValueError, httpx.HTTPError) as e:
        logger.error("coin_input_plan_failed", coin_type=args.coin_type, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(plan, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
