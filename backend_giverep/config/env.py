"""
Environment variable loading and validation for GiveRep.

- SUI_NETWORK: mainnet | testnet | devnet (default: mainnet)
- SUI_RPC_URL: fullnode endpoint; overrides the network's public fullnode
- SUI_RPC_TIMEOUT_SEC: HTTP timeout per JSON-RPC request (default: 30)
- SUI_COINS_PAGE_LIMIT: page size for suix_getCoins (1-50; unset = node default)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_giverep/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

FULLNODE_URLS = {
    "mainnet": "https://fullnode.mainnet.sui.io:443",
    "testnet": "https://fullnode.testnet.sui.io:443",
    "devnet": "https://fullnode.devnet.sui.io:443",
}
DEFAULT_NETWORK = "mainnet"
DEFAULT_RPC_TIMEOUT_SEC = 30.0
# suix_getCoins rejects limits above this
MAX_COINS_PAGE_LIMIT = 50


def load_giverep_env() -> None:
    """Load .env from project root. Existing environment variables win."""
    load_dotenv(_ENV_PATH, override=False)


def get_sui_network() -> str:
    """
    Return SUI_NETWORK from env: mainnet | testnet | devnet.
    Unknown values fall back to mainnet.
    """
    load_giverep_env()
    raw = (os.getenv("SUI_NETWORK") or DEFAULT_NETWORK).strip().lower()
    return raw if raw in FULLNODE_URLS else DEFAULT_NETWORK


def get_sui_rpc_url() -> str:
    """
    Resolve Sui RPC URL from env.
    Order: SUI_RPC_URL > public fullnode for SUI_NETWORK.
    """
    load_giverep_env()
    url = (os.getenv("SUI_RPC_URL") or "").strip()
    if url:
        return url
    return FULLNODE_URLS[get_sui_network()]


def get_rpc_timeout_sec() -> float:
    load_giverep_env()
    raw = (os.getenv("SUI_RPC_TIMEOUT_SEC") or "").strip()
    if not raw:
        return DEFAULT_RPC_TIMEOUT_SEC
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"SUI_RPC_TIMEOUT_SEC must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError("SUI_RPC_TIMEOUT_SEC must be positive")
    return value


def get_coins_page_limit() -> int | None:
    """Return SUI_COINS_PAGE_LIMIT, or None to let the node pick its default page size."""
    load_giverep_env()
    raw = (os.getenv("SUI_COINS_PAGE_LIMIT") or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"SUI_COINS_PAGE_LIMIT must be an integer, got {raw!r}") from e
    if not (1 <= value <= MAX_COINS_PAGE_LIMIT):
        raise ValueError(f"SUI_COINS_PAGE_LIMIT must be between 1 and {MAX_COINS_PAGE_LIMIT}")
    return value
