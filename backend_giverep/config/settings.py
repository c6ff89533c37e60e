"""
Application settings.

Typed, immutable view over the environment (see config.env) for the Sui
RPC client, the coin input engine and logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from backend_giverep.config.env import (
    get_coins_page_limit,
    get_rpc_timeout_sec,
    get_sui_network,
    get_sui_rpc_url,
    load_giverep_env,
)


@dataclass(frozen=True)
class Settings:
    sui_network: str
    sui_rpc_url: str
    rpc_timeout_sec: float
    coins_page_limit: int | None
    log_level: str
    log_format: str


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read fresh on every call so tests can monkeypatch the environment.
    Raises ValueError when a numeric setting is malformed.
    """
    load_giverep_env()
    return Settings(
        sui_network=get_sui_network(),
        sui_rpc_url=get_sui_rpc_url(),
        rpc_timeout_sec=get_rpc_timeout_sec(),
        coins_page_limit=get_coins_page_limit(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        log_format=(os.getenv("LOG_FORMAT") or "json").strip().lower(),
    )
