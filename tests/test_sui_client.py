"""
Tests for the Sui JSON-RPC client with mocked HTTP (httpx.MockTransport).
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from backend_giverep.core.exceptions import SuiRpcError
from backend_giverep.sui.client import SuiRpcClient
from backend_giverep.sui.coins import get_coin_input
from backend_giverep.sui.transaction import Transaction

RPC_URL = "https://fullnode.test.sui.io:443"
OWNER = "0x" + "ab" * 32
COIN_TYPE = "0x" + "5d" * 32 + "::usdc::USDC"


def _coin_item(n: int, balance: str) -> dict:
    return {
        "coinType": COIN_TYPE,
        "coinObjectId": f"0x{n:064x}",
        "version": str(500 + n),
        "digest": f"dig{n}",
        "balance": balance,
        "previousTransaction": f"tx{n}",
    }


def _client_with(handler) -> tuple[SuiRpcClient, list[dict]]:
    requests: list[dict] = []

    def _record(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests.append(body)
        return handler(body)

    http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
    return SuiRpcClient(RPC_URL, http_client=http), requests


def test_get_coins_parses_page():
    def handler(body):
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": body["id"],
                "result": {
                    "data": [_coin_item(1, "18446744073709551615")],
                    "nextCursor": "0xcur",
                    "hasNextPage": True,
                },
            },
        )

    client, requests = _client_with(handler)
    page = asyncio.run(client.get_coins(OWNER, COIN_TYPE, cursor="0xprev", limit=10))

    assert requests[0]["method"] == "suix_getCoins"
    assert requests[0]["params"] == [OWNER, COIN_TYPE, "0xprev", 10]
    assert page.has_next_page is True
    assert page.next_cursor == "0xcur"
    assert page.data[0].balance == 2**64 - 1
    assert page.data[0].version == "501"
    assert page.data[0].previous_transaction == "tx1"


def test_rpc_error_raises_sui_rpc_error():
    def handler(body):
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": body["id"], "error": {"code": -32602, "message": "Invalid params"}},
        )

    client, _ = _client_with(handler)
    with pytest.raises(SuiRpcError) as exc_info:
        asyncio.run(client.get_coins(OWNER, "bad"))
    assert exc_info.value.code == -32602
    assert "Invalid params" in str(exc_info.value)


def test_http_error_propagates():
    client, _ = _client_with(lambda body: httpx.Response(503, text="unavailable"))
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_coin_metadata(COIN_TYPE))


def test_missing_result_raises():
    client, _ = _client_with(lambda body: httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"]}))
    with pytest.raises(SuiRpcError, match="no result"):
        asyncio.run(client.get_balance(OWNER, COIN_TYPE))


def test_coin_metadata_null_and_present():
    def handler(body):
        coin_type = body["params"][0]
        if coin_type == COIN_TYPE:
            result = {"decimals": 6, "symbol": "USDC", "name": "USD Coin", "description": "", "iconUrl": None, "id": "0xmeta"}
        else:
            result = None
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    client, _ = _client_with(handler)

    async def _both():
        return (
            await client.get_coin_metadata(COIN_TYPE),
            await client.get_coin_metadata("0x1::fake::FAKE"),
        )

    metadata, missing = asyncio.run(_both())

    assert metadata.decimals == 6
    assert metadata.symbol == "USDC"
    assert missing is None


def test_get_balance_parses_total():
    def handler(body):
        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": body["id"], "result": {"coinType": COIN_TYPE, "coinObjectCount": 3, "totalBalance": "123456789"}},
        )

    client, requests = _client_with(handler)
    assert asyncio.run(client.get_balance(OWNER, COIN_TYPE)) == 123456789
    assert requests[0]["method"] == "suix_getBalance"


def test_engine_follows_rpc_cursors():
    """End to end over HTTP: two pages, cursor from page one sent with page two."""
    pages = {
        None: {"data": [_coin_item(1, "30")], "nextCursor": "0xnext", "hasNextPage": True},
        "0xnext": {"data": [_coin_item(2, "50")], "nextCursor": None, "hasNextPage": False},
    }

    def handler(body):
        cursor = body["params"][2]
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": pages[cursor]})

    client, requests = _client_with(handler)
    tx = Transaction()
    asyncio.run(get_coin_input(client, OWNER, COIN_TYPE, 40, tx))

    assert [r["params"][2] for r in requests] == [None, "0xnext"]
    assert [next(iter(c)) for c in tx.commands] == ["MergeCoins", "SplitCoins"]


def test_constructor_validation():
    with pytest.raises(ValueError):
        SuiRpcClient("  ")
    with pytest.raises(ValueError):
        SuiRpcClient(RPC_URL, timeout_sec=0)


def test_context_manager_leaves_external_client_open():
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))

    async def _use():
        async with SuiRpcClient(RPC_URL, http_client=http):
            pass
        return http.is_closed

    assert asyncio.run(_use()) is False
