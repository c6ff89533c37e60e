"""
Pytest fixtures for GiveRep tests. Fake paginated coin source for the coin input engine.
"""

from __future__ import annotations

import pytest

from backend_giverep.sui.models import Coin, CoinMetadata, CoinPage

OWNER = "0x" + "ab" * 32
USDC_TYPE = "0x" + "5d" * 32 + "::usdc::USDC"


def make_coin(n: int, balance: int, coin_type: str = USDC_TYPE) -> Coin:
    return Coin(
        coin_object_id="0x" + f"{n:064x}",
        coin_type=coin_type,
        version=str(1000 + n),
        digest=f"digest{n}",
        balance=balance,
    )


class FakeCoinSource:
    """
    In-memory stand-in for SuiRpcClient.

    pages: list of coin lists, one per page; every page but the last reports
    has_next_page. Records each get_coins call as (owner, coin_type, cursor, limit).
    """

    def __init__(
        self,
        pages: list[list[Coin]] | None = None,
        metadata: dict[str, CoinMetadata] | None = None,
        fail_on_page: int | None = None,
        error: Exception | None = None,
    ) -> None:
        self.pages = pages if pages is not None else [[]]
        self.metadata = metadata or {}
        self.fail_on_page = fail_on_page
        self.error = error or ConnectionError("node unreachable")
        self.calls: list[tuple[str, str, str | None, int | None]] = []
        self.metadata_calls: list[str] = []

    async def get_coins(self, owner, coin_type, cursor=None, limit=None) -> CoinPage:
        self.calls.append((owner, coin_type, cursor, limit))
        index = 0 if cursor is None else int(cursor.split("-")[1])
        if self.fail_on_page is not None and index == self.fail_on_page:
            raise self.error
        has_next = index + 1 < len(self.pages)
        return CoinPage(
            data=list(self.pages[index]),
            next_cursor=f"cursor-{index + 1}" if has_next else None,
            has_next_page=has_next,
        )

    async def get_coin_metadata(self, coin_type):
        self.metadata_calls.append(coin_type)
        return self.metadata.get(coin_type)


@pytest.fixture
def owner() -> str:
    return OWNER


@pytest.fixture
def coin_type() -> str:
    return USDC_TYPE


@pytest.fixture
def fake_source_factory():
    """Build a FakeCoinSource from per-page balances: [[30], [50]] -> two pages."""

    def _factory(page_balances, **kwargs) -> FakeCoinSource:
        n = 0
        pages = []
        for balances in page_balances:
            page = []
            for balance in balances:
                n += 1
                page.append(make_coin(n, balance))
            pages.append(page)
        return FakeCoinSource(pages, **kwargs)

    return _factory


@pytest.fixture
def coin_factory():
    return make_coin


@pytest.fixture
def fake_source_cls():
    return FakeCoinSource
