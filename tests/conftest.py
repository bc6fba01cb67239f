from datetime import date, timedelta

import polars as pl
import pytest

from src.core.domain_models import STOCK_PRICE_SCHEMA, FetchFailure


def make_prices(symbol: str, closes: list[float], start: date = date(2023, 1, 2)) -> pl.DataFrame:
    """Build a price frame with one row per close, on consecutive days."""
    n = len(closes)
    return pl.DataFrame(
        {
            "symbol": [symbol] * n,
            "date": [start + timedelta(days=i) for i in range(n)],
            "open": [c - 1.0 for c in closes],
            "high": [c + 2.0 for c in closes],
            "low": [c - 2.0 for c in closes],
            "close": closes,
            "volume": [1_000_000 + i for i in range(n)],
        },
        schema=STOCK_PRICE_SCHEMA,
    )


class FakeFetcher:
    """Returns canned prices and records every request."""

    def __init__(self, closes: list[float] | None = None) -> None:
        self.closes = closes if closes is not None else [148.0, 149.5, 150.004]
        self.calls: list[tuple[str, date, date]] = []

    def get_prices(self, symbol: str, start: date, end: date) -> pl.DataFrame:
        self.calls.append((symbol, start, end))
        return make_prices(symbol, self.closes)


class FailingFetcher:
    def __init__(self) -> None:
        self.calls = 0

    def get_prices(self, symbol: str, start: date, end: date) -> pl.DataFrame:
        self.calls += 1
        raise FetchFailure(f"No price data found for {symbol}")


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def failing_fetcher() -> FailingFetcher:
    return FailingFetcher()


@pytest.fixture
def price_frame():
    return make_prices
