"""Market-data extraction layer.

Wraps yfinance downloads with tenacity and converts every failure mode
(network error, empty download, unusable rows) into FetchFailure.
"""

from datetime import date, timedelta

import polars as pl
import yfinance as yf
from loguru import logger
from tenacity import retry, stop_after_attempt, wait_exponential

from src.core.config import settings
from src.core.domain_models import FetchFailure
from src.core.mapper import map_prices_to_df


class MarketDataFetcher:
    """Fetches daily OHLC price history from yfinance."""

    def __init__(self, attempts: int | None = None) -> None:
        """
        Args:
            attempts: Attempts per request; defaults to settings.fetch_attempts
        """
        self.attempts = attempts if attempts is not None else settings.fetch_attempts
        if self.attempts < 1:
            raise ValueError(f"attempts must be >= 1, got {self.attempts}")

    def get_prices(self, symbol: str, start: date, end: date) -> pl.DataFrame:
        """
        Fetch daily prices for a symbol over an inclusive date range.

        Args:
            symbol: Ticker symbol (e.g. "AAPL")
            start: First day of the range
            end: Last day of the range (inclusive)

        Returns:
            Polars DataFrame matching STOCK_PRICE_SCHEMA, sorted by date

        Raises:
            FetchFailure: If the request fails or returns no usable rows
        """
        fetch = retry(
            stop=stop_after_attempt(self.attempts),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        )(self._download)
        return fetch(symbol, start, end)

    def _download(self, symbol: str, start: date, end: date) -> pl.DataFrame:
        logger.info(f"[{symbol}] Fetching prices from {start} to {end}")

        try:
            price_data = yf.download(
                symbol,
                start=start,
                # yfinance treats end as exclusive
                end=end + timedelta(days=1),
                progress=False,
                auto_adjust=True,
            )
        except Exception as e:
            logger.error(f"[{symbol}] Failed to fetch prices: {e}")
            raise FetchFailure(f"Request for {symbol} failed: {e}") from e

        if price_data is None or price_data.empty:
            msg = f"No price data found for {symbol} between {start} and {end}"
            logger.warning(msg)
            raise FetchFailure(msg)

        try:
            prices = map_prices_to_df(price_data, symbol)
        except Exception as e:
            logger.error(f"[{symbol}] Could not map price data: {e}")
            raise FetchFailure(f"Unusable price data for {symbol}: {e}") from e

        if prices.is_empty():
            msg = f"No usable price rows for {symbol} between {start} and {end}"
            logger.warning(msg)
            raise FetchFailure(msg)

        logger.success(f"[{symbol}] Fetched {prices.height} price rows")
        return prices
