"""
Mapping layer: transforms yfinance price downloads into the price frame.

yfinance returns pandas DataFrames indexed by date, with either flat or
(Price, Ticker) multi-index columns depending on version and call style.
"""

import pandas as pd
import polars as pl
from loguru import logger

from src.core.domain_models import STOCK_PRICE_SCHEMA


def _flatten_column(col: object) -> str:
    if isinstance(col, tuple):
        col = col[0]
    return str(col).lower().strip()


def map_prices_to_df(pdf: pd.DataFrame, symbol: str) -> pl.DataFrame:
    """
    Convert yfinance price history to a Polars DataFrame with strict schema.

    Args:
        pdf: Raw pandas DataFrame from yfinance.download()
        symbol: Ticker symbol the rows belong to

    Returns:
        Polars DataFrame matching STOCK_PRICE_SCHEMA, sorted by date,
        without rows that lack a close price
    """
    # Reset index (yfinance uses Date as index)
    pdf_reset = pdf.reset_index()

    # remove multi-index and lowercase columns
    pdf_reset.columns = [_flatten_column(col) for col in pdf_reset.columns]

    prices = pl.from_pandas(pdf_reset)

    # Ensure Date column exists (might be named differently)
    if "date" not in prices.columns:
        for candidate in ("datetime", "index"):
            if candidate in prices.columns:
                prices = prices.rename({candidate: "date"})
                break

    if "volume" not in prices.columns:
        prices = prices.with_columns(pl.lit(0).alias("volume"))

    prices = (
        prices.with_columns(
            pl.lit(symbol).alias("symbol"),
            pl.col("date").cast(pl.Date),
            pl.col("volume").fill_null(0),
        )
        .select([pl.col(name).cast(dtype) for name, dtype in STOCK_PRICE_SCHEMA.items()])
        .filter(pl.col("close").is_not_null() & pl.col("close").is_not_nan())
        .sort("date")
    )

    logger.debug(f"Mapped {len(prices)} price rows for {symbol}")
    return prices
