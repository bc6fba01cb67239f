from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

import polars as pl
from loguru import logger
from pydantic import BaseModel, ConfigDict

# --- Constants & Schemas ---

# Polars schema for price data returned by the market-data fetcher
STOCK_PRICE_SCHEMA = {
    "symbol": pl.Utf8,
    "date": pl.Date,
    "open": pl.Float64,
    "high": pl.Float64,
    "low": pl.Float64,
    "close": pl.Float64,
    "volume": pl.Int64,
}

FETCH_ERROR_MESSAGE = "Could not fetch stock data"


# --- Enums ---


class ViewState(str, Enum):
    """Which of the two mutually exclusive views is visible."""

    LANDING = "landing"
    DASHBOARD = "dashboard"


class MetricSelection(str, Enum):
    """Closed set of metrics offered in the dashboard dropdown."""

    GDP = "gdp"
    CONSUMER_SPENDING = "consumer_spending"
    FDI = "fdi"
    INNOVATION_INDEX = "innovation_index"
    STOCK_PRICES = "stock_prices"

    @property
    def label(self) -> str:
        return METRIC_LABELS[self]

    @property
    def is_stock(self) -> bool:
        return self is MetricSelection.STOCK_PRICES


METRIC_LABELS = {
    MetricSelection.GDP: "GDP",
    MetricSelection.CONSUMER_SPENDING: "Consumer Spending",
    MetricSelection.FDI: "FDI",
    MetricSelection.INNOVATION_INDEX: "Innovation Index",
    MetricSelection.STOCK_PRICES: "Stock Prices",
}


class StockSymbol(str, Enum):
    """Tickers available for the candlestick view."""

    AAPL = "AAPL"
    IBM = "IBM"
    MSFT = "MSFT"
    JPM = "JPM"


class Region(str, Enum):
    US = "us"
    GLOBAL = "global"

    @property
    def label(self) -> str:
        return "U.S." if self is Region.US else "Global"


class ChartKind(str, Enum):
    GROUPED_BAR = "grouped_bar"
    CANDLESTICK = "candlestick"


# --- Errors ---


class DashboardError(Exception):
    """Base class for dashboard domain errors."""


class FetchFailure(DashboardError):
    """Market data could not be fetched or contained no usable rows."""


# --- Domain Models ---


class EconomicRecord(BaseModel):
    """A single static comparison value for one metric and region."""

    model_config = ConfigDict(frozen=True)

    metric: MetricSelection
    region: Region
    value: float
    unit_label: str


class StockQuery(BaseModel):
    """
    Symbol and inclusive date range for a market-data request.

    Use `StockQuery.from_range` to build queries from user input; it
    normalises reversed and out-of-bound ranges instead of rejecting them.
    """

    model_config = ConfigDict(frozen=True)

    symbol: StockSymbol = StockSymbol.AAPL
    start: date
    end: date

    @classmethod
    def default(
        cls,
        today: date | None = None,
        lookback_days: int = 365,
        symbol: StockSymbol = StockSymbol.AAPL,
    ) -> "StockQuery":
        today = today or date.today()
        return cls(symbol=symbol, start=today - timedelta(days=lookback_days), end=today)

    @classmethod
    def from_range(
        cls,
        symbol: StockSymbol,
        start: date,
        end: date,
        min_date: date,
        today: date | None = None,
    ) -> "StockQuery":
        """Swap reversed endpoints, then clamp both into [min_date, today]."""
        today = today or date.today()
        if start > end:
            logger.warning(f"Reversed date range {start} > {end} for {symbol.value}, swapping")
            start, end = end, start

        clamped_start = min(max(start, min_date), today)
        clamped_end = min(max(end, min_date), today)
        if (clamped_start, clamped_end) != (start, end):
            logger.warning(
                f"Date range {start}..{end} clamped to {clamped_start}..{clamped_end}"
            )
        return cls(symbol=symbol, start=clamped_start, end=clamped_end)


@dataclass(frozen=True, eq=False)
class ChartSpec:
    """Renderer-independent description of a chart."""

    kind: ChartKind
    title: str
    x_label: str
    y_label: str
    data: pl.DataFrame
    color_map: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, eq=False)
class RenderResult:
    """Derived output of the selection controller: chart or error, plus summary."""

    summary: str
    chart: ChartSpec | None = None
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def fetch_error(cls) -> "RenderResult":
        return cls(summary=f"Error: {FETCH_ERROR_MESSAGE}", error=FETCH_ERROR_MESSAGE)
