"""Metric selection and render logic for the dashboard view.

Pure Python/Polars - no Streamlit UI calls. The controller owns the
selection state and recomputes its RenderResult on every change.
"""

from datetime import date
from typing import Protocol

import polars as pl
from loguru import logger

from src.app.views.colors import REGION_COLOR_MAP
from src.core.config import settings
from src.core.domain_models import (
    ChartKind,
    ChartSpec,
    FetchFailure,
    MetricSelection,
    RenderResult,
    StockQuery,
    StockSymbol,
)
from src.core.economic_data import get_comparison


class PriceFetcher(Protocol):
    def get_prices(self, symbol: str, start: date, end: date) -> pl.DataFrame: ...


def build_comparison_result(metric: MetricSelection) -> RenderResult:
    """Grouped bar chart of the US and Global records for a comparison metric."""
    us, world = get_comparison(metric)
    df_chart = pl.DataFrame(
        {
            "region": [us.region.label, world.region.label],
            "value": [us.value, world.value],
            "metric": [metric.label, metric.label],
        }
    )
    chart = ChartSpec(
        kind=ChartKind.GROUPED_BAR,
        title=f"U.S. vs Global Comparison in {metric.label}",
        x_label="Metric",
        y_label=us.unit_label,
        data=df_chart,
        color_map={
            us.region.label: REGION_COLOR_MAP[us.region],
            world.region.label: REGION_COLOR_MAP[world.region],
        },
    )
    summary = f"The U.S. {metric.label} value is: {us.value:g} {us.unit_label}"
    return RenderResult(summary=summary, chart=chart)


def build_stock_result(symbol: StockSymbol, df_prices: pl.DataFrame) -> RenderResult:
    """Candlestick chart and latest-close summary for fetched prices."""
    if df_prices.is_empty():
        return RenderResult.fetch_error()

    df_prices = df_prices.sort("date")
    latest_close = float(df_prices.select(pl.col("close").last()).item())
    chart = ChartSpec(
        kind=ChartKind.CANDLESTICK,
        title=f"{symbol.value} Stock Price",
        x_label="Date",
        y_label="Price (USD)",
        data=df_prices,
    )
    summary = f"The latest closing price for {symbol.value} is: ${latest_close:.2f}"
    return RenderResult(summary=summary, chart=chart)


class DashboardController:
    """Holds the metric/stock selection and its derived RenderResult."""

    def __init__(
        self,
        fetcher: PriceFetcher,
        query: StockQuery | None = None,
        min_date: date | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.min_date = min_date or settings.min_stock_date
        self.metric = MetricSelection.GDP
        self.query = query or StockQuery.default(lookback_days=settings.default_lookback_days)
        self._request_id = 0
        self._result = build_comparison_result(self.metric)

    def select_metric(self, metric: MetricSelection) -> RenderResult:
        logger.debug(f"Metric selected: {metric.label}")
        self.metric = metric
        return self._recompute()

    def select_stock(
        self,
        symbol: StockSymbol,
        start: date,
        end: date,
        today: date | None = None,
    ) -> RenderResult:
        """Update the stock query; fetch only while stock prices are selected."""
        self.query = StockQuery.from_range(symbol, start, end, self.min_date, today=today)
        if not self.metric.is_stock:
            return self._result
        return self._recompute()

    def render(self) -> RenderResult:
        return self._result

    def summary(self) -> str:
        return self._result.summary

    def _recompute(self) -> RenderResult:
        if self.metric is MetricSelection.STOCK_PRICES:
            result = self._fetch_stock_result(self.query)
        elif self.metric in (
            MetricSelection.GDP,
            MetricSelection.CONSUMER_SPENDING,
            MetricSelection.FDI,
            MetricSelection.INNOVATION_INDEX,
        ):
            result = build_comparison_result(self.metric)
        else:
            raise ValueError(f"Unsupported metric: {self.metric}")

        if result is not None:
            self._result = result
        return self._result

    def _fetch_stock_result(self, query: StockQuery) -> RenderResult | None:
        """Fetch prices for a query; returns None when a newer request superseded it.

        Streamlit runs the callbacks of one session one at a time, so a newer
        request can only start while this one is in flight if the fetcher
        re-enters the controller. The id check covers that case; it does not
        order fetches issued from separate sessions or threads.
        """
        self._request_id += 1
        request_id = self._request_id

        try:
            df_prices = self.fetcher.get_prices(query.symbol.value, query.start, query.end)
            result = build_stock_result(query.symbol, df_prices)
        except FetchFailure as e:
            logger.warning(f"[{query.symbol.value}] {e}")
            result = RenderResult.fetch_error()

        if request_id != self._request_id:
            logger.debug(f"Discarding stale response for request {request_id}")
            return None
        return result
