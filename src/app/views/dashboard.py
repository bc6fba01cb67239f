"""Dashboard view: selection widgets, chart area and summary panel.

Widgets mutate the controllers only through on_change / on_click callbacks.
"""

from datetime import date

import streamlit as st
from loguru import logger

from src.app.logic.dashboard import DashboardController
from src.app.logic.session import SessionState
from src.app.views.charts import render_chart, render_latest_price_info
from src.app.views.common import render_data_expander, render_sidebar_header, render_summary
from src.core.domain_models import MetricSelection, StockSymbol

METRIC_KEY = "metric_select"
SYMBOL_KEY = "stock_symbol"
DATE_RANGE_KEY = "stock_date_range"


def _on_metric_change(controller: DashboardController) -> None:
    controller.select_metric(st.session_state[METRIC_KEY])


def _on_stock_change(controller: DashboardController) -> None:
    date_range = st.session_state[DATE_RANGE_KEY]
    # date_input yields a single date while the user is still picking the end
    if not isinstance(date_range, (tuple, list)) or len(date_range) != 2:
        logger.debug("Incomplete date range selection, waiting for end date")
        return
    start, end = date_range
    controller.select_stock(st.session_state[SYMBOL_KEY], start, end)


def render_metric_selection(controller: DashboardController) -> None:
    options = list(MetricSelection)
    st.sidebar.selectbox(
        "Select Metric",
        options=options,
        index=options.index(controller.metric),
        format_func=lambda m: m.label,
        key=METRIC_KEY,
        on_change=_on_metric_change,
        args=(controller,),
    )


def render_stock_selection(controller: DashboardController) -> None:
    """Symbol dropdown and date-range picker, shown only for stock prices."""
    symbols = list(StockSymbol)
    st.sidebar.subheader("Stock")
    st.sidebar.selectbox(
        "Select Stock",
        options=symbols,
        index=symbols.index(controller.query.symbol),
        format_func=lambda s: s.value,
        key=SYMBOL_KEY,
        on_change=_on_stock_change,
        args=(controller,),
    )
    st.sidebar.date_input(
        "Date Range",
        value=(controller.query.start, controller.query.end),
        min_value=controller.min_date,
        max_value=date.today(),
        key=DATE_RANGE_KEY,
        on_change=_on_stock_change,
        args=(controller,),
    )


def render_dashboard(state: SessionState) -> None:
    controller = state.dashboard

    render_sidebar_header("Dashboard", "Choose a metric to compare")
    render_metric_selection(controller)
    if controller.metric.is_stock:
        render_stock_selection(controller)
    st.sidebar.divider()
    st.sidebar.button(
        "Return to Landing Page",
        key="return_to_landing",
        on_click=state.view.return_to_landing,
    )

    st.title(f"📊 {controller.metric.label}")
    result = controller.render()

    render_latest_price_info(result)
    render_chart(result)
    render_summary(result)
    render_data_expander(result)
