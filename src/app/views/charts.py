"""Chart rendering components.

Turns renderer-independent ChartSpecs into Plotly figures and draws them.
"""

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from src.app.views.colors import CANDLE_DECREASING, CANDLE_INCREASING
from src.app.views.common import render_empty_state
from src.core.domain_models import ChartKind, ChartSpec, RenderResult

GLOBAL_MARGINS = dict(t=50, l=5, r=5, b=0)
GLOBAL_FONT = dict(
    family="Arial",
    size=16,
)


def make_bar_chart(spec: ChartSpec) -> go.Figure:
    fig = px.bar(
        spec.data,
        x="metric",
        y="value",
        color="region",
        barmode="group",
        title=spec.title,
        labels={"metric": spec.x_label, "value": spec.y_label, "region": "Region"},
        color_discrete_map=spec.color_map,
        text="value",
    )
    fig.update_traces(textposition="outside")
    fig.update_layout(
        template="plotly_white",
        height=450,
        margin=GLOBAL_MARGINS,
        font=GLOBAL_FONT,
    )
    return fig


def make_candlestick_chart(spec: ChartSpec) -> go.Figure:
    df_price = spec.data
    fig = go.Figure(
        go.Candlestick(
            x=df_price["date"],
            open=df_price["open"],
            high=df_price["high"],
            low=df_price["low"],
            close=df_price["close"],
            name="OHLC",
            increasing_line_color=CANDLE_INCREASING,
            decreasing_line_color=CANDLE_DECREASING,
        )
    )
    fig.update_layout(
        title=spec.title,
        xaxis_title=spec.x_label,
        yaxis_title=spec.y_label,
        template="plotly_white",
        height=600,
        showlegend=False,
        hovermode="x unified",
    )
    fig.update_xaxes(rangeslider_visible=False)
    return fig


def make_figure(spec: ChartSpec) -> go.Figure:
    """Build the Plotly figure for a chart spec."""
    if spec.kind is ChartKind.GROUPED_BAR:
        return make_bar_chart(spec)
    if spec.kind is ChartKind.CANDLESTICK:
        return make_candlestick_chart(spec)
    raise ValueError(f"Unsupported chart kind: {spec.kind}")


def render_chart(result: RenderResult) -> None:
    """Draw the chart area: the figure, or the error message on failure."""
    if result.is_error:
        st.error(result.error)
        return
    if result.chart is None:
        render_empty_state("No chart available for this selection")
        return
    st.plotly_chart(make_figure(result.chart), width="stretch")


def render_latest_price_info(result: RenderResult) -> None:
    """Render the most recent OHLC row as metric cards for stock results."""
    if result.chart is None or result.chart.kind is not ChartKind.CANDLESTICK:
        return

    latest = result.chart.data.sort("date").tail(1).to_dicts()[0]
    cols = st.columns(5)

    with cols[0]:
        st.metric(label="Latest Close", value=f"${latest['close']:,.2f}")
    with cols[1]:
        st.metric(label="Open", value=f"${latest['open']:,.2f}")
    with cols[2]:
        st.metric(label="High", value=f"${latest['high']:,.2f}")
    with cols[3]:
        st.metric(label="Low", value=f"${latest['low']:,.2f}")
    with cols[4]:
        st.metric(label="Volume", value=f"{latest['volume']:,.0f}")
