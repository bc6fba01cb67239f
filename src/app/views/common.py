"""Common UI components shared across views.

Pure rendering functions for reusable Streamlit widgets.
"""

import streamlit as st

from src.core.domain_models import RenderResult


def render_sidebar_header(title: str, description: str | None = None) -> None:
    """Render consistent sidebar header with optional description.

    Args:
        title: Main sidebar title
        description: Optional description text below title
    """
    st.sidebar.title(title)
    if description:
        st.sidebar.caption(description)
    st.sidebar.divider()


def render_empty_state(message: str, icon: str = "📊") -> None:
    """Render empty state placeholder when no data is available.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")


def render_summary(result: RenderResult) -> None:
    """Render the one-line summary panel."""
    st.subheader("📝 Summary")
    if result.is_error:
        st.error(result.summary)
    else:
        st.info(result.summary)


def render_data_expander(result: RenderResult) -> None:
    if result.chart is None:
        return
    with st.expander("Show Data", expanded=False):
        st.dataframe(result.chart.data, hide_index=True)
