"""Economic Comparison Dashboard - Streamlit entry point.

Shows the landing page until the user enters the dashboard.
"""

import streamlit as st
from loguru import logger

from src.app.logic.session import get_session_state
from src.app.views.dashboard import render_dashboard
from src.app.views.landing import render_landing_page
from src.config.landing_page import load_landing_page_config
from src.core.config import settings
from src.core.log_config import configure_logging

configure_logging()

st.set_page_config(
    page_title=settings.page_title,
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
)

state = get_session_state(st.session_state)

try:
    if state.view.is_landing:
        render_landing_page(load_landing_page_config(), on_enter=state.view.enter_dashboard)
    else:
        render_dashboard(state)
except Exception as e:
    st.error(f"Unexpected error: {e}")
    logger.error(f"Dashboard error: {e}", exc_info=True)
    raise e
