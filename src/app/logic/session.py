"""Per-session controller storage.

Streamlit reruns the script on every interaction; the controllers live in
st.session_state so their state survives reruns within one browser session.
"""

from dataclasses import dataclass
from typing import Any, MutableMapping

from loguru import logger

from src.app.logic.dashboard import DashboardController, PriceFetcher
from src.app.logic.view_state import ViewStateController
from src.etl.extract import MarketDataFetcher

SESSION_KEY = "econ_dashboard_state"


@dataclass
class SessionState:
    """Container for the controllers owned by one browser session."""

    view: ViewStateController
    dashboard: DashboardController


def get_session_state(
    store: MutableMapping[str, Any],
    fetcher: PriceFetcher | None = None,
) -> SessionState:
    """Return the session's controllers, creating them on first access.

    Args:
        store: Session mapping, normally st.session_state
        fetcher: Market-data fetcher; defaults to MarketDataFetcher
    """
    state = store.get(SESSION_KEY)
    if state is None:
        logger.info("Initialising dashboard session state")
        state = SessionState(
            view=ViewStateController(),
            dashboard=DashboardController(fetcher or MarketDataFetcher()),
        )
        store[SESSION_KEY] = state
    return state
