from loguru import logger

from src.core.domain_models import ViewState


class ViewStateController:
    """Two-state toggle between the landing page and the dashboard."""

    def __init__(self) -> None:
        self.state = ViewState.LANDING

    @property
    def is_landing(self) -> bool:
        return self.state is ViewState.LANDING

    @property
    def is_dashboard(self) -> bool:
        return self.state is ViewState.DASHBOARD

    def enter_dashboard(self) -> None:
        if self.state is not ViewState.DASHBOARD:
            logger.debug("View: landing -> dashboard")
        self.state = ViewState.DASHBOARD

    def return_to_landing(self) -> None:
        if self.state is not ViewState.LANDING:
            logger.debug("View: dashboard -> landing")
        self.state = ViewState.LANDING
