import pytest

from src.app.logic.view_state import ViewStateController
from src.core.domain_models import ViewState


def test_initial_state_is_landing() -> None:
    controller = ViewStateController()

    assert controller.state is ViewState.LANDING
    assert controller.is_landing
    assert not controller.is_dashboard


@pytest.mark.parametrize(
    "actions",
    [
        ["enter", "return"],
        ["enter", "enter", "return", "return"],
        ["return", "enter", "return", "enter", "enter"],
        ["return", "return", "return"],
    ],
)
def test_exactly_one_view_visible_after_each_toggle(actions: list[str]) -> None:
    controller = ViewStateController()

    for action in actions:
        if action == "enter":
            controller.enter_dashboard()
            assert controller.state is ViewState.DASHBOARD
        else:
            controller.return_to_landing()
            assert controller.state is ViewState.LANDING
        assert controller.is_landing != controller.is_dashboard


def test_repeated_transitions_are_noops() -> None:
    controller = ViewStateController()

    controller.enter_dashboard()
    controller.enter_dashboard()
    assert controller.is_dashboard

    controller.return_to_landing()
    controller.return_to_landing()
    assert controller.is_landing
