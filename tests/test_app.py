"""Page wiring tests using Streamlit's AppTest harness."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

from src.app.logic.session import SESSION_KEY, SessionState, get_session_state

APP_PATH = str(Path(__file__).parent.parent / "src" / "app" / "main.py")


def test_get_session_state_is_created_once(fake_fetcher) -> None:
    store: dict = {}

    first = get_session_state(store, fetcher=fake_fetcher)
    second = get_session_state(store)

    assert isinstance(first, SessionState)
    assert first is second
    assert store[SESSION_KEY] is first
    assert first.view.is_landing


def test_landing_page_then_dashboard_and_back() -> None:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()

    assert not at.exception
    assert at.button(key="enter_dashboard").label == "Enter Dashboard"

    at.button(key="enter_dashboard").click().run()

    assert not at.exception
    assert at.button(key="return_to_landing").label == "Return to Landing Page"
    assert at.info[0].value == "The U.S. GDP value is: 25 Trillions USD"

    at.button(key="return_to_landing").click().run()

    assert not at.exception
    assert at.button(key="enter_dashboard").label == "Enter Dashboard"


def test_metric_dropdown_switches_summary() -> None:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    at.button(key="enter_dashboard").click().run()

    at.selectbox(key="metric_select").select_index(2).run()

    assert not at.exception
    assert at.info[0].value == "The U.S. FDI value is: 0.3 Trillions USD"
