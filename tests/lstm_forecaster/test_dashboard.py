"""Streamlit dashboard smoke test (AppTest, no network)."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

DASHBOARD = Path(__file__).resolve().parents[2] / "src" / "lstm_forecaster" / "dashboard.py"


def _app() -> AppTest:
    return AppTest.from_file(str(DASHBOARD), default_timeout=60)


def test_home_renders() -> None:
    at = _app().run()

    assert not at.exception
    assert at.title[0].value == "🧠 LSTM Forecaster"
    assert at.session_state["controller"].state.value == "home"


def test_get_started_then_manual_input() -> None:
    at = _app().run()

    at.button(key="get_started").click().run()
    assert at.session_state["controller"].state.value == "input"

    at.radio(key="input_method").set_value("text").run()
    at.text_area(key="text_data").input("100\n105\n102").run()

    ctrl = at.session_state["controller"]
    assert not at.exception
    assert len(ctrl.parsed) == 3
    assert at.button(key="submit").disabled is False
