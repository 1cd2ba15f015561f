"""Session state for the calculator views.

Each calculator keeps its inputs as a plain dict in ``st.session_state`` under
its view name; the pydantic model is rebuilt from it on every run.  Nothing is
written to disk: leaving a calculator or pressing Reset restores defaults.
"""
import streamlit as st

from core.analysis import AnalysisSession
from core.logging_utils import get_logger
from core.models import DownPaymentScenario, InvestmentScenario

VIEWS = ("home", "down_payment", "roi")
SCENARIOS = {
    "down_payment": DownPaymentScenario,
    "roi": InvestmentScenario,
}

log = get_logger(__name__)


def widget_key(view: str, name: str) -> str:
    return f"{view}__{name}"


def init_state() -> None:
    st.session_state.setdefault("view", "home")
    for view, cls in SCENARIOS.items():
        st.session_state.setdefault(view, cls().model_dump(mode="json"))


def load_scenario(view: str):
    cls = SCENARIOS[view]
    st.session_state.setdefault(view, cls().model_dump(mode="json"))
    return cls(**st.session_state[view])


def save_scenario(view: str, scenario) -> None:
    st.session_state[view] = scenario.model_dump(mode="json")


def analysis_session(view: str) -> AnalysisSession:
    key = f"{view}_analysis"
    if key not in st.session_state:
        st.session_state[key] = AnalysisSession()
    return st.session_state[key]


def reset_scenario(view: str) -> None:
    """Restore defaults and drop any pending analysis.

    Widget keys need no clearing: views push the scenario into them on every run.
    """
    save_scenario(view, SCENARIOS[view]())
    analysis_session(view).clear()
    log.info("scenario reset", extra={"context": {"view": view}})


def navigate(view: str) -> None:
    if view not in VIEWS:
        raise ValueError(f"unknown view: {view}")
    current = st.session_state.get("view", "home")
    if current in SCENARIOS and current != view:
        reset_scenario(current)
    st.session_state["view"] = view
    log.info("navigate", extra={"context": {"from": current, "to": view}})
