"""Shared widgets bound to a calculator's scenario in session state.

Widgets are keyed ``<view>__<field>``.  Before widgets are drawn the current
scenario is pushed into those keys; an ``on_change`` callback writes the edit
back into the scenario dict, so the scenario is the only copy of the inputs.
"""
import streamlit as st

from core.analysis import NarrativeAnalyst
from core.config import config
from core.models import InputMode
from core.presets import FIELD_HINTS
from core.state import analysis_session, load_scenario, save_scenario, widget_key

MODE_LABELS = {InputMode.PERCENT.value: "%", InputMode.DOLLAR.value: "$"}
TERM_LABELS = {30: "30 Year", 15: "15 Year"}


def default_analyst() -> NarrativeAnalyst:
    return NarrativeAnalyst(
        api_key=config.OPENAI_API_KEY,
        model=config.OPENAI_MODEL,
        market=config.MARKET,
        timeout=config.ANALYSIS_TIMEOUT_S,
    )


def push_widgets(view: str, scenario) -> None:
    for name, value in scenario.model_dump(mode="json").items():
        st.session_state[widget_key(view, name)] = value


def commit(view: str, name: str, setter=None) -> None:
    scenario = load_scenario(view)
    value = st.session_state[widget_key(view, name)]
    if setter is None:
        setattr(scenario, name, value)
    else:
        setter(scenario, value)
    save_scenario(view, scenario)


def text_field(view: str, name: str, label: str, errors: dict, help_key: str = None, **kwargs):
    st.text_input(
        label,
        key=widget_key(view, name),
        on_change=commit,
        args=(view, name),
        help=FIELD_HINTS.get(help_key or name),
        **kwargs,
    )
    if name in errors:
        st.error(errors[name])


def mode_field(view: str, mode_name: str, value_name: str, label: str, errors: dict, mode_labels=None):
    """Percent/dollar toggle beside its value box."""
    labels = mode_labels or MODE_LABELS
    st.markdown(f"**{label}**")
    c1, c2 = st.columns(2)
    with c1:
        st.radio(
            f"{label} mode",
            list(labels.keys()),
            format_func=lambda m: labels[m],
            horizontal=True,
            label_visibility="collapsed",
            key=widget_key(view, mode_name),
            on_change=commit,
            args=(view, mode_name),
        )
    with c2:
        st.text_input(
            f"{label} value",
            label_visibility="collapsed",
            key=widget_key(view, value_name),
            on_change=commit,
            args=(view, value_name),
            help=FIELD_HINTS.get(value_name),
        )
    if value_name in errors:
        st.error(errors[value_name])


def term_field(view: str, name: str = "loan_term"):
    st.radio(
        "Loan Term",
        list(TERM_LABELS.keys()),
        format_func=lambda t: TERM_LABELS[t],
        horizontal=True,
        key=widget_key(view, name),
        on_change=commit,
        args=(view, name),
    )


def derived_field(view: str, name: str, label: str, value: float, setter, help_key: str = None):
    """Editable projection of primary fields; edits go through ``setter``."""
    key = widget_key(view, name)
    st.session_state[key] = f"{value:.2f}"
    st.text_input(
        label,
        key=key,
        on_change=commit_derived,
        args=(view, name, setter),
        help=FIELD_HINTS.get(help_key or name),
    )


def commit_derived(view: str, name: str, setter) -> None:
    scenario = load_scenario(view)
    setter(scenario, st.session_state[widget_key(view, name)])
    save_scenario(view, scenario)


def render_analysis(view: str, title: str, disabled: bool, prompt_fn, analyst: NarrativeAnalyst = None):
    """Analyze button plus the latest narrative for ``view``."""
    session = analysis_session(view)
    if st.button("Analyze", key=widget_key(view, "analyze"), disabled=disabled):
        analyst = analyst or default_analyst()
        with st.spinner("Analyzing your results..."):
            session.run(analyst, prompt_fn())
    if disabled:
        st.caption("Fix the highlighted fields to enable analysis.")
    if session.text:
        st.subheader(title)
        st.markdown(session.text)
    return session
