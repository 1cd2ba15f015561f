import streamlit as st

from core.state import navigate

CARDS = [
    (
        "down_payment",
        "Down Payment Estimator",
        "Estimate cash to close and your monthly payment for a new home.",
    ),
    (
        "roi",
        "Investment ROI Calculator",
        "Cap rate, cash flow and cash-on-cash return for a rental property.",
    ),
]


def render_home():
    st.header("Choose a calculator")
    cols = st.columns(len(CARDS))
    for col, (view, title, blurb) in zip(cols, CARDS):
        with col:
            st.subheader(title)
            st.caption(blurb)
            st.button("Open", key=f"open_{view}", on_click=navigate, args=(view,))
