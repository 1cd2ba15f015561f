import streamlit as st

from core.logging_utils import get_logger
from core.presets import DISCLAIMER
from core.state import init_state
from ui.down_payment import render_down_payment_view
from ui.home import render_home
from ui.roi import render_roi_view
from ui.topbar import render_topbar

log = get_logger("homecalc.app")

VIEW_RENDERERS = {
    "home": render_home,
    "down_payment": render_down_payment_view,
    "roi": render_roi_view,
}


def render_app():
    init_state()
    render_topbar()
    view = st.session_state.get("view", "home")
    log.debug("render view", extra={"context": {"view": view}})
    VIEW_RENDERERS.get(view, render_home)()
    st.markdown(
        """
        <style>
        @media (max-width: 600px) {
            div[class^='stColumn'] {flex: 1 1 100% !important;}
        }
        input, select {width: 100% !important;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.caption(f"© Dallas Home Calculator Suite. {DISCLAIMER}")


def main():
    st.set_page_config(page_title="Dallas Home Calculator Suite", layout="wide")
    render_app()


if __name__ == "__main__":
    main()
