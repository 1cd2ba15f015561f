import streamlit as st

from core.version import __version__


def render_topbar():
    """Sticky title bar with the app version."""
    st.markdown(
        """
        <style>
        .homecalc-topbar {position:sticky; top:0; background-color:white; z-index:100; padding:4px 8px; border-bottom:1px solid #ddd;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    with st.container():
        st.markdown('<div class="homecalc-topbar">', unsafe_allow_html=True)
        left, right = st.columns([4, 1])
        left.title("Dallas Home Calculator Suite")
        right.caption(f"v{__version__}")
        st.markdown("</div>", unsafe_allow_html=True)
