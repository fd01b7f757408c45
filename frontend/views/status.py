"""
Server status indicator with a re-check button.
"""
import streamlit as st

from utils.api import APIClient, check_server_status
from utils.styles import status_badge


def render(api: APIClient):
    """Render the status badge with a re-check button."""
    if "server_status" not in st.session_state or st.button("Check status", key="check_status"):
        st.session_state.server_status = check_server_status(api)
    st.markdown(
        f"Server: {status_badge(st.session_state.server_status)}",
        unsafe_allow_html=True,
    )
