"""
Access info panel: URLs under which the API server is reachable on the network.
"""
import streamlit as st

from utils.api import APIClient, error_message
from utils.formatters import build_access_url, format_bytes, format_uptime


def render(api: APIClient):
    """Fetch server info and list one copyable URL per network interface."""
    with st.spinner("Loading network information..."):
        result = api.get_server_info()

    data = result.get("data")
    if result["status"] == 0:
        st.error(f"Error connecting to server: {result.get('error')}")
        return
    if result["status"] != 200 or not isinstance(data, dict) or not data.get("success"):
        st.error(f"Error retrieving network information: {error_message(result)}")
        return

    info = data["serverInfo"]
    addresses = info.get("addresses") or []
    if not addresses:
        st.info("No network addresses found.")
    for address in addresses:
        url = build_access_url(address, info["port"])
        st.markdown(
            f'<div class="access-url-item"><strong>{address["interface"]}:</strong> {url}</div>',
            unsafe_allow_html=True,
        )
        # st.code renders a copy-to-clipboard button
        st.code(url, language=None)

    memory = info.get("memoryUsage") or {}
    st.caption(
        f"Host {info.get('hostname')} ({info.get('platform')}) · "
        f"up {format_uptime(info.get('uptime'))} · "
        f"memory {format_bytes(memory.get('rss'))}"
    )
