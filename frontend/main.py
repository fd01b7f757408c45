import streamlit as st

from config import API_URL, APP_NAME
from utils.api import APIClient
from utils.styles import inject_styles
from views import access_info, records, status


def main():
    st.set_page_config(page_title=APP_NAME, layout="wide")
    inject_styles()

    api = APIClient(API_URL)

    # --- Sidebar: server status and access info
    with st.sidebar:
        st.header(APP_NAME)
        status.render(api)
        st.divider()
        if st.toggle("Show access info", key="show_access_info"):
            access_info.render(api)

    st.title("📋 Records")
    records.render(api)


if __name__ == "__main__":
    main()
