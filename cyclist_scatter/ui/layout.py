"""
Layout helpers for the Streamlit application (page config, sidebar).
"""

from __future__ import annotations

import streamlit as st

from cyclist_scatter.config import DATA_URL

PAGE_TITLE = "Doping in Professional Bicycle Racing"
PAGE_SUBTITLE = "35 Fastest times up Alpe d'Huez"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="centered",
        page_icon=":bicyclist:",
    )


def sidebar_ui() -> bool:
    """Draw the sidebar and return True when a data refresh was requested."""
    refresh = st.sidebar.button("🔄 Refresh Data")
    st.sidebar.caption(f"Source: [cyclist-data.json]({DATA_URL})")
    st.sidebar.caption("Hover a dot for rider details. Use Replay to rerun the entry animation.")
    return refresh
