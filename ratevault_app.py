"""Streamlit application for the RateVault unit converter."""
from __future__ import annotations

import streamlit as st

from ratevault.ui import (
    initialize_session_state,
    render_sidebar,
    render_pinned_units,
    render_catalog_table,
)


st.set_page_config(page_title="RateVault Converter", layout="wide")

# Initialize session state
initialize_session_state()

# Render sidebar
render_sidebar()

# Main content
st.title("RateVault — Unit Converter")
st.caption("Type into any field; every other pinned unit follows.")

render_pinned_units()
render_catalog_table()
