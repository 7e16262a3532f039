"""NPV Sweep — Streamlit Frontend Entry Point."""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import streamlit as st

st.set_page_config(
    page_title="NPV Sweep",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

import api_client
from pages import sweep_calculator


def main():
    st.sidebar.title("NPV Sweep")
    st.sidebar.caption("Discount-rate sensitivity of net present value")

    st.sidebar.divider()
    st.sidebar.caption(f"Backend: {api_client.API_BASE}")
    st.sidebar.caption(f"API Docs: {api_client.API_BASE}/docs")

    sweep_calculator.render()


if __name__ == "__main__":
    main()
