# ipma_dashboard/utils.py
"""General-purpose utility functions for the dashboard."""

import logging

import streamlit as st

from ipma_dashboard.config import DEV

logger = logging.getLogger("ipmadashboard")


def report_error(ctx: str, e: Exception) -> None:
    """Log errors and, in DEV mode, display them in the Streamlit UI."""
    logger.error("%s: %s: %s", ctx, type(e).__name__, e)
    if DEV:
        st.caption(f"⚠ {ctx}: {type(e).__name__}: {e}")
