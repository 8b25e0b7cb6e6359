# main.py
"""Main entry point for the IPMA weather dashboard Streamlit application."""

import sys
import traceback

import streamlit as st

from ipma_dashboard.logger_config import setup_logging
from ipma_dashboard.paths import ensure_dirs
from ipma_dashboard.ui import card_weather
from ipma_dashboard.ui.common import load_css

ensure_dirs()

logger = setup_logging()


def st_autorefresh(interval: int | None = None) -> None:
    """Reload the page every *interval* milliseconds (None disables)."""
    if interval:
        st.markdown(
            f"<script>setTimeout(() => window.location.reload(), {int(interval)});</script>",
            unsafe_allow_html=True,
        )


def main() -> None:
    """Initialize and render the dashboard layout."""
    try:
        logger.info("Starting IPMA weather dashboard")
        st.set_page_config(
            page_title="Tempo IPMA",
            layout="wide",
            page_icon="🌤️",
        )
        load_css("style.css")
        st_autorefresh(interval=300_000)

        card_weather()

    except KeyboardInterrupt:
        logger.info("Dashboard shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unhandled error: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
