"""InfoHub Streamlit Application.

Header, sidebar navigation and the active widget page.
"""

import logging
import sys
from pathlib import Path

# Load environment variables from .env file BEFORE any other imports
# so the quote API key is visible to the settings model
from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

import streamlit as st

# Add parent directory to path for `streamlit run infohub/app.py`
sys.path.insert(0, str(Path(__file__).parent.parent))

from infohub.config.settings import config, get_settings
from infohub.utils import SessionState, VIEW_WEATHER, VIEW_CONVERTER, VIEW_QUOTES
from infohub.ui.components import render_sidebar
from infohub.ui.pages import (
    render_weather_page,
    render_converter_page,
    render_quotes_page,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

PAGES = {
    VIEW_WEATHER: render_weather_page,
    VIEW_CONVERTER: render_converter_page,
    VIEW_QUOTES: render_quotes_page,
}


def main():
    """Main application entry point."""
    # Page configuration - must be first Streamlit command
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon=config.APP_ICON,
        layout="centered",
        initial_sidebar_state="expanded",
    )

    SessionState.init_defaults()

    render_sidebar()

    st.title(config.APP_NAME)
    st.caption(config.APP_TAGLINE)

    current_view = SessionState.get_current_view()
    render_page = PAGES.get(current_view)

    if render_page is None:
        # Fallback to weather
        logger.warning(f"Unknown view {current_view!r}, showing weather")
        SessionState.navigate_to(VIEW_WEATHER)
        render_page = render_weather_page

    render_page()


if __name__ == "__main__":
    main()
