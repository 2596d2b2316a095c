"""Sidebar navigation for InfoHub.

One button per view. Navigating discards the widgets of the other
views, matching a tab that unmounts its content.
"""

import logging

import streamlit as st

from infohub.config.settings import config
from infohub.utils import SessionState, VIEW_WEATHER, VIEW_CONVERTER, VIEW_QUOTES

logger = logging.getLogger(__name__)

NAV_ITEMS = (
    (VIEW_WEATHER, "🌤️ Weather"),
    (VIEW_CONVERTER, "💱 Currency Converter"),
    (VIEW_QUOTES, "💬 Motivational Quotes"),
)


def render_sidebar() -> None:
    """Render the sidebar with navigation buttons."""
    current_view = SessionState.get_current_view()

    with st.sidebar:
        st.markdown(f"## {config.APP_NAME}")
        st.caption(config.APP_TAGLINE)

        st.divider()

        for view, label in NAV_ITEMS:
            if st.button(
                label,
                key=f"nav_{view}",
                type="primary" if view == current_view else "secondary",
                width='stretch',
            ):
                if view != current_view:
                    logger.debug(f"Navigating {current_view} -> {view}")
                    SessionState.navigate_to(view)
                    st.rerun()

        st.divider()
        st.caption(f"v{config.APP_VERSION}")
