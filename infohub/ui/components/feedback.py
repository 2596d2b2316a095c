"""Loading and error feedback shared by the widget pages."""

import logging
from typing import Callable, Optional

import streamlit as st

logger = logging.getLogger(__name__)


def render_card_header(title: str, icon: str) -> None:
    """Render a widget card title."""
    st.subheader(f"{icon} {title}")


def render_loader(message: str = "Loading data...") -> None:
    """Render a static loading notice (for states observed mid-request)."""
    st.info(f"⏳ {message}")


def render_error(
    message: str,
    on_retry: Optional[Callable[[], None]] = None,
    key: str = "retry",
) -> None:
    """Render an error box with an optional Try Again button.

    Args:
        message: Error text shown to the user
        on_retry: Called when the button is pressed; no button if None
        key: Unique Streamlit key for the button
    """
    st.error(f"**Error:** {message}", icon="⚠️")
    if on_retry is not None:
        st.button("🔄 Try Again", key=key, on_click=on_retry)
