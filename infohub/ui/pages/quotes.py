"""Motivational quote page for InfoHub."""

import logging

import streamlit as st

from infohub.utils import SessionState, QUOTE_WIDGET_KEY
from infohub.widgets import QuoteWidget
from infohub.ui.components import render_card_header, render_error

logger = logging.getLogger(__name__)


def get_quote_widget() -> QuoteWidget:
    """Get this session's quote widget, creating it on first display."""
    return SessionState.get_or_create(QUOTE_WIDGET_KEY, QuoteWidget)


def render_quotes_page() -> None:
    """Render the current quote and the generate button."""
    widget = get_quote_widget()
    widget.mount()
    render_card_header("Quote Generator", "💬")

    # Filled after the button so a press shows the new quote in this run
    quote_box = st.container(border=True)

    generate = st.button("🔄 Generate New Quote", key="generate_quote", type="primary")
    if generate:
        with quote_box:
            with st.spinner("Generating inspiration..."):
                widget.generate()

    with quote_box:
        st.markdown(f"### *“{widget.quote}”*")

    if widget.state.is_error:
        render_error(widget.state.error)
