"""Currency converter page for InfoHub."""

import logging

import streamlit as st

from infohub.config.settings import config
from infohub.utils import SessionState, CONVERTER_WIDGET_KEY
from infohub.widgets import ConverterWidget
from infohub.ui.components import render_card_header, render_loader, render_error

logger = logging.getLogger(__name__)


def get_converter_widget() -> ConverterWidget:
    """Get this session's converter widget, creating it on first display."""
    return SessionState.get_or_create(CONVERTER_WIDGET_KEY, ConverterWidget)


def render_converter_page() -> None:
    """Render the INR amount field and converted amounts."""
    widget = get_converter_widget()
    render_card_header("Currency Converter", "💱")
    st.caption("Convert Indian Rupees (INR) to popular currencies.")

    amount_text = st.text_input(
        "Amount in INR (₹)",
        value=widget.amount_text,
        placeholder="Enter amount",
    )

    if not widget.mounted:
        with st.spinner("Converting currency..."):
            widget.mount()
    elif amount_text != widget.amount_text:
        with st.spinner("Converting currency..."):
            widget.on_input(amount_text)

    _render_conversion_state(widget)


def _render_conversion_state(widget: ConverterWidget) -> None:
    state = widget.state

    if state.is_loading:
        render_loader("Converting currency...")
    elif state.is_error:
        render_error(state.error, on_retry=widget.retry, key="converter_retry")
    elif state.is_success and widget.last_result is not None:
        conversion = widget.last_result
        with st.container(border=True):
            col1, col2 = st.columns(2)
            with col1:
                st.metric("US Dollars (USD)", f"${conversion.usd_amount}")
            with col2:
                st.metric("Euros (EUR)", f"€{conversion.eur_amount}")
            st.caption(
                f"Last updated: {conversion.computed_at} "
                f"(Mock Rates: 1 USD ≈ {config.INR_PER_USD} INR, "
                f"1 EUR ≈ {config.INR_PER_EUR} INR)"
            )
