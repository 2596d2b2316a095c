"""Weather page for InfoHub."""

import logging

import streamlit as st

from infohub.utils import SessionState, WEATHER_WIDGET_KEY
from infohub.widgets import WeatherWidget
from infohub.ui.components import render_card_header, render_loader, render_error

logger = logging.getLogger(__name__)


def get_weather_widget() -> WeatherWidget:
    """Get this session's weather widget, creating it on first display."""
    return SessionState.get_or_create(WEATHER_WIDGET_KEY, WeatherWidget)


def render_weather_page() -> None:
    """Render the weather search form and current reading."""
    widget = get_weather_widget()
    render_card_header("Weather Hub", "🌤️")

    with st.form("weather_search"):
        col1, col2 = st.columns([4, 1])
        with col1:
            city = st.text_input(
                "City",
                value=widget.city,
                placeholder="Enter city, e.g., London, UK",
                label_visibility="collapsed",
            )
        with col2:
            submitted = st.form_submit_button("Search")

    if not widget.mounted:
        with st.spinner(f"Fetching weather for {widget.city}..."):
            widget.mount()

    if submitted:
        with st.spinner(f"Fetching weather for {city}..."):
            widget.search(city)

    _render_weather_state(widget)


def _render_weather_state(widget: WeatherWidget) -> None:
    state = widget.state

    if state.is_loading:
        render_loader(f"Fetching weather for {widget.city}...")
    elif state.is_error:
        render_error(state.error, on_retry=widget.retry, key="weather_retry")
    elif state.is_success and widget.last_result is not None:
        weather = widget.last_result
        with st.container(border=True):
            col1, col2 = st.columns(2)
            with col1:
                st.metric("Temperature", f"{weather.temperature_celsius}°C")
            with col2:
                st.markdown(f"**{weather.city}**")
                st.markdown(weather.condition)
            st.divider()
            st.caption(f"Wind Speed: {weather.wind_speed_kph} km/h")
            st.caption("Data Status: Live (Mocked)")
