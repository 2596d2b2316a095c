"""Page components for InfoHub."""
from infohub.ui.pages.weather import render_weather_page
from infohub.ui.pages.converter import render_converter_page
from infohub.ui.pages.quotes import render_quotes_page

__all__ = [
    "render_weather_page",
    "render_converter_page",
    "render_quotes_page",
]
