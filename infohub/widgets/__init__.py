"""Widget state machines for InfoHub."""
from infohub.widgets.base import Widget, error_message, GENERIC_ERROR_MESSAGE
from infohub.widgets.weather import WeatherWidget
from infohub.widgets.converter import ConverterWidget
from infohub.widgets.quotes import QuoteWidget, PLACEHOLDER_QUOTE

__all__ = [
    "Widget",
    "error_message",
    "GENERIC_ERROR_MESSAGE",
    "WeatherWidget",
    "ConverterWidget",
    "QuoteWidget",
    "PLACEHOLDER_QUOTE",
]
