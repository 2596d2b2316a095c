"""Data providers for InfoHub widgets."""
from infohub.services.backoff import (
    with_backoff,
    backoff_delay,
)
from infohub.services.weather import (
    WeatherResult,
    fetch_weather,
)
from infohub.services.currency import (
    ConversionResult,
    convert_inr,
)
from infohub.services.quotes import (
    LOCAL_QUOTES,
    QuoteClient,
    fetch_motivational_quote,
    random_local_quote,
    clean_quote_text,
)

__all__ = [
    # Backoff
    "with_backoff",
    "backoff_delay",
    # Weather
    "WeatherResult",
    "fetch_weather",
    # Currency
    "ConversionResult",
    "convert_inr",
    # Quotes
    "LOCAL_QUOTES",
    "QuoteClient",
    "fetch_motivational_quote",
    "random_local_quote",
    "clean_quote_text",
]
