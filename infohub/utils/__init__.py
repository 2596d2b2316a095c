"""Utilities for InfoHub."""
from infohub.utils.exceptions import (
    InfoHubError,
    ProviderError,
    WeatherUnavailableError,
    InvalidAmountError,
    QuoteAPIError,
    ServiceUnavailableError,
)
from infohub.utils.request_state import (
    Phase,
    RequestState,
)
from infohub.utils.session_state import (
    SessionState,
    VIEWS,
    VIEW_WEATHER,
    VIEW_CONVERTER,
    VIEW_QUOTES,
    WEATHER_WIDGET_KEY,
    CONVERTER_WIDGET_KEY,
    QUOTE_WIDGET_KEY,
)
from infohub.utils.validators import (
    ValidationResult,
    AmountValidator,
    is_positive_number,
    INVALID_AMOUNT_MESSAGE,
)

__all__ = [
    # Exceptions
    "InfoHubError",
    "ProviderError",
    "WeatherUnavailableError",
    "InvalidAmountError",
    "QuoteAPIError",
    "ServiceUnavailableError",
    # Request state
    "Phase",
    "RequestState",
    # Session state
    "SessionState",
    "VIEWS",
    "VIEW_WEATHER",
    "VIEW_CONVERTER",
    "VIEW_QUOTES",
    "WEATHER_WIDGET_KEY",
    "CONVERTER_WIDGET_KEY",
    "QUOTE_WIDGET_KEY",
    # Validators
    "ValidationResult",
    "AmountValidator",
    "is_positive_number",
    "INVALID_AMOUNT_MESSAGE",
]
