"""Custom exceptions for InfoHub.

Exception Hierarchy:
    InfoHubError (base)
    ├── ProviderError
    │   ├── WeatherUnavailableError
    │   ├── InvalidAmountError
    │   └── QuoteAPIError
    └── ServiceUnavailableError
"""


class InfoHubError(Exception):
    """Base exception for InfoHub.

    All custom exceptions in this application inherit from this class.
    The message is what a widget shows to the user.

    Example:
        >>> try:
        ...     fetch_weather("Paris, FR")
        ... except InfoHubError as e:
        ...     show(e.message)
    """

    def __init__(self, message: str = "An error occurred in InfoHub"):
        self.message = message
        super().__init__(self.message)


class ProviderError(InfoHubError):
    """Raised when a data provider cannot produce a result."""

    def __init__(self, message: str = "Data provider failed"):
        super().__init__(message)


class WeatherUnavailableError(ProviderError):
    """Raised when weather cannot be fetched for a city.

    Attributes:
        city: The requested city name

    Example:
        >>> raise WeatherUnavailableError("London, UK")
    """

    def __init__(self, city: str, message: str = None):
        self.city = city
        super().__init__(
            message or f"Could not fetch weather for {city}. Try another city."
        )

    def __repr__(self) -> str:
        return f"WeatherUnavailableError(city={self.city!r}, message={self.message!r})"


class InvalidAmountError(ProviderError):
    """Raised when a conversion amount is not a positive number.

    Attributes:
        amount: The rejected input value
    """

    def __init__(self, amount=None, message: str = None):
        self.amount = amount
        super().__init__(message or "Invalid amount. Please enter a positive number.")


class QuoteAPIError(ProviderError):
    """Raised when the quote generation API call fails.

    Attributes:
        status_code: HTTP status code (if applicable)

    Example:
        >>> raise QuoteAPIError("Quote API returned HTTP 503", status_code=503)
    """

    def __init__(self, message: str = "Quote API call failed", status_code: int = None):
        self.status_code = status_code
        super().__init__(message)


class ServiceUnavailableError(InfoHubError):
    """Raised by the backoff executor once every attempt has failed.

    The underlying error is logged, not attached.
    """

    def __init__(self, message: str = "Service currently unavailable. Please try again later."):
        super().__init__(message)
