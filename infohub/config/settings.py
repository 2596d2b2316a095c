"""
InfoHub Configuration.

Two layers:
- HubConfig: frozen dataclass of UI constants (rates, latencies, defaults),
  with a few environment overrides read at module import time.
- Settings: pydantic-settings model for deployment values such as the
  Gemini API key. Loaded from the environment and the .env file.

Environment variables:
- GEMINI_API_KEY: Quote generator credential (empty = local quotes only)
- QUOTE_MODEL / QUOTE_API_BASE_URL: Generative endpoint
- API_TIMEOUT / API_RETRY_COUNT: HTTP timeout and backoff attempts
- LOG_LEVEL: Root logging level
- WEATHER_LATENCY_MS / CONVERSION_LATENCY_MS: Simulated provider latency
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_int_env(name: str, default: int) -> int:
    """Get integer environment variable or return default."""
    val = os.getenv(name)
    if val is not None:
        try:
            return int(val)
        except ValueError:
            pass
    return default


def _get_str_env(name: str, default: str) -> str:
    """Get string environment variable or return default."""
    return os.getenv(name, default)


@dataclass(frozen=True)
class HubConfig:
    """Immutable InfoHub UI configuration.

    frozen=True ensures config values cannot be accidentally modified.
    Environment variables are read at module import time.
    """

    # Application
    APP_NAME: str = "InfoHub"
    APP_ICON: str = "🧭"
    APP_TAGLINE: str = "Your essential daily utilities, all in one place."
    APP_VERSION: str = field(
        default_factory=lambda: _get_str_env('APP_VERSION', "1.0.0")
    )

    # Weather widget
    DEFAULT_CITY: str = "Bengaluru, IN"
    WEATHER_LATENCY_MS: int = field(
        default_factory=lambda: _get_int_env('WEATHER_LATENCY_MS', 100)
    )
    WEATHER_FAILURE_RATE: float = 0.1
    WEATHER_CONDITIONS: tuple = ("Partly Cloudy", "Sunny", "Light Rain", "Hazy")
    TEMPERATURE_RANGE_C: tuple = (20.0, 35.0)
    WIND_SPEED_RANGE_KPH: tuple = (5.0, 15.0)

    # Currency widget (fixed mock rates: 1 USD = 88.3 INR, 1 EUR = 98.0 INR)
    DEFAULT_AMOUNT_INR: str = "100"
    INR_PER_USD: float = 88.3
    INR_PER_EUR: float = 98.0
    CONVERSION_LATENCY_MS: int = field(
        default_factory=lambda: _get_int_env('CONVERSION_LATENCY_MS', 1000)
    )

    # Backoff (delay before retry i is BASE * 2**i)
    BACKOFF_BASE_SECONDS: float = 1.0

    @property
    def WEATHER_LATENCY_SECONDS(self) -> float:
        """Get simulated weather latency in seconds."""
        return self.WEATHER_LATENCY_MS / 1000.0

    @property
    def CONVERSION_LATENCY_SECONDS(self) -> float:
        """Get simulated conversion latency in seconds."""
        return self.CONVERSION_LATENCY_MS / 1000.0


class Settings(BaseSettings):
    """Deployment settings loaded from environment variables."""

    # Quote generator (Gemini)
    GEMINI_API_KEY: str = ""
    QUOTE_MODEL: str = "gemini-2.5-flash-preview-09-2025"
    QUOTE_API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    API_TIMEOUT: int = 30  # Timeout for the quote API call
    API_RETRY_COUNT: int = 3  # Default attempts for with_backoff

    # Runtime
    LOG_LEVEL: str = "INFO"
    FRONTEND_PORT: int = 8501

    @property
    def has_api_key(self) -> bool:
        """Check if a non-blank quote API key is configured."""
        return bool(self.GEMINI_API_KEY.strip())

    @property
    def quote_api_url(self) -> str:
        """Full generateContent endpoint for the configured model."""
        base = self.QUOTE_API_BASE_URL.rstrip("/")
        return f"{base}/models/{self.QUOTE_MODEL}:generateContent"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global immutable config instance
config = HubConfig()
