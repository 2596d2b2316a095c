"""
Shared test fixtures for InfoHub tests.
"""
import os
import random
import pytest
from unittest.mock import MagicMock, patch

# Test environment: no quote API key, no simulated latency.
# Set before any infohub import so the frozen config picks them up.
os.environ["GEMINI_API_KEY"] = ""
os.environ["WEATHER_LATENCY_MS"] = "0"
os.environ["CONVERSION_LATENCY_MS"] = "0"

from infohub.config.settings import get_settings
get_settings.cache_clear()


@pytest.fixture
def no_sleep():
    """Skip real delays in providers."""
    with patch('infohub.services.weather.time.sleep'), \
         patch('infohub.services.currency.time.sleep'):
        yield


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def api_settings():
    """Settings with a quote API key configured."""
    from infohub.config.settings import Settings
    return Settings(_env_file=None, GEMINI_API_KEY="test-key", API_TIMEOUT=5, API_RETRY_COUNT=3)


@pytest.fixture
def local_settings():
    """Settings without a quote API key."""
    from infohub.config.settings import Settings
    return Settings(_env_file=None, GEMINI_API_KEY="")


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    def _make(status_code=200, json_data=None, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def gemini_body():
    """Factory for generateContent response bodies."""
    return lambda text: {"candidates": [{"content": {"parts": [{"text": text}]}}]}
