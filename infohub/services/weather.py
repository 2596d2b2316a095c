"""
Simulated weather provider.

Stands in for a real weather API: waits a short latency, fails for
roughly one call in ten, and otherwise returns randomized readings.
"""
import logging
import random
import time
from dataclasses import dataclass

from infohub.config.settings import config
from infohub.utils.exceptions import WeatherUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherResult:
    """A single weather reading for a city.

    Numeric readings are pre-formatted strings with one decimal place.
    """
    city: str
    temperature_celsius: str
    condition: str
    wind_speed_kph: str


def _sample_tenths(rng, low: float, high: float) -> float:
    """Uniform value on a 0.1 grid in [low, high).

    Sampling tenths directly keeps the formatted value strictly below
    high, where rounding a continuous sample could produce it.
    """
    return rng.randrange(round(low * 10), round(high * 10)) / 10


def fetch_weather(city: str = None, rng=None) -> WeatherResult:
    """Look up (simulated) current weather for a city.

    Args:
        city: Free-text city name (default from config)
        rng: Random source with random/randrange/choice
            (default: the random module)

    Returns:
        WeatherResult for the city

    Raises:
        WeatherUnavailableError: On the simulated transient failure
    """
    if city is None:
        city = config.DEFAULT_CITY
    if rng is None:
        rng = random

    time.sleep(config.WEATHER_LATENCY_SECONDS)

    if rng.random() < config.WEATHER_FAILURE_RATE:
        logger.info(f"Simulated weather failure for {city!r}")
        raise WeatherUnavailableError(city)

    temperature = _sample_tenths(rng, *config.TEMPERATURE_RANGE_C)
    condition = rng.choice(config.WEATHER_CONDITIONS)
    wind_speed = _sample_tenths(rng, *config.WIND_SPEED_RANGE_KPH)

    return WeatherResult(
        city=city,
        temperature_celsius=f"{temperature:.1f}",
        condition=condition,
        wind_speed_kph=f"{wind_speed:.1f}",
    )
